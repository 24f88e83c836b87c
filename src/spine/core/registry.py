"""Lookup of resource classes by their resource-type tag."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TypeVar

from spine.core.errors import DuplicateFieldError, ResourceTypeConflictError, UnknownResourceTypeError
from spine.core.resource import Resource
from spine.models import ResourceType

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=type[Resource])


class ResourceRegistry:
    def __init__(self) -> None:
        self._classes: dict[ResourceType, type[Resource]] = {}

    def register(self, resource_class: R) -> R:
        """Register ``resource_class`` under its ``resource_type``. Usable as a class decorator.

        Raises ``DuplicateFieldError`` if the class declares the same field name
        twice and ``ResourceTypeConflictError`` if another class already owns
        the resource type.
        """
        resource_type = resource_class.resource_type
        duplicates = sorted(name for name, count in Counter(f.name for f in resource_class.fields).items() if count > 1)
        if duplicates:
            raise DuplicateFieldError(
                f"{resource_class.__name__} declares duplicate field(s): {', '.join(duplicates)}"
            )

        existing = self._classes.get(resource_type)
        if existing is resource_class:
            logger.warning("%s is already registered for %r", resource_class.__name__, resource_type)
            return resource_class
        if existing is not None:
            raise ResourceTypeConflictError(
                f"Resource type {resource_type!r} is already registered to {existing.__name__}"
            )

        self._classes[resource_type] = resource_class
        logger.debug("Registered %s for %r", resource_class.__name__, resource_type)
        return resource_class

    def resource_class(self, resource_type: ResourceType) -> type[Resource]:
        try:
            return self._classes[resource_type]
        except KeyError as exc:
            raise UnknownResourceTypeError(f"No resource class registered for {resource_type!r}") from exc

    def create(self, resource_type: ResourceType, id: str | None = None) -> Resource:  # noqa: A002
        return self.resource_class(resource_type)(id)

    def resource_types(self) -> list[ResourceType]:
        return list(self._classes)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._classes

    def __len__(self) -> int:
        return len(self._classes)
