"""Base resource class with type-level schema and generic, name-keyed field access.

Concrete resources subclass ``Resource`` and declare two class attributes::

    class Post(Resource):
        resource_type = "posts"
        fields = fields_from_mapping({"title": Attribute(), "body": Attribute()})

Declared fields can then be read and written generically through
``value_for_field`` / ``set_value`` or as plain attributes (``post.title``).

Instances are not thread-safe: concurrent mutation of the same resource from
several threads is undefined and must be serialized by the caller.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, TypeVar

from spine.core.errors import ResourceTypeNotDefinedError
from spine.core.fields import Field
from spine.core.ports.coder import Coder
from spine.models import ResourceIdentifier, ResourceType

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Resource")

_STATE_ATTRIBUTES = frozenset({"id", "url", "is_loaded", "meta"})


class _RequiredResourceType:
    """Class-level stand-in that fails until a subclass assigns ``resource_type``."""

    def __get__(self, instance: object, owner: type) -> ResourceType:
        raise ResourceTypeNotDefinedError(f"{owner.__name__} must define the class attribute 'resource_type'")


class Resource:
    resource_type: ClassVar[ResourceType] = _RequiredResourceType()  # type: ignore[assignment]
    """The resource type in plural form, e.g. ``"posts"``."""

    fields: ClassVar[tuple[Field, ...]] = ()
    """All fields that are persisted in the API."""

    id: str | None
    url: str | None
    is_loaded: bool
    meta: dict[str, Any] | None

    def __init__(self, id: str | None = None) -> None:  # noqa: A002
        # Fail on construction rather than on first use
        self.resource_type  # noqa: B018
        object.__setattr__(self, "_values", {})
        self.id = id
        self.url = None
        self.is_loaded = False
        self.meta = None

    # -- schema ---------------------------------------------------------------

    @classmethod
    def field_named(cls, name: str) -> Field | None:
        """Return the first declared field called ``name``, or ``None``."""
        return next((field for field in cls.fields if field.name == name), None)

    @classmethod
    def _declares(cls, name: str) -> bool:
        return name not in _STATE_ATTRIBUTES and cls.field_named(name) is not None

    # -- generic field access -------------------------------------------------

    def value_for_field(self, field: str) -> Any:
        """Return the value bound to ``field``, or ``None`` if it was never set or was cleared."""
        return self._values.get(field)

    def set_value(self, value: Any, field: str) -> None:
        """Bind ``value`` to ``field``; ``None`` clears it."""
        if value is None:
            self._values.pop(field, None)
        else:
            self._values[field] = value

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if not name.startswith("_") and type(self)._declares(name):
            return self.value_for_field(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and type(self)._declares(name):
            self.set_value(value, name)
        else:
            object.__setattr__(self, name, value)

    def unload(self) -> None:
        """Clear every declared field and mark the resource as not loaded.

        ``id``, ``url`` and ``meta`` are left untouched.
        """
        for field in self.fields:
            self.set_value(None, field.name)
        self.is_loaded = False
        logger.debug("Unloaded %s", self)

    def identifier(self) -> ResourceIdentifier | None:
        if self.id is None:
            return None
        return ResourceIdentifier(type=self.resource_type, id=self.id)

    # -- persistence ----------------------------------------------------------

    def encode(self, coder: Coder) -> None:
        """Write ``id``, ``url``, ``isLoaded`` and ``meta`` to ``coder``.

        Subclasses that persist their own fields call ``super().encode(coder)``
        first and then encode their fields.
        """
        coder.encode_value(self.id, "id")
        coder.encode_value(self.url, "url")
        coder.encode_bool(self.is_loaded, "isLoaded")
        coder.encode_value(self.meta, "meta")

    @classmethod
    def decode(cls: type[R], coder: Coder) -> R:
        """Rebuild a resource from values written by ``encode``. Declared fields stay unset."""
        resource = cls()
        id_ = coder.decode_value("id")
        url = coder.decode_value("url")
        meta = coder.decode_value("meta")
        resource.id = id_ if isinstance(id_, str) else None
        resource.url = url if isinstance(url, str) else None
        resource.is_loaded = coder.decode_bool("isLoaded")
        resource.meta = dict(meta) if isinstance(meta, dict) else None
        return resource

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Unsaved resources (id None) of the same type compare equal
        if not isinstance(other, Resource):
            return NotImplemented
        return self.id == other.id and self.resource_type == other.resource_type

    # Mutable entity; key collections on identifier() instead
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.resource_type}({self.id}, {self.url})"

    __repr__ = __str__
