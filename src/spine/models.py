from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from spine.core.errors import InvalidIdentifierError, MissingKeyError, TypeMismatchError

ResourceType = str


class ResourceIdentifier(BaseModel):
    """Uniquely identifies a resource that exists on the server."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    type: ResourceType
    id: str

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ResourceIdentifier:
        """Build an identifier from a mapping with exactly the keys ``type`` and ``id``.

        Raises ``MissingKeyError`` when a key is absent, ``TypeMismatchError``
        when a value is not a string and ``InvalidIdentifierError`` for any
        other key.
        """
        try:
            return cls.model_validate(dict(mapping))
        except ValidationError as exc:
            raise _identifier_error(exc, mapping) from exc

    def to_mapping(self) -> dict[str, str]:
        return {"type": self.type, "id": self.id}

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


def _identifier_error(exc: ValidationError, mapping: Mapping[str, Any]) -> InvalidIdentifierError:
    kinds = {err["type"] for err in exc.errors()}
    if "missing" in kinds:
        missing = [str(err["loc"][0]) for err in exc.errors() if err["type"] == "missing"]
        return MissingKeyError(f"Resource identifier is missing key(s): {', '.join(missing)}")
    if "extra_forbidden" in kinds:
        extra = sorted(str(k) for k in mapping if k not in ("type", "id"))
        return InvalidIdentifierError(f"Unexpected key(s) in resource identifier: {', '.join(extra)}")
    return TypeMismatchError(f"Resource identifier values must be strings: {dict(mapping)!r}")
