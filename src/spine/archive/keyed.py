"""JSON-backed keyed archive for persisting resources as bytes."""

from __future__ import annotations

import json
import logging
from typing import Any

from spine.config import load_settings
from spine.core.errors import ArchiveError
from spine.core.registry import ResourceRegistry
from spine.core.resource import Resource

logger = logging.getLogger(__name__)

TYPE_KEY = "$type"

_SCALARS = (str, int, float, bool, type(None))


class KeyedArchive:
    """In-memory ``Coder`` whose contents serialize to and from JSON bytes.

    Values must be JSON-shaped: ``None``, booleans, numbers, strings, lists and
    dicts with string keys. Anything else is rejected by ``to_bytes`` because
    it would not come back unchanged.
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values: dict[str, Any] = dict(values) if values else {}

    def encode_value(self, value: Any, key: str) -> None:
        self.values[key] = value

    def encode_bool(self, value: bool, key: str) -> None:
        self.values[key] = bool(value)

    def decode_value(self, key: str) -> Any:
        return self.values.get(key)

    def decode_bool(self, key: str) -> bool:
        return bool(self.values.get(key, False))

    def contains(self, key: str) -> bool:
        return key in self.values

    def to_bytes(self, encoding: str | None = None) -> bytes:
        encoding = encoding or load_settings().archive_encoding
        _check_persistable(self.values, "archive")
        try:
            return json.dumps(self.values, separators=(",", ":"), sort_keys=True).encode(encoding)
        except LookupError as exc:
            raise ArchiveError(f"Unknown archive encoding {encoding!r}") from exc
        except (TypeError, ValueError) as exc:
            raise ArchiveError(f"Archive contains a value that cannot be persisted: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str | None = None) -> KeyedArchive:
        encoding = encoding or load_settings().archive_encoding
        try:
            values = json.loads(data.decode(encoding))
        except LookupError as exc:
            raise ArchiveError(f"Unknown archive encoding {encoding!r}") from exc
        except (ValueError, UnicodeDecodeError) as exc:
            raise ArchiveError("Malformed resource archive") from exc
        if not isinstance(values, dict):
            raise ArchiveError(f"Resource archive must hold an object, got {type(values).__name__}")
        return cls(values)


def archive_resource(resource: Resource) -> bytes:
    archive = KeyedArchive()
    archive.encode_value(resource.resource_type, TYPE_KEY)
    resource.encode(archive)
    logger.debug("Archived %s (%d keys)", resource, len(archive.values))
    return archive.to_bytes()


def unarchive_resource(data: bytes, registry: ResourceRegistry) -> Resource:
    """Rebuild a resource from ``archive_resource`` output using the class registered for its type."""
    archive = KeyedArchive.from_bytes(data)
    resource_type = archive.decode_value(TYPE_KEY)
    if not isinstance(resource_type, str):
        raise ArchiveError(f"Resource archive has no {TYPE_KEY!r} entry")
    resource = registry.resource_class(resource_type).decode(archive)
    logger.debug("Unarchived %s", resource)
    return resource


def read_envelope(data: bytes) -> dict[str, Any]:
    return KeyedArchive.from_bytes(data).values


def _check_persistable(value: Any, path: str) -> None:
    if isinstance(value, _SCALARS):
        return
    if isinstance(value, list):
        for index, item in enumerate(value):
            _check_persistable(item, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ArchiveError(
                    f"Archive contains a value that cannot be persisted: {path} has non-string key {key!r}"
                )
            _check_persistable(item, f"{path}.{key}")
        return
    raise ArchiveError(
        f"Archive contains a value that cannot be persisted: {path} has unsupported type {type(value).__name__}"
    )
