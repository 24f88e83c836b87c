from spine.archive.keyed import KeyedArchive, archive_resource, read_envelope, unarchive_resource
from spine.core.errors import (
    ArchiveError,
    ConfigurationError,
    DuplicateFieldError,
    InvalidIdentifierError,
    MissingKeyError,
    RegistryError,
    ResourceTypeConflictError,
    ResourceTypeNotDefinedError,
    SpineError,
    TypeMismatchError,
    UnknownResourceTypeError,
)
from spine.core.fields import Attribute, Field, ToManyRelationship, ToOneRelationship, fields_from_mapping
from spine.core.registry import ResourceRegistry
from spine.core.resource import Resource
from spine.models import ResourceIdentifier, ResourceType

__version__ = "0.1.0"

__all__ = [
    "ArchiveError",
    "Attribute",
    "ConfigurationError",
    "DuplicateFieldError",
    "Field",
    "InvalidIdentifierError",
    "KeyedArchive",
    "MissingKeyError",
    "RegistryError",
    "Resource",
    "ResourceIdentifier",
    "ResourceRegistry",
    "ResourceType",
    "ResourceTypeConflictError",
    "ResourceTypeNotDefinedError",
    "SpineError",
    "ToManyRelationship",
    "ToOneRelationship",
    "TypeMismatchError",
    "UnknownResourceTypeError",
    "__version__",
    "archive_resource",
    "fields_from_mapping",
    "read_envelope",
    "unarchive_resource",
]
