"""Error taxonomy for the resource model."""

from __future__ import annotations


class SpineError(Exception):
    """Base class for all errors raised by spine."""


class InvalidIdentifierError(SpineError, ValueError):
    """Raised when a mapping does not describe a resource identifier."""


class MissingKeyError(InvalidIdentifierError, KeyError):
    """Raised when an identifier mapping lacks ``type`` or ``id``."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class TypeMismatchError(InvalidIdentifierError, TypeError):
    """Raised when an identifier mapping holds a non-string value."""


class ConfigurationError(SpineError, ValueError):
    """Raised when a SPINE_* environment variable holds an unsupported value."""


class ResourceTypeNotDefinedError(SpineError, NotImplementedError):
    """Raised when a resource class does not declare ``resource_type``."""


class RegistryError(SpineError):
    pass


class UnknownResourceTypeError(RegistryError, LookupError):
    pass


class DuplicateFieldError(RegistryError, ValueError):
    pass


class ResourceTypeConflictError(RegistryError, ValueError):
    pass


class ArchiveError(SpineError, ValueError):
    """Raised when archived bytes cannot be produced or read back."""
