"""Field descriptors declared by resource classes."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict


class Field(BaseModel):
    """A declared, persistable attribute of a resource class."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    serialized_name: str | None = None
    is_read_only: bool = False

    @property
    def wire_name(self) -> str:
        """Key used for this field in a serialized document."""
        return self.serialized_name or self.name

    def serialize_as(self, name: str) -> Field:
        return self.model_copy(update={"serialized_name": name})

    def read_only(self) -> Field:
        return self.model_copy(update={"is_read_only": True})

    def named(self, name: str) -> Field:
        return self.model_copy(update={"name": name})


class Attribute(Field):
    pass


class ToOneRelationship(Field):
    linked_type: str


class ToManyRelationship(Field):
    linked_type: str


def fields_from_mapping(mapping: Mapping[str, Field]) -> tuple[Field, ...]:
    """Return the descriptors of ``mapping`` in order, each named after its key.

    Lets a resource class declare its schema as
    ``fields = fields_from_mapping({"title": Attribute(), "author": ToOneRelationship(linked_type="people")})``.
    """
    return tuple(field.named(name) for name, field in mapping.items())
