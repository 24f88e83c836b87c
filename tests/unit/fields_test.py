"""Unit tests for field descriptors."""

from spine import Attribute, Field, ToManyRelationship, ToOneRelationship, fields_from_mapping


def test_fields_from_mapping_names_fields_in_order() -> None:
    fields = fields_from_mapping({"title": Attribute(), "author": ToOneRelationship(linked_type="people")})
    assert [f.name for f in fields] == ["title", "author"]
    assert isinstance(fields[0], Attribute)
    assert isinstance(fields[1], ToOneRelationship)
    assert fields[1].linked_type == "people"


def test_wire_name_defaults_to_name() -> None:
    assert Attribute(name="title").wire_name == "title"


def test_serialize_as_returns_renamed_copy() -> None:
    original = Attribute(name="body")
    renamed = original.serialize_as("content")
    assert renamed.wire_name == "content"
    assert renamed.name == "body"
    assert original.serialized_name is None


def test_read_only_returns_copy() -> None:
    field = ToManyRelationship(name="tags", linked_type="tags").read_only()
    assert field.is_read_only
    assert isinstance(field, ToManyRelationship)
    assert not Field(name="tags").is_read_only


def test_descriptors_compare_by_value() -> None:
    assert Attribute(name="title") == Attribute(name="title")
    assert Attribute(name="title") != Attribute(name="body")
