"""
Tests for the RDL to Java type mapping.
"""

from __future__ import annotations

import pytest

from rdl_to_code.pipeline.analyzer import TypeRegistry
from rdl_to_code.pipeline.ast_backends import JavaTypeMapper
from rdl_to_code.pipeline.errors import TypeResolutionError
from rdl_to_code.pipeline.schema_ast import SchemaParser

SCHEMA = {
    "name": "mapping",
    "namespace": "com.example",
    "types": [
        {"StringTypeDef": {"name": "Name", "type": "String"}},
        {"NumberTypeDef": {"name": "Age", "type": "Int32"}},
        {"ArrayTypeDef": {"name": "Names", "type": "Array", "items": "Name"}},
        {"ArrayTypeDef": {"name": "Ages", "type": "Array", "items": "Int32"}},
        {"MapTypeDef": {"name": "Counts", "type": "Map", "keys": "String", "items": "Int64"}},
        {"StructTypeDef": {"name": "Point", "type": "Struct", "fields": [{"name": "x", "type": "Int32"}]}},
        {"EnumTypeDef": {"name": "Color", "type": "Enum", "elements": [{"symbol": "RED"}]}},
        {"UnionTypeDef": {"name": "Id", "type": "Union", "variants": ["Name", "Age"]}},
        {"AliasTypeDef": {"name": "Location", "type": "Point"}},
        {"StructTypeDef": {"name": "rdl.Schema", "type": "Struct", "fields": []}},
    ],
}


@pytest.fixture
def mapper() -> JavaTypeMapper:
    return JavaTypeMapper(TypeRegistry(SchemaParser().parse(SCHEMA)))


@pytest.mark.parametrize(
    "type_ref,required,boxed",
    [
        ("Bool", "boolean", "Boolean"),
        ("Int8", "byte", "Byte"),
        ("Int16", "short", "Short"),
        ("Int32", "int", "Integer"),
        ("Int64", "long", "Long"),
        ("Float32", "float", "Float"),
        ("Float64", "double", "Double"),
        ("Age", "int", "Integer"),
    ],
)
def test_primitive_boxed_pairing(mapper, type_ref, required, boxed):
    """Required fields get the primitive, optional fields the boxed wrapper"""
    assert mapper.map_type(type_ref) == required
    assert mapper.map_type(type_ref, optional=True) == boxed


@pytest.mark.parametrize("type_ref,expected", [("String", "String"), ("Name", "String"), ("Symbol", "Symbol"), ("Timestamp", "Timestamp"), ("UUID", "UUID")])
def test_text_types(mapper, type_ref, expected):
    assert mapper.map_type(type_ref) == expected
    assert mapper.map_type(type_ref, optional=True) == expected


def test_any_is_object(mapper):
    assert mapper.map_type("Any") == "Object"


def test_array_definition_uses_its_own_items(mapper):
    assert mapper.map_type("Names") == "List<String>"


def test_array_of_primitive_is_boxed(mapper):
    assert mapper.map_type("Ages") == "List<Integer>"


def test_inline_array_uses_items_override(mapper):
    assert mapper.map_type("Array", items="Point") == "List<Point>"
    assert mapper.map_type("Array", items="Any") == "List<Object>"
    assert mapper.map_type("Array") == "List<Object>"


def test_map_definition(mapper):
    assert mapper.map_type("Counts") == "Map<String, Long>"


def test_inline_map_uses_overrides(mapper):
    assert mapper.map_type("Map", items="Point", keys="String") == "Map<String, Point>"
    assert mapper.map_type("Map") == "Map<Object, Object>"


def test_nested_collections(mapper):
    assert mapper.map_type("Array", items="Counts") == "List<Map<String, Long>>"


def test_struct_and_generated_types_keep_their_name(mapper):
    assert mapper.map_type("Point") == "Point"
    assert mapper.map_type("Point", optional=True) == "Point"
    assert mapper.map_type("Color") == "Color"
    assert mapper.map_type("Id") == "Id"
    assert mapper.map_type("Location") == "Location"


def test_any_struct_is_object(mapper):
    assert mapper.map_type("Struct") == "Object"


def test_rdl_prefix_is_stripped(mapper):
    assert mapper.map_type("rdl.Schema") == "Schema"


def test_unknown_reference_fails(mapper):
    with pytest.raises(TypeResolutionError, match="Cannot find type 'Missing'"):
        mapper.map_type("Missing")


def test_unknown_element_fails(mapper):
    with pytest.raises(TypeResolutionError):
        mapper.map_type("Array", items="Missing")


def test_is_primitive(mapper):
    assert mapper.is_primitive("Int32", optional=False)
    assert not mapper.is_primitive("Int32", optional=True)
    assert not mapper.is_primitive("String", optional=False)
    assert not mapper.is_primitive("Point", optional=False)
