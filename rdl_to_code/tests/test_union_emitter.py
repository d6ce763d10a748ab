"""
Tests for the union emitter and its generated streaming deserializer.
"""

from __future__ import annotations

import pytest

from rdl_to_code.pipeline.analyzer import TypeRegistry
from rdl_to_code.pipeline.ast_backends import JavaSerializer, JavaTypeMapper, UnionEmitter
from rdl_to_code.pipeline.ast_backends.java_ast_nodes import JavaFile
from rdl_to_code.pipeline.errors import SchemaShapeError, UnsupportedVariantError
from rdl_to_code.pipeline.schema_ast import SchemaParser

TYPES = [
    {"StringTypeDef": {"name": "StringId", "type": "String"}},
    {"NumberTypeDef": {"name": "IntId", "type": "Int32"}},
    {"NumberTypeDef": {"name": "Count", "type": "Int32"}},
    {"EnumTypeDef": {"name": "Color", "type": "Enum", "elements": [{"symbol": "RED"}]}},
    {"StructTypeDef": {"name": "Point", "type": "Struct", "fields": [{"name": "x", "type": "Int32"}]}},
    {"MapTypeDef": {"name": "Attrs", "type": "Map", "keys": "String", "items": "String"}},
    {"ArrayTypeDef": {"name": "Names", "type": "Array", "items": "String"}},
    {"BytesTypeDef": {"name": "Blob", "type": "Bytes"}},
    {"UnionTypeDef": {"name": "Id", "type": "Union", "variants": ["StringId", "IntId"]}},
    {"UnionTypeDef": {"name": "Value", "type": "Union", "variants": ["Attrs", "Point", "Bool", "Color", "Timestamp", "Float64"]}},
]


def emit_union(union: dict, package: str | None = "com.example") -> str:
    registry = TypeRegistry(SchemaParser().parse({"name": "test", "types": TYPES + [union]}))
    name = next(iter(union.values()))["name"]
    unit = JavaFile(package=package)
    UnionEmitter(registry, JavaTypeMapper(registry)).emit(registry.resolve(name), unit)
    return JavaSerializer().serialize(unit)


def union_def(name: str, variants: list[str]) -> dict:
    return {"UnionTypeDef": {"name": name, "type": "Union", "variants": variants}}


class TestIdUnion:
    """Union of a textual and a numeric variant"""

    @pytest.fixture(scope="class")
    def output(self) -> str:
        return emit_union(union_def("Id", ["StringId", "IntId"]))

    def test_class_declaration(self, output):
        assert "@JsonSerialize(include = JsonSerialize.Inclusion.NON_NULL)\n" in output
        assert "@JsonDeserialize(using = Id.IdJsonDeserializer.class)\npublic final class Id {\n" in output

    def test_discriminant_and_slots(self, output):
        assert "    public enum IdVariant {\n        StringId,\n        IntId\n    }\n" in output
        assert "    @com.fasterxml.jackson.annotation.JsonIgnore\n    public IdVariant variant;\n" in output
        assert "    @RdlOptional public String StringId;\n    @RdlOptional public Integer IntId;\n" in output

    def test_constructors(self, output):
        assert "    public Id() {\n    }\n" in output
        assert "    public Id(String stringId) {\n        this.variant = IdVariant.StringId;\n        this.StringId = stringId;\n    }\n" in output
        assert "    public Id(Integer intId) {\n        this.variant = IdVariant.IntId;\n        this.IntId = intId;\n    }\n" in output

    def test_textual_branch(self, output):
        assert "if (tok == JsonToken.VALUE_STRING) {" in output
        assert 'case "StringId":\n                    t = new Id(jp.getText());\n                    break;' in output

    def test_numeric_branch(self, output):
        assert "if (tok == JsonToken.VALUE_NUMBER_INT || tok == JsonToken.VALUE_NUMBER_FLOAT) {" in output
        assert 'case "IntId":\n                    t = new Id(jp.getIntValue());' in output

    def test_branch_order(self, output):
        """Numeric branch is tested before the textual one"""
        assert output.index('case "IntId"') < output.index('case "StringId"')

    def test_no_unused_branches(self, output):
        assert "JsonToken.VALUE_TRUE" not in output
        assert "JsonToken.START_OBJECT" not in output

    def test_closure_check_per_branch(self, output):
        assert output.count("if (tok != JsonToken.END_OBJECT) {") == 2
        assert output.count("Reason.MULTIPLE_VARIANTS") == 2

    def test_failure_reasons(self, output):
        assert 'throw new IdFormatException(IdFormatException.Reason.NO_VARIANT, "Cannot deserialize Id - no variant present");' in output
        assert 'throw new IdFormatException(IdFormatException.Reason.MALFORMED_UNION, "Cannot deserialize Id - no valid variant present");' in output
        assert 'IdFormatException.Reason.UNRECOGNIZED_VARIANT, "Cannot deserialize Id - bad type variant: " + svariant);' in output

    def test_failure_type(self, output):
        assert "    public static class IdFormatException extends IOException {" in output
        assert "            MALFORMED_UNION,\n            UNRECOGNIZED_VARIANT,\n            MULTIPLE_VARIANTS,\n            NO_VARIANT\n" in output
        assert "        public final Reason reason;" in output
        assert "        public IdFormatException(Reason reason, String message) {\n            super(message);\n            this.reason = reason;\n" in output

    def test_deserializer(self, output):
        assert "    public static class IdJsonDeserializer extends JsonDeserializer<Id> {" in output
        assert "        public Id deserialize(JsonParser jp, DeserializationContext ctxt) throws IOException, JsonProcessingException {" in output
        assert "            String svariant = jp.getCurrentName();" in output

    def test_equals(self, output):
        assert "if (this == _another) {\n            return true;\n        }" in output
        assert "        if (variant != _other.variant) {\n            return false;\n        }" in output
        assert "        case StringId:\n            return StringId == null ? _other.StringId == null : StringId.equals(_other.StringId);" in output

    def test_hash_code(self, output):
        assert "        case IntId:\n            return Objects.hash(variant, IntId);" in output

    def test_imports(self, output):
        assert "import java.io.IOException;\nimport java.util.Objects;\nimport com.yahoo.rdl.*;\n" in output
        assert "import com.fasterxml.jackson.databind.JsonDeserializer;" in output
        assert "import com.fasterxml.jackson.core.JsonToken;" in output
        assert "import com.fasterxml.jackson.core.type.TypeReference;" not in output


class TestValueUnion:
    """Union with structured, boolean, enum, timestamp and float variants"""

    @pytest.fixture(scope="class")
    def output(self) -> str:
        return emit_union(union_def("Value", ["Attrs", "Point", "Bool", "Color", "Timestamp", "Float64"]))

    def test_structured_branch(self, output):
        assert "if (tok == JsonToken.START_OBJECT) {" in output
        assert 'case "Attrs":\n                    t = new Value(jp.readValueAs(new TypeReference<Map<String, String>>() {}));' in output
        assert 'case "Point":\n                    t = new Value(jp.readValueAs(Point.class));' in output
        assert "import com.fasterxml.jackson.core.type.TypeReference;" in output
        assert "import java.util.Map;" in output

    def test_boolean_branch(self, output):
        assert "if (tok == JsonToken.VALUE_TRUE || tok == JsonToken.VALUE_FALSE) {" in output
        assert 't = new Value(jp.getBooleanValue());' in output

    def test_textual_types_use_from_string(self, output):
        assert "t = new Value(com.example.Color.fromString(jp.getText()));" in output
        assert "t = new Value(com.yahoo.rdl.Timestamp.fromString(jp.getText()));" in output

    def test_numeric_accessor(self, output):
        assert "t = new Value(jp.getDoubleValue());" in output

    def test_branch_order(self, output):
        numeric = output.index('case "Float64"')
        textual = output.index('case "Color"')
        boolean = output.index('case "Bool"')
        structured = output.index('case "Attrs"')
        assert numeric < textual < boolean < structured

    def test_slot_names(self, output):
        assert "public Value(Boolean bool) {" in output
        assert "public Value(Map<String, String> attrs) {" in output


class TestUnpackagedUnion:
    """Without a package the slot field obscures the simple type name in static calls"""

    @pytest.fixture(scope="class")
    def output(self) -> str:
        return emit_union(union_def("U", ["Color", "IntId", "Timestamp"]), package=None)

    def test_slot_shares_type_name(self, output):
        assert "@RdlOptional public Color Color;" in output

    def test_enum_read_through_class_literal(self, output):
        assert 'case "Color":\n                    t = new U(jp.readValueAs(Color.class));' in output
        assert "Color.fromString" not in output

    def test_runtime_types_stay_qualified(self, output):
        assert "t = new U(com.yahoo.rdl.Timestamp.fromString(jp.getText()));" in output


class TestUnionFailures:
    def test_array_variant_is_unsupported(self):
        with pytest.raises(UnsupportedVariantError, match="Names"):
            emit_union(union_def("Bad", ["StringId", "Names"]))

    def test_bytes_variant_has_no_shape(self):
        with pytest.raises(SchemaShapeError, match="Blob") as exc_info:
            emit_union(union_def("Bad", ["Blob"]))
        assert not isinstance(exc_info.value, UnsupportedVariantError)

    def test_same_java_type_collides(self):
        with pytest.raises(SchemaShapeError, match="both map to Java type Integer"):
            emit_union(union_def("Bad", ["IntId", "Count"]))

    @pytest.mark.parametrize("variant", ["_other", "_another"])
    def test_variant_named_like_equals_local(self, variant):
        union = union_def("Bad", [variant])
        registry = TypeRegistry(SchemaParser().parse({"name": "test", "types": [{"StringTypeDef": {"name": variant, "type": "String"}}, union]}))
        with pytest.raises(SchemaShapeError, match="reserved by the generated equals"):
            UnionEmitter(registry, JavaTypeMapper(registry)).emit(registry.resolve("Bad"), JavaFile())

    def test_unknown_variant(self):
        with pytest.raises(LookupError, match="Missing"):
            emit_union(union_def("Bad", ["Missing"]))

    def test_not_a_union(self):
        registry = TypeRegistry(SchemaParser().parse({"name": "test", "types": TYPES}))
        with pytest.raises(SchemaShapeError):
            UnionEmitter(registry, JavaTypeMapper(registry)).emit(registry.resolve("Point"), JavaFile())
