"""
Emitter for RDL struct types and aliases of structs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from ...utils import java_field_name, java_string_literal
from ..errors import SchemaShapeError
from ..schema_ast.nodes import NUMERIC_BASE_TYPES, TEXT_BASE_TYPES, AliasTypeDef, BaseType, StructFieldDef, StructTypeDef, TypeDef
from .base import EQUALS_LOCAL, EQUALS_PARAMETER, JSON_SERIALIZE_IMPORT, Emitter
from .java_ast_nodes import JavaAnnotation, JavaClass, JavaField, JavaFile, JavaMethod, JavaParameter, MemberModifier

logger = logging.getLogger(__name__)

JSON_PROPERTY = "com.fasterxml.jackson.annotation.JsonProperty"


@dataclass
class FieldInfo:
    """A flattened struct field with its Java rendering decided."""

    spec: StructFieldDef
    name: str  # Java field name, possibly escaped
    type_name: str
    base_type: BaseType
    is_primitive: bool


class StructEmitter(Emitter):
    """Emits a Java class for a struct: fields, fluent setters, init() and equals()."""

    def emit(self, type_def: TypeDef, unit: JavaFile) -> None:
        if isinstance(type_def, StructTypeDef):
            fields = [self._field_info(f) for f in self.registry.flattened_fields(type_def)]
            closed = type_def.closed
        elif isinstance(type_def, AliasTypeDef):
            # The alias only carries a constrained name
            fields = []
            closed = False
        else:
            raise SchemaShapeError(f"Unreasonable struct typedef: {type_def.name} is a {type(type_def).__name__}")

        name = self.class_name(type_def)
        self.check_member_names(name, [f.name for f in fields])
        logger.debug(f"Emitting struct {name} with {len(fields)} field(s)")

        self.add_imports(
            unit,
            [f.type_name for f in fields],
            extra_java=["java.util.Objects"] if fields else [],
            library=[JSON_SERIALIZE_IMPORT],
        )
        unit.type_comment = self.type_comment(type_def)

        cls = JavaClass(name=name)
        cls.annotations.append(JavaAnnotation(name="JsonSerialize", arguments=["include = JsonSerialize.Inclusion.NON_DEFAULT"]))
        if closed:
            cls.modifiers.append(MemberModifier.FINAL)

        for f in fields:
            cls.fields.append(self._field(f))
        for f in fields:
            cls.methods.append(self._setter(name, f))
        cls.methods.append(self._equals(name, fields))
        cls.methods.append(self._hash_code(fields))

        # init() exists only for a non-zero default, then assigns every declared default
        if any(self._has_non_zero_default(f) for f in fields):
            cls.methods.append(self._init(name, [f for f in fields if self._has_literal_default(f)]))

        unit.declaration = cls

    def _field_info(self, spec: StructFieldDef) -> FieldInfo:
        return FieldInfo(
            spec=spec,
            name=java_field_name(spec.name),
            type_name=self.type_mapper.map_type(spec.type, spec.optional, spec.items, spec.keys),
            base_type=self.registry.find_base_type(spec.type),
            is_primitive=self.type_mapper.is_primitive(spec.type, spec.optional),
        )

    def _field(self, f: FieldInfo) -> JavaField:
        field_node = JavaField(name=f.name, type_name=f.type_name)
        if f.name != f.spec.name:
            field_node.annotations.append(JavaAnnotation(name=JSON_PROPERTY, arguments=[java_string_literal(f.spec.name)]))
        if f.spec.optional:
            field_node.annotations.append(JavaAnnotation(name="RdlOptional"))
        return field_node

    def _setter(self, class_name: str, f: FieldInfo) -> JavaMethod:
        return JavaMethod(
            name=f.name,
            return_type=class_name,
            parameters=[JavaParameter(name=f.name, type_name=f.type_name)],
            body=[f"this.{f.name} = {f.name};", "return this;"],
        )

    def _equals(self, class_name: str, fields: list[FieldInfo]) -> JavaMethod:
        """Field-wise equality: value comparison for primitives, null-aware equals() otherwise."""
        body = [
            f"if (this != {EQUALS_PARAMETER}) {{",
            f"    if ({EQUALS_PARAMETER} == null || {EQUALS_PARAMETER}.getClass() != {class_name}.class) {{",
            "        return false;",
            "    }",
        ]
        if fields:
            body.append(f"    {class_name} {EQUALS_LOCAL} = ({class_name}) {EQUALS_PARAMETER};")
        for f in fields:
            if f.is_primitive:
                body.append(f"    if ({f.name} != {EQUALS_LOCAL}.{f.name}) {{")
            else:
                other = f"{EQUALS_LOCAL}.{f.name}"
                body.append(f"    if ({f.name} == null ? {other} != null : !{f.name}.equals({other})) {{")
            body.append("        return false;")
            body.append("    }")
        body.append("}")
        body.append("return true;")

        return JavaMethod(
            name="equals",
            return_type="boolean",
            annotations=[JavaAnnotation(name="Override")],
            parameters=[JavaParameter(name=EQUALS_PARAMETER, type_name="Object")],
            body=body,
        )

    def _hash_code(self, fields: list[FieldInfo]) -> JavaMethod:
        if fields:
            statement = f"return Objects.hash({', '.join(f.name for f in fields)});"
        else:
            statement = "return 0;"
        return JavaMethod(
            name="hashCode",
            return_type="int",
            annotations=[JavaAnnotation(name="Override")],
            body=[statement],
        )

    def _init(self, class_name: str, fields: list[FieldInfo]) -> JavaMethod:
        """
        Build init(), which assigns declared defaults to fields still at their zero value.

        A field explicitly set to its zero value is indistinguishable from an
        unset one and gets the default too.
        """
        body: list[str] = []
        for f in fields:
            body.append(f"if ({self._zero_test(f)}) {{")
            body.append(f"    {f.name} = {self._literal(f)};")
            body.append("}")
        body.append("return this;")

        return JavaMethod(
            name="init",
            return_type=class_name,
            comment=["sets up the instance according to its default field values, if any"],
            body=body,
        )

    def _has_non_zero_default(self, f: FieldInfo) -> bool:
        # False == 0, so a false Bool default counts as zero too
        return self._has_literal_default(f) and f.spec.default not in ("", 0)

    def _has_literal_default(self, f: FieldInfo) -> bool:
        """Whether the declared default has a Java literal of the field's type."""
        default = f.spec.default
        if f.base_type is BaseType.STRING:
            return isinstance(default, str)
        if f.base_type in TEXT_BASE_TYPES or f.base_type is BaseType.ENUM:
            # An empty symbol names no constant and parses to no value
            return isinstance(default, str) and default != ""
        if f.base_type in NUMERIC_BASE_TYPES:
            return isinstance(default, (int, float)) and not isinstance(default, bool)
        if f.base_type is BaseType.BOOL:
            return isinstance(default, bool)
        return False

    def _zero_test(self, f: FieldInfo) -> str:
        """Java condition that is true while the field holds its zero value."""
        name = f.name
        if f.base_type is BaseType.BOOL:
            return f"!{name}" if f.is_primitive else f"{name} == null || !{name}"
        if f.base_type in NUMERIC_BASE_TYPES:
            return f"{name} == 0" if f.is_primitive else f"{name} == null || {name} == 0"
        if f.base_type is BaseType.STRING:
            return f"{name} == null || {name}.isEmpty()"
        return f"{name} == null"

    def _literal(self, f: FieldInfo) -> str:
        """Render the field's declared default as a Java literal of the field's type."""
        value: Any = f.spec.default
        base = f.base_type

        if base is BaseType.BOOL:
            return "true" if value else "false"

        if base is BaseType.STRING:
            return java_string_literal(value)

        if base is BaseType.ENUM:
            return f"{f.type_name}.{value}"

        if base in TEXT_BASE_TYPES:
            return f"{f.type_name}.fromString({java_string_literal(value)})"

        if base in (BaseType.FLOAT32, BaseType.FLOAT64):
            if not math.isfinite(value):
                raise SchemaShapeError(f"Field {f.spec.name}: default {value!r} has no Java literal")
            text = repr(float(value))
            return f"{text}f" if base is BaseType.FLOAT32 else text

        if isinstance(value, float) and not value.is_integer():
            raise SchemaShapeError(f"Field {f.spec.name}: default {value!r} is not an integer")
        number = int(value)
        if base is BaseType.INT8:
            return f"(byte) {number}"
        if base is BaseType.INT16:
            return f"(short) {number}"
        if base is BaseType.INT64:
            return f"{number}L"
        return str(number)
