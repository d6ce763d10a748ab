"""
Emitter for the schema descriptor unit.

The descriptor rebuilds the schema at runtime through the RDL
``SchemaBuilder`` API, so generated code can introspect the types it
was generated from.
"""

from __future__ import annotations

from typing import Any

from ...utils import capitalize, java_string_literal
from ..schema_ast.nodes import (
    AliasTypeDef,
    ArrayTypeDef,
    BaseType,
    BaseTypeDef,
    BytesTypeDef,
    EnumTypeDef,
    MapTypeDef,
    NumberTypeDef,
    Schema,
    StringTypeDef,
    StructFieldDef,
    StructTypeDef,
    TypeDef,
    UnionTypeDef,
)
from .base import RDL_PACKAGE, create_template_environment
from .java_ast_nodes import JavaFile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class SchemaEmitter:
    """Emits ``<Name>Schema``, a class holding the schema built with SchemaBuilder."""

    TEMPLATE = "schema.java.jinja2"

    def __init__(self):
        self.jinja_env = create_template_environment()

    @staticmethod
    def class_name(schema: Schema) -> str:
        return capitalize(schema.name) + "Schema"

    def emit(self, schema: Schema, types: list[TypeDef], unit: JavaFile) -> None:
        """
        Emit the descriptor for ``schema`` into ``unit``.

        Args:
            schema: The parsed schema
            types: The user-defined types to describe, in declaration order
            unit: Output builder for the descriptor unit
        """
        if unit.package != RDL_PACKAGE:
            unit.add_import(f"{RDL_PACKAGE}.*")

        statements = [s for s in (self._statement(t) for t in types) if s]
        template = self.jinja_env.get_template(self.TEMPLATE)
        unit.raw_body = template.render(
            class_name=self.class_name(schema),
            schema=schema,
            statements=statements,
        )

    def _statement(self, type_def: TypeDef) -> list[str]:
        """Build the chained builder calls for one type, one call per line."""
        name = java_string_literal(type_def.name)

        if isinstance(type_def, BaseTypeDef):
            return []

        if isinstance(type_def, StructTypeDef):
            lines = [f"sb.structType({self._with_supertype(name, type_def, BaseType.STRUCT)})"]
            lines += self._comment(type_def)
            lines += [self._field_call(f) for f in type_def.fields]
        elif isinstance(type_def, EnumTypeDef):
            lines = [f"sb.enumType({name})"]
            lines += self._comment(type_def)
            for element in type_def.elements:
                args = [java_string_literal(element.symbol)]
                if element.comment:
                    args.append(java_string_literal(element.comment))
                lines.append(f"    .element({', '.join(args)})")
        elif isinstance(type_def, UnionTypeDef):
            lines = [f"sb.unionType({name})"]
            lines += self._comment(type_def)
            lines += [f"    .variant({java_string_literal(v)})" for v in type_def.variants]
        elif isinstance(type_def, ArrayTypeDef):
            lines = [f"sb.arrayType({self._with_supertype(name, type_def, BaseType.ARRAY)})"]
            lines += self._comment(type_def)
            lines.append(f"    .items({java_string_literal(type_def.items)})")
            lines += self._sizes(type_def.size, type_def.min_size, type_def.max_size)
        elif isinstance(type_def, MapTypeDef):
            lines = [f"sb.mapType({self._with_supertype(name, type_def, BaseType.MAP)})"]
            lines += self._comment(type_def)
            lines.append(f"    .keys({java_string_literal(type_def.keys)})")
            lines.append(f"    .items({java_string_literal(type_def.items)})")
            lines += self._sizes(type_def.size, type_def.min_size, type_def.max_size)
        elif isinstance(type_def, StringTypeDef):
            lines = [f"sb.stringType({self._with_supertype(name, type_def, BaseType.STRING)})"]
            lines += self._comment(type_def)
            if type_def.pattern:
                lines.append(f"    .pattern({java_string_literal(type_def.pattern)})")
            lines += self._sizes(None, type_def.min_size, type_def.max_size)
        elif isinstance(type_def, NumberTypeDef):
            lines = [f"sb.numberType({name}, {java_string_literal(type_def.type)})"]
            lines += self._comment(type_def)
            if type_def.min is not None:
                lines.append(f"    .min({self._object_literal(type_def.min)})")
            if type_def.max is not None:
                lines.append(f"    .max({self._object_literal(type_def.max)})")
        elif isinstance(type_def, BytesTypeDef):
            lines = [f"sb.bytesType({self._with_supertype(name, type_def, BaseType.BYTES)})"]
            lines += self._comment(type_def)
            lines += self._sizes(type_def.size, type_def.min_size, type_def.max_size)
        elif isinstance(type_def, AliasTypeDef):
            lines = [f"sb.aliasType({name}, {java_string_literal(type_def.type)})"]
            lines += self._comment(type_def)
        else:
            return []

        lines[-1] += ";"
        return lines

    def _with_supertype(self, name: str, type_def: TypeDef, base: BaseType) -> str:
        if type_def.type and type_def.type != base.value:
            return f"{name}, {java_string_literal(type_def.type)}"
        return name

    def _comment(self, type_def: TypeDef) -> list[str]:
        if type_def.comment:
            return [f"    .comment({java_string_literal(type_def.comment)})"]
        return []

    def _sizes(self, size: int | None, min_size: int | None, max_size: int | None) -> list[str]:
        lines = []
        if size is not None:
            lines.append(f"    .size({size})")
        if min_size is not None:
            lines.append(f"    .minSize({min_size})")
        if max_size is not None:
            lines.append(f"    .maxSize({max_size})")
        return lines

    def _field_call(self, f: StructFieldDef) -> str:
        optional = "true" if f.optional else "false"
        comment = java_string_literal(f.comment)
        if f.type == BaseType.ARRAY.value and f.items:
            return f"    .arrayField({java_string_literal(f.name)}, {java_string_literal(f.items)}, {optional}, {comment})"
        if f.type == BaseType.MAP.value and (f.keys or f.items):
            keys = java_string_literal(f.keys or "Any")
            items = java_string_literal(f.items or "Any")
            return f"    .mapField({java_string_literal(f.name)}, {keys}, {items}, {optional}, {comment})"
        args = [java_string_literal(f.name), java_string_literal(f.type), optional, comment]
        if f.default is not None:
            args.append(self._object_literal(f.default))
        return f"    .field({', '.join(args)})"

    @staticmethod
    def _object_literal(value: Any) -> str:
        """Render a JSON scalar as a Java expression boxable to Object."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return f"{value}L" if not INT_MIN <= value <= INT_MAX else str(value)
        if isinstance(value, float):
            return repr(value)
        return java_string_literal(str(value))
