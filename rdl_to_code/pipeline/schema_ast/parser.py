"""
RDL schema parser that builds an AST.

Phase 1 of the pipeline: turn the JSON form of an RDL schema into
node dataclasses without resolving any type references.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaParseError
from .nodes import (
    AliasTypeDef,
    ArrayTypeDef,
    BaseTypeDef,
    BytesTypeDef,
    EnumElementDef,
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


class SchemaParser:
    """Parses an RDL JSON schema into an AST."""

    def parse(self, schema: dict[str, Any]) -> Schema:
        """
        Parse an RDL schema dictionary.

        Args:
            schema: The decoded JSON schema

        Returns:
            Schema with its type definitions in declaration order
        """
        if not isinstance(schema, dict):
            raise SchemaParseError(f"Expected a JSON object for the schema, got {type(schema).__name__}")

        types = tuple(self._parse_type(t, f"types[{i}]") for i, t in enumerate(schema.get("types") or []))

        return Schema(
            name=schema.get("name", ""),
            namespace=schema.get("namespace", ""),
            version=schema.get("version"),
            comment=schema.get("comment", ""),
            types=types,
        )

    def _parse_type(self, value: Any, path: str) -> TypeDef:
        """
        Parse one entry of the ``types`` list.

        An entry is either a bare base type name or a single-key object whose
        key names the definition variant.
        """
        if isinstance(value, str):
            return BaseTypeDef(name=value, type=value)

        if not isinstance(value, dict) or len(value) != 1:
            raise SchemaParseError(f"{path}: expected a single-key type definition object")

        variant, body = next(iter(value.items()))
        parse_method = getattr(self, f"_parse_{variant}", None)
        if parse_method is None:
            raise SchemaParseError(f"{path}: unknown type definition variant '{variant}'")
        if not isinstance(body, dict) or not body.get("name"):
            raise SchemaParseError(f"{path}: {variant} must have a name")

        return parse_method(body, path)

    def _common(self, body: dict[str, Any]) -> dict[str, Any]:
        """Extract the attributes shared by every definition variant."""
        return {
            "name": body["name"],
            "type": body.get("type", ""),
            "comment": body.get("comment", ""),
            "annotations": dict(body.get("annotations") or {}),
        }

    def _parse_BaseType(self, body: dict[str, Any], path: str) -> BaseTypeDef:
        return BaseTypeDef(**self._common(body))

    def _parse_StructTypeDef(self, body: dict[str, Any], path: str) -> StructTypeDef:
        fields = tuple(self._parse_field(f, f"{path}.fields[{i}]") for i, f in enumerate(body.get("fields") or []))
        return StructTypeDef(**self._common(body), fields=fields, closed=bool(body.get("closed", False)))

    def _parse_field(self, body: dict[str, Any], path: str) -> StructFieldDef:
        if not isinstance(body, dict) or not body.get("name") or not body.get("type"):
            raise SchemaParseError(f"{path}: a struct field needs a name and a type")
        return StructFieldDef(
            name=body["name"],
            type=body["type"],
            optional=bool(body.get("optional", False)),
            default=body.get("default"),
            comment=body.get("comment", ""),
            items=body.get("items", ""),
            keys=body.get("keys", ""),
            annotations=dict(body.get("annotations") or {}),
        )

    def _parse_EnumTypeDef(self, body: dict[str, Any], path: str) -> EnumTypeDef:
        elements = tuple(
            EnumElementDef(symbol=e["symbol"], comment=e.get("comment", ""))
            for e in body.get("elements") or []
        )
        return EnumTypeDef(**self._common(body), elements=elements)

    def _parse_UnionTypeDef(self, body: dict[str, Any], path: str) -> UnionTypeDef:
        return UnionTypeDef(**self._common(body), variants=tuple(body.get("variants") or []))

    def _parse_ArrayTypeDef(self, body: dict[str, Any], path: str) -> ArrayTypeDef:
        return ArrayTypeDef(
            **self._common(body),
            items=body.get("items") or "Any",
            size=body.get("size"),
            min_size=body.get("minSize"),
            max_size=body.get("maxSize"),
        )

    def _parse_MapTypeDef(self, body: dict[str, Any], path: str) -> MapTypeDef:
        return MapTypeDef(
            **self._common(body),
            keys=body.get("keys") or "Any",
            items=body.get("items") or "Any",
            size=body.get("size"),
            min_size=body.get("minSize"),
            max_size=body.get("maxSize"),
        )

    def _parse_StringTypeDef(self, body: dict[str, Any], path: str) -> StringTypeDef:
        return StringTypeDef(
            **self._common(body),
            pattern=body.get("pattern"),
            values=tuple(body.get("values") or []),
            min_size=body.get("minSize"),
            max_size=body.get("maxSize"),
        )

    def _parse_NumberTypeDef(self, body: dict[str, Any], path: str) -> NumberTypeDef:
        return NumberTypeDef(**self._common(body), min=body.get("min"), max=body.get("max"))

    def _parse_BytesTypeDef(self, body: dict[str, Any], path: str) -> BytesTypeDef:
        return BytesTypeDef(
            **self._common(body),
            size=body.get("size"),
            min_size=body.get("minSize"),
            max_size=body.get("maxSize"),
        )

    def _parse_AliasTypeDef(self, body: dict[str, Any], path: str) -> AliasTypeDef:
        return AliasTypeDef(**self._common(body))
