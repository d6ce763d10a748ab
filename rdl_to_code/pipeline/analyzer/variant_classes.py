"""
Partition union variants by the JSON token shape of their payload.

The generated union decoder picks a branch from the shape of the value
token (number, string, boolean, object) and only then looks at the
field name, so every variant must land in exactly one shape class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..errors import SchemaShapeError, UnsupportedVariantError
from ..schema_ast.nodes import NUMERIC_BASE_TYPES, TEXT_BASE_TYPES, BaseType, UnionTypeDef
from .type_registry import TypeRegistry


class TokenShape(str, Enum):
    """Token-shape classes, in the order the decoder tests them."""

    NUMERIC = "numeric"
    TEXTUAL = "textual"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class Variant:
    """One union variant with its resolved base type."""

    name: str
    base_type: BaseType


@dataclass
class VariantClasses:
    """Union variants grouped by token shape, each group in declaration order."""

    groups: dict[TokenShape, list[Variant]] = field(default_factory=lambda: {shape: [] for shape in TokenShape})

    def __getitem__(self, shape: TokenShape) -> list[Variant]:
        return self.groups[shape]


def token_shape(base_type: BaseType) -> TokenShape | None:
    """Return the token-shape class of a base type, or None if it has none."""
    if base_type in NUMERIC_BASE_TYPES:
        return TokenShape.NUMERIC
    if base_type in TEXT_BASE_TYPES or base_type is BaseType.ENUM:
        return TokenShape.TEXTUAL
    if base_type is BaseType.BOOL:
        return TokenShape.BOOLEAN
    if base_type is BaseType.ARRAY:
        return TokenShape.SEQUENCE
    if base_type in (BaseType.MAP, BaseType.STRUCT):
        return TokenShape.STRUCTURED
    return None


def classify_variants(union_def: UnionTypeDef, registry: TypeRegistry) -> VariantClasses:
    """
    Group the variants of ``union_def`` into token-shape classes.

    Raises:
        TypeResolutionError: If a variant does not resolve
        UnsupportedVariantError: If a variant is an array
        SchemaShapeError: If a variant's base type has no token shape
    """
    classes = VariantClasses()
    for variant_name in union_def.variants:
        base = registry.find_base_type(variant_name)
        shape = token_shape(base)
        if shape is None:
            raise SchemaShapeError(f"Union {union_def.name}: variant '{variant_name}' of base type {base.value} cannot be decoded")
        if shape is TokenShape.SEQUENCE:
            raise UnsupportedVariantError(f"Union {union_def.name}: array variant '{variant_name}' is not implemented")
        classes[shape].append(Variant(name=variant_name, base_type=base))
    return classes
