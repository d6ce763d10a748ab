"""
AST node definitions for RDL schemas.

These nodes mirror the JSON form of an RDL schema as emitted by the
``rdl`` tool. They are built once by the parser and never mutated
afterwards; every later phase treats them as read-only input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BaseType(str, Enum):
    """Builtin RDL base types. Every type definition resolves to one of these."""

    ANY = "Any"
    BOOL = "Bool"
    BYTES = "Bytes"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    STRING = "String"
    TIMESTAMP = "Timestamp"
    SYMBOL = "Symbol"
    UUID = "UUID"
    ARRAY = "Array"
    MAP = "Map"
    STRUCT = "Struct"
    ENUM = "Enum"
    UNION = "Union"

    @classmethod
    def lookup(cls, name: str) -> BaseType | None:
        """Return the base type named ``name``, or None if it is not a builtin."""
        try:
            return cls(name)
        except ValueError:
            return None


NUMERIC_BASE_TYPES = frozenset(
    {
        BaseType.INT8,
        BaseType.INT16,
        BaseType.INT32,
        BaseType.INT64,
        BaseType.FLOAT32,
        BaseType.FLOAT64,
    }
)

TEXT_BASE_TYPES = frozenset({BaseType.STRING, BaseType.SYMBOL, BaseType.TIMESTAMP, BaseType.UUID})


@dataclass(frozen=True)
class TypeDef:
    """Common part of every RDL type definition."""

    name: str = ""
    # Supertype reference: a builtin base type name or another definition
    type: str = ""
    comment: str = ""
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class BaseTypeDef(TypeDef):
    """A builtin base type (``Int32``, ``Struct``, ...)."""


@dataclass(frozen=True)
class StructFieldDef:
    """A field declared on a struct."""

    name: str = ""
    type: str = ""
    optional: bool = False
    default: Any = None
    comment: str = ""
    # Element / key overrides for inline Array and Map fields
    items: str = ""
    keys: str = ""
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class StructTypeDef(TypeDef):
    """A struct. ``type`` names the parent struct, or ``Struct``."""

    fields: tuple[StructFieldDef, ...] = ()
    closed: bool = False


@dataclass(frozen=True)
class EnumElementDef:
    symbol: str = ""
    comment: str = ""


@dataclass(frozen=True)
class EnumTypeDef(TypeDef):
    elements: tuple[EnumElementDef, ...] = ()


@dataclass(frozen=True)
class UnionTypeDef(TypeDef):
    """A tagged union; each variant is a type reference used as its own slot name."""

    variants: tuple[str, ...] = ()


@dataclass(frozen=True)
class ArrayTypeDef(TypeDef):
    items: str = "Any"
    size: int | None = None
    min_size: int | None = None
    max_size: int | None = None


@dataclass(frozen=True)
class MapTypeDef(TypeDef):
    keys: str = "Any"
    items: str = "Any"
    size: int | None = None
    min_size: int | None = None
    max_size: int | None = None


@dataclass(frozen=True)
class StringTypeDef(TypeDef):
    pattern: str | None = None
    values: tuple[str, ...] = ()
    min_size: int | None = None
    max_size: int | None = None


@dataclass(frozen=True)
class NumberTypeDef(TypeDef):
    min: int | float | None = None
    max: int | float | None = None


@dataclass(frozen=True)
class BytesTypeDef(TypeDef):
    size: int | None = None
    min_size: int | None = None
    max_size: int | None = None


@dataclass(frozen=True)
class AliasTypeDef(TypeDef):
    """A new name for an existing type, e.g. ``type Location Point``."""


@dataclass(frozen=True)
class Schema:
    """A parsed RDL schema."""

    name: str = ""
    namespace: str = ""
    version: int | None = None
    comment: str = ""
    types: tuple[TypeDef, ...] = ()
