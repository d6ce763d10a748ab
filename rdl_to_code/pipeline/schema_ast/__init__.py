"""
Schema AST (Abstract Syntax Tree) module.

Contains the RDL node definitions and the JSON schema parser.
"""

from __future__ import annotations

from .nodes import (
    AliasTypeDef,
    ArrayTypeDef,
    BaseType,
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
from .parser import SchemaParser

__all__ = [
    "BaseType",
    "TypeDef",
    "BaseTypeDef",
    "StructTypeDef",
    "StructFieldDef",
    "EnumTypeDef",
    "EnumElementDef",
    "UnionTypeDef",
    "ArrayTypeDef",
    "MapTypeDef",
    "StringTypeDef",
    "NumberTypeDef",
    "BytesTypeDef",
    "AliasTypeDef",
    "Schema",
    "SchemaParser",
]
