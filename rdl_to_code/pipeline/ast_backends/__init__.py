"""
Java AST backends.

Emitters build ``JavaFile`` units from RDL definitions; the serializer
turns a unit into Java source.
"""

from __future__ import annotations

from .base import Emitter
from .enum_emitter import EnumEmitter
from .java_serializer import JavaSerializer
from .schema_emitter import SchemaEmitter
from .struct_emitter import StructEmitter
from .type_mapper import JavaTypeMapper
from .union_emitter import UnionEmitter

__all__ = [
    "Emitter",
    "EnumEmitter",
    "JavaSerializer",
    "JavaTypeMapper",
    "SchemaEmitter",
    "StructEmitter",
    "UnionEmitter",
]
