"""
Type registry for RDL type references.

Resolves type names to their definitions, classifies each definition by
its builtin base type, and flattens inherited struct fields.
"""

from __future__ import annotations

from ..errors import TypeResolutionError
from ..schema_ast.nodes import (
    AliasTypeDef,
    ArrayTypeDef,
    BaseType,
    BaseTypeDef,
    EnumTypeDef,
    MapTypeDef,
    Schema,
    StructFieldDef,
    StructTypeDef,
    TypeDef,
    UnionTypeDef,
)

# Supertype to assume when a definition leaves ``type`` empty
_IMPLIED_SUPERTYPES: dict[type[TypeDef], BaseType] = {
    StructTypeDef: BaseType.STRUCT,
    UnionTypeDef: BaseType.UNION,
    EnumTypeDef: BaseType.ENUM,
    ArrayTypeDef: BaseType.ARRAY,
    MapTypeDef: BaseType.MAP,
}


class TypeRegistry:
    """Resolves type references against a schema and the RDL builtins."""

    def __init__(self, schema: Schema):
        """
        Initialize the registry.

        Args:
            schema: The parsed schema whose definitions should be resolvable
        """
        self.schema = schema
        self._definition_cache: dict[str, TypeDef] = {}
        self._build_cache()

    def _build_cache(self) -> None:
        """Register the builtins, then every schema definition by name."""
        for base in BaseType:
            self._definition_cache[base.value] = BaseTypeDef(name=base.value, type=base.value)
        for type_def in self.schema.types:
            if isinstance(type_def, BaseTypeDef) and BaseType.lookup(type_def.name):
                continue
            self._definition_cache[type_def.name] = type_def

    def find_type(self, type_ref: str) -> TypeDef | None:
        """Get a definition by name, or None when it is unknown."""
        return self._definition_cache.get(type_ref)

    def resolve(self, type_ref: str) -> TypeDef:
        """Get a definition by name.

        Raises:
            TypeResolutionError: If the reference is unknown
        """
        type_def = self.find_type(type_ref)
        if type_def is None:
            raise TypeResolutionError(type_ref)
        return type_def

    def base_type(self, type_def: TypeDef) -> BaseType:
        """Follow the supertype chain of ``type_def`` down to its builtin base type."""
        seen: set[str] = set()
        current = type_def
        while True:
            if isinstance(current, BaseTypeDef):
                base = BaseType.lookup(current.name) or BaseType.lookup(current.type)
                if base is not None:
                    return base
            if current.name in seen:
                raise TypeResolutionError(type_def.name)
            seen.add(current.name)

            supertype = current.type or _IMPLIED_SUPERTYPES.get(type(current), BaseType.ANY).value
            base = BaseType.lookup(supertype)
            if base is not None:
                return base
            current = self.resolve(supertype)

    def find_base_type(self, type_ref: str) -> BaseType:
        """Resolve ``type_ref`` and return its base type."""
        return self.base_type(self.resolve(type_ref))

    def flattened_fields(self, type_def: TypeDef) -> list[StructFieldDef]:
        """
        Get the effective field list of a struct, parent fields first.

        Args:
            type_def: A struct definition (anything else has no fields)

        Returns:
            The parent's effective fields in order, followed by the struct's own
        """
        chain: list[StructTypeDef] = []
        seen: set[str] = set()
        current: TypeDef = type_def
        while True:
            if isinstance(current, AliasTypeDef):
                current = self.resolve(current.type)
                continue
            if not isinstance(current, StructTypeDef):
                break
            if current.name in seen:
                raise TypeResolutionError(type_def.name)
            seen.add(current.name)
            chain.append(current)

            parent = current.type
            if not parent or BaseType.lookup(parent) is not None:
                break
            current = self.resolve(parent)

        fields: list[StructFieldDef] = []
        for struct_def in reversed(chain):
            fields.extend(struct_def.fields)
        return fields
