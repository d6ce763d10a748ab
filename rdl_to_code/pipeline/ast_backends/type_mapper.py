"""
Mapping from RDL type references to Java type names.
"""

from __future__ import annotations

from ..analyzer.type_registry import TypeRegistry
from ..schema_ast.nodes import ArrayTypeDef, BaseType, MapTypeDef, StructTypeDef

ANY_STRUCT = "Struct"
RDL_PREFIX = "rdl."


class JavaTypeMapper:
    """Translates RDL type references to Java type names.

    Holds no state besides the registry it reads from, so the same
    reference always maps to the same name.
    """

    # base type -> (required, optional)
    PRIMITIVE_TYPE_MAP: dict[BaseType, tuple[str, str]] = {
        BaseType.BOOL: ("boolean", "Boolean"),
        BaseType.INT8: ("byte", "Byte"),
        BaseType.INT16: ("short", "Short"),
        BaseType.INT32: ("int", "Integer"),
        BaseType.INT64: ("long", "Long"),
        BaseType.FLOAT32: ("float", "Float"),
        BaseType.FLOAT64: ("double", "Double"),
    }

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

    def map_type(self, type_ref: str, optional: bool = False, items: str = "", keys: str = "") -> str:
        """
        Map a type reference to a Java type name.

        Args:
            type_ref: The RDL type reference
            optional: Whether the referencing field is optional (selects boxed types)
            items: Element type override for an inline ``Array`` or ``Map`` field
            keys: Key type override for an inline ``Map`` field

        Returns:
            Java type name

        Raises:
            TypeResolutionError: If ``type_ref`` (or a nested element type) is unknown
        """
        type_def = self.registry.resolve(type_ref)
        base = self.registry.base_type(type_def)

        if base is BaseType.ANY:
            return "Object"

        if base is BaseType.STRING:
            return "String"

        if base in (BaseType.SYMBOL, BaseType.TIMESTAMP, BaseType.UUID):
            return type_ref

        if base in self.PRIMITIVE_TYPE_MAP:
            required_name, boxed_name = self.PRIMITIVE_TYPE_MAP[base]
            return boxed_name if optional else required_name

        if base is BaseType.ARRAY:
            if isinstance(type_def, ArrayTypeDef):
                element = type_def.items
            else:
                element = self._override(items)
            return f"List<{self._type_argument(element)}>"

        if base is BaseType.MAP:
            if isinstance(type_def, MapTypeDef):
                key, element = type_def.keys, type_def.items
            else:
                key, element = self._override(keys), self._override(items)
            return f"Map<{self._type_argument(key)}, {self._type_argument(element)}>"

        if base is BaseType.STRUCT:
            if type_ref.startswith(RDL_PREFIX):
                return type_ref[len(RDL_PREFIX) :]
            if type_ref == ANY_STRUCT or (isinstance(type_def, StructTypeDef) and type_def.name == ANY_STRUCT):
                return "Object"
            return type_ref

        # Enums, unions, bytes: generated or library types referenced by name
        return type_ref

    def is_primitive(self, type_ref: str, optional: bool) -> bool:
        """Whether a field of this type is held in an unboxed Java primitive."""
        return not optional and self.registry.find_base_type(type_ref) in self.PRIMITIVE_TYPE_MAP

    def _type_argument(self, type_ref: str) -> str:
        """Map a collection element; Java type arguments cannot be primitives, so use the boxed form."""
        return self.map_type(type_ref, optional=True)

    @staticmethod
    def _override(type_ref: str) -> str:
        return type_ref or "Any"
