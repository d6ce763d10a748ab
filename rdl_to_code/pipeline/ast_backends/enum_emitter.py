"""
Emitter for RDL enum types.
"""

from __future__ import annotations

from ..errors import SchemaShapeError
from ..schema_ast.nodes import EnumTypeDef, TypeDef
from .base import Emitter
from .java_ast_nodes import JavaEnum, JavaEnumConstant, JavaFile, JavaMethod, JavaParameter, MemberModifier


class EnumEmitter(Emitter):
    """Emits a Java enum with a strict ``fromString`` lookup."""

    def emit(self, type_def: TypeDef, unit: JavaFile) -> None:
        if not isinstance(type_def, EnumTypeDef):
            raise SchemaShapeError(f"Bad enum definition: {type_def.name} is a {type(type_def).__name__}")

        name = self.class_name(type_def)
        self.add_imports(unit, [])
        unit.type_comment = self.type_comment(type_def)

        enum_node = JavaEnum(name=name)
        for element in type_def.elements:
            enum_node.constants.append(JavaEnumConstant(name=element.symbol))
        enum_node.methods.append(self._from_string(name))

        unit.declaration = enum_node

    def _from_string(self, name: str) -> JavaMethod:
        """Exact-match scan over the constants; unknown text is an error, not a default."""
        return JavaMethod(
            name="fromString",
            return_type=name,
            modifiers=[MemberModifier.STATIC],
            parameters=[JavaParameter(name="v", type_name="String")],
            body=[
                f"for ({name} e : values()) {{",
                "    if (e.toString().equals(v)) {",
                "        return e;",
                "    }",
                "}",
                f'throw new IllegalArgumentException("Invalid string representation for {name}: " + v);',
            ],
        )
