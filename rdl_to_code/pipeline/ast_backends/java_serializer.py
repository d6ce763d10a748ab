"""
Java AST Serializer.

Converts Java AST nodes to properly-formatted Java source code.
Follows common Java style:
- Opening braces on the declaration line
- 4-space indentation
- Blank line between members
- Annotations on separate lines above declarations
"""

from __future__ import annotations

from .java_ast_nodes import (
    AccessModifier,
    JavaAnnotation,
    JavaClass,
    JavaConstructor,
    JavaEnum,
    JavaField,
    JavaFile,
    JavaMethod,
    MemberModifier,
)


class JavaSerializer:
    """Serializes Java AST nodes to source code."""

    INDENT = "    "  # 4 spaces

    def serialize(self, file: JavaFile) -> str:
        """Serialize a complete Java file to source code."""
        lines: list[str] = []

        if file.generation_comment:
            lines.append(file.generation_comment.rstrip("\n"))
            lines.append("")

        if file.package:
            lines.append(f"package {file.package};")

        for directive in file.imports:
            lines.append(f"import {directive.name};")

        if file.package or file.imports:
            lines.append("")

        if file.type_comment:
            lines.append(file.type_comment.rstrip("\n"))

        if file.raw_body:
            lines.append(file.raw_body.rstrip("\n"))
        elif isinstance(file.declaration, JavaEnum):
            lines.extend(self._serialize_enum(file.declaration, 0))
        elif isinstance(file.declaration, JavaClass):
            lines.extend(self._serialize_class(file.declaration, 0))

        return "\n".join(lines) + "\n"

    def _declaration_prefix(self, access: AccessModifier, modifiers: list[MemberModifier]) -> str:
        """Build the ``public static final`` part of a declaration, with trailing space."""
        words = [access.value] if access.value else []
        words.extend(m.value for m in modifiers)
        return "".join(f"{w} " for w in words)

    def _serialize_annotations(self, annotations: list[JavaAnnotation], prefix: str) -> list[str]:
        return [f"{prefix}{annotation.to_string()}" for annotation in annotations]

    def _serialize_class(self, cls: JavaClass, indent: int) -> list[str]:
        """Serialize a class declaration."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        lines.extend(self._serialize_annotations(cls.annotations, prefix))

        declaration = f"{prefix}{self._declaration_prefix(cls.access, cls.modifiers)}class {cls.name}"
        if cls.base_class:
            declaration += f" extends {cls.base_class}"
        lines.append(declaration + " {")

        sections: list[list[str]] = []

        for nested_enum in cls.nested_enums:
            sections.append(self._serialize_enum(nested_enum, indent + 1))

        if cls.fields:
            field_lines: list[str] = []
            for field in cls.fields:
                field_lines.extend(self._serialize_field(field, indent + 1))
            sections.append(field_lines)

        for method in cls.methods:
            sections.append(self._serialize_method(method, indent + 1))

        for nested_cls in cls.nested_classes:
            sections.append(self._serialize_class(nested_cls, indent + 1))

        for constructor in cls.constructors:
            sections.append(self._serialize_constructor(constructor, indent + 1))

        for i, section in enumerate(sections):
            if i > 0:
                lines.append("")
            lines.extend(section)

        lines.append(f"{prefix}}}")
        return lines

    def _serialize_field(self, field: JavaField, indent: int) -> list[str]:
        """Serialize a field declaration."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        declaration = f"{self._declaration_prefix(field.access, field.modifiers)}{field.type_name} {field.name};"

        if field.inline_annotations and field.annotations:
            annotations = " ".join(a.to_string() for a in field.annotations)
            lines.append(f"{prefix}{annotations} {declaration}")
        else:
            lines.extend(self._serialize_annotations(field.annotations, prefix))
            lines.append(f"{prefix}{declaration}")

        return lines

    def _serialize_body(self, body: list[str], indent: int) -> list[str]:
        body_prefix = self.INDENT * indent
        return [f"{body_prefix}{stmt}" if stmt else "" for stmt in body]

    def _serialize_constructor(self, constructor: JavaConstructor, indent: int) -> list[str]:
        """Serialize a constructor declaration."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        params = ", ".join(f"{p.type_name} {p.name}" for p in constructor.parameters)
        access = f"{constructor.access.value} " if constructor.access.value else ""
        lines.append(f"{prefix}{access}{constructor.class_name}({params}) {{")
        lines.extend(self._serialize_body(constructor.body, indent + 1))
        lines.append(f"{prefix}}}")

        return lines

    def _serialize_method(self, method: JavaMethod, indent: int) -> list[str]:
        """Serialize a method declaration."""
        lines: list[str] = []
        prefix = self.INDENT * indent

        if method.comment:
            lines.append(f"{prefix}//")
            lines.extend(f"{prefix}// {text}" if text else f"{prefix}//" for text in method.comment)
            lines.append(f"{prefix}//")

        lines.extend(self._serialize_annotations(method.annotations, prefix))

        params = ", ".join(f"{p.type_name} {p.name}" for p in method.parameters)
        signature = f"{prefix}{self._declaration_prefix(method.access, method.modifiers)}{method.return_type} {method.name}({params})"
        if method.throws:
            signature += f" throws {', '.join(method.throws)}"
        lines.append(signature + " {")
        lines.extend(self._serialize_body(method.body, indent + 1))
        lines.append(f"{prefix}}}")

        return lines

    def _serialize_enum(self, enum: JavaEnum, indent: int) -> list[str]:
        """Serialize an enum, with its methods if it has any."""
        lines: list[str] = []
        prefix = self.INDENT * indent
        member_prefix = prefix + self.INDENT

        lines.append(f"{prefix}{self._declaration_prefix(enum.access, enum.modifiers)}enum {enum.name} {{")

        for i, constant in enumerate(enum.constants):
            if i < len(enum.constants) - 1:
                terminator = ","
            else:
                terminator = ";" if enum.methods else ""
            lines.append(f"{member_prefix}{constant.name}{terminator}")
        if not enum.constants and enum.methods:
            lines.append(f"{member_prefix};")

        for method in enum.methods:
            lines.append("")
            lines.extend(self._serialize_method(method, indent + 1))

        lines.append(f"{prefix}}}")
        return lines
