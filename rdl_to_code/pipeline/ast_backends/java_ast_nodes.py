"""
Java AST node definitions.

These nodes represent the structure of Java source files for code generation.
Emitters append to a JavaFile, which is then serialized to source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AccessModifier(str, Enum):
    """Java access modifiers."""

    PUBLIC = "public"
    PACKAGE = ""


class MemberModifier(str, Enum):
    """Java member modifiers."""

    STATIC = "static"
    FINAL = "final"


@dataclass
class JavaNode:
    """Base class for all Java AST nodes."""

    pass


@dataclass
class JavaAnnotation(JavaNode):
    """Represents a Java annotation (e.g., @JsonProperty("name"))."""

    name: str = ""
    arguments: list[str] = field(default_factory=list)

    def to_string(self) -> str:
        """Convert to annotation string."""
        if self.arguments:
            args_str = ", ".join(self.arguments)
            return f"@{self.name}({args_str})"
        return f"@{self.name}"


@dataclass
class JavaParameter(JavaNode):
    """Represents a method/constructor parameter."""

    name: str = ""
    type_name: str = ""


@dataclass
class JavaField(JavaNode):
    """Represents a class field."""

    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: list[MemberModifier] = field(default_factory=list)
    annotations: list[JavaAnnotation] = field(default_factory=list)
    # Emit annotations on the declaration line instead of above it
    inline_annotations: bool = False


@dataclass
class JavaConstructor(JavaNode):
    """Represents a class constructor."""

    class_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    parameters: list[JavaParameter] = field(default_factory=list)
    body: list[str] = field(default_factory=list)


@dataclass
class JavaMethod(JavaNode):
    """Represents a class method.

    ``body`` holds one statement per entry; nested blocks are expressed
    with leading indentation inside the entries.
    """

    name: str = ""
    return_type: str = "void"
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: list[MemberModifier] = field(default_factory=list)
    parameters: list[JavaParameter] = field(default_factory=list)
    throws: list[str] = field(default_factory=list)
    annotations: list[JavaAnnotation] = field(default_factory=list)
    body: list[str] = field(default_factory=list)
    # Comment lines emitted above the method, without the "//" prefix
    comment: list[str] = field(default_factory=list)


@dataclass
class JavaEnumConstant(JavaNode):
    """Represents an enum constant."""

    name: str = ""


@dataclass
class JavaEnum(JavaNode):
    """Represents an enum declaration."""

    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: list[MemberModifier] = field(default_factory=list)
    constants: list[JavaEnumConstant] = field(default_factory=list)
    methods: list[JavaMethod] = field(default_factory=list)


@dataclass
class JavaClass(JavaNode):
    """Represents a class declaration."""

    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: list[MemberModifier] = field(default_factory=list)
    base_class: str | None = None
    annotations: list[JavaAnnotation] = field(default_factory=list)
    nested_enums: list[JavaEnum] = field(default_factory=list)
    fields: list[JavaField] = field(default_factory=list)
    methods: list[JavaMethod] = field(default_factory=list)
    nested_classes: list[JavaClass] = field(default_factory=list)
    constructors: list[JavaConstructor] = field(default_factory=list)


@dataclass
class ImportDirective(JavaNode):
    """Represents an import statement (``com.yahoo.rdl.*`` style names allowed)."""

    name: str = ""


@dataclass
class JavaFile(JavaNode):
    """Represents a complete Java source file.

    This is the output builder handed to every emitter: emitters add
    imports and declarations, the serializer turns it into text.
    """

    generation_comment: str = ""
    package: str | None = None
    imports: list[ImportDirective] = field(default_factory=list)
    # Comment block emitted right above the top-level declaration
    type_comment: str = ""
    declaration: JavaClass | JavaEnum | None = None
    # Preformatted source used instead of ``declaration`` (template output)
    raw_body: str = ""

    def add_import(self, name: str) -> None:
        """Add an import once, keeping first-added order."""
        if all(existing.name != name for existing in self.imports):
            self.imports.append(ImportDirective(name=name))
