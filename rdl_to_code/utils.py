"""
Utility functions for the RDL to code generator.
"""

import textwrap

# Java reserved words that cannot be used as field names
JAVA_RESERVED_KEYWORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Examples:
        "point" -> "Point"
        "myType" -> "MyType"
    """
    return text[:1].upper() + text[1:]


def uncapitalize(text: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return text[:1].lower() + text[1:]


def java_field_name(name: str) -> str:
    """Rename a field that collides with a Java reserved word.

    The field keeps its wire name through a JsonProperty annotation, so
    the rename never drops it.
    """
    if name in JAVA_RESERVED_KEYWORDS:
        return f"_{name}"
    return name


def format_comment(text: str, indent: int = 0, max_col: int = 80) -> str:
    """Format text as a boxed ``//`` comment block wrapped at ``max_col``.

    Examples:
        "Point - a point" ->
            //
            // Point - a point
            //
    """
    prefix = " " * indent + "// "
    width = max(max_col - len(prefix), 20)
    lines = [" " * indent + "//"]
    for paragraph in text.splitlines() or [""]:
        wrapped = textwrap.wrap(paragraph, width=width) or [""]
        lines.extend((prefix + line).rstrip() for line in wrapped)
    lines.append(" " * indent + "//")
    return "\n".join(lines) + "\n"


def java_string_literal(text: str) -> str:
    """Quote text as a Java string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\t", "\\t")
    return f'"{escaped}"'
