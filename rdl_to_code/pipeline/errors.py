"""
Exceptions raised while generating code.

All of them are fatal: the pipeline stops at the first one and the
caller of the top-level generator receives it unchanged.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for every generation-time failure."""

    pass


class SchemaParseError(CodeGenerationError, ValueError):
    """Raised when the schema JSON does not have the shape of an RDL schema."""

    pass


class TypeResolutionError(CodeGenerationError, LookupError):
    """Raised when a type reference does not resolve in the registry."""

    def __init__(self, type_ref: str):
        super().__init__(f"Cannot find type '{type_ref}'")
        self.type_ref = type_ref


class SchemaShapeError(CodeGenerationError):
    """Raised when a definition cannot be emitted for its base kind.

    This can happen when:
    - A struct-kind type is neither a struct nor an alias definition
    - A union variant has no token-shape class (Any, Bytes, Union)
    - Two union variants map to the same Java type
    """

    pass


class UnsupportedVariantError(SchemaShapeError, NotImplementedError):
    """Raised for union variants whose payload is an array."""

    pass


class GeneratedCodeError(CodeGenerationError):
    """Raised when a generated unit fails the structural check before writing."""

    pass
