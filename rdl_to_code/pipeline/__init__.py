"""
Pipeline - AST-based RDL schema to Java generator.

This module provides a multi-phase architecture for generating Java
models from RDL schemas:

1. Phase 1 (Parser): Parse the RDL JSON schema into nodes
2. Phase 2 (Analyzer): Resolve type references and base types
3. Phase 3 (AST Backend): Emit Java AST units
4. Phase 4 (Serializer): Convert the AST to source code
5. Phase 5 (Output): Atomic writes of the units
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import (
    CodeGenerationError,
    GeneratedCodeError,
    SchemaParseError,
    SchemaShapeError,
    TypeResolutionError,
    UnsupportedVariantError,
)
from .generator import DefinitionKind, PipelineGenerator
from .output import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "DefinitionKind",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "CodeGenerationError",
    "GeneratedCodeError",
    "SchemaParseError",
    "SchemaShapeError",
    "TypeResolutionError",
    "UnsupportedVariantError",
]
