"""RDL to Code Generator

A Python package for generating Java models from RDL schemas, with
Jackson serialization annotations and streaming union deserializers.
"""

__version__ = "1.0.1"

from .pipeline import (
    AtomicWriter,
    CodeGenerationError,
    CodeGeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "CodeGenerationError",
    "AtomicWriter",
]
