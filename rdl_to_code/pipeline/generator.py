"""
Pipeline generator: drives RDL schema to Java generation.

1. Phase 1 (Parser): Parse the RDL JSON schema into node dataclasses
2. Phase 2 (Analyzer): Build the type registry
3. Phase 3 (AST Backend): Emit one Java unit per struct, union and enum
4. Phase 4 (Serializer): Convert each unit to source code
5. Phase 5 (Output): Write the units under the package directory
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, assert_never

from ..utils import capitalize, format_comment
from .analyzer.type_registry import TypeRegistry
from .ast_backends import EnumEmitter, JavaSerializer, JavaTypeMapper, SchemaEmitter, StructEmitter, UnionEmitter
from .ast_backends.java_ast_nodes import JavaFile
from .ast_backends.type_mapper import RDL_PREFIX
from .config import CodeGeneratorConfig, OutputMode
from .output import AtomicWriter
from .schema_ast.nodes import BaseType, BaseTypeDef, Schema, TypeDef
from .schema_ast.parser import SchemaParser

logger = logging.getLogger(__name__)

JAVA_EXTENSION = ".java"


class DefinitionKind(Enum):
    """What the driver does with a type definition."""

    STRUCT = "struct"
    UNION = "union"
    ENUM = "enum"
    ARRAY = "array"
    # Maps, primitives and constrained scalars: mapped inline, no unit
    ALIAS = "alias"


_KIND_BY_BASE = {
    BaseType.STRUCT: DefinitionKind.STRUCT,
    BaseType.UNION: DefinitionKind.UNION,
    BaseType.ENUM: DefinitionKind.ENUM,
    BaseType.ARRAY: DefinitionKind.ARRAY,
}


class PipelineGenerator:
    """
    Generates Java models from an RDL schema.

    Usage:
        generator = PipelineGenerator(schema_dict, config)
        units = generator.generate()
        generator.write(output_dir)
    """

    def __init__(self, schema: dict[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Initialize the pipeline generator.

        Args:
            schema: The RDL schema as decoded JSON
            config: Generator configuration
        """
        self.config = config or CodeGeneratorConfig()
        self.schema: Schema = SchemaParser().parse(schema)
        self.registry = TypeRegistry(self.schema)
        self.type_mapper = JavaTypeMapper(self.registry)
        self.serializer = JavaSerializer()

        self.struct_emitter = StructEmitter(self.registry, self.type_mapper)
        self.union_emitter = UnionEmitter(self.registry, self.type_mapper)
        self.enum_emitter = EnumEmitter(self.registry, self.type_mapper)
        self.schema_emitter = SchemaEmitter()

    @property
    def package(self) -> str:
        return self.config.namespace or self.schema.namespace

    def classify(self, type_def: TypeDef) -> DefinitionKind:
        """Classify a definition by its base type."""
        return _KIND_BY_BASE.get(self.registry.base_type(type_def), DefinitionKind.ALIAS)

    def generate(self) -> dict[str, str]:
        """
        Generate every unit of the schema.

        Returns:
            Mapping of file name (``Point.java``) to Java source, in declaration order
        """
        logger.info(f"Generating Java models for schema '{self.schema.name}' into package '{self.package}'")
        units: dict[str, str] = {}

        for type_def in self._user_types():
            if type_def.name in self.config.ignore_classes:
                logger.debug(f"Ignoring {type_def.name}")
                continue

            unit = self._new_unit()
            kind = self.classify(type_def)
            match kind:
                case DefinitionKind.STRUCT:
                    self.struct_emitter.emit(type_def, unit)
                case DefinitionKind.UNION:
                    self.union_emitter.emit(type_def, unit)
                case DefinitionKind.ENUM:
                    self.enum_emitter.emit(type_def, unit)
                case DefinitionKind.ARRAY | DefinitionKind.ALIAS:
                    logger.debug(f"No unit for {type_def.name} ({kind.value}), mapped inline")
                    continue
                case _:
                    assert_never(kind)

            units[capitalize(type_def.name) + JAVA_EXTENSION] = self.serializer.serialize(unit)

        if self.config.generate_schema_descriptor and self.schema.name:
            unit = self._new_unit()
            self.schema_emitter.emit(self.schema, self._user_types(), unit)
            units[SchemaEmitter.class_name(self.schema) + JAVA_EXTENSION] = self.serializer.serialize(unit)

        logger.info(f"Generated {len(units)} unit(s)")
        return units

    def write(self, output_dir: str | Path) -> list[Path]:
        """
        Generate every unit and write it under ``output_dir``.

        Units go in the package directory (dots become path separators).

        Returns:
            The written paths

        Raises:
            FileExistsError: If a unit exists and the output mode is ``error``
            GeneratedCodeError: If a unit fails the structural check
        """
        units = self.generate()
        target_dir = self.output_directory(output_dir)
        output = self.config.output
        writer = AtomicWriter()

        written: list[Path] = []
        for file_name, content in units.items():
            path = target_dir / file_name
            if output.atomic_write:
                if output.mode == OutputMode.ERROR_IF_EXISTS:
                    writer.write_if_not_exists(path, content, validate=output.validate_before_write)
                else:
                    writer.write(path, content, validate=output.validate_before_write)
            else:
                if output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
                    raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
                if output.validate_before_write:
                    writer.validate(content)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
            logger.info(f"Wrote {path}")
            written.append(path)
        return written

    def output_directory(self, output_dir: str | Path) -> Path:
        """Directory holding the units of the package."""
        target = Path(output_dir)
        if self.package:
            target = target.joinpath(*self.package.split("."))
        return target

    def _user_types(self) -> list[TypeDef]:
        """Schema definitions in declaration order, minus builtins and ``rdl.`` types."""
        types = []
        for type_def in self.schema.types:
            if isinstance(type_def, BaseTypeDef):
                continue
            if type_def.name.startswith(RDL_PREFIX):
                logger.debug(f"Skipping runtime type {type_def.name}")
                continue
            types.append(type_def)
        return types

    def _new_unit(self) -> JavaFile:
        unit = JavaFile(package=self.package or None)
        if self.config.add_generation_comment:
            unit.generation_comment = format_comment(f"This file generated by {self.config.banner}. Do not modify!")
        return unit
