"""
Base class for Java type emitters.

Defines the interface every emitter implements and the pieces they share:
the type comment block and the import block of a unit.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

import jinja2

from ...utils import capitalize, format_comment, java_string_literal
from ..analyzer.type_registry import TypeRegistry
from ..errors import SchemaShapeError
from ..schema_ast.nodes import TypeDef
from .java_ast_nodes import JavaFile
from .type_mapper import JavaTypeMapper

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "java"

RDL_PACKAGE = "com.yahoo.rdl"

JSON_SERIALIZE_IMPORT = "com.fasterxml.jackson.databind.annotation.JsonSerialize"

# Parameter and local of the generated equals()
EQUALS_PARAMETER = "_another"
EQUALS_LOCAL = "_other"

_COLLECTION_TYPES = {
    "List": "java.util.List",
    "Map": "java.util.Map",
}
_COLLECTION_PATTERN = re.compile(r"\b(List|Map)<")


def create_template_environment() -> jinja2.Environment:
    """Set up the Jinja2 environment for the Java templates."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
    )
    env.filters["java_string"] = java_string_literal
    return env


class Emitter(ABC):
    """Abstract base class for the struct, union and enum emitters."""

    # Maximum column for generated comment blocks
    COMMENT_WIDTH = 80

    def __init__(self, registry: TypeRegistry, type_mapper: JavaTypeMapper):
        """
        Initialize the emitter.

        Args:
            registry: Registry used to resolve type references
            type_mapper: Mapper from RDL type references to Java type names
        """
        self.registry = registry
        self.type_mapper = type_mapper
        self._jinja_env: jinja2.Environment | None = None

    def get_template(self, name: str) -> jinja2.Template:
        """Load a Java template, setting up the Jinja2 environment on first use."""
        if self._jinja_env is None:
            self._jinja_env = create_template_environment()
        return self._jinja_env.get_template(name)

    @abstractmethod
    def emit(self, type_def: TypeDef, unit: JavaFile) -> None:
        """
        Emit the Java declaration for ``type_def`` into ``unit``.

        Args:
            type_def: The definition to emit
            unit: Output builder for the unit; receives imports and the declaration
        """

    def class_name(self, type_def: TypeDef) -> str:
        return capitalize(type_def.name)

    def check_member_names(self, owner: str, names: Iterable[str]) -> None:
        """Reject member names that would shadow the locals of the generated equals()."""
        clash = sorted(set(names) & {EQUALS_PARAMETER, EQUALS_LOCAL})
        if clash:
            raise SchemaShapeError(f"{owner}: member name '{clash[0]}' is reserved by the generated equals()")

    def type_comment(self, type_def: TypeDef) -> str:
        """Build the ``Name - comment`` block placed above the declaration."""
        text = f"{type_def.name} -"
        if type_def.comment:
            text += f" {type_def.comment}"
        return format_comment(text, 0, self.COMMENT_WIDTH)

    def add_imports(self, unit: JavaFile, java_types: Iterable[str], extra_java: Iterable[str] = (), library: Iterable[str] = ()) -> None:
        """
        Add the import block of a unit.

        Collection imports come first, then ``extra_java`` (java.* names),
        the RDL runtime package, and finally ``library`` (Jackson) imports.

        Args:
            unit: The unit being built
            java_types: Java type names used in declarations (scanned for List/Map)
            extra_java: Additional java.* imports
            library: Third-party imports
        """
        used = set()
        for type_name in java_types:
            used.update(_COLLECTION_PATTERN.findall(type_name))
        java_imports = sorted({_COLLECTION_TYPES[name] for name in used} | set(extra_java))

        for name in java_imports:
            unit.add_import(name)
        if unit.package != RDL_PACKAGE:
            unit.add_import(f"{RDL_PACKAGE}.*")
        for name in library:
            unit.add_import(name)
