"""
Emitter for RDL union types.

A union travels on the wire as a single-key JSON object whose key is the
active variant's type name. The generated class carries a discriminant
enum, one nullable slot per variant, and a Jackson deserializer that
recovers the variant from the field name and the shape of the value token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...utils import java_field_name, uncapitalize
from ..analyzer.variant_classes import TokenShape, Variant, classify_variants
from ..errors import SchemaShapeError
from ..schema_ast.nodes import BaseType, TypeDef, UnionTypeDef
from .base import EQUALS_LOCAL, EQUALS_PARAMETER, JSON_SERIALIZE_IMPORT, RDL_PACKAGE, Emitter
from .java_ast_nodes import (
    JavaAnnotation,
    JavaClass,
    JavaConstructor,
    JavaEnum,
    JavaEnumConstant,
    JavaField,
    JavaFile,
    JavaMethod,
    JavaParameter,
    MemberModifier,
)

logger = logging.getLogger(__name__)

DESERIALIZER_IMPORTS = [
    "com.fasterxml.jackson.databind.JsonDeserializer",
    "com.fasterxml.jackson.databind.annotation.JsonDeserialize",
    "com.fasterxml.jackson.core.JsonParser",
    "com.fasterxml.jackson.core.JsonToken",
    "com.fasterxml.jackson.databind.DeserializationContext",
    "com.fasterxml.jackson.core.JsonProcessingException",
]
TYPE_REFERENCE_IMPORT = "com.fasterxml.jackson.core.type.TypeReference"

FAILURE_REASONS = ["MALFORMED_UNION", "UNRECOGNIZED_VARIANT", "MULTIPLE_VARIANTS", "NO_VARIANT"]

# Token tests selecting each decoder branch, in branch order
BRANCH_CONDITIONS = {
    TokenShape.NUMERIC: "tok == JsonToken.VALUE_NUMBER_INT || tok == JsonToken.VALUE_NUMBER_FLOAT",
    TokenShape.TEXTUAL: "tok == JsonToken.VALUE_STRING",
    TokenShape.BOOLEAN: "tok == JsonToken.VALUE_TRUE || tok == JsonToken.VALUE_FALSE",
    TokenShape.STRUCTURED: "tok == JsonToken.START_OBJECT",
}

# Boxed Java type -> JsonParser accessor
NUMBER_ACCESSORS = {
    "Byte": "getByteValue",
    "Short": "getShortValue",
    "Integer": "getIntValue",
    "Long": "getLongValue",
    "Float": "getFloatValue",
    "Double": "getDoubleValue",
}


@dataclass
class UnionSlot:
    """A variant as it appears in the generated class."""

    variant: Variant
    type_name: str  # boxed Java type of the slot
    param_name: str  # constructor parameter name


class UnionEmitter(Emitter):
    """Emits a Java class for a union, including its streaming deserializer."""

    TEMPLATE = "union_deserializer.java.jinja2"

    def emit(self, type_def: TypeDef, unit: JavaFile) -> None:
        if not isinstance(type_def, UnionTypeDef):
            raise SchemaShapeError(f"Bad union definition: {type_def.name} is a {type(type_def).__name__}")

        name = self.class_name(type_def)
        classes = classify_variants(type_def, self.registry)
        slots = {v.name: self._slot(v) for shape in TokenShape for v in classes[shape]}
        ordered_slots = [slots[v] for v in type_def.variants]
        self.check_member_names(name, type_def.variants)
        self._check_constructor_collisions(name, ordered_slots)
        logger.debug(f"Emitting union {name} with variants {', '.join(type_def.variants)}")

        needs_type_reference = any(s.variant.base_type is BaseType.MAP for s in ordered_slots)
        self.add_imports(
            unit,
            [s.type_name for s in ordered_slots],
            extra_java=["java.io.IOException", "java.util.Objects"],
            library=DESERIALIZER_IMPORTS + ([TYPE_REFERENCE_IMPORT] if needs_type_reference else []) + [JSON_SERIALIZE_IMPORT],
        )
        unit.type_comment = self.type_comment(type_def)

        cls = JavaClass(name=name, modifiers=[MemberModifier.FINAL])
        cls.annotations.append(JavaAnnotation(name="JsonSerialize", arguments=["include = JsonSerialize.Inclusion.NON_NULL"]))
        cls.annotations.append(JavaAnnotation(name="JsonDeserialize", arguments=[f"using = {name}.{name}JsonDeserializer.class"]))

        variant_enum = f"{name}Variant"
        cls.nested_enums.append(
            JavaEnum(
                name=variant_enum,
                constants=[JavaEnumConstant(name=v) for v in type_def.variants],
            )
        )

        cls.fields.append(
            JavaField(
                name="variant",
                type_name=variant_enum,
                annotations=[JavaAnnotation(name="com.fasterxml.jackson.annotation.JsonIgnore")],
            )
        )
        for slot in ordered_slots:
            cls.fields.append(
                JavaField(
                    name=slot.variant.name,
                    type_name=slot.type_name,
                    annotations=[JavaAnnotation(name="RdlOptional")],
                    inline_annotations=True,
                )
            )

        cls.methods.append(self._equals(name, ordered_slots))
        cls.methods.append(self._hash_code(ordered_slots))

        cls.nested_classes.append(self._failure_class(name))
        branches = [(shape, [slots[v.name] for v in classes[shape]]) for shape in BRANCH_CONDITIONS]
        cls.nested_classes.append(self._deserializer_class(name, branches, unit.package))

        cls.constructors.append(JavaConstructor(class_name=name))
        for slot in ordered_slots:
            cls.constructors.append(
                JavaConstructor(
                    class_name=name,
                    parameters=[JavaParameter(name=slot.param_name, type_name=slot.type_name)],
                    body=[
                        f"this.variant = {variant_enum}.{slot.variant.name};",
                        f"this.{slot.variant.name} = {slot.param_name};",
                    ],
                )
            )

        unit.declaration = cls

    def _slot(self, variant: Variant) -> UnionSlot:
        return UnionSlot(
            variant=variant,
            type_name=self.type_mapper.map_type(variant.name, optional=True),
            param_name=java_field_name(uncapitalize(variant.name)),
        )

    def _check_constructor_collisions(self, name: str, slots: list[UnionSlot]) -> None:
        """Two variants with the same erased Java type would need the same constructor."""
        seen: dict[str, str] = {}
        for slot in slots:
            erased = slot.type_name.split("<", 1)[0]
            if erased in seen:
                raise SchemaShapeError(f"Union {name}: variants '{seen[erased]}' and '{slot.variant.name}' both map to Java type {erased}")
            seen[erased] = slot.variant.name

    def _equals(self, name: str, slots: list[UnionSlot]) -> JavaMethod:
        """Same class, same discriminant, then deep-equal only the active slot."""
        body = [
            f"if (this == {EQUALS_PARAMETER}) {{",
            "    return true;",
            "}",
            f"if ({EQUALS_PARAMETER} == null || {EQUALS_PARAMETER}.getClass() != {name}.class) {{",
            "    return false;",
            "}",
            f"{name} {EQUALS_LOCAL} = ({name}) {EQUALS_PARAMETER};",
            f"if (variant != {EQUALS_LOCAL}.variant) {{",
            "    return false;",
            "}",
            "if (variant == null) {",
            "    return true;",
            "}",
            "switch (variant) {",
        ]
        for slot in slots:
            v = slot.variant.name
            body.append(f"case {v}:")
            body.append(f"    return {v} == null ? {EQUALS_LOCAL}.{v} == null : {v}.equals({EQUALS_LOCAL}.{v});")
        body.append("}")
        body.append("return false;")

        return JavaMethod(
            name="equals",
            return_type="boolean",
            annotations=[JavaAnnotation(name="Override")],
            parameters=[JavaParameter(name=EQUALS_PARAMETER, type_name="Object")],
            body=body,
        )

    def _hash_code(self, slots: list[UnionSlot]) -> JavaMethod:
        body = [
            "if (variant == null) {",
            "    return 0;",
            "}",
            "switch (variant) {",
        ]
        for slot in slots:
            body.append(f"case {slot.variant.name}:")
            body.append(f"    return Objects.hash(variant, {slot.variant.name});")
        body.append("}")
        body.append("return 0;")

        return JavaMethod(
            name="hashCode",
            return_type="int",
            annotations=[JavaAnnotation(name="Override")],
            body=body,
        )

    def _failure_class(self, name: str) -> JavaClass:
        """The decoder's failure type, carrying which rule the input broke."""
        error = f"{name}FormatException"
        return JavaClass(
            name=error,
            modifiers=[MemberModifier.STATIC],
            base_class="IOException",
            nested_enums=[JavaEnum(name="Reason", constants=[JavaEnumConstant(name=r) for r in FAILURE_REASONS])],
            fields=[JavaField(name="reason", type_name="Reason", modifiers=[MemberModifier.FINAL])],
            constructors=[
                JavaConstructor(
                    class_name=error,
                    parameters=[
                        JavaParameter(name="reason", type_name="Reason"),
                        JavaParameter(name="message", type_name="String"),
                    ],
                    body=["super(message);", "this.reason = reason;"],
                )
            ],
        )

    def _deserializer_class(self, name: str, branches: list[tuple[TokenShape, list[UnionSlot]]], package: str | None) -> JavaClass:
        template = self.get_template(self.TEMPLATE)
        rendered = template.render(
            name=name,
            error=f"{name}FormatException",
            branches=[
                {
                    "condition": BRANCH_CONDITIONS[shape],
                    "cases": [{"variant": s.variant.name, "value": self._decode_expression(shape, s, package)} for s in slots],
                }
                for shape, slots in branches
                if slots
            ],
        )

        deserialize = JavaMethod(
            name="deserialize",
            return_type=name,
            annotations=[JavaAnnotation(name="Override")],
            parameters=[
                JavaParameter(name="jp", type_name="JsonParser"),
                JavaParameter(name="ctxt", type_name="DeserializationContext"),
            ],
            throws=["IOException", "JsonProcessingException"],
            body=rendered.splitlines(),
        )
        return JavaClass(
            name=f"{name}JsonDeserializer",
            modifiers=[MemberModifier.STATIC],
            base_class=f"JsonDeserializer<{name}>",
            methods=[deserialize],
        )

    def _decode_expression(self, shape: TokenShape, slot: UnionSlot, package: str | None) -> str:
        """Java expression reading the current token as the slot's native type."""
        if shape is TokenShape.NUMERIC:
            return f"jp.{NUMBER_ACCESSORS[slot.type_name]}()"
        if shape is TokenShape.TEXTUAL:
            if slot.type_name == "String":
                return "jp.getText()"
            owner = self._static_reference(slot.type_name, package)
            if owner is None:
                # A class literal is a type context, so the slot field cannot obscure it
                return f"jp.readValueAs({slot.type_name}.class)"
            return f"{owner}.fromString(jp.getText())"
        if shape is TokenShape.BOOLEAN:
            return "jp.getBooleanValue()"
        if slot.variant.base_type is BaseType.MAP:
            return f"jp.readValueAs(new TypeReference<{slot.type_name}>() {{}})"
        return f"jp.readValueAs({slot.type_name}.class)"

    @staticmethod
    def _static_reference(type_name: str, package: str | None) -> str | None:
        """
        Qualified type name for a static call.

        The slot field of the same name obscures the simple name, so an
        unpackaged type has no name usable here and None is returned.
        """
        if type_name in (BaseType.TIMESTAMP.value, BaseType.SYMBOL.value, BaseType.UUID.value):
            return f"{RDL_PACKAGE}.{type_name}"
        return f"{package}.{type_name}" if package else None
