"""
Tests for the Java AST serializer.
"""

from __future__ import annotations

from rdl_to_code.pipeline.ast_backends import JavaSerializer
from rdl_to_code.pipeline.ast_backends.java_ast_nodes import (
    AccessModifier,
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


class TestJavaSerializer:
    def test_file_layout(self):
        unit = JavaFile(package="com.example", type_comment="//\n// Foo -\n//\n")
        unit.add_import("com.yahoo.rdl.*")
        unit.add_import("com.yahoo.rdl.*")
        unit.declaration = JavaClass(
            name="Foo",
            fields=[JavaField(name="a", type_name="int")],
            methods=[JavaMethod(name="a", return_type="int", body=["return a;"])],
        )

        expected = """package com.example;
import com.yahoo.rdl.*;

//
// Foo -
//
public class Foo {
    public int a;

    public int a() {
        return a;
    }
}
"""
        assert JavaSerializer().serialize(unit) == expected

    def test_generation_comment_comes_first(self):
        unit = JavaFile(generation_comment="//\n// generated\n//\n", package="p", declaration=JavaClass(name="A"))
        output = JavaSerializer().serialize(unit)
        assert output.startswith("//\n// generated\n//\n\npackage p;\n")

    def test_raw_body_replaces_declaration(self):
        unit = JavaFile(raw_body="public class Raw {\n}\n", declaration=JavaClass(name="Ignored"))
        output = JavaSerializer().serialize(unit)
        assert "public class Raw {" in output
        assert "Ignored" not in output

    def test_nested_members_order(self):
        """Nested enums, fields, methods, nested classes, then constructors"""
        cls = JavaClass(
            name="Outer",
            modifiers=[MemberModifier.FINAL],
            nested_enums=[JavaEnum(name="Kind", constants=[JavaEnumConstant(name="A"), JavaEnumConstant(name="B")])],
            fields=[JavaField(name="kind", type_name="Kind", annotations=[JavaAnnotation(name="RdlOptional")], inline_annotations=True)],
            methods=[JavaMethod(name="run", throws=["IOException"])],
            nested_classes=[JavaClass(name="Inner", modifiers=[MemberModifier.STATIC], base_class="Exception")],
            constructors=[JavaConstructor(class_name="Outer", parameters=[JavaParameter(name="k", type_name="Kind")], body=["this.kind = k;"])],
        )
        output = JavaSerializer().serialize(JavaFile(declaration=cls))
        expected = """public final class Outer {
    public enum Kind {
        A,
        B
    }

    @RdlOptional public Kind kind;

    public void run() throws IOException {
    }

    public static class Inner extends Exception {
    }

    public Outer(Kind k) {
        this.kind = k;
    }
}
"""
        assert output == expected

    def test_method_comment_and_annotations(self):
        method = JavaMethod(
            name="init",
            return_type="Foo",
            comment=["sets things up"],
            annotations=[JavaAnnotation(name="Override")],
            body=["return this;"],
        )
        output = JavaSerializer().serialize(JavaFile(declaration=JavaClass(name="Foo", methods=[method])))
        assert "    //\n    // sets things up\n    //\n    @Override\n    public Foo init() {\n" in output

    def test_enum_with_methods(self):
        enum = JavaEnum(
            name="E",
            constants=[JavaEnumConstant(name="X")],
            methods=[JavaMethod(name="f", modifiers=[MemberModifier.STATIC])],
        )
        output = JavaSerializer().serialize(JavaFile(declaration=enum))
        assert output == "public enum E {\n    X;\n\n    public static void f() {\n    }\n}\n"

    def test_empty_enum_with_methods(self):
        enum = JavaEnum(name="E", methods=[JavaMethod(name="f")])
        output = JavaSerializer().serialize(JavaFile(declaration=enum))
        assert "public enum E {\n    ;\n" in output

    def test_package_private_field(self):
        cls = JavaClass(name="A", fields=[JavaField(name="x", type_name="int", access=AccessModifier.PACKAGE, modifiers=[MemberModifier.FINAL])])
        assert "    final int x;\n" in JavaSerializer().serialize(JavaFile(declaration=cls))

    def test_modifiers_cover_generated_declarations(self):
        """Only the modifiers the emitters put on generated members"""
        assert [m.value for m in AccessModifier] == ["public", ""]
        assert [m.value for m in MemberModifier] == ["static", "final"]
