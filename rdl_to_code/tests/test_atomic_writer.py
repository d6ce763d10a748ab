"""
Tests for atomic writes of generated units.
"""

from __future__ import annotations

import pytest

from rdl_to_code.pipeline.errors import GeneratedCodeError
from rdl_to_code.pipeline.output import AtomicWriter

VALID_JAVA = """package com.example;

public class Point {
    public String open = "{";
    // a stray } in a comment
    public char c = '}';
}
"""


class TestAtomicWriter:
    def test_write_creates_directories(self, tmp_path):
        target = tmp_path / "com" / "example" / "Point.java"
        AtomicWriter().write(target, VALID_JAVA)
        assert target.read_text() == VALID_JAVA

    def test_no_temp_files_left(self, tmp_path):
        AtomicWriter().write(tmp_path / "Point.java", VALID_JAVA)
        assert [p.name for p in tmp_path.iterdir()] == ["Point.java"]

    def test_unbalanced_braces(self, tmp_path):
        target = tmp_path / "Broken.java"
        with pytest.raises(GeneratedCodeError, match="unbalanced braces"):
            AtomicWriter().write(target, "public class Broken {\n")
        assert not target.exists()
        assert list(tmp_path.iterdir()) == []

    def test_missing_type_declaration(self, tmp_path):
        with pytest.raises(GeneratedCodeError, match="no type definitions"):
            AtomicWriter().write(tmp_path / "Empty.java", "package com.example;\n")

    def test_failed_validation_keeps_previous_content(self, tmp_path):
        target = tmp_path / "Point.java"
        target.write_text(VALID_JAVA)
        with pytest.raises(GeneratedCodeError):
            AtomicWriter().write(target, "public class Point {")
        assert target.read_text() == VALID_JAVA

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "Notes.java"
        AtomicWriter().write(target, "not java", validate=False)
        assert target.read_text() == "not java"

    def test_custom_validator(self, tmp_path):
        def reject(content: str) -> None:
            raise GeneratedCodeError("rejected")

        with pytest.raises(GeneratedCodeError, match="rejected"):
            AtomicWriter(validate_java=reject).write(tmp_path / "Point.java", VALID_JAVA)

    def test_write_if_not_exists(self, tmp_path):
        target = tmp_path / "Point.java"
        writer = AtomicWriter()
        assert writer.write_if_not_exists(target, VALID_JAVA)
        with pytest.raises(FileExistsError):
            writer.write_if_not_exists(target, VALID_JAVA)
