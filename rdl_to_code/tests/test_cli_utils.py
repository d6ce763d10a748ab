#!/usr/bin/env python3

import click
import pytest

from rdl_to_code.cli_utils import reconstruct_command_line
from rdl_to_code.rdl_to_code import rdl_to_code


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Without an active Click context the bare program name is returned"""
        assert reconstruct_command_line(rdl_to_code) == "rdl_to_code"

    def test_reconstruct_command_line_with_context(self):
        """Arguments come first, then options that differ from their defaults"""
        with click.Context(rdl_to_code) as ctx:
            ctx.params = {
                "config": None,
                "namespace": "com.example",
                "force": True,
                "verbose": False,
                "path": "/nonexistent/geo.json",
                "output": "build/java",
            }
            result = reconstruct_command_line(rdl_to_code)
        assert result == "rdl_to_code /nonexistent/geo.json build/java --namespace com.example --force"

    def test_existing_paths_are_shortened(self, tmp_path):
        schema = tmp_path / "geo.json"
        schema.write_text("{}")
        with click.Context(rdl_to_code) as ctx:
            ctx.params = {"path": str(schema), "output": str(tmp_path)}
            result = reconstruct_command_line(rdl_to_code)
        assert result == f"rdl_to_code geo.json {tmp_path.name}"


if __name__ == "__main__":
    pytest.main([__file__])
