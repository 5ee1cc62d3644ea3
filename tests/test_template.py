"""Tests for template placeholder substitution."""

import pytest

from greg import TemplateError, substitute
from greg.template import render_template


class TestSubstitute:
    """Test placeholder replacement in template text."""

    def test_no_placeholders_unchanged(self):
        text = "#include <stddef.h>\nint x;\n"
        assert substitute(text, {"@CMD_LOADERS@": "  foo();\n"}) == text

    def test_placeholder_replaced(self):
        result = substitute("a\n@CMD_MACROS@b\n", {"@CMD_MACROS@": "#define x y\n"})
        assert result == "a\n#define x y\nb\n"
        assert "@CMD_MACROS@" not in result

    def test_every_occurrence_replaced(self):
        assert substitute("@X@ @X@", {"@X@": "1"}) == "1 1"

    def test_unbound_placeholder_kept(self):
        assert substitute("@UNKNOWN@", {"@X@": "1"}) == "@UNKNOWN@"

    def test_empty_binding_removes_placeholder(self):
        assert substitute("a@X@b", {"@X@": ""}) == "ab"


class TestRenderTemplate:
    """Test reading and rendering template files."""

    def test_render(self, tmp_path):
        path = tmp_path / "greg.h.in"
        path.write_text("/* @VER_MACROS@ */\n")
        assert render_template(path, {"@VER_MACROS@": "v"}) == "/* v */\n"

    def test_missing_template(self, tmp_path):
        with pytest.raises(TemplateError):
            render_template(tmp_path / "missing.in", {})

    def test_undecodable_template(self, tmp_path):
        path = tmp_path / "greg.h.in"
        path.write_bytes(b"\xff\xfe@CMD_MACROS@")

        with pytest.raises(TemplateError):
            render_template(path, {})
