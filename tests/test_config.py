"""
Tests for loading and saving style settings files.
"""

import json

import pytest

from msgbox import (
    DOUBLE,
    LIGHT,
    StyleError,
    UnknownPresetError,
    load_style,
    render,
    save_style,
    style_from_dict,
)


class TestLoadStyle:
    """Tests for load_style()."""

    def test_missing_file_uses_light(self, tmp_path):
        assert load_style(tmp_path / "style.json") is LIGHT

    def test_loads_preset_caption_and_glyphs(self, tmp_path):
        path = tmp_path / "style.json"
        path.write_text(json.dumps({
            "preset": "double",
            "caption": "Config",
            "glyphs": {"vertical_bar": "|"},
        }), encoding="utf-8")

        style = load_style(path)
        assert style == DOUBLE.with_glyphs(vertical_bar="|").with_caption("Config")

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "style.json"
        path.write_text('{"preset": "dos"}', encoding="utf-8")
        assert load_style(str(path)) is DOUBLE

    def test_malformed_json_warns_and_uses_light(self, tmp_path, capsys):
        path = tmp_path / "style.json"
        path.write_text("{not json", encoding="utf-8")

        assert load_style(path) is LIGHT
        out = capsys.readouterr().out
        assert "Warning: Could not load style.json" in out

    def test_invalid_utf8_warns_and_uses_light(self, tmp_path, capsys):
        path = tmp_path / "style.json"
        path.write_bytes(b'{"caption": "\xff\xfe"}')

        assert load_style(path) is LIGHT
        assert "Warning: Could not load style.json" in capsys.readouterr().out

    def test_unknown_preset_raises(self, tmp_path):
        path = tmp_path / "style.json"
        path.write_text('{"preset": "heavy"}', encoding="utf-8")
        with pytest.raises(UnknownPresetError):
            load_style(path)

    def test_unknown_glyph_raises(self, tmp_path):
        path = tmp_path / "style.json"
        path.write_text('{"glyphs": {"corner": "+"}}', encoding="utf-8")
        with pytest.raises(StyleError):
            load_style(path)

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "style.json"
        path.write_text('["double"]', encoding="utf-8")
        with pytest.raises(StyleError, match="must be an object"):
            load_style(path)


class TestSaveStyle:
    """Tests for save_style()."""

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "style.json"
        style = DOUBLE.with_caption("Rust Editions")

        save_style(style, path)

        assert load_style(path) == style

    def test_glyphs_written_unescaped(self, tmp_path):
        path = tmp_path / "style.json"
        save_style(LIGHT, path)

        text = path.read_text(encoding="utf-8")
        assert "╭" in text
        assert json.loads(text)["glyphs"]["horizontal_bar"] == "─"

    def test_loaded_style_renders(self, tmp_path):
        path = tmp_path / "style.json"
        save_style(LIGHT.with_caption("cap"), path)
        assert render(["abc"], load_style(path)) == "╭─────╮\n│ abc │\n<cap>─╯"


class TestStyleFromDict:
    """Tests for style_from_dict()."""

    def test_builds_style(self):
        assert style_from_dict({"preset": "light", "caption": "x"}) == LIGHT.with_caption("x")

    def test_rejects_non_dict(self):
        with pytest.raises(StyleError):
            style_from_dict("double")
