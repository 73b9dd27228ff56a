"""
Loading and saving border styles from JSON settings files.

Settings file format:
    {
        "preset": "double",
        "caption": "Config",
        "glyphs": {"vertical_bar": "|"}
    }

Every key is optional; an empty object gives the light style.
"""

import json
from pathlib import Path

from .errors import StyleError
from .styles import BorderStyle, LIGHT


def style_from_dict(data: dict) -> BorderStyle:
    """Build a style from already-parsed settings."""
    if not isinstance(data, dict):
        raise StyleError(f"Style settings must be an object, got {type(data).__name__}")
    return BorderStyle.from_dict(data)


def load_style(path: Path) -> BorderStyle:
    """
    Load a style from a settings file.

    A missing or unreadable file falls back to the light style. A readable
    file with bad values (unknown preset, unknown glyph) raises StyleError.
    """
    path = Path(path)
    if not path.exists():
        return LIGHT

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
        print(f"Warning: Could not load {path.name}: {e}")
        return LIGHT

    return style_from_dict(data)


def save_style(style: BorderStyle, path: Path):
    """Save a style to a settings file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(style.to_dict(), f, indent=2, ensure_ascii=False)
