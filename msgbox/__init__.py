"""
msgbox - Plain message boxes drawn with Unicode box characters.

    >>> from msgbox import render, DOUBLE
    >>> print(render(["abc"], DOUBLE.with_caption("Hi")))
    ╔═════╗
    ║ abc ║
    <Hi>══╝

Import from submodules directly when you need the helpers:
    from msgbox.render import interior_width
    from msgbox.glyphs import LIGHT_H
"""

from .errors import StyleError, UnknownPresetError
from .styles import BorderStyle, LIGHT, DOUBLE, PRESETS, get_preset
from .render import (
    render,
    generate_box,
    generate_with_caption,
    generate_with_config,
    interior_width,
)
from .config import load_style, save_style, style_from_dict

# Name used by earlier releases
TextBoxConfig = BorderStyle


def _get_version():
    """Read version from the installed distribution, then the VERSION file."""
    from importlib.metadata import PackageNotFoundError, version
    from pathlib import Path
    try:
        return version("msgbox")
    except PackageNotFoundError:
        pass
    # Source checkout that was never installed
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()

__all__ = [
    # Rendering
    "render",
    "generate_box",
    "generate_with_caption",
    "generate_with_config",
    "interior_width",
    # Styles
    "BorderStyle",
    "TextBoxConfig",
    "LIGHT",
    "DOUBLE",
    "PRESETS",
    "get_preset",
    # Config
    "load_style",
    "save_style",
    "style_from_dict",
    # Errors
    "StyleError",
    "UnknownPresetError",
]
