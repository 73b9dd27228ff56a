"""
Border styles for message boxes.

A BorderStyle bundles the six glyphs that frame a box plus an optional
caption for the bottom border. Styles are frozen; every builder method
returns a new style and leaves the receiver untouched.
"""

from dataclasses import dataclass, replace
from typing import Optional

from . import glyphs
from .errors import StyleError, UnknownPresetError


GLYPH_FIELDS = (
    "horizontal_bar",
    "vertical_bar",
    "top_left",
    "top_right",
    "bottom_left",
    "bottom_right",
)


@dataclass(frozen=True)
class BorderStyle:
    """Box drawing characters and the bottom border caption."""
    horizontal_bar: str
    vertical_bar: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    caption: Optional[str] = None

    @classmethod
    def light(cls) -> "BorderStyle":
        """Single-line rounded style: ╭─╮ │ ╰─╯"""
        return LIGHT

    @classmethod
    def double(cls) -> "BorderStyle":
        """Double-line style: ╔═╗ ║ ╚═╝"""
        return DOUBLE

    # The double style is what old DOS programs drew their dialogs with
    dos = double

    def with_caption(self, caption: str) -> "BorderStyle":
        """Return a copy of this style with the given bottom border caption."""
        return replace(self, caption=caption)

    def without_caption(self) -> "BorderStyle":
        return replace(self, caption=None)

    def with_glyphs(self, **overrides: str) -> "BorderStyle":
        """
        Return a copy of this style with some glyphs replaced.

        Args:
            **overrides: Any subset of GLYPH_FIELDS mapped to new glyphs

        Raises:
            StyleError: If a name is not a glyph field or a glyph is empty
        """
        for name, value in overrides.items():
            if name not in GLYPH_FIELDS:
                raise StyleError(f"Unknown glyph field {name!r}")
            if not isinstance(value, str) or not value:
                raise StyleError(f"Glyph {name!r} must be a non-empty string, got {value!r}")
        return replace(self, **overrides)

    def to_dict(self) -> dict:
        d = {"glyphs": {name: getattr(self, name) for name in GLYPH_FIELDS}}
        if self.caption is not None:
            d["caption"] = self.caption
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "BorderStyle":
        """
        Build a style from a settings dict.

        Starts from the preset named by "preset" (light when absent), then
        applies the "glyphs" overrides and the "caption".
        """
        preset = data.get("preset")
        style = get_preset(preset if preset is not None else "light")

        overrides = data.get("glyphs")
        if overrides is None:
            overrides = {}
        if not isinstance(overrides, dict):
            raise StyleError(f"'glyphs' must be an object, got {type(overrides).__name__}")
        if overrides:
            style = style.with_glyphs(**overrides)

        caption = data.get("caption")
        if caption is not None:
            if not isinstance(caption, str):
                raise StyleError(f"'caption' must be a string, got {type(caption).__name__}")
            style = style.with_caption(caption)

        return style


LIGHT = BorderStyle(
    horizontal_bar=glyphs.LIGHT_H,
    vertical_bar=glyphs.LIGHT_V,
    top_left=glyphs.LIGHT_TL,
    top_right=glyphs.LIGHT_TR,
    bottom_left=glyphs.LIGHT_BL,
    bottom_right=glyphs.LIGHT_BR,
)

DOUBLE = BorderStyle(
    horizontal_bar=glyphs.DOUBLE_H,
    vertical_bar=glyphs.DOUBLE_V,
    top_left=glyphs.DOUBLE_TL,
    top_right=glyphs.DOUBLE_TR,
    bottom_left=glyphs.DOUBLE_BL,
    bottom_right=glyphs.DOUBLE_BR,
)

PRESETS = {
    "light": LIGHT,
    "default": LIGHT,
    "double": DOUBLE,
    "dos": DOUBLE,
}


def get_preset(name: str) -> BorderStyle:
    """Look up a preset by name (case-insensitive)."""
    if not isinstance(name, str):
        raise UnknownPresetError(name, sorted(PRESETS))
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise UnknownPresetError(name, sorted(PRESETS)) from None
