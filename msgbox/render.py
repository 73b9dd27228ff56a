"""
Message box rendering.

Frames a list of lines with box-drawing glyphs:

    ╭─────────────────────╮
    │ A vec:    [1, 2, 3] │
    │ A tuple:  (1, 2, 3) │
    <Tuples>──────────────╯

Widths are measured in code points, so every glyph and character is
assumed to take one terminal column.
"""

from typing import Iterable, Optional

from .glyphs import CAPTION_OPEN, CAPTION_CLOSE
from .styles import BorderStyle, LIGHT


def interior_width(lines: list[str], caption: Optional[str] = None) -> int:
    """Width of the content area: the longest line or the caption, whichever is wider."""
    longest = max((len(line) for line in lines), default=0)
    if caption is None:
        return longest
    return max(longest, len(caption))


def border_row(left: str, fill: str, right: str, count: int) -> str:
    """
    Create a border row.

    Args:
        left: Left corner (or caption tag)
        fill: Fill glyph (repeated)
        right: Right corner
        count: Number of fill glyphs

    Returns:
        Formatted string for the row
    """
    return f"{left}{fill * count}{right}"


def content_row(line: str, width: int, bar: str) -> str:
    """Frame one line, right-padding it with spaces to width."""
    spaces = " " * (width - len(line))
    return f"{bar} {line}{spaces} {bar}"


def bottom_row(style: BorderStyle, width: int) -> str:
    """
    Create the bottom border, with the caption tag if the style has one.

    The caption tag replaces the bottom-left corner. Its two brackets take
    the place of the padding columns, so one fewer fill glyph is needed
    than in the plain border.
    """
    if style.caption is None:
        return border_row(style.bottom_left, style.horizontal_bar, style.bottom_right, width + 2)

    tag = f"{CAPTION_OPEN}{style.caption}{CAPTION_CLOSE}"
    return border_row(tag, style.horizontal_bar, style.bottom_right, width - len(style.caption) + 1)


def render(lines: Iterable[str], config: Optional[BorderStyle] = None) -> str:
    """
    Render lines inside a box.

    Args:
        lines: Content rows, rendered as given (no wrapping)
        config: Border style; defaults to the light style without a caption

    Returns:
        The box as a single string, rows separated by newlines,
        no trailing newline

    Raises:
        TypeError: If lines is a single string rather than a sequence of lines
    """
    if isinstance(lines, str):
        raise TypeError("render() expects a sequence of lines, not a single string")
    style = config if config is not None else LIGHT
    lines = list(lines)
    width = interior_width(lines, style.caption)

    rows = [border_row(style.top_left, style.horizontal_bar, style.top_right, width + 2)]
    rows.extend(content_row(line, width, style.vertical_bar) for line in lines)
    rows.append(bottom_row(style, width))

    return "\n".join(rows)


def generate_box(lines: Iterable[str]) -> str:
    """Render lines with the default light style."""
    return render(lines, LIGHT)


def generate_with_caption(lines: Iterable[str], caption: str) -> str:
    """Render lines with the light style and a caption on the bottom border."""
    return render(lines, LIGHT.with_caption(caption))


def generate_with_config(lines: Iterable[str], config: BorderStyle) -> str:
    return render(lines, config)
