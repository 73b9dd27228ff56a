"""
Box drawing glyphs.

Unicode box-drawing characters used by the built-in border styles.
"""

# Light style (rounded corners)
LIGHT_TL = "╭"  # Top-left
LIGHT_TR = "╮"  # Top-right
LIGHT_BL = "╰"  # Bottom-left
LIGHT_BR = "╯"  # Bottom-right
LIGHT_H = "─"   # Horizontal
LIGHT_V = "│"   # Vertical

# Double style (DOS-like)
DOUBLE_TL = "╔"
DOUBLE_TR = "╗"
DOUBLE_BL = "╚"
DOUBLE_BR = "╝"
DOUBLE_H = "═"
DOUBLE_V = "║"

# Caption tag wrapped around the bottom border label
CAPTION_OPEN = "<"
CAPTION_CLOSE = ">"
