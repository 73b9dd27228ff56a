"""
Exceptions raised while building or loading border styles.
"""


class StyleError(ValueError):
    """A border style could not be built from the given values."""


class UnknownPresetError(StyleError, KeyError):
    """Raised when a preset name is not registered."""

    def __init__(self, name, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown box style {name!r} (expected one of: {', '.join(known)})")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
