"""Exceptions raised by palettron."""


class PalettronError(Exception):
    """Base class for palettron's own errors."""


class ParseError(PalettronError, ValueError):
    """A color string could not be parsed."""

    def __init__(self, value, reason: str | None = None) -> None:
        self.value = value
        message = f"Cannot parse color {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class IndexOutOfRange(PalettronError, IndexError):
    """A single-index palette operation addressed a missing position."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of range for a palette of size {size}")
