"""Free functions composing palettes."""
from __future__ import annotations

from typing import Iterable, Iterator

from .colors import Color, ColorInput
from .palette import Palettron, PaletteInput, to_color


def _flatten(palettes: Iterable[PaletteInput]) -> Iterator[Color]:
    for palette in palettes:
        if isinstance(palette, Palettron):
            yield from palette.colors
        elif isinstance(palette, str):
            # a bare string is one color, not a sequence of characters
            raise TypeError(f"Expected a palette or a sequence of colors, got the string {palette!r}")
        else:
            yield from (to_color(c) for c in palette)


def concat(*palettes: PaletteInput) -> Palettron:
    """
    Concatenate two or more palettes, keeping duplicates.

    Palettron instances and raw sequences of colors can be mixed:

    >>> concat(["#ff0000"], Palettron(["#00ff00"])).to_hex()
    ['#ff0000', '#00ff00']
    """
    return Palettron(_flatten(palettes))


def merge(*palettes: PaletteInput) -> Palettron:
    """
    Merge two or more palettes, keeping the first occurrence of each hex value.

    >>> merge(["#ff0000", "#00ff00"], ["#00ff00", "#0000ff"]).to_hex()
    ['#ff0000', '#00ff00', '#0000ff']
    """
    seen: dict[str, Color] = {}
    for color in _flatten(palettes):
        seen.setdefault(color.to_hex(), color)
    return Palettron(seen.values())


def palettron(*sequences: Iterable[ColorInput]) -> Palettron:
    """
    Build one palette out of any number of color sequences.

    >>> palettron(["#ff0000"], ["#00ff00", "#0000ff"]).size
    3
    """
    return Palettron(c for sequence in sequences for c in sequence)
