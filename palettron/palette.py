"""
Immutable color palettes.

A ``Palettron`` is an ordered, immutable sequence of ``Color`` values. Every
method that looks like it changes the palette returns a new one, so calls
chain freely:

>>> from palettron import palettron
>>> palettron(["#ff0000", "#00ff00", "#0000ff"]).shift(1).alpha(0.5).to_hex()
['#0000ff80', '#ff000080', '#00ff0080']

Index-based operations address the palette's current order, 0-based. Set
operations (``pick``, ``modify``) ignore indices they cannot find; single
index operations (``replace``, ``swap``) raise ``IndexOutOfRange``.
"""
from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, TypeVar, Union

import numpy as np

from .colors import Color, ColorInput, ColorUnitRGBA, get_color_class
from .errors import IndexOutOfRange, ParseError
from .types.color_types import ColorSpace, Seed
from .types.format_type import FormatType
from .utils import make_rng, normalize_indices
from .utils.indices import Indices

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SEED = 0

Colors = tuple[Color, ...]
Visitor = Callable[[Color, int], Any]
Predicate = Callable[[Color, int, Colors], bool]
Transform = Callable[[Color, int, Colors], Union[Color, str]]
Comparator = Callable[[Color, Color], float]


def to_color(value: ColorInput) -> Color:
    """Resolve a color input to a ``Color``, sharing it when it already is one."""
    return value if isinstance(value, Color) else Color(value)


class Palettron:
    """
    Immutable ordered sequence of colors.

    Args:
        colors: Color strings, ``Color`` values or any scalar ``ColorBase``.

    Raises:
        ParseError: One of the strings is not a color.
        TypeError: ``colors`` is a single string.
    """
    __slots__ = ('_colors', '_is_frozen')

    def __init__(self, colors: Iterable[ColorInput] = ()) -> None:
        if isinstance(colors, str):
            # a bare string is one color, not a sequence of characters
            raise TypeError(f"Expected a sequence of colors, got the string {colors!r}")
        self._colors: Colors = tuple(to_color(c) for c in colors)
        object.__setattr__(self, '_is_frozen', True)

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    # ------------------ INSPECTION ------------------
    @property
    def colors(self) -> Colors:
        return self._colors

    @property
    def size(self) -> int:
        """The number of colors in the palette."""
        return len(self._colors)

    def each(self, visitor: Visitor) -> None:
        """Call ``visitor(color, index)`` for every color, in order."""
        for i, color in enumerate(self._colors):
            visitor(color, i)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            try:
                item = Color(item)
            except ParseError:
                return False
        return item in self._colors

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palettron):
            return NotImplemented
        return self.to_hex() == other.to_hex()

    def __hash__(self) -> int:
        return hash(tuple(self.to_hex()))

    def __repr__(self) -> str:
        return f"Palettron({self.to_hex()!r})"

    # ------------------ PER-COLOR ADJUSTMENTS ------------------
    def _each_color(self, adjust: Callable[[Color], Color]) -> Palettron:
        return Palettron(adjust(c) for c in self._colors)

    def alpha(self, a: float) -> Palettron:
        """Set the alpha of every color."""
        return self._each_color(lambda c: c.with_alpha(a))

    def darken(self, x: float = 0.1) -> Palettron:
        return self._each_color(lambda c: c.darken(x))

    def desaturate(self, x: float = 0.1) -> Palettron:
        return self._each_color(lambda c: c.desaturate(x))

    def grayscale(self) -> Palettron:
        return self._each_color(lambda c: c.grayscale())

    def invert(self) -> Palettron:
        return self._each_color(lambda c: c.invert())

    def lighten(self, x: float = 0.1) -> Palettron:
        return self._each_color(lambda c: c.lighten(x))

    def rotate(self, x: float = 15) -> Palettron:
        """Rotate the hue of every color by ``x`` degrees."""
        return self._each_color(lambda c: c.rotate(x))

    def saturate(self, x: float = 0.1) -> Palettron:
        return self._each_color(lambda c: c.saturate(x))

    # ------------------ COMBINATION ------------------
    def add(self, *colors: ColorInput) -> Palettron:
        """Append one or more colors."""
        return Palettron(self._colors + tuple(to_color(c) for c in colors))

    def concat(self, *palettes: PaletteInput) -> Palettron:
        """Append the colors of other palettes, duplicates included."""
        from .combinators import concat
        return concat(self, *palettes)

    def merge(self, *palettes: PaletteInput) -> Palettron:
        """Append the colors of other palettes, dropping repeated hex values."""
        from .combinators import merge
        return merge(self, *palettes)

    # ------------------ REORDERING ------------------
    def reverse(self) -> Palettron:
        return Palettron(self._colors[::-1])

    def shift(self, x: int) -> Palettron:
        """
        Rotate the palette by ``x`` positions with wrapping.

        Positive ``x`` moves the last ``x`` colors to the front, negative
        ``x`` moves the first ``|x|`` colors to the back. Shifting an empty
        palette returns an empty palette.
        """
        if not self._colors:
            return Palettron()
        n = x % len(self._colors)
        if n == 0:
            return Palettron(self._colors)
        return Palettron(self._colors[-n:] + self._colors[:-n])

    def swap(self, a: int, b: int) -> Palettron:
        """
        Exchange the colors at positions ``a`` and ``b``.

        Raises:
            IndexOutOfRange: ``a`` or ``b`` is not in ``[0, size)``.
        """
        self._check_index(a)
        self._check_index(b)
        colors = list(self._colors)
        colors[a], colors[b] = colors[b], colors[a]
        return Palettron(colors)

    def sort(self, comparator: Optional[Comparator] = None, *, key: Optional[Callable[[Color], Any]] = None) -> Palettron:
        """
        Stable sort with either a ``comparator(a, b)`` returning a negative,
        zero or positive number, or a ``key`` function.
        """
        if (comparator is None) == (key is None):
            raise TypeError("sort() takes exactly one of comparator or key")
        sort_key = key if key is not None else cmp_to_key(comparator)  # type: ignore[arg-type]
        return Palettron(sorted(self._colors, key=sort_key))

    def shuffle(self, seed: Seed = DEFAULT_SEED) -> Palettron:
        """
        Reorder the palette pseudo-randomly; the same seed always gives the
        same order for the same input.
        """
        if not self._colors:
            return Palettron()
        rng = make_rng(seed)
        order = np.argsort(rng.random(len(self._colors)), kind="stable")
        return Palettron(self._colors[i] for i in order)

    # ------------------ SELECTION ------------------
    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> Palettron:
        """Select ``[start, end)`` with the usual Python slice semantics."""
        return Palettron(self._colors[start:end])

    def pick(self, indices: Indices) -> Palettron:
        """
        Keep only the colors at ``indices``, in palette order.

        Duplicate indices collapse and unknown ones are ignored.
        """
        wanted = self._known_indices(normalize_indices(indices))
        return Palettron(c for i, c in enumerate(self._colors) if i in wanted)

    def filter(self, predicate: Predicate) -> Palettron:
        """Keep colors for which ``predicate(color, index, colors)`` is truthy."""
        return Palettron(
            c for i, c in enumerate(self._colors) if predicate(c, i, self._colors)
        )

    # ------------------ MUTATION AS NEW COPY ------------------
    def modify(self, indices: Indices, transform: Callable[[Color, int], Union[Color, str]]) -> Palettron:
        """Apply ``transform(color, index)`` to the colors at ``indices`` only."""
        wanted = self._known_indices(normalize_indices(indices))
        return Palettron(
            transform(c, i) if i in wanted else c for i, c in enumerate(self._colors)
        )

    def replace(self, index: int, color: ColorInput) -> Palettron:
        """
        Replace the color at ``index``.

        Raises:
            IndexOutOfRange: ``index`` is not in ``[0, size)``.
        """
        self._check_index(index)
        colors = list(self._colors)
        colors[index] = to_color(color)
        return Palettron(colors)

    def map(self, transform: Transform) -> Palettron:
        """Build a palette from ``transform(color, index, colors)`` for every color."""
        return Palettron(transform(c, i, self._colors) for i, c in enumerate(self._colors))

    # ------------------ EXPORT ------------------
    def to_hex(self) -> list[str]:
        """CSS hex strings, ``#rrggbb`` or ``#rrggbbaa``."""
        return [c.to_hex() for c in self._colors]

    def to_rgb(self) -> list[str]:
        """CSS ``rgb()`` / ``rgba()`` strings."""
        return [c.to_rgb_string() for c in self._colors]

    def to_hsl(self) -> list[str]:
        """CSS ``hsl()`` / ``hsla()`` strings."""
        return [c.to_hsl_string() for c in self._colors]

    def to_any(self, transform: Callable[[Color, int, Colors], T]) -> list[T]:
        """Export each color through ``transform(color, index, colors)``."""
        return [transform(c, i, self._colors) for i, c in enumerate(self._colors)]

    def to_array(self, space: ColorSpace = "rgba", format_type: FormatType = FormatType.FLOAT) -> np.ndarray:
        """
        Channel array of shape ``(size, channels)``.

        Args:
            space: "rgb", "rgba", "hsl" or "hsla".
            format_type: INT, FLOAT or PERCENTAGE channel scaling.

        Raises:
            ValueError: Unsupported space/format combination.
        """
        target = get_color_class(space, format_type)
        values = np.array([c.rgba for c in self._colors], dtype=float).reshape(-1, 4)
        return np.array(ColorUnitRGBA(values).convert(target.mode, target.format_type).value)

    # ------------------ HELPERS ------------------
    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._colors):
            raise IndexOutOfRange(index, len(self._colors))

    def _known_indices(self, indices: frozenset[int]) -> frozenset[int]:
        known = frozenset(i for i in indices if 0 <= i < len(self._colors))
        if known != indices:
            logger.debug("Ignoring indices %s outside palette of size %d",
                         sorted(indices - known), len(self._colors))
        return known


PaletteInput = Union[Palettron, Sequence[ColorInput]]
