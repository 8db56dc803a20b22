"""
CSS color string parsing.

Every parser returns unit RGBA floats ``(r, g, b, a)``, all in ``[0, 1]``.
Accepted syntaxes:

- hex: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``
- ``rgb()`` / ``rgba()``: comma or space separated, numbers (0-255) or
  percentages, optional alpha (``, a`` or ``/ a``) as number or percentage
- ``hsl()`` / ``hsla()``: hue with optional ``deg``/``rad``/``grad``/``turn``
  unit, saturation and lightness as percentages, optional alpha
- CSS3 color names (through ``webcolors``) and ``transparent``

Out-of-range channel values are clamped rather than rejected.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Callable, Optional, Tuple

import webcolors
from boundednumbers.functions import clamp01

from ..errors import ParseError
from .css_to_hsl import css_hsl_to_rgb

logger = logging.getLogger(__name__)

UnitRGBA = Tuple[float, float, float, float]

_NUM = r"([+-]?\d*\.?\d+(?:e[+-]?\d+)?)"

HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
RGB_COMMA_RE = re.compile(
    rf"^rgba?\(\s*{_NUM}(%)?\s*,\s*{_NUM}(%)?\s*,\s*{_NUM}(%)?\s*(?:,\s*{_NUM}(%)?\s*)?\)$"
)
RGB_SPACE_RE = re.compile(
    rf"^rgba?\(\s*{_NUM}(%)?\s+{_NUM}(%)?\s+{_NUM}(%)?\s*(?:/\s*{_NUM}(%)?\s*)?\)$"
)
HSL_COMMA_RE = re.compile(
    rf"^hsla?\(\s*{_NUM}(deg|rad|grad|turn)?\s*,\s*{_NUM}%\s*,\s*{_NUM}%\s*(?:,\s*{_NUM}(%)?\s*)?\)$"
)
HSL_SPACE_RE = re.compile(
    rf"^hsla?\(\s*{_NUM}(deg|rad|grad|turn)?\s+{_NUM}%\s+{_NUM}%\s*(?:/\s*{_NUM}(%)?\s*)?\)$"
)

ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 360 / 400,
    "turn": 360.0,
    "rad": 180 / math.pi,
}


def _alpha(value: Optional[str], percent: Optional[str]) -> float:
    if value is None:
        return 1.0
    a = float(value)
    return clamp01(a / 100 if percent else a)


def parse_hex(text: str) -> Optional[UnitRGBA]:
    match = HEX_RE.match(text)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(c * 2 for c in digits)
    channels = [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    r, g, b, a = channels
    return r, g, b, a


def parse_rgb_string(text: str) -> Optional[UnitRGBA]:
    match = RGB_COMMA_RE.match(text) or RGB_SPACE_RE.match(text)
    if match is None:
        return None
    r, r_pct, g, g_pct, b, b_pct, a, a_pct = match.groups()
    # Channels are either all numbers or all percentages
    if not (r_pct == g_pct == b_pct):
        return None
    divisor = 100.0 if r_pct else 255.0
    return (
        clamp01(float(r) / divisor),
        clamp01(float(g) / divisor),
        clamp01(float(b) / divisor),
        _alpha(a, a_pct),
    )


def parse_hsl_string(text: str) -> Optional[UnitRGBA]:
    match = HSL_COMMA_RE.match(text) or HSL_SPACE_RE.match(text)
    if match is None:
        return None
    h, unit, s, l, a, a_pct = match.groups()
    hue = float(h) * ANGLE_UNITS[unit or "deg"]
    r, g, b = css_hsl_to_rgb(hue, clamp01(float(s) / 100), clamp01(float(l) / 100))
    return float(r), float(g), float(b), _alpha(a, a_pct)


def parse_name(text: str) -> Optional[UnitRGBA]:
    if text == "transparent":
        return 0.0, 0.0, 0.0, 0.0
    try:
        rgb = webcolors.name_to_rgb(text)
    except ValueError:
        return None
    logger.debug("Resolved color name %r to %r", text, rgb)
    return rgb.red / 255, rgb.green / 255, rgb.blue / 255, 1.0


PARSERS: tuple[Callable[[str], Optional[UnitRGBA]], ...] = (
    parse_hex,
    parse_rgb_string,
    parse_hsl_string,
    parse_name,
)


def parse_color(value: str) -> UnitRGBA:
    """
    Parse a CSS color string into unit RGBA floats.

    Raises:
        ParseError: If no supported syntax matches ``value``.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a color string, got {type(value).__name__}")
    text = value.strip().lower()
    if not text:
        raise ParseError(value, "empty string")
    for parser in PARSERS:
        parsed = parser(text)
        if parsed is not None:
            return parsed
    raise ParseError(value)
