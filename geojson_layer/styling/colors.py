"""Colour and numeric token parsing for simplestyle properties.

Property values in the wild are loosely typed: colours come as Material
palette names or hex strings of several lengths, and numbers as either
JSON numbers or numeric strings.  Every helper here returns ``None``
for anything it cannot interpret, so the caller falls back to its
defaults profile.  Nothing in this module raises on bad input.
"""

from __future__ import annotations

import math
import string

from geojson_layer.models.primitives import Color

# Material Design palette primaries (shade 500) plus the basic colours.
_NAMED_COLORS: dict[str, int] = {
    "red": 0xFFF44336,
    "pink": 0xFFE91E63,
    "purple": 0xFF9C27B0,
    "deeppurple": 0xFF673AB7,
    "indigo": 0xFF3F51B5,
    "blue": 0xFF2196F3,
    "lightblue": 0xFF03A9F4,
    "cyan": 0xFF00BCD4,
    "teal": 0xFF009688,
    "green": 0xFF4CAF50,
    "lightgreen": 0xFF8BC34A,
    "lime": 0xFFCDDC39,
    "yellow": 0xFFFFEB3B,
    "amber": 0xFFFFC107,
    "orange": 0xFFFF9800,
    "deeporange": 0xFFFF5722,
    "brown": 0xFF795548,
    "grey": 0xFF9E9E9E,
    "gray": 0xFF9E9E9E,
    "bluegrey": 0xFF607D8B,
    "bluegray": 0xFF607D8B,
    "black": 0xFF000000,
    "white": 0xFFFFFFFF,
    "transparent": 0x00000000,
}

_HEX_DIGITS = frozenset(string.hexdigits)
_NAME_SEPARATORS = str.maketrans("", "", " -_")


def color_names() -> list[str]:
    """Return the recognised colour names, sorted."""
    return sorted(_NAMED_COLORS)


def resolve_color(token: object) -> Color | None:
    """Resolve a colour name or hex string to a ``Color``.

    Names are matched ignoring case, spaces, hyphens and underscores
    (``"deepPurple"``, ``"deep-purple"`` and ``"Deep Purple"`` are the
    same colour).  Hex strings may have a leading ``#`` and 3, 4, 6 or 8
    digits: ``rgb``, ``rgba``, ``rrggbb`` or ``rrggbbaa``.  Short forms
    repeat each digit, so ``#22e`` is ``#2222ee``.

    Returns:
        The colour, or ``None`` if *token* is not a string or is not a
        known name or well-formed hex value.
    """
    if not isinstance(token, str):
        return None
    text = token.strip()
    if not text:
        return None

    named = _NAMED_COLORS.get(text.lower().translate(_NAME_SEPARATORS))
    if named is not None:
        return Color.from_argb(named)

    return _parse_hex(text.removeprefix("#"))


def _parse_hex(digits: str) -> Color | None:
    if not digits or not set(digits) <= _HEX_DIGITS:
        return None
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        return None
    return Color(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
        alpha=int(digits[6:8], 16) / 255.0,
    )


def coerce_number(value: object) -> float | None:
    """Read a numeric property that may arrive as a number or a string.

    Booleans are not numbers here, and non-finite results (``"nan"``,
    ``"inf"``) are rejected.

    Returns:
        The value as a float, or ``None`` meaning "use the default".
    """
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def coerce_opacity(value: object) -> float | None:
    """Like ``coerce_number`` but only accepts values in ``[0, 1]``."""
    number = coerce_number(value)
    if number is None or not 0.0 <= number <= 1.0:
        return None
    return number
