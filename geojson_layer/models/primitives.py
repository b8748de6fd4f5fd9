"""Drawable primitive models.

These are the layer's output: what a renderer receives after a document
has been parsed.  Coordinates are ``(lat, lng)``, the reverse of GeoJSON's
``[lng, lat]`` order, matching what map renderers consume.

Design notes:
- All models are frozen; sequences are tuples so a published snapshot
  can never be mutated by a consumer.
- ``Color`` keeps channels as 0-255 integers and alpha as a 0.0-1.0
  float, so applying an opacity never loses precision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from geojson_layer.core.constants import OPAQUE_ALPHA_THRESHOLD


class LatLng(NamedTuple):
    """A WGS 84 position in renderer order."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class Color:
    """An sRGB colour with a fractional alpha.

    Attributes:
        red: Red channel, 0-255.
        green: Green channel, 0-255.
        blue: Blue channel, 0-255.
        alpha: Opacity, 0.0 (transparent) to 1.0 (opaque).
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @classmethod
    def from_argb(cls, value: int) -> Color:
        """Build a colour from a packed ``0xAARRGGBB`` integer."""
        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
            alpha=((value >> 24) & 0xFF) / 255.0,
        )

    @property
    def argb(self) -> int:
        """Packed ``0xAARRGGBB`` value (alpha rounded to 8 bits)."""
        a = round(self.alpha * 255)
        return (a << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @property
    def is_opaque(self) -> bool:
        return self.alpha > OPAQUE_ALPHA_THRESHOLD

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy of this colour with *alpha* replacing the current alpha."""
        return Color(self.red, self.green, self.blue, float(alpha))

    def to_hex(self) -> str:
        """CSS hex notation: ``#rrggbb``, or ``#rrggbbaa`` when not opaque."""
        rgb = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if self.alpha >= 1.0:
            return rgb
        return f"{rgb}{round(self.alpha * 255):02x}"


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Marker:
    """A point marker: a pin of ``size`` pixels whose tip sits on ``point``.

    Attributes:
        point: Marker location.
        color: Pin colour.
        size: Width and height in pixels.
        anchor: Which part of the pin is placed on ``point``.
    """

    point: LatLng
    color: Color
    size: float
    anchor: str = "bottom-center"


@dataclass(frozen=True, slots=True)
class Polyline:
    """An open line through two or more points."""

    points: tuple[LatLng, ...]
    color: Color
    stroke_width: float


@dataclass(frozen=True, slots=True)
class Polygon:
    """A filled area with an outer ring and optional hole rings.

    Attributes:
        points: Outer ring.
        holes: Hole rings; empty when the polygon has none.
        fill_color: Fill colour, or ``None`` for an unfilled polygon.
        border_color: Border stroke colour.
        border_stroke_width: Border width in pixels.
    """

    points: tuple[LatLng, ...]
    holes: tuple[tuple[LatLng, ...], ...]
    fill_color: Color | None
    border_color: Color
    border_stroke_width: float

    @property
    def has_holes(self) -> bool:
        return len(self.holes) > 0


@dataclass(frozen=True, slots=True)
class LayerPrimitives:
    """An immutable snapshot of everything a layer draws.

    Produced whole by one parse; never patched incrementally.
    """

    markers: tuple[Marker, ...] = field(default_factory=tuple)
    polylines: tuple[Polyline, ...] = field(default_factory=tuple)
    polygons: tuple[Polygon, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.markers or self.polylines or self.polygons)

    def __len__(self) -> int:
        return len(self.markers) + len(self.polylines) + len(self.polygons)
