"""Geometry decoding helpers.

Responsibilities:
- Raw ``[lng, lat, ...]`` array → ``LatLng``
- LineString arrays → validated point tuples (>= 2 points)
- Polygon ring arrays → outer ring + holes (>= 3 points per ring)
- Geometry type dispatch, including Multi* fan-out

Every decoder returns ``None`` for input it cannot use; nothing here
raises on malformed data.  Failures are contained at the smallest
level possible: a bad coordinate drops that coordinate, a bad hole
drops that hole, a bad Multi* element drops that element.  Only a bad
outer ring drops a whole polygon.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

from geojson_layer.core.constants import (
    LINE_STRING,
    MIN_LINE_POINTS,
    MIN_RING_POINTS,
    MULTI_LINE_STRING,
    MULTI_POINT,
    MULTI_POLYGON,
    POINT,
    POLYGON,
)
from geojson_layer.models.geometry import (
    LineStringGeometry,
    MultiLineStringGeometry,
    MultiPointGeometry,
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
    PolygonRings,
)
from geojson_layer.models.primitives import LatLng

if TYPE_CHECKING:
    from collections.abc import Callable

    from geojson_layer.models.geometry import Geometry

_T = TypeVar("_T")


def is_array(value: object) -> bool:
    """Whether *value* is a decoded JSON array."""
    return isinstance(value, list | tuple)


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


# ---------------------------------------------------------------------------
# Coordinates, lines, rings
# ---------------------------------------------------------------------------


def decode_coordinate(raw: object) -> LatLng | None:
    """Decode a GeoJSON position into ``LatLng``.

    The first two numeric entries are taken as longitude and latitude;
    anything else in the array (elevation, stray strings) is ignored.
    """
    if not is_array(raw):
        return None
    numbers = [value for value in raw if _is_number(value)]  # type: ignore[attr-defined]
    if len(numbers) < 2:
        return None
    return LatLng(lat=float(numbers[1]), lng=float(numbers[0]))


def decode_line_string(raw: object) -> tuple[LatLng, ...] | None:
    """Decode a LineString coordinate array, keeping only valid positions.

    Returns ``None`` when fewer than two valid positions remain.
    """
    if not is_array(raw):
        return None
    points = tuple(
        point
        for point in (decode_coordinate(item) for item in raw)  # type: ignore[attr-defined]
        if point is not None
    )
    if len(points) < MIN_LINE_POINTS:
        return None
    return points


def decode_polygon_rings(raw: object) -> PolygonRings | None:
    """Decode Polygon ring arrays into an outer ring and holes.

    The first ring is the outer boundary and is mandatory: if it has
    fewer than three valid positions the polygon is rejected.  Later
    rings are holes and are dropped individually when invalid.
    """
    if not is_array(raw):
        return None
    rings = [ring for ring in raw if is_array(ring)]  # type: ignore[attr-defined]
    if not rings:
        return None

    outer = _decode_ring(rings[0])
    if outer is None:
        return None

    holes = tuple(hole for hole in (_decode_ring(ring) for ring in rings[1:]) if hole is not None)
    return PolygonRings(outer=outer, holes=holes)


def _decode_ring(raw: object) -> tuple[LatLng, ...] | None:
    points = decode_line_string(raw)
    if points is None or len(points) < MIN_RING_POINTS:
        return None
    return points


# ---------------------------------------------------------------------------
# Geometry dispatch
# ---------------------------------------------------------------------------


def _decode_point(coordinates: object) -> PointGeometry | None:
    point = decode_coordinate(coordinates)
    return None if point is None else PointGeometry(point)


def _decode_multi_point(coordinates: object) -> MultiPointGeometry:
    return MultiPointGeometry(_decode_each(coordinates, decode_coordinate))


def _decode_line(coordinates: object) -> LineStringGeometry | None:
    points = decode_line_string(coordinates)
    return None if points is None else LineStringGeometry(points)


def _decode_multi_line(coordinates: object) -> MultiLineStringGeometry:
    return MultiLineStringGeometry(_decode_each(coordinates, decode_line_string))


def _decode_polygon(coordinates: object) -> PolygonGeometry | None:
    rings = decode_polygon_rings(coordinates)
    return None if rings is None else PolygonGeometry(rings)


def _decode_multi_polygon(coordinates: object) -> MultiPolygonGeometry:
    return MultiPolygonGeometry(_decode_each(coordinates, decode_polygon_rings))


def _decode_each(coordinates: object, decode: Callable[[object], _T | None]) -> tuple[_T, ...]:
    """Decode every array element independently, dropping the failures."""
    if not is_array(coordinates):
        return ()
    decoded = (decode(item) for item in coordinates if is_array(item))  # type: ignore[attr-defined]
    return tuple(item for item in decoded if item is not None)


_DECODERS: dict[str, Callable[[object], Geometry | None]] = {
    POINT: _decode_point,
    MULTI_POINT: _decode_multi_point,
    LINE_STRING: _decode_line,
    MULTI_LINE_STRING: _decode_multi_line,
    POLYGON: _decode_polygon,
    MULTI_POLYGON: _decode_multi_polygon,
}


def decode_geometry(geometry_type: str, coordinates: object) -> Geometry | None:
    """Decode *coordinates* according to *geometry_type*.

    Returns ``None`` for an unrecognised type or when a single geometry
    fails to decode.  Multi* types always decode; their element tuple
    may be empty.
    """
    decoder = _DECODERS.get(geometry_type)
    if decoder is None:
        return None
    return decoder(coordinates)
