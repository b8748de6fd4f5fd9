"""Decoded geometry variants.

A closed set of frozen dataclasses, one per supported GeoJSON geometry
type.  Each carries only validated payload: every coordinate has been
checked and swapped to ``LatLng``, every line has at least two points,
and every ring at least three.  Multi* variants hold the elements that
decoded successfully; elements that failed are simply absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from geojson_layer.models.primitives import LatLng


@dataclass(frozen=True, slots=True)
class PolygonRings:
    """One outer ring plus zero or more hole rings."""

    outer: tuple[LatLng, ...]
    holes: tuple[tuple[LatLng, ...], ...] = ()


@dataclass(frozen=True, slots=True)
class PointGeometry:
    point: LatLng


@dataclass(frozen=True, slots=True)
class MultiPointGeometry:
    points: tuple[LatLng, ...]


@dataclass(frozen=True, slots=True)
class LineStringGeometry:
    points: tuple[LatLng, ...]


@dataclass(frozen=True, slots=True)
class MultiLineStringGeometry:
    lines: tuple[tuple[LatLng, ...], ...]


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    rings: PolygonRings


@dataclass(frozen=True, slots=True)
class MultiPolygonGeometry:
    polygons: tuple[PolygonRings, ...]


Geometry: TypeAlias = (
    PointGeometry
    | MultiPointGeometry
    | LineStringGeometry
    | MultiLineStringGeometry
    | PolygonGeometry
    | MultiPolygonGeometry
)
