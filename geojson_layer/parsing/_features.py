"""Single-feature processing.

A feature passes through a fixed series of gates; failing any gate
drops the feature silently and yields no primitives:

1. ``type`` is ``"Feature"``.
2. ``geometry`` is an object with a string ``type``.
3. ``geometry.coordinates`` is an array.
4. The caller's filter, if any, accepts ``(geometry type, properties)``.
   The filter runs before decoding so rejected features cost nothing.
5. The geometry type is recognised and decodes.

Surviving geometry is handed to the ``FeatureBuilder``, one primitive
per decoded element.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from geojson_layer.core.constants import FEATURE
from geojson_layer.models.geometry import (
    LineStringGeometry,
    MultiLineStringGeometry,
    MultiPointGeometry,
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
)
from geojson_layer.models.primitives import LayerPrimitives
from geojson_layer.parsing._decoding import decode_geometry, is_array
from geojson_layer.styling.builders import FeatureBuilder

FeatureFilter: TypeAlias = Callable[[str, Mapping[str, Any]], bool]
"""Receives a geometry type (``"Point"``, ``"LineString"``...) and feature
properties; returns ``False`` to skip the feature."""

_EMPTY = LayerPrimitives()


def process_feature(
    feature: Mapping[str, Any],
    *,
    builder: FeatureBuilder,
    feature_filter: FeatureFilter | None = None,
) -> LayerPrimitives:
    """Turn one GeoJSON Feature into zero or more primitives."""
    if feature.get("type") != FEATURE:
        return _EMPTY

    geometry = feature.get("geometry")
    if not isinstance(geometry, Mapping):
        return _EMPTY
    geometry_type = geometry.get("type")
    if not isinstance(geometry_type, str):
        return _EMPTY
    coordinates = geometry.get("coordinates")
    if not is_array(coordinates):
        return _EMPTY

    properties = feature.get("properties")
    if not isinstance(properties, Mapping):
        properties = {}

    if feature_filter is not None and not feature_filter(geometry_type, properties):
        return _EMPTY

    decoded = decode_geometry(geometry_type, coordinates)
    if decoded is None:
        return _EMPTY

    match decoded:
        case PointGeometry(point=point):
            return LayerPrimitives(markers=(builder.build_marker(point, properties),))
        case MultiPointGeometry(points=points):
            return LayerPrimitives(
                markers=tuple(builder.build_marker(p, properties) for p in points)
            )
        case LineStringGeometry(points=points):
            return LayerPrimitives(polylines=(builder.build_polyline(points, properties),))
        case MultiLineStringGeometry(lines=lines):
            return LayerPrimitives(
                polylines=tuple(builder.build_polyline(line, properties) for line in lines)
            )
        case PolygonGeometry(rings=rings):
            polygon = builder.build_polygon(rings.outer, rings.holes, properties)
            return LayerPrimitives(polygons=(polygon,))
        case MultiPolygonGeometry(polygons=polygons):
            return LayerPrimitives(
                polygons=tuple(
                    builder.build_polygon(r.outer, r.holes, properties) for r in polygons
                )
            )
    return _EMPTY
