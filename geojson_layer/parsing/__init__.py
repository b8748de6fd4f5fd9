"""GeoJSON document parsing: a composable pipeline.

Walks a decoded GeoJSON document and produces the layer's drawable
primitives.

The parsing pipeline is split into focused stages:
- **_validation**: root-object check (the only stage that raises)
- **_decoding**: coordinates, lines, rings and geometry-type dispatch
- **_features**: per-feature gates, filter, and builder hand-off

Supported structures:
- FeatureCollection with any number of features
- A bare Feature as the root
- Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon
- Polygon holes (best effort; the outer ring is mandatory)

Error policy:
- Not a GeoJSON root: ``NotAGeoJsonError``
- Anything wrong inside a feature: the feature (or the smallest failing
  part of it) is skipped and parsing continues
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from geojson_layer.core.constants import FEATURE_COLLECTION
from geojson_layer.models.primitives import LayerPrimitives
from geojson_layer.parsing._decoding import (
    decode_coordinate,
    decode_geometry,
    decode_line_string,
    decode_polygon_rings,
    is_array,
)
from geojson_layer.parsing._features import FeatureFilter, process_feature
from geojson_layer.parsing._validation import validate_document
from geojson_layer.styling.builders import DefaultFeatureBuilder

if TYPE_CHECKING:
    from geojson_layer.models.primitives import Marker, Polygon, Polyline
    from geojson_layer.styling.builders import FeatureBuilder

logger = logging.getLogger("geojson_layer.parsing")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "FeatureFilter",
    "decode_coordinate",
    "decode_geometry",
    "decode_line_string",
    "decode_polygon_rings",
    "parse_document",
    "process_feature",
    "validate_document",
]


def parse_document(
    root: object,
    *,
    builder: FeatureBuilder | None = None,
    feature_filter: FeatureFilter | None = None,
) -> LayerPrimitives:
    """Parse a decoded GeoJSON document into a fresh primitives snapshot.

    Each call builds its result from scratch; nothing from a previous
    call survives into the new snapshot.

    Args:
        root: The decoded JSON root.
        builder: Builds primitives from decoded geometry.  Defaults to
            ``DefaultFeatureBuilder()`` (the ``INITIAL`` style profile).
        feature_filter: Optional ``(geometry_type, properties) -> bool``;
            features for which it returns ``False`` are skipped.

    Returns:
        Markers, polylines and polygons, in document order.

    Raises:
        NotAGeoJsonError: If *root* is not a mapping or its ``type`` is
            neither ``FeatureCollection`` nor ``Feature``.
    """
    data = validate_document(root)
    if builder is None:
        builder = DefaultFeatureBuilder()

    markers: list[Marker] = []
    polylines: list[Polyline] = []
    polygons: list[Polygon] = []

    for feature in _iter_features(data):
        produced = process_feature(feature, builder=builder, feature_filter=feature_filter)
        markers.extend(produced.markers)
        polylines.extend(produced.polylines)
        polygons.extend(produced.polygons)

    logger.info(
        "Parsed GeoJSON %s: %d marker(s), %d polyline(s), %d polygon(s)",
        data.get("type"),
        len(markers),
        len(polylines),
        len(polygons),
    )
    return LayerPrimitives(
        markers=tuple(markers),
        polylines=tuple(polylines),
        polygons=tuple(polygons),
    )


def _iter_features(data: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    """Return the feature objects to process, skipping non-object entries."""
    features = data.get("features")
    if data.get("type") == FEATURE_COLLECTION or is_array(features):
        if not is_array(features):
            return []
        return [f for f in features if isinstance(f, Mapping)]  # type: ignore[union-attr]
    return [data]
