"""Shared constants, single source of truth.

Centralises GeoJSON type tags, the recognised simplestyle property
names, and marker pixel sizes so no module repeats string literals.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# GeoJSON type tags (RFC 7946)
# ---------------------------------------------------------------------------

FEATURE_COLLECTION = "FeatureCollection"
FEATURE = "Feature"

ROOT_TYPES: frozenset[str] = frozenset({FEATURE_COLLECTION, FEATURE})
"""Root ``type`` values that make a document a GeoJSON document."""

POINT = "Point"
MULTI_POINT = "MultiPoint"
LINE_STRING = "LineString"
MULTI_LINE_STRING = "MultiLineString"
POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"

# ---------------------------------------------------------------------------
# Geometry minimums
# ---------------------------------------------------------------------------

MIN_LINE_POINTS = 2
MIN_RING_POINTS = 3

# ---------------------------------------------------------------------------
# simplestyle-spec property subset
# ---------------------------------------------------------------------------

PROP_MARKER_COLOR = "marker-color"
PROP_MARKER_SIZE = "marker-size"
PROP_STROKE = "stroke"
PROP_STROKE_OPACITY = "stroke-opacity"
PROP_STROKE_WIDTH = "stroke-width"
PROP_FILL = "fill"
PROP_FILL_OPACITY = "fill-opacity"

# ---------------------------------------------------------------------------
# Marker sizes (pixels)
# ---------------------------------------------------------------------------

MARKER_SIZE_MEDIUM = "medium"

MARKER_SIZES: dict[str, float] = {
    "small": 20.0,
    "medium": 36.0,
    "large": 48.0,
}

# A colour whose alpha exceeds this is treated as fully opaque.
OPAQUE_ALPHA_THRESHOLD = 0.99
