"""Data models.

Defines the data structures used throughout the layer:
- Primitives: LatLng, Color, Marker, Polyline, Polygon, LayerPrimitives
- Geometry: decoded geometry variants (PointGeometry ... MultiPolygonGeometry)
- Style: StyleDefaults profiles and resolved per-feature styles
"""

from geojson_layer.models.geometry import (
    Geometry,
    LineStringGeometry,
    MultiLineStringGeometry,
    MultiPointGeometry,
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
    PolygonRings,
)
from geojson_layer.models.primitives import (
    Color,
    LatLng,
    LayerPrimitives,
    Marker,
    Polygon,
    Polyline,
)
from geojson_layer.models.style import (
    INITIAL,
    LEAFLET,
    STYLE_PROFILES,
    LineStyle,
    ModelValidationError,
    PointStyle,
    PolygonStyle,
    StyleDefaults,
)

__all__ = [
    "INITIAL",
    "LEAFLET",
    "STYLE_PROFILES",
    "Color",
    "Geometry",
    "LatLng",
    "LayerPrimitives",
    "LineStringGeometry",
    "LineStyle",
    "Marker",
    "ModelValidationError",
    "MultiLineStringGeometry",
    "MultiPointGeometry",
    "MultiPolygonGeometry",
    "PointGeometry",
    "PointStyle",
    "Polygon",
    "PolygonGeometry",
    "PolygonRings",
    "PolygonStyle",
    "Polyline",
    "StyleDefaults",
]
