"""Feature styling.

- colors: colour-name/hex and numeric token parsing
- resolver: simplestyle property resolution against a defaults profile
- builders: default primitive builders and the ``FeatureBuilder`` override interface
"""

from geojson_layer.styling.builders import (
    CallbackFeatureBuilder,
    DefaultFeatureBuilder,
    FeatureBuilder,
    default_on_point,
    default_on_polygon,
    default_on_polyline,
)
from geojson_layer.styling.colors import (
    coerce_number,
    coerce_opacity,
    color_names,
    resolve_color,
)
from geojson_layer.styling.resolver import (
    resolve_line_style,
    resolve_point_style,
    resolve_polygon_style,
)

__all__ = [
    "CallbackFeatureBuilder",
    "DefaultFeatureBuilder",
    "FeatureBuilder",
    "coerce_number",
    "coerce_opacity",
    "color_names",
    "default_on_point",
    "default_on_polygon",
    "default_on_polyline",
    "resolve_color",
    "resolve_line_style",
    "resolve_point_style",
    "resolve_polygon_style",
]
