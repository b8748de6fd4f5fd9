"""Style resolution for the default feature builders.

Merges a feature's simplestyle properties with a ``StyleDefaults``
profile.  Recognised properties:

- Points: ``marker-color``, ``marker-size`` (``small``/``medium``/``large``).
- Lines: ``stroke``, ``stroke-opacity``, ``stroke-width``.
- Polygons: ``fill``, ``fill-opacity``, plus the line properties for
  the border.

Opacity rule: an explicit opacity in ``[0, 1]`` always wins.  Without
one, the profile's opacity is applied only when the resolved colour is
fully opaque, so a colour token that already carries alpha (``#2222ee80``)
keeps it.  A ``fill-opacity`` of exactly 0 means "no fill".

All functions are pure and never raise on bad property values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from geojson_layer.core.constants import (
    MARKER_SIZE_MEDIUM,
    MARKER_SIZES,
    PROP_FILL,
    PROP_FILL_OPACITY,
    PROP_MARKER_COLOR,
    PROP_MARKER_SIZE,
    PROP_STROKE,
    PROP_STROKE_OPACITY,
    PROP_STROKE_WIDTH,
)
from geojson_layer.models.style import LineStyle, PointStyle, PolygonStyle
from geojson_layer.styling.colors import coerce_number, coerce_opacity, resolve_color

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geojson_layer.models.primitives import Color
    from geojson_layer.models.style import StyleDefaults


def resolve_point_style(properties: Mapping[str, Any], defaults: StyleDefaults) -> PointStyle:
    """Resolve marker colour and pixel size for a point feature."""
    color = resolve_color(properties.get(PROP_MARKER_COLOR)) or defaults.marker_color

    size_name = properties.get(PROP_MARKER_SIZE)
    if size_name is None:
        size_name = defaults.marker_size
    size = (
        _marker_size(size_name)
        or _marker_size(defaults.marker_size)
        or MARKER_SIZES[MARKER_SIZE_MEDIUM]
    )
    return PointStyle(color=color, size=size)


def resolve_line_style(properties: Mapping[str, Any], defaults: StyleDefaults) -> LineStyle:
    """Resolve stroke colour (with opacity) and width for a line or polygon border."""
    color = resolve_color(properties.get(PROP_STROKE)) or defaults.stroke_color
    opacity = coerce_opacity(properties.get(PROP_STROKE_OPACITY))
    if opacity is not None:
        color = color.with_alpha(opacity)
    elif color.is_opaque:
        color = color.with_alpha(defaults.stroke_opacity)

    width = coerce_number(properties.get(PROP_STROKE_WIDTH))
    return LineStyle(color=color, width=defaults.stroke_width if width is None else width)


def resolve_polygon_style(properties: Mapping[str, Any], defaults: StyleDefaults) -> PolygonStyle:
    """Resolve fill and border for a polygon feature."""
    color = resolve_color(properties.get(PROP_FILL)) or defaults.fill_color
    opacity = coerce_opacity(properties.get(PROP_FILL_OPACITY))
    fill: Color | None = color
    if opacity is not None:
        fill = None if opacity == 0.0 else color.with_alpha(opacity)
    elif color.is_opaque:
        fill = color.with_alpha(defaults.fill_opacity)

    return PolygonStyle(fill=fill, border=resolve_line_style(properties, defaults))


def _marker_size(name: object) -> float | None:
    if not isinstance(name, str):
        return None
    return MARKER_SIZES.get(name)
