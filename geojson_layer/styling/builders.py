"""Primitive builders: turn decoded geometry + properties into primitives.

The parser never styles anything itself; it hands every decoded
geometry to a ``FeatureBuilder``.  ``DefaultFeatureBuilder`` applies the
simplestyle resolver.  To customise one geometry family, subclass it and
override that family's method; the others keep default styling::

    class RedPins(DefaultFeatureBuilder):
        def build_marker(self, point, properties):
            marker = default_on_point(point, properties, defaults=self.defaults)
            return dataclasses.replace(marker, color=Color.from_argb(0xFFFF0000))

``CallbackFeatureBuilder`` does the same for plain callables.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from geojson_layer.models.primitives import Marker, Polygon, Polyline
from geojson_layer.models.style import INITIAL
from geojson_layer.styling.resolver import (
    resolve_line_style,
    resolve_point_style,
    resolve_polygon_style,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from geojson_layer.models.primitives import LatLng
    from geojson_layer.models.style import StyleDefaults

    OnPoint = Callable[[LatLng, Mapping[str, Any]], Marker]
    OnPolyline = Callable[[Sequence[LatLng], Mapping[str, Any]], Polyline]
    OnPolygon = Callable[
        [Sequence[LatLng], Sequence[Sequence[LatLng]], Mapping[str, Any]], Polygon
    ]


# ---------------------------------------------------------------------------
# Default builders
# ---------------------------------------------------------------------------


def default_on_point(
    point: LatLng,
    properties: Mapping[str, Any],
    *,
    defaults: StyleDefaults | None = None,
) -> Marker:
    """Build a marker styled from ``marker-color`` and ``marker-size``."""
    style = resolve_point_style(properties, defaults or INITIAL)
    return Marker(point=point, color=style.color, size=style.size)


def default_on_polyline(
    points: Sequence[LatLng],
    properties: Mapping[str, Any],
    *,
    defaults: StyleDefaults | None = None,
) -> Polyline:
    """Build a polyline styled from ``stroke``, ``stroke-opacity`` and ``stroke-width``."""
    style = resolve_line_style(properties, defaults or INITIAL)
    return Polyline(points=tuple(points), color=style.color, stroke_width=style.width)


def default_on_polygon(
    points: Sequence[LatLng],
    holes: Sequence[Sequence[LatLng]],
    properties: Mapping[str, Any],
    *,
    defaults: StyleDefaults | None = None,
) -> Polygon:
    """Build a polygon styled from ``fill``/``fill-opacity`` and the stroke properties."""
    style = resolve_polygon_style(properties, defaults or INITIAL)
    return Polygon(
        points=tuple(points),
        holes=tuple(tuple(ring) for ring in holes),
        fill_color=style.fill,
        border_color=style.border.color,
        border_stroke_width=style.border.width,
    )


# ---------------------------------------------------------------------------
# Builder interface
# ---------------------------------------------------------------------------


class FeatureBuilder(abc.ABC):
    """Builds one primitive per decoded geometry element.

    Implementations receive validated geometry and the feature's raw
    properties, and are fully responsible for styling.
    """

    @abc.abstractmethod
    def build_marker(self, point: LatLng, properties: Mapping[str, Any]) -> Marker:
        """Build a marker for a ``Point`` (or one ``MultiPoint`` element)."""

    @abc.abstractmethod
    def build_polyline(
        self, points: Sequence[LatLng], properties: Mapping[str, Any]
    ) -> Polyline:
        """Build a polyline for a ``LineString`` (or one ``MultiLineString`` element)."""

    @abc.abstractmethod
    def build_polygon(
        self,
        points: Sequence[LatLng],
        holes: Sequence[Sequence[LatLng]],
        properties: Mapping[str, Any],
    ) -> Polygon:
        """Build a polygon for a ``Polygon`` (or one ``MultiPolygon`` element)."""


class DefaultFeatureBuilder(FeatureBuilder):
    """Styles every family with the simplestyle resolver and a defaults profile."""

    def __init__(self, defaults: StyleDefaults | None = None) -> None:
        self._defaults = defaults or INITIAL

    @property
    def defaults(self) -> StyleDefaults:
        return self._defaults

    def build_marker(self, point: LatLng, properties: Mapping[str, Any]) -> Marker:
        return default_on_point(point, properties, defaults=self._defaults)

    def build_polyline(
        self, points: Sequence[LatLng], properties: Mapping[str, Any]
    ) -> Polyline:
        return default_on_polyline(points, properties, defaults=self._defaults)

    def build_polygon(
        self,
        points: Sequence[LatLng],
        holes: Sequence[Sequence[LatLng]],
        properties: Mapping[str, Any],
    ) -> Polygon:
        return default_on_polygon(points, holes, properties, defaults=self._defaults)


class CallbackFeatureBuilder(DefaultFeatureBuilder):
    """Adapts optional per-family callables; unset families use default styling."""

    def __init__(
        self,
        *,
        on_point: OnPoint | None = None,
        on_polyline: OnPolyline | None = None,
        on_polygon: OnPolygon | None = None,
        defaults: StyleDefaults | None = None,
    ) -> None:
        super().__init__(defaults)
        self._on_point = on_point
        self._on_polyline = on_polyline
        self._on_polygon = on_polygon

    def build_marker(self, point: LatLng, properties: Mapping[str, Any]) -> Marker:
        if self._on_point is not None:
            return self._on_point(point, properties)
        return super().build_marker(point, properties)

    def build_polyline(
        self, points: Sequence[LatLng], properties: Mapping[str, Any]
    ) -> Polyline:
        if self._on_polyline is not None:
            return self._on_polyline(points, properties)
        return super().build_polyline(points, properties)

    def build_polygon(
        self,
        points: Sequence[LatLng],
        holes: Sequence[Sequence[LatLng]],
        properties: Mapping[str, Any],
    ) -> Polygon:
        if self._on_polygon is not None:
            return self._on_polygon(points, holes, properties)
        return super().build_polygon(points, holes, properties)
