"""Tests for the document walker and per-feature processing.

Covers:
- Root validation (the only structural failure)
- FeatureCollection and bare Feature roots
- Silent skipping of malformed features, geometries and entries
- Style properties flowing through to primitives
- Feature filters and custom builders
- Snapshot replacement across calls
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from geojson_layer.core.exceptions import NotAGeoJsonError
from geojson_layer.models.primitives import Color, LatLng, Marker
from geojson_layer.models.style import INITIAL, LEAFLET
from geojson_layer.parsing import parse_document, process_feature
from geojson_layer.providers import decode_json
from geojson_layer.styling.builders import CallbackFeatureBuilder, DefaultFeatureBuilder

SQUARE = [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]
HOLE = [[2, 2], [4, 2], [4, 4], [2, 2]]


def _feature(geometry_type: str, coordinates: Any, **properties: Any) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": geometry_type, "coordinates": coordinates},
        "properties": properties,
    }


def _collection(*features: Any) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


class TestRootValidation:
    """Only the root shape can fail a parse."""

    @pytest.mark.parametrize(
        "root",
        [
            {},
            {"type": "Topology"},
            {"type": "Point", "coordinates": [1, 2]},
            {"type": ["FeatureCollection"]},
            [],
            "FeatureCollection",
            None,
            42,
        ],
    )
    def test_not_geojson(self, root: object) -> None:
        with pytest.raises(NotAGeoJsonError):
            parse_document(root)

    def test_error_is_structured(self) -> None:
        with pytest.raises(NotAGeoJsonError) as exc_info:
            parse_document({})
        err = exc_info.value
        assert err.code == "NOT_GEOJSON"
        assert err.category == "validation"
        assert err.retryable is False

    def test_empty_collection(self) -> None:
        result = parse_document({"type": "FeatureCollection", "features": []})
        assert result.markers == ()
        assert result.polylines == ()
        assert result.polygons == ()
        assert result.is_empty

    @pytest.mark.parametrize("features", [None, "many", {"0": {}}])
    def test_collection_without_feature_array(self, features: object) -> None:
        result = parse_document({"type": "FeatureCollection", "features": features})
        assert result.is_empty

    def test_collection_missing_features_key(self) -> None:
        assert parse_document({"type": "FeatureCollection"}).is_empty


class TestDocumentShapes:
    """Supported root shapes and geometry families."""

    def test_bare_feature_root(self) -> None:
        result = parse_document(_feature("Point", [2.35, 48.85]))
        assert len(result.markers) == 1
        assert result.markers[0].point == LatLng(48.85, 2.35)

    def test_line_string_coordinates_swapped(self) -> None:
        result = parse_document(_collection(_feature("LineString", [[24.7, 59.4], [24.8, 59.401]])))
        assert len(result.polylines) == 1
        assert result.polylines[0].points == (LatLng(59.4, 24.7), LatLng(59.401, 24.8))

    def test_line_string_style(self) -> None:
        doc = _collection(
            _feature(
                "LineString",
                [[24.7, 59.4], [24.8, 59.401]],
                stroke="#22e",
                **{"stroke-width": 11},
            )
        )
        line = parse_document(doc).polylines[0]
        assert line.stroke_width == 11.0
        assert line.color == Color.from_argb(0xFF2222EE)

    def test_mixed_document(self, mixed_document: dict[str, Any]) -> None:
        result = parse_document(mixed_document)
        assert len(result) == 3
        assert result.markers[0].color == Color.from_argb(0xFFF44336)
        assert result.polylines[0].stroke_width == 4.0
        assert result.polygons[0].has_holes

    def test_multi_geometries_fan_out(self) -> None:
        doc = _collection(
            _feature("MultiPoint", [[0, 0], [1, 1], [2, 2]]),
            _feature("MultiLineString", [[[0, 0], [1, 1]], [[2, 2], [3, 3]]]),
            _feature("MultiPolygon", [[SQUARE], [SQUARE, HOLE]]),
        )
        result = parse_document(doc)
        assert len(result.markers) == 3
        assert len(result.polylines) == 2
        assert len(result.polygons) == 2
        assert result.polygons[1].holes

    def test_document_order_preserved(self) -> None:
        doc = _collection(
            _feature("Point", [0, 1]),
            _feature("Point", [0, 2]),
            _feature("Point", [0, 3]),
        )
        lats = [m.point.lat for m in parse_document(doc).markers]
        assert lats == [1.0, 2.0, 3.0]


class TestSilentSkipping:
    """Malformed features are dropped without failing the document."""

    @pytest.mark.parametrize("bad_number", ["1" + "0" * 400, "1e400", "NaN", "-Infinity"])
    def test_out_of_range_coordinate_skips_only_its_feature(self, bad_number: str) -> None:
        text = (
            '{"type": "FeatureCollection", "features": ['
            '{"type": "Feature", "geometry": {"type": "Point", "coordinates": ['
            + bad_number
            + ', 2]}},'
            '{"type": "Feature", "geometry": {"type": "Point", "coordinates": [24.7, 59.4]}}'
            "]}"
        )
        result = parse_document(decode_json(text, "<test>"))
        assert len(result.markers) == 1
        assert result.markers[0].point == LatLng(59.4, 24.7)

    def test_malformed_features_skipped(self) -> None:
        doc = _collection(
            "not a feature",
            None,
            {"type": "Feature"},
            {"type": "Feature", "geometry": None},
            {"type": "Feature", "geometry": {"type": 5, "coordinates": [0, 0]}},
            {"type": "Feature", "geometry": {"type": "Point"}},
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": "0,0"}},
            {"type": "Thing", "geometry": {"type": "Point", "coordinates": [0, 0]}},
            _feature("GeometryCollection", []),
            _feature("Point", ["a", "b"]),
            _feature("Point", [5, 6]),
        )
        result = parse_document(doc)
        assert len(result) == 1
        assert result.markers[0].point == LatLng(6.0, 5.0)

    def test_polygon_with_bad_outer_ring(self) -> None:
        doc = _collection(_feature("Polygon", [[[0, 0], [1, 1]], HOLE]))
        assert parse_document(doc).polygons == ()

    def test_multi_polygon_with_one_bad_element(self) -> None:
        doc = _collection(_feature("MultiPolygon", [[SQUARE], [[[0, 0], [1, 1]]]]))
        assert len(parse_document(doc).polygons) == 1

    def test_non_mapping_properties_treated_as_empty(self) -> None:
        feature = _feature("Point", [0, 0])
        feature["properties"] = ["marker-color", "red"]
        marker = parse_document(feature).markers[0]
        assert marker.color == INITIAL.marker_color

    def test_missing_properties(self) -> None:
        feature = _feature("LineString", [[0, 0], [1, 1]])
        del feature["properties"]
        assert len(parse_document(feature).polylines) == 1


class TestPolygonFill:
    """``fill-opacity: 0`` removes the fill but keeps the border."""

    def test_zero_fill_opacity(self) -> None:
        doc = _collection(
            _feature("Polygon", [SQUARE], **{"fill-opacity": 0, "stroke": "#22e"})
        )
        polygon = parse_document(doc).polygons[0]
        assert polygon.fill_color is None
        assert polygon.border_color == Color.from_argb(0xFF2222EE)
        assert polygon.border_stroke_width == INITIAL.stroke_width


class TestFeatureFilter:
    """Caller filters decide which features are built."""

    def test_exclude_points(self, mixed_document: dict[str, Any]) -> None:
        result = parse_document(
            mixed_document,
            feature_filter=lambda geometry_type, _props: geometry_type != "Point",
        )
        assert result.markers == ()
        assert len(result.polylines) == 1
        assert len(result.polygons) == 1

    def test_filter_sees_properties(self) -> None:
        doc = _collection(
            _feature("Point", [0, 0], visible=True),
            _feature("Point", [1, 1], visible=False),
        )
        result = parse_document(
            doc, feature_filter=lambda _type, props: bool(props.get("visible"))
        )
        assert len(result.markers) == 1

    def test_filter_runs_before_decoding(self) -> None:
        seen: list[str] = []

        def record(geometry_type: str, _props: Any) -> bool:
            seen.append(geometry_type)
            return False

        doc = _collection(_feature("Point", ["bad"]), _feature("Circle", [0, 0]))
        assert parse_document(doc, feature_filter=record).is_empty
        assert seen == ["Point", "Circle"]


class TestBuilders:
    """Custom builders receive decoded geometry and raw properties."""

    def test_profile_builder(self) -> None:
        doc = _collection(_feature("Polygon", [SQUARE]))
        polygon = parse_document(doc, builder=DefaultFeatureBuilder(LEAFLET)).polygons[0]
        assert polygon.border_color == LEAFLET.stroke_color
        assert polygon.border_stroke_width == 3.0

    def test_callback_builder_receives_properties(self) -> None:
        received: list[Any] = []

        def on_point(point: LatLng, properties: Any) -> Marker:
            received.append(dict(properties))
            return Marker(point=point, color=Color(1, 2, 3), size=9.0)

        doc = _collection(_feature("MultiPoint", [[0, 0], [1, 1]], name="pair"))
        result = parse_document(doc, builder=CallbackFeatureBuilder(on_point=on_point))
        assert [m.size for m in result.markers] == [9.0, 9.0]
        assert received == [{"name": "pair"}, {"name": "pair"}]

    def test_process_feature_directly(self) -> None:
        produced = process_feature(
            _feature("LineString", [[0, 0], [1, 1]]), builder=DefaultFeatureBuilder()
        )
        assert len(produced.polylines) == 1
        assert produced.markers == ()


class TestSnapshotReplacement:
    """Every parse produces a fresh, independent snapshot."""

    def test_second_parse_replaces_first(self) -> None:
        first = parse_document(_collection(_feature("Point", [0, 0]), _feature("Point", [1, 1])))
        second = parse_document(_collection(_feature("LineString", [[0, 0], [1, 1]])))
        assert len(first.markers) == 2
        assert second.markers == ()
        assert len(second.polylines) == 1

    def test_snapshot_is_immutable(self) -> None:
        result = parse_document(_collection(_feature("Point", [0, 0])))
        assert isinstance(result.markers, tuple)
        with pytest.raises(AttributeError):
            result.markers = ()  # type: ignore[misc]


class TestSampleFiles:
    """Documents on disk parse end to end."""

    def test_mixed_collection_file(self, mixed_collection_geojson: Path) -> None:
        doc = json.loads(mixed_collection_geojson.read_text(encoding="utf-8"))
        result = parse_document(doc)
        assert len(result) == 3
        assert result.markers[0].size == 48.0
        assert result.polylines[0].stroke_width == 5.0
        assert result.polygons[0].fill_color == Color.from_argb(0xFF00FF00).with_alpha(0.25)
