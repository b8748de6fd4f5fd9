"""Shared pytest fixtures for the GeoJSON layer test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample GeoJSON file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mixed_collection_geojson(data_dir: Path) -> Path:
    """Path to a FeatureCollection with one feature of every geometry family."""
    return data_dir / "01_mixed_collection.geojson"


@pytest.fixture()
def single_feature_geojson(data_dir: Path) -> Path:
    """Path to a document whose root is a bare Point Feature."""
    return data_dir / "02_single_feature.geojson"


@pytest.fixture()
def not_geojson_file(data_dir: Path) -> Path:
    """Path to a valid JSON file whose root is not a GeoJSON type."""
    return data_dir / "03_not_geojson.json"


@pytest.fixture()
def malformed_json_file(data_dir: Path) -> Path:
    """Path to a file that is not valid JSON."""
    return data_dir / "04_malformed.geojson"


# ---------------------------------------------------------------------------
# In-memory document fixtures
# ---------------------------------------------------------------------------


def point_feature(lng: float, lat: float, **properties: Any) -> dict[str, Any]:
    """Build a Point Feature with the given simplestyle properties."""
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lng, lat]},
        "properties": properties,
    }


def collection(*features: dict[str, Any]) -> dict[str, Any]:
    """Wrap features in a FeatureCollection."""
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture()
def mixed_document() -> dict[str, Any]:
    """A FeatureCollection with a point, a line and a polygon with a hole."""
    return collection(
        point_feature(-0.1276, 51.5072, **{"marker-color": "red"}),
        {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [[-0.12, 51.5], [-0.11, 51.51], [-0.10, 51.52]],
            },
            "properties": {"stroke": "#22e", "stroke-width": 4},
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [
                    [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]],
                    [[2, 2], [4, 2], [4, 4], [2, 2]],
                ],
            },
            "properties": {"fill": "green", "fill-opacity": 0.5},
        },
    )
