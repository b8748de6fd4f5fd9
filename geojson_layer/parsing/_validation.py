"""Root-document validation.

The document's overall shape is a contract the caller must satisfy:
the root must be a JSON object whose ``type`` is ``FeatureCollection``
or ``Feature``.  Anything else means the source is not GeoJSON at all
and is reported as ``NotAGeoJsonError``.  Everything below the root is
validated leniently, feature by feature, elsewhere.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from geojson_layer.core.constants import ROOT_TYPES
from geojson_layer.core.exceptions import NotAGeoJsonError


def validate_document(data: object) -> Mapping[str, Any]:
    """Check that *data* is a GeoJSON root and return it.

    Raises:
        NotAGeoJsonError: If *data* is not a mapping, or its ``type`` is
            neither ``FeatureCollection`` nor ``Feature``.
    """
    if not isinstance(data, Mapping):
        msg = f"Contents are not a GeoJSON: expected a JSON object, got {type(data).__name__}"
        raise NotAGeoJsonError(msg)

    root_type = data.get("type")
    if not isinstance(root_type, str) or root_type not in ROOT_TYPES:
        msg = f"Root object type is not valid for a GeoJSON: {root_type!r}"
        raise NotAGeoJsonError(msg)

    return data
