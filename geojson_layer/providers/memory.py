"""In-memory provider for documents that are already decoded."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from geojson_layer.parsing import validate_document
from geojson_layer.providers.base import GeoJsonProvider

if TYPE_CHECKING:
    from collections.abc import Mapping


class MemoryGeoJson(GeoJsonProvider):
    """Serves a decoded GeoJSON mapping.

    Two instances are equal only if they are the same object, so handing
    a layer a new ``MemoryGeoJson`` always triggers a reload, even when
    the wrapped data is equal.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def describe(self) -> str:
        return "<memory>"

    async def fetch(self) -> str:
        return json.dumps(self._data)

    async def load_data(self) -> Mapping[str, Any]:
        return validate_document(self._data)
