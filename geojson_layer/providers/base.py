"""GeoJsonProvider abstract base class.

Defines the data-source contract.  The layer interacts exclusively with
this interface; it never knows whether a document came from memory, a
file, a packaged resource, or the network.

Lifecycle:
    1. ``fetch()``:     retrieve raw JSON text (the only I/O step).
    2. ``load_data()``: fetch, decode, and check the root is GeoJSON.

Each concrete provider implements ``fetch`` and ``describe``.  Any
retrieval problem surfaces as ``DataSourceError``; a decoded document
that is not GeoJSON surfaces as ``NotAGeoJsonError``.  Retries, if
wanted, are the caller's decision (see ``GeoJsonError.retryable``).
"""

from __future__ import annotations

import abc
import json
from typing import TYPE_CHECKING, Any

from geojson_layer.core.exceptions import DataSourceError
from geojson_layer.parsing import validate_document

if TYPE_CHECKING:
    from collections.abc import Mapping


class GeoJsonProvider(abc.ABC):
    """Abstract base class for GeoJSON data sources.

    Example usage::

        provider = get_provider("https://example.com/parks.geojson")
        document = await provider.load_data()
        primitives = parse_document(document)
    """

    @abc.abstractmethod
    async def fetch(self) -> str:
        """Retrieve the raw document text.

        Raises:
            DataSourceError: If the document cannot be retrieved.
        """

    @abc.abstractmethod
    def describe(self) -> str:
        """Return a short display name (path, URL...) for logs and errors."""

    async def load_data(self) -> Mapping[str, Any]:
        """Fetch, decode and validate the document.

        Raises:
            DataSourceError: If fetching or JSON decoding fails.
            NotAGeoJsonError: If the decoded root is not GeoJSON.
        """
        text = await self.fetch()
        return validate_document(decode_json(text, self.describe()))


def decode_json(text: str, source: str) -> object:
    """Decode JSON text, mapping decode failures to ``DataSourceError``."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        msg = f"Error parsing GeoJSON: {exc}"
        raise DataSourceError(source, msg) from exc
