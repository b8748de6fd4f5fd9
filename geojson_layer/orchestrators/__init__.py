"""Layer orchestration.

Manages the load-and-parse lifecycle of a GeoJSON layer:
1. Fetch the document through its provider
2. Parse it into a primitives snapshot
3. Publish the snapshot (discarding stale or failed loads)
"""

from geojson_layer.orchestrators.layer import (
    GeoJsonLayer,
    LoadResult,
    LoadStatus,
    Renderer,
)

__all__ = ["GeoJsonLayer", "LoadResult", "LoadStatus", "Renderer"]
