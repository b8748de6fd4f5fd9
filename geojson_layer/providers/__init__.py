"""GeoJSON data sources.

Implements the data-source abstraction (Strategy pattern):
- GeoJsonProvider: Abstract base class defining the interface
- MemoryGeoJson: An already-decoded mapping
- FileGeoJson: A file on the local filesystem
- PackageResourceGeoJson: Data bundled inside an importable package
- NetworkGeoJson: A document served over HTTP(S)

``get_provider`` picks the right one from a mapping, path or URL.
"""

from geojson_layer.providers.base import GeoJsonProvider, decode_json
from geojson_layer.providers.factory import get_provider, list_schemes, register_scheme
from geojson_layer.providers.file import FileGeoJson
from geojson_layer.providers.memory import MemoryGeoJson
from geojson_layer.providers.network import NetworkGeoJson
from geojson_layer.providers.resource import PackageResourceGeoJson

__all__ = [
    "FileGeoJson",
    "GeoJsonProvider",
    "MemoryGeoJson",
    "NetworkGeoJson",
    "PackageResourceGeoJson",
    "decode_json",
    "get_provider",
    "list_schemes",
    "register_scheme",
]
