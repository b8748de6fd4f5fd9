"""Provider factory: picks a data source for a caller-supplied source value.

Mappings become ``MemoryGeoJson`` and paths become ``FileGeoJson``.
Strings containing ``://`` are dispatched on their URL scheme through a
registry of loaders; other strings are treated as file paths.

Built-in schemes:

- ``http``, ``https``: ``NetworkGeoJson``
- ``file``:           ``FileGeoJson``
- ``resource``:       ``PackageResourceGeoJson`` from
  ``resource://<package>/<path/inside/package>``

Usage::

    from geojson_layer.providers.factory import get_provider

    provider = get_provider("https://example.com/trails.geojson")
    document = await provider.load_data()
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlsplit

from geojson_layer.core.config import LayerConfig
from geojson_layer.core.exceptions import DataSourceError
from geojson_layer.providers.base import GeoJsonProvider
from geojson_layer.providers.file import FileGeoJson
from geojson_layer.providers.memory import MemoryGeoJson
from geojson_layer.providers.network import NetworkGeoJson
from geojson_layer.providers.resource import PackageResourceGeoJson

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Scheme registry
# ---------------------------------------------------------------------------

# Each entry maps a URL scheme to a callable building the provider from the
# full URL and the active configuration.

_SCHEME_REGISTRY: dict[str, Callable[[str, LayerConfig], GeoJsonProvider]] = {}


def _register_builtin_schemes() -> None:
    """Register the built-in scheme loaders."""

    def _network(url: str, config: LayerConfig) -> GeoJsonProvider:
        return NetworkGeoJson(
            url,
            timeout_s=config.http_timeout_s,
            follow_redirects=config.follow_redirects,
        )

    def _file(url: str, config: LayerConfig) -> GeoJsonProvider:
        return FileGeoJson(Path(unquote(urlsplit(url).path)))

    def _resource(url: str, config: LayerConfig) -> GeoJsonProvider:
        parts = urlsplit(url)
        if not parts.netloc or not parts.path.strip("/"):
            msg = "Resource URLs must look like resource://<package>/<path>"
            raise DataSourceError(url, msg)
        return PackageResourceGeoJson(parts.netloc, unquote(parts.path.lstrip("/")))

    _SCHEME_REGISTRY["http"] = _network
    _SCHEME_REGISTRY["https"] = _network
    _SCHEME_REGISTRY["file"] = _file
    _SCHEME_REGISTRY["resource"] = _resource


def _ensure_registry() -> None:
    """Initialise the scheme registry once (idempotent)."""
    if not _SCHEME_REGISTRY:
        _register_builtin_schemes()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_scheme(
    scheme: str,
    loader: Callable[[str, LayerConfig], GeoJsonProvider],
) -> None:
    """Register a provider loader for a URL scheme.

    Args:
        scheme: URL scheme without ``://`` (case-insensitive).
        loader: Callable receiving the full URL and the active config.

    Raises:
        ValueError: If the scheme is empty.
    """
    if not scheme:
        msg = "Scheme must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _SCHEME_REGISTRY[scheme.lower()] = loader
    logger.debug("Registered data source scheme: %s", scheme)


def list_schemes() -> list[str]:
    """Return all registered URL schemes, sorted."""
    _ensure_registry()
    return sorted(_SCHEME_REGISTRY)


def get_provider(
    source: GeoJsonProvider | Mapping[str, object] | os.PathLike[str] | str,
    *,
    config: LayerConfig | None = None,
) -> GeoJsonProvider:
    """Return a provider for *source*.

    Args:
        source: An existing provider (returned unchanged), a decoded
            mapping, a filesystem path, or a URL/path string.
        config: Supplies network settings; defaults to ``LayerConfig()``.

    Raises:
        DataSourceError: If the URL scheme is not registered or the
            source type is not supported.
    """
    if isinstance(source, GeoJsonProvider):
        return source
    if isinstance(source, Mapping):
        return MemoryGeoJson(source)
    if isinstance(source, os.PathLike):
        return FileGeoJson(Path(source))
    if not isinstance(source, str):
        msg = f"Unsupported data source type: {type(source).__name__}"
        raise DataSourceError(repr(source), msg)

    scheme, sep, _ = source.partition("://")
    if not sep:
        return FileGeoJson(Path(source))

    _ensure_registry()
    loader = _SCHEME_REGISTRY.get(scheme.lower())
    if loader is None:
        available = ", ".join(sorted(_SCHEME_REGISTRY))
        msg = f"Unknown data source scheme: {scheme!r}. Available: {available}"
        raise DataSourceError(source, msg)

    provider = loader(source, config or LayerConfig())
    logger.info("Created data source: %s", provider.describe())
    return provider
