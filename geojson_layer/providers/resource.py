"""Provider for GeoJSON documents bundled inside an importable package."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from importlib import resources

from geojson_layer.core.exceptions import DataSourceError
from geojson_layer.providers.base import GeoJsonProvider


@dataclass(frozen=True)
class PackageResourceGeoJson(GeoJsonProvider):
    """Reads package data via ``importlib.resources``.

    Attributes:
        package: Dotted name of the package holding the resource.
        resource: ``/``-separated path of the resource inside the package.
        encoding: Text encoding of the resource.
    """

    package: str
    resource: str
    encoding: str = "utf-8"

    def describe(self) -> str:
        return f"resource://{self.package}/{self.resource}"

    async def fetch(self) -> str:
        try:
            return await asyncio.to_thread(self._read)
        except (ImportError, OSError, TypeError, UnicodeDecodeError, ValueError) as exc:
            msg = f"Error loading or parsing GeoJSON from package resources: {exc}"
            raise DataSourceError(self.describe(), msg) from exc

    def _read(self) -> str:
        parts = [part for part in self.resource.split("/") if part]
        return resources.files(self.package).joinpath(*parts).read_text(encoding=self.encoding)
