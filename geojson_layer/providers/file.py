"""Local filesystem provider."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from geojson_layer.core.exceptions import DataSourceError
from geojson_layer.providers.base import GeoJsonProvider

logger = logging.getLogger("geojson_layer.providers.file")


@dataclass(frozen=True)
class FileGeoJson(GeoJsonProvider):
    """Reads a GeoJSON document from a file.

    Attributes:
        path: Filesystem path to the document.
        encoding: Text encoding of the file.
    """

    path: Path
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def describe(self) -> str:
        return str(self.path)

    async def fetch(self) -> str:
        path = self.path
        if not await asyncio.to_thread(path.is_file):
            msg = f"File {path} does not exist"
            raise DataSourceError(self.describe(), msg)

        try:
            text = await asyncio.to_thread(path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Error loading GeoJSON: {exc}"
            raise DataSourceError(self.describe(), msg) from exc

        logger.debug("Read %d character(s) from %s", len(text), path)
        return text
