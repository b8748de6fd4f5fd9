"""HTTP provider for GeoJSON documents served over the network.

Uses ``httpx.AsyncClient``.  A client may be injected (connection
pooling, custom transports, tests); an injected client is used as-is
and left open.  Otherwise a short-lived client is created per fetch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from geojson_layer.core.exceptions import DataSourceError
from geojson_layer.providers.base import GeoJsonProvider

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("geojson_layer.providers.network")

_RETRYABLE_STATUS = frozenset({408, 429})


@dataclass(frozen=True)
class NetworkGeoJson(GeoJsonProvider):
    """Downloads a GeoJSON document with an HTTP GET.

    Attributes:
        url: Absolute ``http`` or ``https`` URL of the document.
        headers: Extra request headers (e.g. an ``Authorization`` token).
        timeout_s: Request timeout in seconds.
        follow_redirects: Whether 3xx responses are followed.
        client: Optional shared ``httpx.AsyncClient``.
    """

    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout_s: float = 30.0
    follow_redirects: bool = True
    client: httpx.AsyncClient | None = field(default=None, compare=False, repr=False)

    def describe(self) -> str:
        return self.url

    async def fetch(self) -> str:
        try:
            if self.client is not None:
                response = await self._get(self.client)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._get(client)
        except httpx.InvalidURL as exc:
            msg = f"Invalid GeoJSON URL {self.url!r}: {exc}"
            raise DataSourceError(self.url, msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Error downloading GeoJSON from {self.url}: {exc}"
            raise DataSourceError(self.url, msg, retryable=True) from exc

        if response.status_code != httpx.codes.OK:
            status = response.status_code
            msg = f"Error requesting GeoJSON from {self.url}: HTTP {status}"
            raise DataSourceError(
                self.url,
                msg,
                retryable=status >= 500 or status in _RETRYABLE_STATUS,
            )

        logger.debug("Downloaded %d bytes from %s", len(response.content), self.url)
        return response.text

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        return await client.get(
            self.url,
            headers=dict(self.headers),
            timeout=self.timeout_s,
            follow_redirects=self.follow_redirects,
        )
