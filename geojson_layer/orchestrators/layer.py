"""GeoJSON layer load lifecycle.

Ties a data source to the parser and publishes the result as an
immutable snapshot:

1. ``load()`` starts a new load generation and awaits the provider.
2. If another load started meanwhile, this result is stale and is
   discarded, whether it succeeded or failed (last load wins).
3. A load or structural error leaves the previous snapshot in place.
4. Otherwise the document is parsed synchronously and the new snapshot
   replaces the old one in a single assignment, so consumers only ever
   see a complete result.

Rendering is delegated: ``render()`` hands the snapshot to any object
implementing the ``Renderer`` protocol, and ``on_update`` lets a caller
schedule a redraw whenever a new snapshot is applied.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from geojson_layer.core.config import LayerConfig
from geojson_layer.core.exceptions import GeoJsonLoadError
from geojson_layer.models.primitives import LayerPrimitives
from geojson_layer.parsing import parse_document, validate_document
from geojson_layer.providers.factory import get_provider
from geojson_layer.styling.builders import DefaultFeatureBuilder

if TYPE_CHECKING:
    import os
    from collections.abc import Callable, Mapping, Sequence

    from geojson_layer.models.primitives import Marker, Polygon, Polyline
    from geojson_layer.parsing import FeatureFilter
    from geojson_layer.providers.base import GeoJsonProvider
    from geojson_layer.styling.builders import FeatureBuilder

    Source = GeoJsonProvider | Mapping[str, Any] | os.PathLike[str] | str

logger = logging.getLogger("geojson_layer.orchestrators.layer")


class LoadStatus(enum.Enum):
    """Outcome of a single ``GeoJsonLayer.load()`` call.

    Values:
        APPLIED:    The new snapshot replaced the previous one.
        FAILED:     Fetching, decoding or root validation failed; the
                    previous snapshot is still displayed.
        SUPERSEDED: A newer load started before this one finished; its
                    result was discarded.
    """

    APPLIED = "applied"
    FAILED = "failed"
    SUPERSEDED = "superseded"


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of one load.

    Attributes:
        status: What happened to the load.
        generation: Load generation number (increments per ``load()``).
        primitives: The applied snapshot; ``None`` unless ``APPLIED``.
        error: The load error; ``None`` unless ``FAILED``.
    """

    status: LoadStatus
    generation: int
    primitives: LayerPrimitives | None = None
    error: GeoJsonLoadError | None = None

    @property
    def applied(self) -> bool:
        return self.status is LoadStatus.APPLIED


class Renderer(Protocol):
    """Drawing capability the layer renders into."""

    def draw_polygons(self, polygons: Sequence[Polygon]) -> None: ...

    def draw_polylines(self, polylines: Sequence[Polyline]) -> None: ...

    def draw_markers(self, markers: Sequence[Marker]) -> None: ...


class GeoJsonLayer:
    """A GeoJSON source rendered as markers, polylines and polygons.

    Example usage::

        layer = GeoJsonLayer("https://example.com/parks.geojson")
        result = await layer.load()
        if result.applied:
            layer.render(canvas)
    """

    def __init__(
        self,
        source: Source,
        *,
        builder: FeatureBuilder | None = None,
        feature_filter: FeatureFilter | None = None,
        config: LayerConfig | None = None,
        on_update: Callable[[LayerPrimitives], None] | None = None,
    ) -> None:
        self._config = config or LayerConfig()
        self._provider = get_provider(source, config=self._config)
        self._builder = builder or DefaultFeatureBuilder(self._config.style_defaults)
        self._feature_filter = feature_filter
        self._on_update = on_update
        self._primitives = LayerPrimitives()
        self._generation = 0

    @property
    def provider(self) -> GeoJsonProvider:
        return self._provider

    @property
    def primitives(self) -> LayerPrimitives:
        """The current snapshot (empty until the first successful load)."""
        return self._primitives

    async def load(self) -> LoadResult:
        """Load and parse the current source, replacing the snapshot on success."""
        self._generation += 1
        generation = self._generation
        provider = self._provider

        try:
            document = validate_document(await provider.load_data())
        except GeoJsonLoadError as exc:
            if generation != self._generation:
                return self._superseded(generation)
            logger.warning(
                "GeoJSON load failed | source=%s | code=%s | error=%s",
                provider.describe(),
                exc.code,
                exc,
            )
            return LoadResult(LoadStatus.FAILED, generation, error=exc)

        if generation != self._generation:
            return self._superseded(generation)

        primitives = parse_document(
            document,
            builder=self._builder,
            feature_filter=self._feature_filter,
        )
        self._primitives = primitives
        logger.info(
            "GeoJSON layer updated | source=%s | generation=%d | primitives=%d",
            provider.describe(),
            generation,
            len(primitives),
        )
        if self._on_update is not None:
            self._on_update(primitives)
        return LoadResult(LoadStatus.APPLIED, generation, primitives=primitives)

    async def update_provider(self, source: Source) -> LoadResult | None:
        """Switch to a new source, reloading only if it differs from the current one.

        Returns:
            The reload result, or ``None`` when the source is unchanged.
        """
        provider = get_provider(source, config=self._config)
        if provider == self._provider:
            return None
        self._provider = provider
        return await self.load()

    def render(self, renderer: Renderer) -> None:
        """Draw the current snapshot: polygons, then polylines, then markers.

        Empty families are not drawn at all.
        """
        snapshot = self._primitives
        if snapshot.polygons:
            renderer.draw_polygons(snapshot.polygons)
        if snapshot.polylines:
            renderer.draw_polylines(snapshot.polylines)
        if snapshot.markers:
            renderer.draw_markers(snapshot.markers)

    def _superseded(self, generation: int) -> LoadResult:
        logger.debug(
            "Discarding stale GeoJSON load | generation=%d | current=%d",
            generation,
            self._generation,
        )
        return LoadResult(LoadStatus.SUPERSEDED, generation)
