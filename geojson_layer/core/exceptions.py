"""Unified exception taxonomy.

Every error the layer surfaces to its caller inherits from
``GeoJsonError`` and carries structured context fields, so callers can
make consistent retry and display decisions without string matching.

Only two things are ever raised out of a load: a transport failure
(``DataSourceError``) and a structural failure (``NotAGeoJsonError``).
Problems inside individual features are not errors at all; the
parser drops the feature and moves on.

Taxonomy categories
-------------------
- ``ValidationError``:   input/contract violations, never retryable.
- ``GeoJsonLoadError``:  the document could not be produced.
    - ``DataSourceError``:  fetch or decode failed (file, resource, HTTP).
    - ``NotAGeoJsonError``: decoded JSON is not a GeoJSON root.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeoJsonError(Exception):
    """Base exception for all layer-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred (e.g. ``"load"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"NOT_GEOJSON"``).
        retryable: Whether retrying the same operation may succeed.
        correlation_id: Caller-supplied correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


class ValidationError(GeoJsonError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs["retryable"] = False
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Load errors
# ---------------------------------------------------------------------------


class GeoJsonLoadError(GeoJsonError):
    """Raised when a GeoJSON document cannot be produced for the layer."""

    default_stage = "load"
    default_code = "GEOJSON_LOAD_FAILED"


class DataSourceError(GeoJsonLoadError):
    """Fetching or decoding the raw document failed.

    Attributes:
        source: Display name of the data source (path, URL, resource).
    """

    default_code = "DATA_SOURCE_FAILED"

    def __init__(self, source: str, message: str, *, retryable: bool = False) -> None:
        self.source = source
        super().__init__(message, retryable=retryable)

    def __str__(self) -> str:
        return f"[{self.source}] {self.message}"


class NotAGeoJsonError(GeoJsonLoadError, ValidationError):
    """Decoded JSON is not a mapping with a FeatureCollection or Feature type."""

    default_code = "NOT_GEOJSON"
