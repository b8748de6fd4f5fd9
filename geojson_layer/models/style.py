"""Style models: defaults profiles and resolved per-feature styles.

``StyleDefaults`` supplies the fallback for every style property a
feature does not set.  Two built-in profiles are provided:

- ``INITIAL``: the simplestyle-spec defaults.  Shades of grey, 2 px
  strokes, fill opacity 0.6.  Used when nothing else is configured.
- ``LEAFLET``: Leaflet's path defaults.  Blue, 3 px strokes, a faint
  0.2 fill opacity.

Callers may construct their own profile (or ``dataclasses.replace`` a
built-in one); profiles are validated at construction and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from geojson_layer.core.constants import MARKER_SIZE_MEDIUM
from geojson_layer.core.exceptions import ValidationError
from geojson_layer.models.primitives import Color


class ModelValidationError(ValueError, ValidationError):
    """Raised when a style model is constructed with invalid field values.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
        value: The invalid value.
    """

    default_stage = "model_validation"
    default_code = "MODEL_VALIDATION_FAILED"

    def __init__(self, model: str, field_name: str, value: object, message: str) -> None:
        self.model = model
        self.field_name = field_name
        self.value = value
        formatted = f"{model}.{field_name}={value!r}: {message}"
        ValidationError.__init__(self, formatted)


def _check_range(model: str, name: str, value: float, lo: float, hi: float) -> None:
    if not lo <= value <= hi:
        raise ModelValidationError(model, name, value, f"must be between {lo} and {hi}")


def _check_min(model: str, name: str, value: float, lo: float) -> None:
    if value < lo:
        raise ModelValidationError(model, name, value, f"must be >= {lo}")


@dataclass(frozen=True, slots=True)
class StyleDefaults:
    """Fallback values for the default feature builders.

    Attributes:
        marker_color: Pin colour when ``marker-color`` is absent or invalid.
        marker_size: Size name (``small``/``medium``/``large``) when
            ``marker-size`` is absent or invalid.
        stroke_color: Line/border colour when ``stroke`` is absent or invalid.
        stroke_opacity: Applied to an opaque stroke colour when
            ``stroke-opacity`` is absent or invalid.
        stroke_width: Line/border width in pixels.
        fill_color: Polygon fill when ``fill`` is absent or invalid.
        fill_opacity: Applied to an opaque fill colour when
            ``fill-opacity`` is absent or invalid.
    """

    marker_color: Color = field(default_factory=lambda: Color.from_argb(0xFF7E7E7E))
    marker_size: str = MARKER_SIZE_MEDIUM
    stroke_color: Color = field(default_factory=lambda: Color.from_argb(0xFF555555))
    stroke_opacity: float = 1.0
    stroke_width: float = 2.0
    fill_color: Color = field(default_factory=lambda: Color.from_argb(0xFF555555))
    fill_opacity: float = 0.6

    def __post_init__(self) -> None:
        _check_range("StyleDefaults", "stroke_opacity", self.stroke_opacity, 0.0, 1.0)
        _check_range("StyleDefaults", "fill_opacity", self.fill_opacity, 0.0, 1.0)
        _check_min("StyleDefaults", "stroke_width", self.stroke_width, 0.0)


INITIAL = StyleDefaults()

LEAFLET = StyleDefaults(
    stroke_color=Color.from_argb(0xFF3388FF),
    stroke_opacity=1.0,
    stroke_width=3.0,
    fill_color=Color.from_argb(0xFF3388FF),
    fill_opacity=0.2,
)

STYLE_PROFILES: dict[str, StyleDefaults] = {
    "initial": INITIAL,
    "leaflet": LEAFLET,
}


# ---------------------------------------------------------------------------
# Resolved styles
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PointStyle:
    color: Color
    size: float


@dataclass(frozen=True, slots=True)
class LineStyle:
    color: Color
    width: float


@dataclass(frozen=True, slots=True)
class PolygonStyle:
    """Fill plus border; ``fill`` is ``None`` when the polygon is unfilled."""

    fill: Color | None
    border: LineStyle
