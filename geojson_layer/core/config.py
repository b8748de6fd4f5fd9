"""Layer configuration loaded from environment variables.

All configuration values have sensible defaults; the environment only
needs to set what differs.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is out of
    its valid range or names an unknown style profile.  This catches bad
    configuration at startup rather than on the first load.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geojson_layer.core.exceptions import ValidationError

if TYPE_CHECKING:
    from geojson_layer.models.style import StyleDefaults

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class LayerConfig:
    """Immutable layer configuration.

    Attributes:
        style_profile: Name of the built-in ``StyleDefaults`` profile used by
            the default feature builder (``initial`` or ``leaflet``).
        http_timeout_s: Timeout in seconds for network data sources.
        follow_redirects: Whether network data sources follow HTTP redirects.
    """

    style_profile: str = "initial"
    http_timeout_s: float = 30.0
    follow_redirects: bool = True

    @property
    def style_defaults(self) -> StyleDefaults:
        """Return the ``StyleDefaults`` profile named by ``style_profile``."""
        from geojson_layer.models.style import STYLE_PROFILES

        return STYLE_PROFILES[self.style_profile]

    @classmethod
    def from_env(cls) -> LayerConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or unknown.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEOJSON_HTTP_TIMEOUT_S=abc``).
        """
        config = cls(
            style_profile=os.getenv("GEOJSON_STYLE_PROFILE", "initial").strip().lower(),
            http_timeout_s=float(os.getenv("GEOJSON_HTTP_TIMEOUT_S", "30")),
            follow_redirects=_parse_bool(
                "GEOJSON_FOLLOW_REDIRECTS", os.getenv("GEOJSON_FOLLOW_REDIRECTS", "true")
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/0, true/false, yes/no, on/off")


def _validate(config: LayerConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    from geojson_layer.models.style import STYLE_PROFILES

    if config.style_profile not in STYLE_PROFILES:
        available = ", ".join(sorted(STYLE_PROFILES))
        raise ConfigValidationError(
            "GEOJSON_STYLE_PROFILE",
            config.style_profile,
            f"must be one of: {available}",
        )

    if config.http_timeout_s <= 0:
        raise ConfigValidationError(
            "GEOJSON_HTTP_TIMEOUT_S",
            config.http_timeout_s,
            "must be > 0 (seconds)",
        )
