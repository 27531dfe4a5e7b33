"""Matching configuration - scoring weights and thresholds."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger("lostfound.matching.config")


@dataclass(frozen=True)
class MatchingConfig:
    """Configuration for lost-item matching.

    Centralizes all scoring weights and thresholds. The defaults give a
    maximum of 100 from tags + color + category, with the description bonus
    on top (the final score saturates at 100).
    """

    # Scoring weights
    tag_weight: float = 50.0
    color_weight: float = 25.0
    category_weight: float = 25.0
    description_weight: float = 10.0

    # Fuzzy comparison thresholds (strictly greater than)
    tag_similarity_threshold: float = 0.7
    description_similarity_threshold: float = 0.8

    # Significant words must be longer than this
    min_word_length: int = 2

    # Thresholds
    min_score: int = 30
    search_min_score: int = 25  # Lower threshold used by lost-item search for more results


# Default config instance
DEFAULT_CONFIG = MatchingConfig()

_DEFAULTS = asdict(DEFAULT_CONFIG)


class MatchingSettings(BaseModel):
    """Validated "matching" section of settings.json.

    Numeric strings are coerced; anything else that doesn't fit raises
    ValidationError.
    """

    model_config = ConfigDict(extra="ignore")

    tag_weight: float = Field(default=_DEFAULTS["tag_weight"], ge=0)
    color_weight: float = Field(default=_DEFAULTS["color_weight"], ge=0)
    category_weight: float = Field(default=_DEFAULTS["category_weight"], ge=0)
    description_weight: float = Field(default=_DEFAULTS["description_weight"], ge=0)
    tag_similarity_threshold: float = Field(
        default=_DEFAULTS["tag_similarity_threshold"], ge=0, le=1
    )
    description_similarity_threshold: float = Field(
        default=_DEFAULTS["description_similarity_threshold"], ge=0, le=1
    )
    min_word_length: int = Field(default=_DEFAULTS["min_word_length"], ge=0)
    min_score: int = Field(default=_DEFAULTS["min_score"], ge=0, le=100)
    search_min_score: int = Field(default=_DEFAULTS["search_min_score"], ge=0, le=100)

    def to_config(self) -> MatchingConfig:
        return MatchingConfig(**self.model_dump())


# Cached config instance (loaded from settings file)
_cached_config: MatchingConfig | None = None


def _config_from_settings(matching_settings: dict) -> MatchingConfig:
    """Build a MatchingConfig from the "matching" section.

    Unknown keys are ignored with a warning. Raises pydantic.ValidationError
    when a known key has a value of the wrong type or out of range.
    """
    unknown = sorted(set(matching_settings) - set(MatchingSettings.model_fields))
    if unknown:
        logger.warning("Ignoring unknown matching settings", keys=unknown)
    return MatchingSettings.model_validate(matching_settings).to_config()


def get_matching_config() -> MatchingConfig:
    """Get the current matching configuration.

    Loads the "matching" section of settings.json on first use and caches it.
    Falls back to defaults when the file is missing, unreadable or holds
    invalid values.

    Returns:
        MatchingConfig instance with current settings
    """
    global _cached_config

    if _cached_config is not None:
        return _cached_config

    try:
        from lostfound.core.settings_persistence import load_settings_file

        matching_settings = load_settings_file().get("matching")
        if isinstance(matching_settings, dict) and matching_settings:
            _cached_config = _config_from_settings(matching_settings)
            return _cached_config
    except Exception as e:
        logger.warning(
            "Failed to load matching settings, using defaults",
            error=str(e),
        )

    _cached_config = DEFAULT_CONFIG
    return _cached_config


def reload_matching_config() -> None:
    """Reload matching configuration from settings file.

    Call this after updating settings to ensure new values are used.
    """
    global _cached_config
    _cached_config = None
    get_matching_config()
