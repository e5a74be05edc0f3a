"""
Configuration management for the darkroom easel geometry engine.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with EASEL_ prefix.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class OptimizerSettings(BaseSettings):
    """Settings for the minimum-border snap search."""

    model_config = SettingsConfigDict(env_prefix="EASEL_OPTIMIZER_")

    # Search window around the requested border
    search_span: float = Field(default=0.5, gt=0.0, le=5.0)
    min_search_border: float = Field(
        default=0.01,
        gt=0.0,
        le=1.0,
        description="Lower floor of the search window",
    )

    # Candidate stepping
    step: float = Field(default=0.01, gt=0.0, le=1.0)
    adaptive_step_divisor: int = Field(default=100, ge=1, le=10000)

    # Ruler increment the borders should land on
    snap: float = Field(default=0.25, gt=0.0, le=2.0)
    epsilon: float = Field(default=1e-9, gt=0.0, le=1e-3)


class CacheSettings(BaseSettings):
    """Settings for the easel fit cache."""

    model_config = SettingsConfigDict(env_prefix="EASEL_CACHE_")

    max_memo_size: int = Field(default=50, ge=1, le=100000)


class PaperSettings(BaseSettings):
    """Settings for paper-area derived values."""

    model_config = SettingsConfigDict(env_prefix="EASEL_PAPER_")

    # Default blade thickness (preview units)
    blade_thickness: int = Field(default=15, ge=1, le=200)

    # Reference area (20x24 in) at which thickness is unscaled
    base_paper_area: float = Field(default=20.0 * 24.0, gt=0.0)
    max_scale_factor: float = Field(default=2.0, ge=1.0, le=10.0)
    epsilon: float = Field(default=1e-9, gt=0.0, le=1e-3)


class PrecisionSettings(BaseSettings):
    """Settings for rounding of results."""

    model_config = SettingsConfigDict(env_prefix="EASEL_PRECISION_")

    decimal_places: int = Field(default=2, ge=0, le=8)
    display_places: int = Field(default=3, ge=0, le=8)

    @property
    def rounding_multiplier(self) -> int:
        """Multiplier used for standard-precision rounding."""
        return 10**self.decimal_places


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="EASEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    app_name: str = Field(default="Darkroom Easel Calculator")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Subsettings
    optimizer: OptimizerSettings = Field(default_factory=OptimizerSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    paper: PaperSettings = Field(default_factory=PaperSettings)
    precision: PrecisionSettings = Field(default_factory=PrecisionSettings)


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
