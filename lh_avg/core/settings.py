"""lh-avg configuration management.

Configuration is loaded from the following sources, highest priority first:
1. CLI options (when applicable)
2. Explicit overrides passed to get_settings
3. Environment variables (with LH_AVG_ prefix) and a .env file
4. Default values

Example usage:
    from lh_avg.core.settings import get_settings

    settings = get_settings()
    print(settings.as_percentage)

Environment variable support:
    LH_AVG_AS_PERCENTAGE=true
    LH_AVG_OUTPUT_FORMAT=json
    LH_AVG_PWA__PO=8
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lh_avg.scoring.models import PwaDenominators

OUTPUT_FORMATS = ("table", "json")


class LhAvgSettings(BaseSettings):
    """Main lh-avg settings.

    Example:
        settings = LhAvgSettings(as_percentage=True)
        print(settings.pwa.po)
    """

    model_config = SettingsConfigDict(
        env_prefix="LH_AVG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    as_percentage: bool = Field(
        default=False,
        description="Report scores as percentage strings",
    )
    show_diff: bool = Field(
        default=False,
        description="Report rows after the first as differences against it",
    )
    output_format: str = Field(
        default="table",
        description="CLI output format (table, json)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    pwa: PwaDenominators = Field(
        default_factory=PwaDenominators,
        description="Check counts for shorthand PWA scores",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        lower_v = v.lower()
        if lower_v not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format: {v}. Must be one of {OUTPUT_FORMATS}"
            )
        return lower_v


def get_settings(**overrides: Any) -> LhAvgSettings:
    """Get an lh-avg settings instance.

    Args:
        **overrides: Explicit configuration overrides.

    Returns:
        Configured LhAvgSettings instance.
    """
    return LhAvgSettings(**overrides)


@lru_cache
def get_cached_settings() -> LhAvgSettings:
    """Get cached settings instance.

    Note:
        The cache can be cleared with get_cached_settings.cache_clear() if needed.
    """
    return get_settings()
