"""
Configuration system for termclip.

Handles environment-based defaults with Pydantic Settings.
The truncation functions themselves take explicit arguments; these
settings feed the command-line interface.
"""

import shutil
import warnings
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.display_width import text_width
from .utils.string_helpers import DEFAULT_ELLIPSIS


class Config(BaseSettings):
    """
    Default truncation settings.

    Configuration priority:
    1. Environment variables
    2. Variables from .env file
    3. Default field values

    Example .env file:
        TERMCLIP_ELLIPSIS=…
        TERMCLIP_MAX_CHARS=120
        TERMCLIP_MAX_WIDTH=60
        TERMCLIP_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="TERMCLIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ellipsis: str = Field(
        default=DEFAULT_ELLIPSIS,
        description="Marker appended by width truncation",
    )
    max_chars: int = Field(
        default=80,
        ge=0,
        description="Default character budget for count truncation",
    )
    max_width: int | None = Field(
        default=None,
        ge=0,
        description="Default column budget for width truncation (terminal width if unset)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )

    @model_validator(mode="after")
    def validate_ellipsis_width(self):
        """Warn if the ellipsis cannot fit inside the configured width."""
        if self.max_width is not None and self.max_width > 0:
            ellipsis_width = text_width(self.ellipsis)
            if ellipsis_width >= self.max_width:
                warnings.warn(
                    f"Ellipsis {self.ellipsis!r} is {ellipsis_width} columns wide, "
                    f"which does not fit TERMCLIP_MAX_WIDTH={self.max_width}. "
                    f"It will be shortened on every truncation.",
                    UserWarning,
                    stacklevel=2,
                )
        return self

    def resolve_max_width(self) -> int:
        """
        Get the width budget to use.

        Returns:
            The configured max_width, or the current terminal width
        """
        if self.max_width is not None:
            return self.max_width
        return shutil.get_terminal_size().columns


@lru_cache
def get_config() -> Config:
    """
    Get cached configuration instance.

    Clear cache with get_config.cache_clear() if needed.

    Returns:
        Cached Config instance
    """
    return Config()
