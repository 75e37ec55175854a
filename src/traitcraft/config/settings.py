"""Configuration settings using Pydantic Settings.

Usage:
    from traitcraft.config import TraitcraftSettings, get_settings

    # Load from environment variables (TRAITCRAFT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = TraitcraftSettings(strict_redeclaration=True)
    blueprint = Blueprint("user", settings=settings)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraitcraftSettings(BaseSettings):
    """Configuration for blueprint composition.

    Attributes:
        strict_redeclaration: Reject redeclaring a non-overridable attribute
            within one declaration set.
        enum_trait_separator: Joins field name and value into an enum trait name.
        verbose: Default for configure_logging(verbose=...).
        log_json: Default for configure_logging(log_json=...).

    Environment Variables:
        TRAITCRAFT_STRICT_REDECLARATION
        TRAITCRAFT_ENUM_TRAIT_SEPARATOR
        TRAITCRAFT_VERBOSE
        TRAITCRAFT_LOG_JSON
    """

    model_config = SettingsConfigDict(
        env_prefix="TRAITCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_redeclaration: bool = False
    enum_trait_separator: str = "_"
    verbose: bool = False
    log_json: bool = False

    @field_validator("enum_trait_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("enum_trait_separator must not be empty")
        return value


@lru_cache(maxsize=1)
def get_settings() -> TraitcraftSettings:
    """Process-wide settings, read from the environment once."""
    return TraitcraftSettings()
