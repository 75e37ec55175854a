"""Configuration module: pydantic-settings for composition, structlog wiring.

Usage:
    from traitcraft.config import TraitcraftSettings, configure_logging

    settings = TraitcraftSettings(strict_redeclaration=True)
    configure_logging(verbose=True)
"""

from traitcraft.config.logging import configure_logging
from traitcraft.config.settings import TraitcraftSettings, get_settings

__all__ = [
    "TraitcraftSettings",
    "get_settings",
    "configure_logging",
]
