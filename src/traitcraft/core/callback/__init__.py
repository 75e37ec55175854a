"""Callback functionality: hook model and phase naming."""

from traitcraft.core.callback.core import AFTER, BEFORE, phase_names
from traitcraft.core.callback.models import Callback

__all__ = [
    "Callback",
    "phase_names",
    "BEFORE",
    "AFTER",
]
