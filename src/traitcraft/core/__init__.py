"""Core functionalities: pure data structures with no trait resolution.

Architecture Note:
    core/ holds the leaf building blocks (declarations, callbacks, types).
    Name resolution and composition live in registry/ and blueprint/.
"""

from traitcraft.core.callback import AFTER, BEFORE, Callback, phase_names
from traitcraft.core.declaration import (
    AttributeDefinitionError,
    Declaration,
    DeclarationSet,
)
from traitcraft.core.types import Action

__all__ = [
    # Types
    "Action",
    # Declaration
    "Declaration",
    "DeclarationSet",
    "AttributeDefinitionError",
    # Callback
    "Callback",
    "phase_names",
    "BEFORE",
    "AFTER",
]
