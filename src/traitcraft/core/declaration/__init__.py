"""Attribute declarations: the declaration model and the ordered declaration set."""

from traitcraft.core.declaration.core import AttributeDefinitionError, DeclarationSet
from traitcraft.core.declaration.models import Declaration

__all__ = [
    "Declaration",
    "DeclarationSet",
    "AttributeDefinitionError",
]
