"""Blueprint composition: blueprints, traits and enum-derived traits."""

from traitcraft.blueprint.blueprint import Blueprint
from traitcraft.blueprint.composable import CircularTraitError, Composable
from traitcraft.blueprint.enums import EnumSource, EnumSpec, defined_enum_fields
from traitcraft.blueprint.trait import Trait

__all__ = [
    "Composable",
    "Blueprint",
    "Trait",
    "EnumSpec",
    "EnumSource",
    "defined_enum_fields",
    "CircularTraitError",
]
