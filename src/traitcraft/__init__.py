"""traitcraft: declarative blueprint composition.

Merges a named blueprint with reusable, nestable traits into one deterministic,
cached specification of attributes, lifecycle callbacks and construction
overrides.

Usage:
    from traitcraft import Blueprint, Declaration, Trait, TraitRegistry

    registry = TraitRegistry()

    admin = Trait("admin", registry=registry).register()
    admin.declare_attribute(Declaration("role", "admin"))

    user = Blueprint("user", registry=registry)
    user.declare_attribute(Declaration("name", "Ada"))
    user.declare_attribute(Declaration("role", "member"))
    user.append_traits("admin")

    [(d.name, d.rule) for d in user.attributes()]
    # [("name", "Ada"), ("role", "admin")]
"""

__version__ = "0.1.0"

# Blueprints and traits
from traitcraft.blueprint import (
    Blueprint,
    CircularTraitError,
    Composable,
    EnumSource,
    EnumSpec,
    Trait,
)

# Configuration
from traitcraft.config import TraitcraftSettings, configure_logging, get_settings

# Core primitives
from traitcraft.core import (
    Action,
    AttributeDefinitionError,
    Callback,
    Declaration,
    DeclarationSet,
)

# Registry
from traitcraft.registry import TraitRegistry, UnresolvableTraitError, get_registry

__all__ = [
    # Version
    "__version__",
    # Core
    "Action",
    "Declaration",
    "DeclarationSet",
    "AttributeDefinitionError",
    "Callback",
    # Registry
    "TraitRegistry",
    "UnresolvableTraitError",
    "get_registry",
    # Blueprint
    "Composable",
    "Blueprint",
    "Trait",
    "EnumSpec",
    "EnumSource",
    "CircularTraitError",
    # Config
    "TraitcraftSettings",
    "get_settings",
    "configure_logging",
]
