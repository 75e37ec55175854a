"""Trait registry: name-to-trait lookup with a process-wide default instance."""

from traitcraft.registry.core import TraitRegistry, UnresolvableTraitError, get_registry

__all__ = [
    "TraitRegistry",
    "UnresolvableTraitError",
    "get_registry",
]
