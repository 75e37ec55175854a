"""Trait registry: process-wide lookup of traits by name.

Usage:
    registry = TraitRegistry()
    registry.register("admin", admin_trait)

    registry.lookup("admin")   # -> Trait or None
    registry.find("admin")     # -> Trait, raises UnresolvableTraitError

    # Process-wide instance used when no registry is injected
    get_registry().register("admin", admin_trait)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from traitcraft.blueprint.trait import Trait

logger = logging.getLogger(__name__)


class UnresolvableTraitError(LookupError):
    """Raised when a trait name matches no local definition and no registry entry."""

    def __init__(self, trait_name: str, composer: str | None = None) -> None:
        self.trait_name = trait_name
        self.composer = composer
        where = f" (referenced from '{composer}')" if composer else ""
        super().__init__(f"Trait not registered: '{trait_name}'{where}")


class TraitRegistry:
    """Registry mapping trait names to traits, plus known callback phase names.

    Entries are added during definition loading and looked up during
    composition. Registering a name twice replaces the earlier trait.
    """

    def __init__(self) -> None:
        """Initialize empty trait registry."""
        self._traits: dict[str, Trait] = {}
        self._callback_names: dict[str, None] = {}

    def register(self, name: str, trait: Trait) -> Trait:
        """Register a trait under a name; last registration wins.

        Args:
            name: Name other units use to reference the trait.
            trait: Trait to register.

        Returns:
            The registered trait.
        """
        replaced = name in self._traits
        self._traits[name] = trait
        logger.debug("Registered trait: %s (replaced=%s)", name, replaced)
        return trait

    def lookup(self, name: str) -> Trait | None:
        """Get a registered trait by name.

        Args:
            name: Trait name to look up.

        Returns:
            The trait if registered, None otherwise.
        """
        return self._traits.get(name)

    def find(self, name: str) -> Trait:
        """Get a registered trait by name, failing loudly.

        Raises:
            UnresolvableTraitError: If no trait is registered under name.
        """
        trait = self._traits.get(name)
        if trait is None:
            raise UnresolvableTraitError(name)
        return trait

    def is_registered(self, name: str) -> bool:
        return name in self._traits

    def names(self) -> list[str]:
        """Registered trait names in registration order."""
        return list(self._traits)

    def register_callback(self, name: str) -> None:
        """Record a callback phase name so the runtime knows it exists."""
        self._callback_names[name] = None

    def callback_names(self) -> list[str]:
        """Known callback phase names in first-registration order."""
        return list(self._callback_names)

    def is_callback_registered(self, name: str) -> bool:
        return name in self._callback_names

    def __len__(self) -> int:
        return len(self._traits)


# Module-level registry instance
_registry = TraitRegistry()


def get_registry() -> TraitRegistry:
    """Access the process-wide trait registry.

    Returns:
        The process-local TraitRegistry instance.
    """
    return _registry
