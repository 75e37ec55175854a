"""Trait: named, registry-addressable composable unit.

Usage:
    admin = Trait("admin", registry=registry)
    admin.declare_attribute(Declaration("role", "admin"))
    admin.register()          # registry.register("admin", admin)

    blueprint.append_traits("admin")
"""

from __future__ import annotations

from typing import Self

from traitcraft.blueprint.composable import Composable


class Trait(Composable):
    """Reusable bundle of declarations, callbacks and overrides.

    Composing blueprints only read a trait, except that compile may define
    further local traits on it so nested references resolve.
    """

    def register(self) -> Self:
        """Register this trait in its registry under its name."""
        self.registry.register(self.name, self)
        return self

    def __repr__(self) -> str:
        return f"Trait({self.name!r})"
