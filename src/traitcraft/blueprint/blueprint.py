"""Blueprint: the top-level composable unit a caller builds directly."""

from __future__ import annotations

from traitcraft.blueprint.composable import Composable


class Blueprint(Composable):
    """Entity blueprint merged with its traits into one cached specification.

    Unlike Trait, a blueprint is never registered by name.
    """

    def __repr__(self) -> str:
        return (
            f"Blueprint({self.name!r}, base_traits={list(self.base_trait_names)!r}, "
            f"additional_traits={list(self.additional_trait_names)!r})"
        )
