"""Ordered, name-keyed attribute declaration set.

Usage:
    declarations = DeclarationSet("user")
    declarations.declare(Declaration("name", "Ada"))
    declarations.declare(Declaration("email", "ada@example.com"))

    # Right-biased merge: replaces values, keeps first-seen positions
    merged = DeclarationSet()
    merged.apply(trait_attributes)
    merged.apply(declarations)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from traitcraft.core.declaration.models import Declaration


class AttributeDefinitionError(ValueError):
    """Raised when a non-overridable attribute is redeclared under strict mode."""

    pass


class DeclarationSet:
    """Ordered mapping from attribute name to Declaration.

    At most one declaration lives per name. Replacing a declaration keeps the
    position its name first occupied; new names are appended.
    """

    def __init__(
        self,
        name: str | None = None,
        declarations: Iterable[Declaration] = (),
        *,
        strict: bool = False,
    ) -> None:
        """Initialize declaration set.

        Args:
            name: Name of the owning composable unit, used in error messages.
            declarations: Initial declarations, declared in order.
            strict: Reject redeclaring a non-overridable name in this set.
        """
        self.name = name
        self._declarations: dict[str, Declaration] = {}
        self._overridable = False
        self._strict = strict
        for declaration in declarations:
            self.declare(declaration)

    @property
    def overridable(self) -> bool:
        return self._overridable

    def declare(self, declaration: Declaration) -> Declaration:
        """Insert or replace a declaration by name.

        Args:
            declaration: Declaration to store.

        Returns:
            The stored declaration (marked overridable if the set is).

        Raises:
            AttributeDefinitionError: In strict mode, if the name is already
                declared and the existing declaration is not overridable.
        """
        if self._overridable and not declaration.overridable:
            declaration = replace(declaration, overridable=True)

        existing = self._declarations.get(declaration.name)
        if self._strict and existing is not None and not existing.overridable:
            owner = f" on '{self.name}'" if self.name else ""
            raise AttributeDefinitionError(
                f"Attribute already defined{owner}: {declaration.name}"
            )

        self._declarations[declaration.name] = declaration
        return declaration

    def apply(self, other: Iterable[Declaration]) -> None:
        """Stable right-biased merge of another set into this one.

        Incoming declarations win on value. Names already present keep their
        position; unseen names are appended in the incoming order.
        """
        for declaration in other:
            self._declarations[declaration.name] = declaration

    def mark_overridable(self) -> None:
        """Mark current and future declarations as overridable."""
        self._overridable = True
        for name, declaration in self._declarations.items():
            if not declaration.overridable:
                self._declarations[name] = replace(declaration, overridable=True)

    def get(self, name: str) -> Declaration | None:
        return self._declarations.get(name)

    def names(self) -> list[str]:
        """Attribute names in iteration order."""
        return list(self._declarations)

    def copy(self) -> DeclarationSet:
        """Independent copy sharing no mutable state with this set."""
        duplicate = DeclarationSet(self.name, strict=self._strict)
        duplicate._declarations = dict(self._declarations)
        duplicate._overridable = self._overridable
        return duplicate

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._declarations.values())

    def __len__(self) -> int:
        return len(self._declarations)

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __repr__(self) -> str:
        return f"DeclarationSet({self.name!r}, names={self.names()!r})"
