"""Enum-derived trait expansion.

A described class advertises its enumerated fields through
``defined_enum_fields()``; each (field, value) pair becomes a trait that sets
the field to that value.

Usage:
    class Post:
        @classmethod
        def defined_enum_fields(cls):
            return {"status": ["active", "archived"]}

    blueprint.automatically_register_defined_enums(Post)
    blueprint.expand_enum_traits(Post)   # defines status_active, status_archived
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from traitcraft.blueprint.trait import Trait
from traitcraft.config.settings import TraitcraftSettings, get_settings
from traitcraft.core.declaration import Declaration
from traitcraft.registry import TraitRegistry


@runtime_checkable
class EnumSource(Protocol):
    """Described class exposing enumerated-field metadata.

    ``defined_enum_fields`` is called on the class itself, so it must be a
    classmethod or staticmethod.
    """

    def defined_enum_fields(self) -> Mapping[str, Iterable[Any]]: ...


def defined_enum_fields(klass: Any) -> Mapping[str, Iterable[Any]]:
    """Enum metadata of a described class, empty if it exposes none.

    Raises:
        TypeError: If the class defines defined_enum_fields as a plain
            instance method.
    """
    if not isinstance(klass, EnumSource):
        return {}
    if isinstance(klass, type) and inspect.isfunction(
        inspect.getattr_static(klass, "defined_enum_fields")
    ):
        raise TypeError(
            f"{klass.__name__}.defined_enum_fields must be a classmethod or staticmethod"
        )
    return klass.defined_enum_fields()


@dataclass(frozen=True, slots=True)
class EnumSpec:
    """Enum descriptor recorded on a composable unit for later expansion.

    Attributes:
        field: Attribute name the generated traits set.
        values: Explicit values, stored as a tuple. None means ask the
            described class.
    """

    field: str
    values: Iterable[Any] | None = None

    def __post_init__(self) -> None:
        if self.values is not None:
            object.__setattr__(self, "values", tuple(self.values))

    def build_traits(
        self,
        klass: Any,
        *,
        registry: TraitRegistry | None = None,
        settings: TraitcraftSettings | None = None,
    ) -> list[Trait]:
        """Build one single-attribute trait per enumerated value.

        Args:
            klass: Described class consulted when no explicit values are set.
            registry: Registry the generated traits resolve names against.
            settings: Settings for the generated traits; also supplies the
                separator joining field and value into the trait name.

        Returns:
            Traits named "<field><separator><value>", in value order. Empty
            if the described class exposes no enum metadata.

        Raises:
            ValueError: If the described class exposes enum metadata but not
                for this field.
        """
        settings = settings if settings is not None else get_settings()
        values = self.values
        if values is None:
            fields = defined_enum_fields(klass)
            if not fields:
                return []
            if self.field not in fields:
                raise ValueError(
                    f"{getattr(klass, '__name__', klass)!s} defines no enum field '{self.field}'"
                )
            values = fields[self.field]

        traits = []
        for value in values:
            trait = Trait(
                f"{self.field}{settings.enum_trait_separator}{_label(value)}",
                registry=registry,
                settings=settings,
            )
            trait.declare_attribute(Declaration(self.field, value))
            traits.append(trait)
        return traits


def _label(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name.lower()
    return str(value)
