"""Composable unit: the shared composition algorithm of blueprints and traits.

A composable unit owns its declarations, callbacks, locally-defined traits and
optional constructor/construction-strategy overrides. It references further
traits by name in two ordered lists, base (inherited first) and additional
(applied last). Names resolve lazily: local definitions first, then the
registry.

Aggregation order for every query is:

    flattened base traits -> own value -> flattened additional traits

Multi-valued fields (attributes, callbacks) are flattened in that order;
single-valued fields (constructor, construction strategy) take the last value
present.

Usage:
    blueprint = Blueprint("user", registry=registry)
    blueprint.declare_attribute(Declaration("name", "Ada"))
    blueprint.inherit_traits("timestamped")
    blueprint.append_traits("admin")

    @blueprint.after("build")
    def normalize(user): ...

    blueprint.attributes()     # cached DeclarationSet
    blueprint.callbacks()      # [Callback, ...]
"""

from __future__ import annotations

import copy
import logging
import warnings
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Self

from traitcraft.config.settings import TraitcraftSettings, get_settings
from traitcraft.core.callback import AFTER, BEFORE, Callback, phase_names
from traitcraft.core.declaration import Declaration, DeclarationSet
from traitcraft.core.types import Action
from traitcraft.registry import TraitRegistry, UnresolvableTraitError, get_registry

if TYPE_CHECKING:
    from traitcraft.blueprint.enums import EnumSpec
    from traitcraft.blueprint.trait import Trait

logger = logging.getLogger(__name__)


class CircularTraitError(RecursionError):
    """Raised when a unit's aggregation re-enters itself through its traits."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Trait composition cycle through '{name}'")


def _skip_construction(instance: Any) -> None:
    """Construction strategy that materializes nothing."""
    return None


class Composable:
    """Base composable unit. See Blueprint and Trait for the two variants."""

    def __init__(
        self,
        name: str,
        base_traits: Iterable[str] = (),
        *,
        registry: TraitRegistry | None = None,
        settings: TraitcraftSettings | None = None,
    ) -> None:
        """Initialize an empty composable unit.

        Args:
            name: Unit name.
            base_traits: Initial base trait names.
            registry: Registry for name resolution. None uses get_registry().
            settings: Composition settings. None uses get_settings().
        """
        self.name = name
        self._registry = registry if registry is not None else get_registry()
        self._settings = settings if settings is not None else get_settings()
        self._declarations = DeclarationSet(name, strict=self._settings.strict_redeclaration)
        self._callbacks: list[Callback] = []
        self._defined_traits: dict[str, Trait] = {}
        self._registered_enums: list[EnumSpec] = []
        self._base_traits: list[str] = list(base_traits)
        self._additional_traits: list[str] = []
        self._constructor: Action | None = None
        self._construction_strategy: Action | None = None
        self._attributes: DeclarationSet | None = None
        self._compiled = False
        self._aggregating = False

    @property
    def registry(self) -> TraitRegistry:
        return self._registry

    @property
    def settings(self) -> TraitcraftSettings:
        return self._settings

    @property
    def declarations(self) -> DeclarationSet:
        """Own declarations, before any trait is applied."""
        return self._declarations

    @property
    def base_trait_names(self) -> tuple[str, ...]:
        return tuple(self._base_traits)

    @property
    def additional_trait_names(self) -> tuple[str, ...]:
        return tuple(self._additional_traits)

    @property
    def defined_traits(self) -> list[Trait]:
        """Locally-defined traits in definition order."""
        return list(self._defined_traits.values())

    @property
    def registered_enums(self) -> list[EnumSpec]:
        return list(self._registered_enums)

    @property
    def compiled(self) -> bool:
        return self._compiled

    # Declaration

    def declare_attribute(self, declaration: Declaration) -> Declaration:
        """Add or replace an own attribute declaration."""
        self._warn_if_cached("declare_attribute")
        return self._declarations.declare(declaration)

    def overridable(self) -> Self:
        """Mark own declarations (current and future) as overridable."""
        self._declarations.mark_overridable()
        return self

    def inherit_traits(self, *names: str) -> None:
        """Append names to the base trait list, composed before own values."""
        self._warn_if_cached("inherit_traits")
        self._base_traits.extend(names)

    def append_traits(self, *names: str) -> None:
        """Append names to the additional trait list, composed after own values."""
        self._warn_if_cached("append_traits")
        self._additional_traits.extend(names)

    def define_trait(self, trait: Trait) -> Trait:
        """Record a locally-defined trait; a same-named one is replaced."""
        self._defined_traits[trait.name] = trait
        return trait

    def _receive_trait(self, trait: Trait) -> None:
        """Accept a trait propagated from a composer; own definitions win."""
        self._defined_traits.setdefault(trait.name, trait)

    def trait(self, name: str, base_traits: Iterable[str] = ()) -> Trait:
        """Create an inline trait sharing this unit's registry and settings.

        The trait is defined locally, so only this unit (and the traits it
        composes, after compile) can resolve it by name.
        """
        # Late import to avoid circular dependency
        from traitcraft.blueprint.trait import Trait

        return self.define_trait(
            Trait(name, base_traits, registry=self._registry, settings=self._settings)
        )

    def register_enum(self, enum: EnumSpec) -> None:
        """Record an enum descriptor for later expansion."""
        self._registered_enums.append(enum)

    def automatically_register_defined_enums(self, klass: Any) -> None:
        """Register one EnumSpec per enum field the described class exposes.

        No-op if the class exposes no enum metadata.
        """
        # Late import to avoid circular dependency
        from traitcraft.blueprint.enums import EnumSpec, defined_enum_fields

        for field in defined_enum_fields(klass):
            self.register_enum(EnumSpec(field))

    def expand_enum_traits(self, klass: Any) -> list[Trait]:
        """Define one trait per value of every registered enum.

        Returns:
            The traits defined, in registration then value order.
        """
        expanded = []
        for enum in self._registered_enums:
            for trait in enum.build_traits(
                klass,
                registry=self._registry,
                settings=self._settings,
            ):
                expanded.append(self.define_trait(trait))
        logger.debug(
            "Expanded enum traits on %s: %s", self.name, [trait.name for trait in expanded]
        )
        return expanded

    # Callbacks and overrides

    def add_callback(self, callback: Callback) -> None:
        self._callbacks.append(callback)

    def callback(
        self, *names: str, action: Action | None = None
    ) -> Action | Callable[[Action], Action]:
        """Bind one action under each phase name.

        Usable directly, ``callback("after_build", action=fn)``, or as a
        decorator, ``@blueprint.callback("after_build")``.

        Raises:
            ValueError: If no phase names are given.
        """
        if not names:
            raise ValueError("callback() needs at least one phase name")

        def register(fn: Action) -> Action:
            for name in names:
                self._registry.register_callback(name)
                self.add_callback(Callback(name, fn))
            return fn

        if action is None:
            return register
        return register(action)

    def before(
        self, *phases: str, action: Action | None = None
    ) -> Action | Callable[[Action], Action]:
        """Bind an action under "before_<phase>" for every phase."""
        return self.callback(*phase_names(BEFORE, phases), action=action)

    def after(
        self, *phases: str, action: Action | None = None
    ) -> Action | Callable[[Action], Action]:
        """Bind an action under "after_<phase>" for every phase."""
        return self.callback(*phase_names(AFTER, phases), action=action)

    def override_constructor(self, fn: Action) -> None:
        self._constructor = fn

    def override_construction_strategy(self, fn: Action) -> None:
        self._construction_strategy = fn

    def skip_construction(self) -> None:
        """Install a construction strategy that does nothing."""
        self._construction_strategy = _skip_construction

    # Compilation and aggregation

    def compile(self) -> None:
        """Propagate locally-defined traits into every composed trait.

        After this, a trait defined here resolves by name from inside the
        traits this unit composes, unless a composed trait defines that name
        itself. Idempotent until the unit is cloned.

        Raises:
            UnresolvableTraitError: If a composed trait name cannot be
                resolved. The unit stays uncompiled so it can be retried.
        """
        if self._compiled:
            return

        if self._defined_traits:
            composed = self._resolve(self._base_traits) + self._resolve(self._additional_traits)
            for defined in list(self._defined_traits.values()):
                for trait in composed:
                    trait._receive_trait(defined)
            logger.debug(
                "Compiled %s: propagated %s into %s",
                self.name,
                list(self._defined_traits),
                [trait.name for trait in composed],
            )

        self._compiled = True

    def attributes(self) -> DeclarationSet:
        """Aggregated attribute declarations, computed once and cached.

        Base traits apply first, then own declarations, then additional
        traits. Later sources win on value; positions come from the first
        source that declared each name.
        """
        if self._attributes is None:
            attributes = DeclarationSet(self.name)
            for declarations in self._aggregate(self._declarations, Composable.attributes):
                attributes.apply(declarations)
            self._attributes = attributes
            logger.debug("Aggregated attributes for %s: %s", self.name, attributes.names())
        return self._attributes

    def callbacks(self) -> list[Callback]:
        """All callbacks from base traits, self and additional traits, in order."""
        sources = self._aggregate(self._callbacks, Composable.callbacks)
        return [callback for source in sources for callback in source]

    def callbacks_for(self, name: str) -> list[Callback]:
        """Aggregated callbacks bound to one phase name."""
        return [callback for callback in self.callbacks() if callback.name == name]

    def constructor(self) -> Action | None:
        """Last constructor override across base traits, self and additional traits."""
        return _last_present(self._aggregate(self._constructor, Composable.constructor))

    def construction_strategy(self) -> Action | None:
        """Last construction-strategy override, same precedence as constructor()."""
        return _last_present(
            self._aggregate(self._construction_strategy, Composable.construction_strategy)
        )

    def clone(self) -> Self:
        """Independent copy with derived state reset.

        The clone copies own declarations, callbacks, local traits and trait
        name lists, but starts uncompiled with no cached attributes, so it can
        be extended and composed differently from its source.
        """
        return copy.copy(self)

    def __copy__(self) -> Self:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._declarations = self._declarations.copy()
        clone._callbacks = list(self._callbacks)
        clone._defined_traits = dict(self._defined_traits)
        clone._registered_enums = list(self._registered_enums)
        clone._base_traits = list(self._base_traits)
        clone._additional_traits = list(self._additional_traits)
        clone._attributes = None
        clone._compiled = False
        clone._aggregating = False
        return clone

    def _aggregate[T](self, own: T, select: Callable[[Composable], T]) -> list[T]:
        """Collect one value per source in aggregation order."""
        self.compile()
        if self._aggregating:
            raise CircularTraitError(self.name)

        self._aggregating = True
        try:
            base = [select(trait) for trait in self._resolve(self._base_traits)]
            additional = [select(trait) for trait in self._resolve(self._additional_traits)]
        finally:
            self._aggregating = False
        return [*base, own, *additional]

    def _resolve(self, names: Iterable[str]) -> list[Trait]:
        return [self._trait_by_name(name) for name in names]

    def _trait_by_name(self, name: str) -> Trait:
        """Resolve a trait name: local definitions first, then the registry."""
        trait = self._defined_traits.get(name)
        if trait is None:
            trait = self._registry.lookup(name)
        if trait is None:
            raise UnresolvableTraitError(name, composer=self.name)
        return trait

    def _warn_if_cached(self, operation: str) -> None:
        if self._attributes is not None:
            warnings.warn(
                f"{operation}() called on '{self.name}' after its attributes were "
                f"aggregated; the cached attributes will not reflect it. "
                f"Clone before extending.",
                stacklevel=3,
            )


def _last_present(values: list[Action | None]) -> Action | None:
    present = [value for value in values if value is not None]
    return present[-1] if present else None
