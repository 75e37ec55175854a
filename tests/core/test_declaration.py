"""Tests for attribute declarations."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from traitcraft.core.declaration import (
    AttributeDefinitionError,
    Declaration,
    DeclarationSet,
)


def test_declare_appends_new_names_in_order():
    declarations = DeclarationSet("user")
    declarations.declare(Declaration("name", "Ada"))
    declarations.declare(Declaration("email", "ada@example.com"))

    assert declarations.names() == ["name", "email"]
    assert len(declarations) == 2
    assert "email" in declarations


def test_declare_replaces_in_place():
    """Redeclaring a name changes its value but keeps its first position."""
    declarations = DeclarationSet(
        "user",
        [Declaration("a", 1), Declaration("b", 2), Declaration("c", 3)],
    )

    declarations.declare(Declaration("a", 10))

    assert declarations.names() == ["a", "b", "c"]
    assert declarations.get("a").rule == 10  # type: ignore[union-attr]


def test_apply_is_right_biased_and_stable():
    base = DeclarationSet(declarations=[Declaration("x", 1), Declaration("y", 1)])
    incoming = DeclarationSet(declarations=[Declaration("z", 2), Declaration("x", 2)])

    base.apply(incoming)

    assert base.names() == ["x", "y", "z"]
    assert [d.rule for d in base] == [2, 1, 2]


@given(
    first=st.lists(st.sampled_from("abcdef"), max_size=6),
    second=st.lists(st.sampled_from("abcdef"), max_size=6),
)
def test_apply_orders_by_first_appearance(first, second):
    """PROPERTY: apply keeps first-seen order and last-applied values."""
    merged = DeclarationSet()
    merged.apply(Declaration(name, ("first", name)) for name in first)
    merged.apply(Declaration(name, ("second", name)) for name in second)

    assert merged.names() == list(dict.fromkeys(first + second))
    for declaration in merged:
        expected = "second" if declaration.name in second else "first"
        assert declaration.rule == (expected, declaration.name)


def test_get_missing_returns_none():
    assert DeclarationSet().get("missing") is None


def test_mark_overridable_covers_existing_and_future():
    declarations = DeclarationSet(declarations=[Declaration("a", 1)])

    declarations.mark_overridable()
    declarations.declare(Declaration("b", 2))

    assert declarations.overridable
    assert all(d.overridable for d in declarations)


def test_strict_set_rejects_redeclaration():
    """Strict mode: redeclaring a non-overridable name fails loudly."""
    declarations = DeclarationSet("user", strict=True)
    declarations.declare(Declaration("name", "Ada"))

    with pytest.raises(AttributeDefinitionError, match="Attribute already defined on 'user': name"):
        declarations.declare(Declaration("name", "Grace"))


def test_strict_set_allows_overridable_redeclaration():
    declarations = DeclarationSet("user", strict=True)
    declarations.declare(Declaration("name", "Ada"))
    declarations.mark_overridable()

    declarations.declare(Declaration("name", "Grace"))

    assert declarations.get("name").rule == "Grace"  # type: ignore[union-attr]


def test_strict_set_still_accepts_apply():
    """Composition merges are never redeclarations."""
    declarations = DeclarationSet(declarations=[Declaration("x", 1)], strict=True)

    declarations.apply([Declaration("x", 2)])

    assert declarations.get("x").rule == 2  # type: ignore[union-attr]


def test_copy_is_independent():
    original = DeclarationSet("user", [Declaration("a", 1)])
    duplicate = original.copy()

    duplicate.declare(Declaration("b", 2))
    duplicate.declare(Declaration("a", 99))

    assert original.names() == ["a"]
    assert original.get("a").rule == 1  # type: ignore[union-attr]
    assert duplicate.names() == ["a", "b"]
