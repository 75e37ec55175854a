"""Basic workflow integration tests."""

import sys
from enum import Enum

sys.path.insert(0, "src")

from traitcraft import (
    Blueprint,
    Declaration,
    Trait,
    TraitcraftSettings,
    TraitRegistry,
)


class Role(Enum):
    MEMBER = "member"
    ADMIN = "admin"


class User:
    @classmethod
    def defined_enum_fields(cls):
        return {"role": Role}


def test_user_blueprint_end_to_end():
    """Compose a user from shared, inline and enum-derived traits."""
    registry = TraitRegistry()
    settings = TraitcraftSettings(_env_file=None)

    timestamped = Trait("timestamped", registry=registry, settings=settings).register()
    timestamped.declare_attribute(Declaration("created_at", "now"))
    timestamped.before("create", action=lambda user: user.setdefault("stamped", True))

    with_profile = Trait("with_profile", registry=registry, settings=settings).register()
    with_profile.declare_attribute(Declaration("profile", "default"))
    with_profile.append_traits("verified")

    user = Blueprint("user", ["timestamped"], registry=registry, settings=settings)
    user.declare_attribute(Declaration("name", "Ada"))
    user.declare_attribute(Declaration("role", Role.MEMBER))
    user.trait("verified").declare_attribute(Declaration("verified", True))
    user.automatically_register_defined_enums(User)
    user.expand_enum_traits(User)
    user.append_traits("with_profile", "role_admin")
    user.after("create", action=lambda obj, ctx: ctx.append("created"))

    attributes = user.attributes()

    assert attributes.names() == ["created_at", "name", "role", "profile", "verified"]
    assert attributes.get("role").rule is Role.ADMIN  # type: ignore[union-attr]

    events: list[str] = []
    instance: dict = {}
    for callback in user.callbacks():
        callback.run(instance, events)

    assert instance == {"stamped": True}
    assert events == ["created"]
    assert registry.callback_names() == ["before_create", "after_create"]


def test_variants_from_one_blueprint():
    """Clones of one blueprint compose different traits independently."""
    registry = TraitRegistry()

    Trait("admin", registry=registry).register().declare_attribute(Declaration("role", "admin"))
    Trait("guest", registry=registry).register().declare_attribute(Declaration("role", "guest"))

    base = Blueprint("user", registry=registry)
    base.declare_attribute(Declaration("name", "Ada"))
    base.declare_attribute(Declaration("role", "member"))

    admin = base.clone()
    admin.append_traits("admin")
    guest = base.clone()
    guest.append_traits("guest")

    assert admin.attributes().get("role").rule == "admin"  # type: ignore[union-attr]
    assert guest.attributes().get("role").rule == "guest"  # type: ignore[union-attr]
    assert base.attributes().get("role").rule == "member"  # type: ignore[union-attr]
