"""Tests for callbacks and phase naming."""

import pytest

from traitcraft.core.callback import AFTER, BEFORE, Callback, phase_names


def test_phase_names_prefix_each_phase():
    assert phase_names(BEFORE, ["build", "create"]) == ["before_build", "before_create"]
    assert phase_names(AFTER, ["stub"]) == ["after_stub"]


def test_phase_names_requires_a_phase():
    with pytest.raises(ValueError, match="at least one phase"):
        phase_names(BEFORE, [])


def test_run_without_arguments():
    callback = Callback("after_build", lambda: "ran")

    assert callback.run(object(), "context") == "ran"


def test_run_with_instance():
    instance = object()
    callback = Callback("after_build", lambda obj: obj)

    assert callback.run(instance, "context") is instance


def test_run_with_instance_and_context():
    received = []
    callback = Callback("after_create", lambda obj, ctx: received.append((obj, ctx)))

    callback.run("instance", "context")

    assert received == [("instance", "context")]


def test_run_with_varargs_receives_both():
    callback = Callback("after_create", lambda *args: args)

    assert callback.run("instance", "context") == ("instance", "context")


def test_callbacks_are_values():
    def action(obj):
        return obj

    assert Callback("after_build", action) == Callback("after_build", action)
