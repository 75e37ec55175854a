"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from traitcraft import TraitcraftSettings, TraitRegistry


@pytest.fixture
def registry():
    """Fresh TraitRegistry, isolated from the process-wide one."""
    return TraitRegistry()


@pytest.fixture
def settings():
    """Default settings that ignore any local .env file."""
    return TraitcraftSettings(_env_file=None)


@pytest.fixture
def strict_settings():
    return TraitcraftSettings(_env_file=None, strict_redeclaration=True)
