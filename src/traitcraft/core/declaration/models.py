"""Attribute declaration model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Declaration:
    """A single named attribute specification.

    The rule is opaque to traitcraft: it is whatever the evaluation engine
    understands (a literal value, a callable, a sequence generator...).
    """

    name: str
    rule: Any = None
    overridable: bool = False
