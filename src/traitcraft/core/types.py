"""Core type definitions for traitcraft."""

from collections.abc import Callable
from typing import Any

type Action = Callable[..., Any]
"""Opaque callable stored by a composable unit.

Constructors and construction strategies receive the in-progress instance and
return it (or return nothing after side effects). Callback actions receive
the instance and, optionally, an evaluation context. traitcraft never inspects
the body of an Action; it only stores and aggregates it.
"""
