"""Callback model: an action bound to a named lifecycle phase."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any

from traitcraft.core.types import Action


@dataclass(frozen=True, slots=True)
class Callback:
    """Lifecycle hook bound to one phase name (e.g. "after_build")."""

    name: str
    action: Action

    def run(self, instance: Any, context: Any = None) -> Any:
        """Invoke the action with as many leading arguments as it accepts.

        Actions may take no arguments, the instance, or the instance and the
        evaluation context.

        Args:
            instance: Object being constructed.
            context: Evaluation context supplied by the runtime.

        Returns:
            Whatever the action returns.
        """
        return self.action(*(instance, context)[: _positional_arity(self.action)])


def _positional_arity(action: Action) -> int:
    """Count positional parameters, capped at two (instance, context)."""
    try:
        signature = inspect.signature(action)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return 2
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return min(count, 2)
