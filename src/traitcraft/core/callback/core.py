"""Phase naming for lifecycle callbacks.

Phase name strings are the contract with the runtime that later walks the
callback list: ``before("build")`` registers under ``"before_build"``.
"""

from __future__ import annotations

from collections.abc import Iterable

BEFORE = "before"
AFTER = "after"


def phase_names(qualifier: str, phases: Iterable[str]) -> list[str]:
    """Prefix each lifecycle moment with a qualifier.

    Args:
        qualifier: Usually BEFORE or AFTER.
        phases: Lifecycle moment identifiers, e.g. "build", "create".

    Returns:
        Qualified phase names in the given order.

    Raises:
        ValueError: If no phases are given.
    """
    names = [f"{qualifier}_{phase}" for phase in phases]
    if not names:
        raise ValueError(f"{qualifier}() needs at least one phase name")
    return names
