"""Turn phase classification from the hand tile count."""

from __future__ import annotations

from enum import Enum

from .exceptions import PhaseError


class Phase(Enum):
    """Decision point implied by ``hand tile count % 3``."""

    DRAW = "draw"  # one tile pending a discard/keep decision
    CHOICE = "choice"  # meld or discard may be chosen
    INVALID = "invalid"


_BY_REMAINDER = {1: Phase.DRAW, 2: Phase.CHOICE, 0: Phase.INVALID}


def classify(count: int) -> Phase:
    """Return the phase for a hand holding ``count`` tiles."""
    return _BY_REMAINDER[count % 3]


def require_decision_phase(count: int) -> Phase:
    """Like :func:`classify` but raise :class:`PhaseError` for invalid counts."""
    phase = classify(count)
    if phase is Phase.INVALID:
        raise PhaseError(count)
    return phase


__all__ = ["Phase", "classify", "require_decision_phase"]
