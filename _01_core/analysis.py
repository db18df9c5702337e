"""Inputs computed by the external hand-analysis engine.

The analysis side owns shanten calculation, wait counting and danger
estimation. This module only describes the shape of its results and the two
danger-table queries the decision policies need.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .decision import MeldType
from .hand import HandState

# Tile index -> probability that discarding it deals into an opponent's hand.
DangerTable = Mapping[int, float]

COMPLETE_SHANTEN = -1


@dataclass(frozen=True)
class DiscardCandidate:
    """One ranked discard option.

    Attributes:
        discard_tile: Tile index to discard.
        waits: Number of tiles that advance the hand after this discard.
        score: Expected hand value after the discard.
        avg_improve_waits: Average waits after an improving draw, reported for
            shanten-regressing candidates.
    """

    discard_tile: int
    waits: int
    score: int = 0
    avg_improve_waits: float = 0.0


@dataclass(frozen=True)
class MeldOffer:
    """A discard by another player that the hand may claim."""

    target_tile: int
    meld_type: MeldType
    combination: tuple[int, ...]
    # Analysis of the hand after the claim, best first.
    results: tuple[DiscardCandidate, ...] = ()
    shanten: int | None = None


@dataclass(frozen=True)
class HandAnalysis:
    """Ranked analysis results; ordering is authoritative (best first)."""

    shanten: int
    results: tuple[DiscardCandidate, ...] = ()
    regressing_results: tuple[DiscardCandidate, ...] = ()
    meld: MeldOffer | None = None

    @property
    def is_complete(self) -> bool:
        return self.shanten == COMPLETE_SHANTEN


def danger_level(hand: HandState, table: DangerTable | None) -> float:
    """Highest risk among tiles held in hand; 0 without a table."""
    if table is None:
        return 0.0
    return max((table.get(index, 0.0) for index in hand.tiles()), default=0.0)


def safest_tile(hand: HandState, table: DangerTable | None) -> int | None:
    """Lowest-risk tile in hand, lowest index on ties; ``None`` for an empty hand."""
    risks = table or {}
    candidates = [(risks.get(index, 0.0), index) for index in hand.tiles()]
    if not candidates:
        return None
    return min(candidates)[1]


__all__ = [
    "COMPLETE_SHANTEN",
    "DangerTable",
    "DiscardCandidate",
    "HandAnalysis",
    "MeldOffer",
    "danger_level",
    "safest_tile",
]
