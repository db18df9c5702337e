"""Base strategy interface and shared discard helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from _01_core.analysis import DangerTable, DiscardCandidate, HandAnalysis, safest_tile
from _01_core.config import AutoPlayerConfig
from _01_core.decision import ActionKind, Decision
from _01_core.hand import HandState
from _01_core.tiles import tile_to_str

DEFENSIVE_CONFIDENCE = 0.8
TENPAI_SHANTEN = 0


@dataclass(frozen=True)
class DiscardContext:
    """Everything a strategy may look at when choosing a discard."""

    hand: HandState
    analysis: HandAnalysis
    danger: DangerTable | None
    danger_level: float
    config: AutoPlayerConfig

    @property
    def under_threat(self) -> bool:
        # Equality with the threshold does not count as a threat.
        return self.danger_level > self.config.defense_threshold


class Strategy(ABC):
    """Abstract base class for discard policies."""

    @abstractmethod
    def select_discard(self, context: DiscardContext) -> Decision | None:
        """Choose a discard for the current hand.

        Args:
            context: Hand, analysis results, danger information and config.

        Returns:
            The discard decision, or ``None`` when no candidate is usable.
        """
        ...

    def __call__(self, context: DiscardContext) -> Decision | None:
        return self.select_discard(context)

    @property
    def name(self) -> str:
        """Return the strategy's name for display purposes."""
        return self.__class__.__name__


def defensive_discard(context: DiscardContext) -> Decision | None:
    """Fold: throw the lowest-risk tile in hand."""
    tile = safest_tile(context.hand, context.danger)
    if tile is None:
        return None
    risk = (context.danger or {}).get(tile, 0.0)
    return Decision(
        action=ActionKind.DISCARD,
        tile=tile,
        confidence=DEFENSIVE_CONFIDENCE,
        reason=f"defensive discard {tile_to_str(tile)} (danger {risk:.2f})",
    )


def offensive_discard(
    context: DiscardContext,
    candidate: DiscardCandidate,
    confidence: float,
    label: str,
) -> Decision:
    """Discard the given candidate, declaring riichi when it leaves the hand ready."""
    tile = candidate.discard_tile
    reason = f"{label} discard {tile_to_str(tile)} (waits {candidate.waits}, score {candidate.score})"
    action = ActionKind.DISCARD
    if context.config.auto_riichi and context.analysis.shanten == TENPAI_SHANTEN and candidate.waits > 0:
        action = ActionKind.RIICHI
        reason = f"riichi on {reason}"
    return Decision(action=action, tile=tile, confidence=confidence, reason=reason)


__all__ = [
    "DEFENSIVE_CONFIDENCE",
    "DiscardContext",
    "Strategy",
    "defensive_discard",
    "offensive_discard",
]
