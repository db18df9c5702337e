"""Balanced strategy: attack by default, fold once danger passes the threshold."""
from __future__ import annotations

from _01_core.decision import Decision

from .base import DiscardContext, Strategy, defensive_discard, offensive_discard

ATTACK_CONFIDENCE = 0.85
# Some risk in hand, even below the defense threshold, lowers confidence.
RISK_NOTICE_LEVEL = 0.1
RISK_PENALTY = 0.8


class BalancedStrategy(Strategy):
    def select_discard(self, context: DiscardContext) -> Decision | None:
        if context.under_threat:
            fold = defensive_discard(context)
            if fold is not None:
                return fold

        if not context.analysis.results:
            return None
        confidence = ATTACK_CONFIDENCE
        if context.danger_level > RISK_NOTICE_LEVEL:
            confidence *= RISK_PENALTY
        return offensive_discard(context, context.analysis.results[0], confidence, "balanced")


__all__ = ["BalancedStrategy"]
