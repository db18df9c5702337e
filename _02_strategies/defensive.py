"""Defensive strategy: fold first, otherwise play like the balanced strategy."""
from __future__ import annotations

from _01_core.decision import Decision

from .balanced import BalancedStrategy
from .base import DiscardContext, Strategy, defensive_discard


class DefensiveStrategy(Strategy):
    def __init__(self, fallback: Strategy | None = None) -> None:
        self._fallback = fallback or BalancedStrategy()

    def select_discard(self, context: DiscardContext) -> Decision | None:
        if context.under_threat:
            fold = defensive_discard(context)
            if fold is not None:
                return fold
        return self._fallback.select_discard(context)


__all__ = ["DefensiveStrategy"]
