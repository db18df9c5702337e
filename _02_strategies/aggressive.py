"""Aggressive strategy: always push for the best shape, ignoring danger."""
from __future__ import annotations

from _01_core.decision import ActionKind, Decision
from _01_core.tiles import tile_to_str

from .base import DiscardContext, Strategy, offensive_discard

PRIMARY_CONFIDENCE = 0.9
FALLBACK_CONFIDENCE = 0.7


class AggressiveStrategy(Strategy):
    """Take the top-ranked discard; fall back to a shanten-regressing one."""

    def select_discard(self, context: DiscardContext) -> Decision | None:
        analysis = context.analysis
        if analysis.results:
            return offensive_discard(context, analysis.results[0], PRIMARY_CONFIDENCE, "aggressive")
        if analysis.regressing_results:
            best = analysis.regressing_results[0]
            return Decision(
                action=ActionKind.DISCARD,
                tile=best.discard_tile,
                confidence=FALLBACK_CONFIDENCE,
                reason=(
                    f"shanten-regressing discard {tile_to_str(best.discard_tile)} "
                    f"(avg waits after improvement {best.avg_improve_waits:.1f})"
                ),
            )
        return None


__all__ = ["AggressiveStrategy"]
