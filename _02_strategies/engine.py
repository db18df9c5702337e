"""Decision engine: turns hand state and analysis into a single decision."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from _01_core.analysis import DangerTable, HandAnalysis, MeldOffer, danger_level
from _01_core.config import AutoPlayerConfig, StrategyName
from _01_core.decision import ActionKind, Decision, MeldClaim
from _01_core.exceptions import PhaseError
from _01_core.hand import HandState
from _01_core.phase import Phase
from _01_core.tiles import tile_to_str

from .aggressive import AggressiveStrategy
from .balanced import BalancedStrategy
from .base import DiscardContext, Strategy
from .defensive import DefensiveStrategy

logger = logging.getLogger(__name__)

AGARI_CONFIDENCE = 1.0
MELD_CONFIDENCE = 0.75


def default_strategies() -> dict[StrategyName, Strategy]:
    """Fresh instances of the built-in strategies keyed by name."""
    return {
        StrategyName.AGGRESSIVE: AggressiveStrategy(),
        StrategyName.BALANCED: BalancedStrategy(),
        StrategyName.DEFENSIVE: DefensiveStrategy(),
    }


class DecisionEngine:
    """Stateless policy core.

    `decide` depends only on its arguments, so one engine can serve any
    number of sessions.
    """

    def __init__(self, strategies: Mapping[StrategyName, Strategy] | None = None) -> None:
        self._strategies = dict(strategies) if strategies is not None else default_strategies()

    def decide(
        self,
        hand: HandState,
        phase: Phase,
        analysis: HandAnalysis,
        danger: DangerTable | None,
        config: AutoPlayerConfig,
    ) -> Decision:
        """Produce the decision for one turn-phase transition.

        Raises:
            PhaseError: if ``phase`` is INVALID and the engine is enabled.
        """
        if not config.enabled:
            return Decision.pass_action("disabled")
        if phase is Phase.INVALID:
            raise PhaseError(hand.count)

        if phase is Phase.DRAW and analysis.is_complete:
            decision = Decision(
                action=ActionKind.AGARI,
                tile=None,
                confidence=AGARI_CONFIDENCE,
                reason="hand complete",
            )
        else:
            decision = None
            if phase is Phase.CHOICE and analysis.meld is not None and config.auto_meld:
                decision = self._meld_decision(analysis.meld)
            if decision is None:
                decision = self._discard_decision(hand, analysis, danger, config)

        logger.debug("Decision for %s phase: %s", phase.value, decision)
        return decision

    def _discard_decision(
        self,
        hand: HandState,
        analysis: HandAnalysis,
        danger: DangerTable | None,
        config: AutoPlayerConfig,
    ) -> Decision:
        context = DiscardContext(
            hand=hand,
            analysis=analysis,
            danger=danger,
            danger_level=danger_level(hand, danger),
            config=config,
        )
        strategy = self._strategies[config.strategy]
        decision = strategy.select_discard(context)
        if decision is None:
            return Decision.pass_action("no suitable candidate")
        return decision

    @staticmethod
    def _meld_decision(offer: MeldOffer) -> Decision | None:
        if not offer.results:
            return None
        best = offer.results[0]
        shanten = "?" if offer.shanten is None else offer.shanten
        return Decision(
            action=ActionKind.MELD,
            tile=offer.target_tile,
            confidence=MELD_CONFIDENCE,
            reason=(
                f"{offer.meld_type.name.lower()} on {tile_to_str(offer.target_tile)} "
                f"(shanten {shanten}, waits {best.waits})"
            ),
            meld=MeldClaim(
                meld_type=offer.meld_type,
                target_tile=offer.target_tile,
                combination=offer.combination,
            ),
        )


_DEFAULT_ENGINE = DecisionEngine()


def decide(
    hand: HandState,
    phase: Phase,
    analysis: HandAnalysis,
    danger: DangerTable | None,
    config: AutoPlayerConfig,
) -> Decision:
    """Module-level shortcut for :meth:`DecisionEngine.decide` with built-in strategies."""
    return _DEFAULT_ENGINE.decide(hand, phase, analysis, danger, config)


__all__ = ["AGARI_CONFIDENCE", "MELD_CONFIDENCE", "DecisionEngine", "decide", "default_strategies"]
