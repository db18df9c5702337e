"""Automation session: single owner of configuration, engine and gate."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from _01_core.analysis import DangerTable, HandAnalysis
from _01_core.config import AutoPlayerConfig, StrategyName
from _01_core.decision import ActionKind, Decision
from _01_core.exceptions import ConfigWriteError
from _01_core.formatting import format_decision
from _01_core.hand import HandState
from _01_core.phase import Phase, classify
from _02_strategies.engine import DecisionEngine

from .channel import ActionChannel
from .gate import ExecutionGate, ExecutionOutcome
from .store import ConfigStore

logger = logging.getLogger(__name__)

_AUTO_FLAGS = {
    ActionKind.DISCARD: "auto_discard",
    ActionKind.MELD: "auto_meld",
    ActionKind.RIICHI: "auto_riichi",
    ActionKind.AGARI: "auto_agari",
}


def is_actionable(decision: Decision, config: AutoPlayerConfig) -> bool:
    """Whether ``decision`` may be executed automatically under ``config``."""
    flag = _AUTO_FLAGS.get(decision.action)
    if flag is None or not getattr(config, flag):
        return False
    return decision.confidence >= config.min_confidence


@dataclass(frozen=True)
class CycleResult:
    phase: Phase
    decision: Decision
    outcome: ExecutionOutcome | None = None

    @property
    def executed(self) -> bool:
        return self.outcome is not None and self.outcome.dispatched


class AutomationSession:
    """One player's automation state.

    Configuration changes made here are validated, activated and persisted.
    The decision path only reads a snapshot of the configuration taken at the
    start of each cycle.
    """

    def __init__(
        self,
        store: ConfigStore | None = None,
        engine: DecisionEngine | None = None,
        gate: ExecutionGate | None = None,
    ) -> None:
        self.store = store or ConfigStore()
        self.engine = engine or DecisionEngine()
        self.gate = gate or ExecutionGate()

    @property
    def config(self) -> AutoPlayerConfig:
        return self.store.get()

    def set_config(self, config: AutoPlayerConfig) -> AutoPlayerConfig:
        return self._persist(config)

    def set_enabled(self, enabled: bool) -> AutoPlayerConfig:
        config = self._persist(self.config.with_changes(enabled=enabled))
        logger.info("Auto-player %s", "enabled" if enabled else "disabled")
        return config

    def toggle(self) -> AutoPlayerConfig:
        return self.set_enabled(not self.config.enabled)

    def set_strategy(self, strategy: StrategyName | str) -> AutoPlayerConfig:
        config = self._persist(self.config.with_changes(strategy=strategy))
        logger.info("Strategy set to %s", config.strategy.value)
        return config

    def reset(self) -> AutoPlayerConfig:
        return self.store.reset()

    def _persist(self, config: AutoPlayerConfig) -> AutoPlayerConfig:
        """Activate and save ``config``, restoring the previous one if the write fails."""
        previous = self.store.get()
        activated = self.store.set(config)
        try:
            self.store.save()
        except ConfigWriteError:
            self.store.set(previous)
            raise
        return activated

    def attach_channel(self, channel: ActionChannel | None) -> None:
        self.gate.attach(channel)
        logger.info("Action channel: %s", self.gate.channel.name)

    def detach_channel(self) -> None:
        self.attach_channel(None)

    def decide(
        self,
        hand: HandState,
        analysis: HandAnalysis,
        danger: DangerTable | None,
        config: AutoPlayerConfig | None = None,
    ) -> Decision:
        config = config or self.config
        return self.engine.decide(hand, classify(hand.count), analysis, danger, config)

    def run_cycle(
        self,
        hand: HandState,
        analysis: HandAnalysis,
        danger: DangerTable | None,
    ) -> CycleResult:
        """Decide and, when allowed, execute one turn.

        Decisions blocked by an auto flag or below the minimum confidence are
        reported as suggestions and not executed. Errors from the engine or
        the gate propagate; hand state and configuration are left untouched.
        """
        config = self.config
        phase = classify(hand.count)
        decision = self.engine.decide(hand, phase, analysis, danger, config)
        if decision.is_pass:
            return CycleResult(phase=phase, decision=decision)
        if not is_actionable(decision, config):
            self.gate.report(f"[suggestion only] {format_decision(decision)}")
            return CycleResult(phase=phase, decision=decision)
        outcome = self.gate.apply(decision, config)
        return CycleResult(phase=phase, decision=decision, outcome=outcome)

    def close(self) -> None:
        """End the session, cancelling any pending delayed action."""
        self.gate.cancel()


__all__ = ["AutomationSession", "CycleResult", "is_actionable"]
