"""Confirmation and delay gate between a decision and its execution."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from _01_core.config import AutoPlayerConfig
from _01_core.decision import ActionKind, Decision
from _01_core.exceptions import DispatchError, UnknownActionError, UnsupportedMeldTypeError, UserCancelledError
from _01_core.formatting import format_decision

from .channel import ActionChannel, SimulatedChannel

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Decision], bool]
Reporter = Callable[[str], None]


def prompt_confirm(decision: Decision) -> bool:
    """Ask on the terminal; only ``y``/``Y`` accepts."""
    del decision  # already reported
    response = input("Execute this action? (y/N): ")
    return response.strip() in ("y", "Y")


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of applying one decision."""

    decision: Decision
    dispatched: bool
    simulated: bool = False
    detail: str = ""


class ExecutionGate:
    """Reports a decision, asks for confirmation, waits, then dispatches it.

    Without an attached channel the gate falls back to a
    :class:`SimulatedChannel`, so it works with no external wiring.
    """

    def __init__(
        self,
        channel: ActionChannel | None = None,
        confirm: ConfirmFn = prompt_confirm,
        reporter: Reporter | None = None,
    ) -> None:
        self._reporter = reporter
        self._confirm = confirm
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._channel: ActionChannel = channel or SimulatedChannel(reporter)

    @property
    def channel(self) -> ActionChannel:
        with self._lock:
            return self._channel

    def attach(self, channel: ActionChannel | None) -> None:
        """Swap the dispatch channel; ``None`` restores simulated execution."""
        with self._lock:
            self._channel = channel or SimulatedChannel(self._reporter)

    def cancel(self) -> None:
        """Abort any pending delay; later applications are refused."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def apply(self, decision: Decision, config: AutoPlayerConfig) -> ExecutionOutcome:
        """Execute ``decision`` under the confirmation and delay policy of ``config``.

        Raises:
            UserCancelledError: the user rejected the action or the gate was cancelled.
            DispatchError: the channel failed; nothing is retried.
        """
        if decision.is_pass:
            return ExecutionOutcome(decision=decision, dispatched=False, detail="pass")

        self.report(format_decision(decision))

        if config.confirm_actions and not self._confirm(decision):
            raise UserCancelledError("Action rejected by user")
        if self._cancelled.is_set():
            raise UserCancelledError("Execution gate cancelled")
        if config.delay_seconds > 0 and self._cancelled.wait(config.delay_seconds):
            raise UserCancelledError("Pending action cancelled")

        channel = self.channel
        try:
            self._dispatch(decision, channel)
        except DispatchError as exc:
            logger.warning("Dispatch of %s via %s failed: %s", decision.action.value, channel.name, exc)
            raise

        detail = "simulated execution" if channel.simulated else f"sent via {channel.name}"
        return ExecutionOutcome(decision=decision, dispatched=True, simulated=channel.simulated, detail=detail)

    @staticmethod
    def _dispatch(decision: Decision, channel: ActionChannel) -> None:
        action = decision.action
        if action == ActionKind.DISCARD and decision.tile is not None:
            channel.discard(decision.tile)
        elif action == ActionKind.MELD:
            if decision.meld is None:
                raise UnsupportedMeldTypeError(None)
            claim = decision.meld
            channel.meld(claim.meld_type, claim.target_tile, claim.combination)
        elif action == ActionKind.RIICHI:
            channel.riichi()
            if decision.tile is not None:
                channel.discard(decision.tile)
        elif action == ActionKind.AGARI:
            channel.agari()
        else:
            raise UnknownActionError(action)

    def report(self, message: str) -> None:
        """Send a message to the observer surface."""
        logger.info(message)
        if self._reporter is not None:
            self._reporter(message)


__all__ = ["ConfirmFn", "ExecutionGate", "ExecutionOutcome", "Reporter", "prompt_confirm"]
