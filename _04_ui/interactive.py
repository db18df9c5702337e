"""Interactive draw/discard loop feeding the automation session."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Protocol

from _01_core.analysis import DangerTable, HandAnalysis
from _01_core.exceptions import AutoPlayerError, InvalidTileError, TileCountError, UserCancelledError
from _01_core.hand import HandState
from _01_core.phase import Phase, require_decision_phase
from _03_automation.session import AutomationSession, CycleResult

from .commands import CommandResult, handle_special_command

logger = logging.getLogger(__name__)


class HandAnalyzer(Protocol):
    """External analysis engine: hand in, ranked results and danger table out."""

    def __call__(self, hand: HandState) -> tuple[HandAnalysis, DangerTable | None]:
        ...


def play_turn(
    hand: HandState,
    session: AutomationSession,
    analyzer: HandAnalyzer,
    out: Callable[[str], None] = print,
) -> CycleResult | None:
    """Analyze the hand and let the session act; errors are reported, not raised."""
    try:
        analysis, danger = analyzer(hand)
        return session.run_cycle(hand, analysis, danger)
    except UserCancelledError as exc:
        out(f"Cancelled: {exc}")
    except AutoPlayerError as exc:
        out(f"Error: {exc}")
    except Exception as exc:
        logger.exception("Internal error during decision cycle")
        out(f"Internal error: {exc}")
    return None


def interact(
    hand: HandState,
    session: AutomationSession,
    analyzer: HandAnalyzer,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> None:
    """Prompt for drawn and discarded tiles until the input ends.

    ``quit``/``exit`` terminate the process.

    Raises:
        PhaseError: if the hand ever holds a multiple of three tiles.
    """
    out("Type 'help' for help, 'auto-help' for auto-player commands")
    while True:
        phase = require_decision_phase(hand.count)

        try:
            token = read("> draw " if phase is Phase.DRAW else "> discard ").strip()
        except EOFError:
            return

        result = handle_special_command(token, session, out)
        if result is CommandResult.QUIT:
            sys.exit(0)
        if result is CommandResult.HANDLED:
            continue

        try:
            if phase is Phase.DRAW:
                hand.draw(token)
            else:
                hand.discard(token)
        except (InvalidTileError, TileCountError) as exc:
            out(str(exc))
            continue

        play_turn(hand, session, analyzer, out)


__all__ = ["HandAnalyzer", "interact", "play_turn"]
