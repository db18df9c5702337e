#!/usr/bin/env python
"""Run the interactive auto-player assistant.

Usage:
    python scripts/assist.py --hand 123m456p789s1122z
    python scripts/assist.py --hand 123m456p789s1122z --analyzer mypkg.analysis:analyze
    python scripts/assist.py --hand 123m456p789s1122z --server http://127.0.0.1:8765

The analyzer is an external callable taking a HandState and returning
``(HandAnalysis, danger_table_or_None)``. Without one, every cycle reports
that no candidate is available. Without --server, actions are simulated.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from _01_core.analysis import DangerTable, HandAnalysis
from _01_core.exceptions import AutoPlayerError
from _01_core.hand import HandState
from _01_core.logging_config import setup_logging
from _03_automation.channel import DEFAULT_TIMEOUT, HttpActionChannel
from _03_automation.gate import ExecutionGate
from _03_automation.session import AutomationSession
from _03_automation.store import CONFIG_FILENAME, ConfigStore
from _04_ui.interactive import HandAnalyzer, interact

logger = logging.getLogger(__name__)

# Larger than any reachable shanten, so never read as complete or ready.
UNKNOWN_SHANTEN = 8


def no_analysis(hand: HandState) -> tuple[HandAnalysis, DangerTable | None]:
    del hand  # unused
    return HandAnalysis(shanten=UNKNOWN_SHANTEN), None


def load_analyzer(target: str | None) -> HandAnalyzer:
    """Import ``module:attribute`` and return the callable it names."""
    if target is None:
        return no_analysis
    module_name, _, attribute = target.partition(":")
    if not attribute:
        raise ValueError(f"Analyzer must look like 'module:function', got {target!r}")
    return getattr(importlib.import_module(module_name), attribute)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive mahjong auto-player assistant")
    parser.add_argument("--hand", required=True, help="Starting hand, e.g. 123m456p789s1122z")
    parser.add_argument("--config", default=CONFIG_FILENAME, help="Path to the JSON config file")
    parser.add_argument("--analyzer", default=None, help="External analyzer as module:function")
    parser.add_argument("--server", default=None, help="Base URL of the game client bridge")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Dispatch timeout in seconds")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        hand = HandState.from_str(args.hand)
        analyzer = load_analyzer(args.analyzer)
        store = ConfigStore(args.config)
        store.load()
    except (AutoPlayerError, ImportError, AttributeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    session = AutomationSession(store=store, gate=ExecutionGate(reporter=print))
    channel = HttpActionChannel(args.server, timeout=args.timeout) if args.server else None
    session.attach_channel(channel)

    try:
        interact(hand, session, analyzer)
    except AutoPlayerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        session.close()
        if channel is not None:
            channel.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
