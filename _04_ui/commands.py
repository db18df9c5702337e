"""Special command handling for the interactive prompt."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from _01_core.config import StrategyName, format_config
from _01_core.exceptions import ConfigError
from _03_automation.session import AutomationSession

logger = logging.getLogger(__name__)

AUTO_PREFIX = "auto-"

HELP_TEXT = """\
Available commands:
  help         - show this help
  auto-help    - show auto-player commands
  quit/exit    - leave interactive mode
  <tile>       - draw or discard a tile, e.g. 1m, 2p, 3s, 1z (0m/0p/0s for red fives)"""

AUTO_HELP_TEXT = """\
Auto-player commands:
  auto-enable / auto-on      - enable automatic play
  auto-disable / auto-off    - disable automatic play
  auto-toggle                - flip the enabled switch
  auto-show                  - show the current configuration
  auto-reset                 - restore and save the default configuration
  auto-aggressive            - use the aggressive strategy
  auto-balanced              - use the balanced strategy
  auto-defensive             - use the defensive strategy
  auto-strategy=<name>       - same as the three commands above"""


class CommandResult(Enum):
    NOT_COMMAND = "not_command"
    HANDLED = "handled"
    QUIT = "quit"


def handle_special_command(
    token: str,
    session: AutomationSession,
    out: Callable[[str], None] = print,
) -> CommandResult:
    """Intercept help, quit and ``auto-*`` tokens before tile parsing."""
    token = token.strip()
    if token == "help":
        out(HELP_TEXT)
        return CommandResult.HANDLED
    if token == "auto-help":
        out(AUTO_HELP_TEXT)
        return CommandResult.HANDLED
    if token in ("quit", "exit"):
        out("Leaving interactive mode")
        return CommandResult.QUIT
    if token.startswith(AUTO_PREFIX):
        handle_auto_command(token[len(AUTO_PREFIX):], session, out)
        return CommandResult.HANDLED
    return CommandResult.NOT_COMMAND


def handle_auto_command(
    command: str,
    session: AutomationSession,
    out: Callable[[str], None] = print,
) -> None:
    """Run one automation-control command (the part after ``auto-``)."""
    strategies = {name.value for name in StrategyName}
    try:
        if command in ("enable", "on"):
            session.set_enabled(True)
            out("Auto-player enabled")
        elif command in ("disable", "off"):
            session.set_enabled(False)
            out("Auto-player disabled")
        elif command == "toggle":
            config = session.toggle()
            out(f"Auto-player {'enabled' if config.enabled else 'disabled'}")
        elif command == "show":
            out(format_config(session.config))
        elif command == "reset":
            session.reset()
            out("Auto-player configuration reset to defaults")
        elif command in strategies or command.startswith("strategy="):
            name = command.split("=", 1)[-1]
            config = session.set_strategy(name)
            out(f"Strategy set to {config.strategy.value}")
        else:
            out(f"Unknown command: {AUTO_PREFIX}{command} (see auto-help)")
    except ConfigError as exc:
        logger.warning("Auto command %r failed: %s", command, exc)
        out(f"Configuration error: {exc}")


__all__ = [
    "AUTO_HELP_TEXT",
    "HELP_TEXT",
    "CommandResult",
    "handle_auto_command",
    "handle_special_command",
]
