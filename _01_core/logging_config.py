"""Logging configuration for the auto-player."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to output logs in JSON format (useful when the
            assistant runs as a service)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    if format_json:
        formatter = logging.Formatter(
            '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'
        )
    else:
        # Stderr keeps log lines apart from the interactive prompt on stdout
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)

    logging.root.setLevel(log_level)
    logging.root.addHandler(handler)


__all__ = ["setup_logging"]
