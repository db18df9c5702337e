"""Core game-side data for the auto-player: tiles, hand, phase and decisions."""

from . import analysis, config, decision, exceptions, formatting, hand, logging_config, phase, tiles

__all__ = [
    "analysis",
    "config",
    "decision",
    "exceptions",
    "formatting",
    "hand",
    "logging_config",
    "phase",
    "tiles",
]
