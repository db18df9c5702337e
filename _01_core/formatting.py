"""Shared formatting utilities for decision display."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tiles import tile_label, tile_to_str

if TYPE_CHECKING:
    from .decision import Decision


def tile_text(index: int) -> str:
    """
    Return a tile as token plus label.

    Args:
        index: Tile index in [0, 33]

    Returns:
        A string like "5m (5 man)" or "5z (White)"
    """
    return f"{tile_to_str(index)} ({tile_label(index)})"


def confidence_tier(confidence: float) -> str:
    """Bucket a confidence value into high / medium / low."""
    if confidence >= 0.8:
        return "high"
    if confidence >= 0.6:
        return "medium"
    return "low"


def format_decision(decision: Decision) -> str:
    """
    Format a decision for the observer surface.

    Args:
        decision: The decision to describe

    Returns:
        Two lines: the action with tile and confidence, then the reason
    """
    head = f"[auto] {decision.action.value}"
    if decision.tile is not None:
        head += f" {tile_text(decision.tile)}"
    head += f" (confidence {decision.confidence * 100:.1f}%, {confidence_tier(decision.confidence)})"
    return f"{head}\n    reason: {decision.reason}"


__all__ = ["confidence_tier", "format_decision", "tile_text"]
