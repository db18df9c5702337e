"""Discard strategies and the decision engine."""

from .aggressive import AggressiveStrategy
from .balanced import BalancedStrategy
from .base import DiscardContext, Strategy, defensive_discard, offensive_discard
from .defensive import DefensiveStrategy
from .engine import DecisionEngine, decide, default_strategies

__all__ = [
    "AggressiveStrategy",
    "BalancedStrategy",
    "DecisionEngine",
    "DefensiveStrategy",
    "DiscardContext",
    "Strategy",
    "decide",
    "default_strategies",
    "defensive_discard",
    "offensive_discard",
]
