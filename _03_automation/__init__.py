"""Configuration persistence, action dispatch and execution gating."""

from .channel import ActionChannel, ActionRequest, HttpActionChannel, SimulatedChannel
from .gate import ExecutionGate, ExecutionOutcome, prompt_confirm
from .session import AutomationSession, CycleResult, is_actionable
from .store import CONFIG_FILENAME, ConfigStore

__all__ = [
    "CONFIG_FILENAME",
    "ActionChannel",
    "ActionRequest",
    "AutomationSession",
    "ConfigStore",
    "CycleResult",
    "ExecutionGate",
    "ExecutionOutcome",
    "HttpActionChannel",
    "SimulatedChannel",
    "is_actionable",
    "prompt_confirm",
]
