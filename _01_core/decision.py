"""Decision values produced by the decision engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ActionKind(str, Enum):
    DISCARD = "discard"
    MELD = "meld"
    RIICHI = "riichi"
    AGARI = "agari"
    PASS = "pass"


class MeldType(IntEnum):
    """Shape of a claimed meld."""

    CHI = 0  # sequence
    PON = 1  # triplet
    KAN = 2  # quad


@dataclass(frozen=True)
class MeldClaim:
    """The meld a `meld` decision asks the game client to call."""

    meld_type: MeldType
    target_tile: int
    combination: tuple[int, ...]


@dataclass(frozen=True)
class Decision:
    """Immutable outcome of one decision cycle.

    `tile` is ``None`` when the action concerns no particular tile. `reason`
    is free text for display and logs only.
    """

    action: ActionKind
    tile: int | None = None
    confidence: float = 0.0
    reason: str = ""
    meld: MeldClaim | None = None

    @classmethod
    def pass_action(cls, reason: str) -> Decision:
        """Create a PASS decision with zero confidence."""
        return cls(action=ActionKind.PASS, tile=None, confidence=0.0, reason=reason)

    @property
    def is_pass(self) -> bool:
        return self.action == ActionKind.PASS

    def to_dict(self) -> dict:
        payload: dict = {
            "action": self.action.value,
            "tile": "none" if self.tile is None else self.tile,
            "confidence": self.confidence,
            "reason": self.reason,
        }
        if self.meld is not None:
            payload["meld"] = {
                "type": self.meld.meld_type.name.lower(),
                "targetTile": self.meld.target_tile,
                "combination": list(self.meld.combination),
            }
        return payload


__all__ = ["ActionKind", "Decision", "MeldClaim", "MeldType"]
