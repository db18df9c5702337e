"""Mutable hand state tracked across draw and discard events."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .exceptions import TileCountError
from .tiles import FIVE_INDICES, MAX_COPIES, TILE_KINDS, parse_hand, tile_from_str, tile_label


@dataclass
class HandState:
    """Tile counts for one player's concealed hand.

    `left_tiles34` counts tiles not yet seen by this player; when omitted it is
    derived from the hand itself. `discards` is kept only for the furiten
    self-check done by the analysis side.
    """

    tiles34: list[int] = field(default_factory=lambda: [0] * TILE_KINDS)
    left_tiles34: list[int] = field(default_factory=list)
    red_fives: list[int] = field(default_factory=lambda: [0, 0, 0])
    discards: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.tiles34) != TILE_KINDS:
            raise ValueError(f"tiles34 must have {TILE_KINDS} entries, got {len(self.tiles34)}")
        if not self.left_tiles34:
            self.left_tiles34 = [MAX_COPIES - count for count in self.tiles34]

    @classmethod
    def from_str(cls, text: str) -> HandState:
        """Build a hand from compact notation such as ``"123m456p789s1122z"``."""
        return cls(
            tiles34=parse_hand(text),
            red_fives=[_red_fives_in(text, suit) for suit in "mps"],
        )

    @property
    def count(self) -> int:
        return sum(self.tiles34)

    def tiles(self) -> Iterator[int]:
        """Yield the index of every tile kind present in the hand."""
        for index, count in enumerate(self.tiles34):
            if count > 0:
                yield index

    def draw(self, token: str) -> int:
        index, is_red = tile_from_str(token)
        if self.tiles34[index] >= MAX_COPIES:
            raise TileCountError(f"Cannot draw another {tile_label(index)}: hand already holds {MAX_COPIES}")
        if is_red:
            self.red_fives[index // 9] += 1
        self.left_tiles34[index] -= 1
        self.tiles34[index] += 1
        return index

    def discard(self, token: str) -> int:
        index, is_red = tile_from_str(token)
        if self.tiles34[index] == 0:
            raise TileCountError(f"Cannot discard {tile_label(index)}: not in hand")
        if is_red:
            if self.red_fives[index // 9] == 0:
                raise TileCountError(f"Cannot discard red {tile_label(index)}: none in hand")
            self.red_fives[index // 9] -= 1
        self.tiles34[index] -= 1
        if index in FIVE_INDICES:
            suit = index // 9
            self.red_fives[suit] = min(self.red_fives[suit], self.tiles34[index])
        self.discards.append(index)
        return index


def _red_fives_in(text: str, suit: str) -> int:
    """Count ``0`` ranks in the digit run belonging to ``suit``."""
    total = 0
    run: list[str] = []
    for char in text.replace(" ", ""):
        if char.isdigit():
            run.append(char)
            continue
        if char == suit:
            total += run.count("0")
        run.clear()
    return total


__all__ = ["HandState"]
