"""Tile constants and conversions for the 34-category tile domain."""

from __future__ import annotations

from .exceptions import InvalidTileError

TILE_KINDS = 34
MAX_COPIES = 4
HONOR_START = 27

SUITS = ("m", "p", "s", "z")
RED_FIVE_RANK = "0"

# Index of the five in each numbered suit, where red fives live.
FIVE_INDICES: tuple[int, ...] = (4, 13, 22)

HONOR_NAMES: tuple[str, ...] = ("East", "South", "West", "North", "White", "Green", "Red")
SUIT_NAMES = {"m": "man", "p": "pin", "s": "sou"}


def _check_index(index: int) -> None:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < TILE_KINDS:
        raise InvalidTileError(index)


def tile_from_str(token: str) -> tuple[int, bool]:
    """Parse a single tile token like ``"5m"`` or ``"0p"``.

    Returns the tile index and whether the token named a red five.
    """
    token = token.strip()
    if len(token) != 2:
        raise InvalidTileError(token)
    rank, suit = token[0], token[1]
    if suit not in SUITS or not rank.isdigit():
        raise InvalidTileError(token)
    suit_index = SUITS.index(suit)

    if rank == RED_FIVE_RANK:
        if suit == "z":
            raise InvalidTileError(token)
        return FIVE_INDICES[suit_index], True

    number = int(rank)
    limit = 7 if suit == "z" else 9
    if not 1 <= number <= limit:
        raise InvalidTileError(token)
    return suit_index * 9 + number - 1, False


def parse_hand(text: str) -> list[int]:
    """Parse compact hand notation (``"123m456p11z"``) into 34 counts."""
    counts = [0] * TILE_KINDS
    pending: list[str] = []
    for char in text.replace(" ", ""):
        if char.isdigit():
            pending.append(char)
            continue
        if not pending:
            raise InvalidTileError(text)
        for rank in pending:
            index, _ = tile_from_str(rank + char)
            if counts[index] >= MAX_COPIES:
                raise InvalidTileError(text)
            counts[index] += 1
        pending.clear()
    if pending:
        raise InvalidTileError(text)
    return counts


def tile_to_str(index: int) -> str:
    """Return the ``<rank><suit>`` token for a tile index.

    This is also the encoding used by the action dispatch protocol. Honors
    report their rank directly (``1z``..``7z``).
    """
    _check_index(index)
    if index >= HONOR_START:
        return f"{index - HONOR_START + 1}z"
    return f"{index % 9 + 1}{SUITS[index // 9]}"


def tile_label(index: int) -> str:
    """Human readable label, e.g. ``"5 man"`` or ``"White"``."""
    _check_index(index)
    if index >= HONOR_START:
        return HONOR_NAMES[index - HONOR_START]
    return f"{index % 9 + 1} {SUIT_NAMES[SUITS[index // 9]]}"


__all__ = [
    "FIVE_INDICES",
    "HONOR_START",
    "MAX_COPIES",
    "SUITS",
    "TILE_KINDS",
    "parse_hand",
    "tile_from_str",
    "tile_label",
    "tile_to_str",
]
