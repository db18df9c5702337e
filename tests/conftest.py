"""
Pytest configuration and shared fixtures for auto-player tests.

Provides ready-made hands, analysis results, danger tables and a recording
action channel that stands in for the game client bridge.
"""

import pytest

from _01_core.analysis import DiscardCandidate, HandAnalysis
from _01_core.config import DEFAULT_CONFIG
from _01_core.hand import HandState
from _03_automation.channel import ActionChannel, coerce_meld_type
from _03_automation.store import ConfigStore

# 14 tiles: 1m2m3m 2p3p4p 7s8s9s East x3 South x2
FOURTEEN_TILE_HAND = "123m234p789s11122z"


class RecordingChannel(ActionChannel):
    """Channel that records every call and can be told to fail."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple] = []
        self._error = error

    def _record(self, *call) -> None:
        if self._error is not None:
            raise self._error
        self.calls.append(call)

    def discard(self, tile):
        self._record("discard", tile)

    def meld(self, meld_type, target_tile, combination):
        self._record("meld", coerce_meld_type(meld_type), target_tile, tuple(combination))

    def riichi(self):
        self._record("riichi")

    def agari(self):
        self._record("agari")

    def pass_turn(self):
        self._record("pass")


def enabled_config(**changes):
    """Default config, switched on, with optional overrides."""
    return DEFAULT_CONFIG.with_changes(enabled=True, **changes)


@pytest.fixture
def hand() -> HandState:
    return HandState.from_str(FOURTEEN_TILE_HAND)


@pytest.fixture
def analysis() -> HandAnalysis:
    """Analysis whose best discard is 5m (index 4) with 8 waits."""
    return HandAnalysis(
        shanten=1,
        results=(
            DiscardCandidate(discard_tile=4, waits=8, score=3900),
            DiscardCandidate(discard_tile=28, waits=6, score=2000),
        ),
    )


@pytest.fixture
def danger_table() -> dict[int, float]:
    """Risk for every tile in FOURTEEN_TILE_HAND; 2p (index 10) is safest."""
    return {
        0: 0.3,
        1: 0.3,
        2: 0.5,
        10: 0.02,
        11: 0.2,
        12: 0.2,
        24: 0.3,
        25: 0.3,
        26: 0.3,
        27: 0.05,
        28: 0.04,
    }


@pytest.fixture
def recording_channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def store(tmp_path) -> ConfigStore:
    return ConfigStore(tmp_path / "auto_player_config.json")
