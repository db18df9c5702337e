"""Pydantic request models for the auto-player API."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from _01_core.analysis import DiscardCandidate, HandAnalysis, MeldOffer
from _01_core.config import StrategyName
from _01_core.decision import MeldType

TileIndex = Annotated[int, Field(ge=0, le=33)]
Risk = Annotated[float, Field(ge=0.0, le=1.0)]


class CandidatePayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    discard_tile: TileIndex = Field(alias="discardTile")
    waits: int = Field(default=0, ge=0)
    score: int = 0
    avg_improve_waits: float = Field(default=0.0, ge=0.0, alias="avgImproveWaits")

    def to_candidate(self) -> DiscardCandidate:
        return DiscardCandidate(
            discard_tile=self.discard_tile,
            waits=self.waits,
            score=self.score,
            avg_improve_waits=self.avg_improve_waits,
        )


class MeldPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    target_tile: TileIndex = Field(alias="targetTile")
    meld_type: MeldType = Field(alias="meldType")
    combination: list[TileIndex] = Field(min_length=3, max_length=4)
    results: list[CandidatePayload] = Field(default_factory=list)
    shanten: int | None = Field(default=None, ge=-1, le=8)

    def to_offer(self) -> MeldOffer:
        return MeldOffer(
            target_tile=self.target_tile,
            meld_type=self.meld_type,
            combination=tuple(self.combination),
            results=tuple(result.to_candidate() for result in self.results),
            shanten=self.shanten,
        )


class DecideRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    hand: str = Field(max_length=64)
    shanten: int = Field(ge=-1, le=8)
    results: list[CandidatePayload] = Field(default_factory=list)
    regressing_results: list[CandidatePayload] = Field(default_factory=list, alias="regressingResults")
    meld: MeldPayload | None = None
    danger: dict[TileIndex, Risk] | None = None

    def to_analysis(self) -> HandAnalysis:
        return HandAnalysis(
            shanten=self.shanten,
            results=tuple(result.to_candidate() for result in self.results),
            regressing_results=tuple(result.to_candidate() for result in self.regressing_results),
            meld=self.meld.to_offer() if self.meld is not None else None,
        )


class EnabledRequest(BaseModel):
    enabled: bool


class StrategyRequest(BaseModel):
    strategy: StrategyName
