"""Action channels: where executed decisions are sent."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from _01_core.decision import MeldType
from _01_core.exceptions import (
    DispatchSerializationError,
    DispatchStatusError,
    DispatchTransportError,
    UnsupportedMeldTypeError,
)
from _01_core.tiles import tile_to_str

logger = logging.getLogger(__name__)

# Action type codes understood by the game client bridge.
ACTION_CHI = 1
ACTION_PON = 2
ACTION_KAN = 3
ACTION_RIICHI = 4
ACTION_AGARI = 5
ACTION_PASS = 6

MELD_ACTION_CODES = {
    MeldType.CHI: ACTION_CHI,
    MeldType.PON: ACTION_PON,
    MeldType.KAN: ACTION_KAN,
}

DEFAULT_TIMEOUT = 10.0


def coerce_meld_type(meld_type: MeldType | int) -> MeldType:
    try:
        return MeldType(meld_type)
    except ValueError:
        raise UnsupportedMeldTypeError(meld_type) from None


def format_combination(tiles: Sequence[int]) -> str:
    """Join tiles as ``"1m|2m|3m"``."""
    return "|".join(tile_to_str(tile) for tile in tiles)


class ActionChannel(ABC):
    """Sink for the five action kinds the auto-player can execute.

    Implementations raise a :class:`DispatchError` subclass on failure and
    never retry on their own.
    """

    @abstractmethod
    def discard(self, tile: int) -> None:
        ...

    @abstractmethod
    def meld(self, meld_type: MeldType | int, target_tile: int, combination: Sequence[int]) -> None:
        ...

    @abstractmethod
    def riichi(self) -> None:
        ...

    @abstractmethod
    def agari(self) -> None:
        ...

    @abstractmethod
    def pass_turn(self) -> None:
        ...

    @property
    def simulated(self) -> bool:
        """Whether actions only get reported instead of transmitted."""
        return False

    @property
    def name(self) -> str:
        return self.__class__.__name__


class SimulatedChannel(ActionChannel):
    """Null-object channel used when no game client is attached.

    Each action is recorded in :attr:`reports` and logged.
    """

    def __init__(self, reporter: Callable[[str], None] | None = None) -> None:
        self.reports: list[str] = []
        self._reporter = reporter

    @property
    def simulated(self) -> bool:
        return True

    def discard(self, tile: int) -> None:
        self._report(f"simulated discard {tile_to_str(tile)}")

    def meld(self, meld_type: MeldType | int, target_tile: int, combination: Sequence[int]) -> None:
        kind = coerce_meld_type(meld_type)
        self._report(
            f"simulated {kind.name.lower()} on {tile_to_str(target_tile)} [{format_combination(combination)}]"
        )

    def riichi(self) -> None:
        self._report("simulated riichi")

    def agari(self) -> None:
        self._report("simulated agari")

    def pass_turn(self) -> None:
        self._report("simulated pass")

    def _report(self, message: str) -> None:
        self.reports.append(message)
        logger.info(message)
        if self._reporter is not None:
            self._reporter(message)


class ActionRequest(BaseModel):
    """JSON body posted to ``<base>/action``; unset fields are omitted."""

    model_config = ConfigDict(populate_by_name=True)

    type: int = Field(ge=ACTION_CHI, le=ACTION_PASS)
    tile: str | None = None
    combination: str | None = None
    pass_: bool | None = Field(default=None, alias="pass")
    timestamp: int


class HttpActionChannel(ActionChannel):
    """Sends actions to a game client bridge over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        self._clock = clock

    @property
    def base_url(self) -> str:
        return self._base_url

    def discard(self, tile: int) -> None:
        # The bridge performs discards through its pass action.
        self._send(type=ACTION_PASS, tile=tile_to_str(tile))

    def meld(self, meld_type: MeldType | int, target_tile: int, combination: Sequence[int]) -> None:
        code = MELD_ACTION_CODES[coerce_meld_type(meld_type)]
        self._send(type=code, tile=tile_to_str(target_tile), combination=format_combination(combination))

    def riichi(self) -> None:
        self._send(type=ACTION_RIICHI)

    def agari(self) -> None:
        self._send(type=ACTION_AGARI)

    def pass_turn(self) -> None:
        self._send(type=ACTION_PASS, pass_=True)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpActionChannel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, **fields: object) -> None:
        try:
            request = ActionRequest(timestamp=int(self._clock() * 1000), **fields)
            body = request.model_dump_json(by_alias=True, exclude_none=True)
        except (ValueError, TypeError, PydanticSerializationError) as exc:
            raise DispatchSerializationError(f"Failed to encode action request: {exc}") from exc

        url = f"{self._base_url}/action"
        try:
            response = self._client.post(url, content=body, headers={"Content-Type": "application/json"})
        except httpx.HTTPError as exc:
            raise DispatchTransportError(f"Failed to send action to {url}: {exc}") from exc

        if not response.is_success:
            raise DispatchStatusError(response.status_code)
        logger.debug("Sent action %s to %s", body, url)


__all__ = [
    "ACTION_AGARI",
    "ACTION_CHI",
    "ACTION_KAN",
    "ACTION_PASS",
    "ACTION_PON",
    "ACTION_RIICHI",
    "ActionChannel",
    "ActionRequest",
    "HttpActionChannel",
    "SimulatedChannel",
    "coerce_meld_type",
    "format_combination",
]
