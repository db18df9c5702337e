"""FastAPI application exposing the auto-player configuration and decisions."""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, HTTPException

from _01_core.analysis import danger_level
from _01_core.config import validate_config
from _01_core.exceptions import ConfigValidationError, ConfigWriteError, InvalidTileError, PhaseError
from _01_core.hand import HandState
from _01_core.phase import classify
from _03_automation.session import AutomationSession, is_actionable

from .requests import DecideRequest, EnabledRequest, StrategyRequest

logger = logging.getLogger(__name__)


def create_app(session: AutomationSession | None = None) -> FastAPI:
    session = session or AutomationSession()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        session.close()

    app = FastAPI(title="Mahjong Auto-Player", version="0.1.0", lifespan=lifespan)
    app.state.session = session

    def _persisted(action) -> dict:
        try:
            config = action()
        except ConfigValidationError as exc:
            raise HTTPException(status_code=422, detail={"field": exc.field, "message": str(exc)}) from exc
        except ConfigWriteError as exc:
            logger.exception("Failed to persist config")
            raise HTTPException(status_code=500, detail="Failed to save config") from exc
        return config.to_file_dict()

    @app.get("/api/config")
    def api_get_config() -> dict:
        return session.config.to_file_dict()

    @app.put("/api/config")
    def api_put_config(payload: dict[str, Any] = Body(...)) -> dict:
        return _persisted(lambda: session.set_config(validate_config(payload)))

    @app.post("/api/config/reset")
    def api_reset_config() -> dict:
        return _persisted(session.reset)

    @app.post("/api/enabled")
    def api_set_enabled(request: EnabledRequest) -> dict:
        return _persisted(lambda: session.set_enabled(request.enabled))

    @app.post("/api/strategy")
    def api_set_strategy(request: StrategyRequest) -> dict:
        return _persisted(lambda: session.set_strategy(request.strategy))

    @app.post("/api/decide")
    def api_decide(request: DecideRequest) -> dict:
        try:
            hand = HandState.from_str(request.hand)
        except InvalidTileError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        config = session.config
        try:
            decision = session.decide(hand, request.to_analysis(), request.danger, config)
        except PhaseError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

        return {
            "phase": classify(hand.count).value,
            "dangerLevel": danger_level(hand, request.danger),
            "actionable": is_actionable(decision, config),
            "decision": decision.to_dict(),
        }

    return app


__all__ = ["create_app"]
