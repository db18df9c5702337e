"""Auto-player configuration model and validation."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigValidationError


class StrategyName(str, Enum):
    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    DEFENSIVE = "defensive"


class AutoPlayerConfig(BaseModel):
    """Strategy and automation switches, persisted as camelCase JSON."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    enabled: bool = False
    auto_discard: bool = Field(default=True, alias="autoDiscard")
    auto_meld: bool = Field(default=False, alias="autoMeld")
    auto_riichi: bool = Field(default=False, alias="autoRiichi")
    auto_agari: bool = Field(default=True, alias="autoAgari")
    min_confidence: float = Field(default=0.7, ge=0.0, le=1.0, alias="minConfidence")
    defense_threshold: float = Field(default=0.15, ge=0.0, le=1.0, alias="defenseThreshold")
    delay_seconds: float = Field(default=1.0, ge=0.0, le=10.0, alias="delaySeconds")
    confirm_actions: bool = Field(default=True, alias="confirmActions")
    strategy: StrategyName = StrategyName.BALANCED

    def to_file_dict(self) -> dict[str, Any]:
        """Serializable form with the on-disk field names."""
        return self.model_dump(mode="json", by_alias=True)

    def with_changes(self, **changes: Any) -> AutoPlayerConfig:
        """Return a validated copy with ``changes`` applied."""
        return validate_config({**self.model_dump(), **changes})


DEFAULT_CONFIG = AutoPlayerConfig()

_FIELD_BY_ALIAS = {
    (info.alias or name): name for name, info in AutoPlayerConfig.model_fields.items()
}


def validate_config(candidate: AutoPlayerConfig | Mapping[str, Any]) -> AutoPlayerConfig:
    """Check a candidate configuration and return it as a validated model.

    Raises:
        ConfigValidationError: naming the first field that violates its range
            or type. Later violations are not reported.
    """
    data = candidate.model_dump() if isinstance(candidate, AutoPlayerConfig) else candidate
    try:
        return AutoPlayerConfig.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        loc = str(error["loc"][0]) if error["loc"] else "config"
        raise ConfigValidationError(_FIELD_BY_ALIAS.get(loc, loc), error["msg"]) from None


def format_config(config: AutoPlayerConfig) -> str:
    """Multi-line summary of a configuration for display."""
    lines = [
        "Auto-player configuration:",
        f"  enabled:           {config.enabled}",
        f"  auto discard:      {config.auto_discard}",
        f"  auto meld:         {config.auto_meld}",
        f"  auto riichi:       {config.auto_riichi}",
        f"  auto agari:        {config.auto_agari}",
        f"  min confidence:    {config.min_confidence:.2f}",
        f"  defense threshold: {config.defense_threshold:.2f}",
        f"  delay:             {config.delay_seconds:.1f}s",
        f"  confirm actions:   {config.confirm_actions}",
        f"  strategy:          {config.strategy.value}",
    ]
    return "\n".join(lines)


__all__ = [
    "DEFAULT_CONFIG",
    "AutoPlayerConfig",
    "StrategyName",
    "format_config",
    "validate_config",
]
