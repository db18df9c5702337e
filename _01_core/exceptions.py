"""Custom exception classes for the auto-player core."""

from __future__ import annotations


class AutoPlayerError(Exception):
    """Base exception for all auto-player errors."""


class ConfigError(AutoPlayerError):
    """Base class for configuration load/save failures."""


class ConfigReadError(ConfigError):
    """Raised when the configuration file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read config {path}: {reason}")


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not a JSON object."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse config {path}: {reason}")


class ConfigValidationError(ConfigError):
    """Raised when a configuration field violates its declared range."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid config field '{field}': {message}")


class ConfigWriteError(ConfigError):
    """Raised when the configuration file cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write config {path}: {reason}")


class InvalidTileError(AutoPlayerError, ValueError):
    """Raised when a tile token or index cannot be interpreted."""

    def __init__(self, tile: object) -> None:
        self.tile = tile
        super().__init__(f"Invalid tile: {tile!r}")


class TileCountError(AutoPlayerError):
    """Raised when a draw or discard is impossible for the current hand."""


class PhaseError(AutoPlayerError):
    """Raised when the hand tile count is not a valid decision point."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Invalid hand size: {count} tiles")


class DispatchError(AutoPlayerError):
    """Base class for failures while sending an action."""


class UnsupportedMeldTypeError(DispatchError):
    """Raised when a meld claim has an unknown meld type."""

    def __init__(self, meld_type: object) -> None:
        self.meld_type = meld_type
        super().__init__(f"Unsupported meld type: {meld_type!r}")


class DispatchSerializationError(DispatchError):
    """Raised when an action request cannot be encoded."""


class DispatchTransportError(DispatchError):
    """Raised when an action request fails to reach the game client."""


class DispatchStatusError(DispatchError):
    """Raised when the game client answers with a non-success status."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Action endpoint returned status {code}")


class UserCancelledError(AutoPlayerError):
    """Raised when a pending action is rejected or cancelled."""


class UnknownActionError(AutoPlayerError):
    """Raised when a decision names an action the gate cannot dispatch."""

    def __init__(self, action: object) -> None:
        self.action = action
        super().__init__(f"Unknown action: {action!r}")


__all__ = [
    "AutoPlayerError",
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "ConfigWriteError",
    "DispatchError",
    "DispatchSerializationError",
    "DispatchStatusError",
    "DispatchTransportError",
    "InvalidTileError",
    "PhaseError",
    "TileCountError",
    "UnknownActionError",
    "UnsupportedMeldTypeError",
    "UserCancelledError",
]
