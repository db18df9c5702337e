"""Persistent store for the active auto-player configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import RLock
from typing import Any

from _01_core.config import DEFAULT_CONFIG, AutoPlayerConfig, validate_config
from _01_core.exceptions import ConfigParseError, ConfigReadError, ConfigWriteError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "auto_player_config.json"


class ConfigStore:
    """Owns the active configuration and its JSON file.

    Every read and write of the active configuration goes through one lock.
    A configuration only becomes active after it passes validation.
    """

    def __init__(self, path: str | Path = CONFIG_FILENAME) -> None:
        self._path = Path(path)
        self._active = DEFAULT_CONFIG
        self._lock = RLock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AutoPlayerConfig:
        """Read, validate and activate the persisted configuration.

        A missing file is replaced by the default configuration, which is
        written out and activated.
        """
        with self._lock:
            if not self._path.exists():
                logger.info("No config at %s, writing defaults", self._path)
                return self.reset()

            try:
                raw = self._path.read_bytes()
            except OSError as exc:
                raise ConfigReadError(str(self._path), str(exc)) from exc

            try:
                data = json.loads(raw.decode("utf-8"))
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise ConfigParseError(str(self._path), str(exc)) from exc
            if not isinstance(data, dict):
                raise ConfigParseError(str(self._path), "expected a JSON object")

            config = validate_config(data)
            self._active = config
            logger.info("Loaded config from %s (strategy=%s)", self._path, config.strategy.value)
            return config

    def save(self) -> None:
        """Persist the active configuration."""
        with self._lock:
            self._write(self._active)

    def get(self) -> AutoPlayerConfig:
        with self._lock:
            return self._active

    def set(self, config: AutoPlayerConfig) -> AutoPlayerConfig:
        """Validate and activate ``config``; the previous one stays active on failure."""
        validated = validate_config(config)
        with self._lock:
            self._active = validated
        return validated

    def update(self, **changes: Any) -> AutoPlayerConfig:
        """Apply field changes to the active configuration."""
        with self._lock:
            return self.set(self._active.with_changes(**changes))

    def reset(self) -> AutoPlayerConfig:
        """Persist and activate the default configuration."""
        with self._lock:
            self._write(DEFAULT_CONFIG)
            self._active = DEFAULT_CONFIG
            return DEFAULT_CONFIG

    def _write(self, config: AutoPlayerConfig) -> None:
        data = json.dumps(config.to_file_dict(), indent=2, ensure_ascii=False) + "\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(data, encoding="utf-8")
        except OSError as exc:
            raise ConfigWriteError(str(self._path), str(exc)) from exc
        logger.debug("Wrote config to %s", self._path)


__all__ = ["CONFIG_FILENAME", "ConfigStore"]
