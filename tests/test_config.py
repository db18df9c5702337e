"""
Tests for configuration validation and persistence.

Covers range checks on every bounded field, the closed strategy set, and the
config store's load / save / reset contract including its failure modes.
"""

import json

import pytest

from _01_core.config import DEFAULT_CONFIG, AutoPlayerConfig, StrategyName, format_config, validate_config
from _01_core.exceptions import ConfigParseError, ConfigReadError, ConfigValidationError, ConfigWriteError
from _03_automation.store import ConfigStore


class TestValidation:
    def test_defaults(self):
        config = DEFAULT_CONFIG
        assert config.enabled is False
        assert config.auto_discard is True
        assert config.auto_meld is False
        assert config.auto_riichi is False
        assert config.auto_agari is True
        assert config.min_confidence == 0.7
        assert config.defense_threshold == 0.15
        assert config.delay_seconds == 1.0
        assert config.confirm_actions is True
        assert config.strategy is StrategyName.BALANCED

    @pytest.mark.parametrize(
        ("key", "value", "field"),
        [
            ("minConfidence", -0.01, "min_confidence"),
            ("minConfidence", 1.01, "min_confidence"),
            ("defenseThreshold", -0.5, "defense_threshold"),
            ("defenseThreshold", 2.0, "defense_threshold"),
            ("delaySeconds", -1.0, "delay_seconds"),
            ("delaySeconds", 10.5, "delay_seconds"),
            ("strategy", "reckless", "strategy"),
        ],
    )
    def test_out_of_range_field_is_named(self, key, value, field):
        data = {**DEFAULT_CONFIG.to_file_dict(), key: value}
        with pytest.raises(ConfigValidationError) as excinfo:
            validate_config(data)
        assert excinfo.value.field == field

    @pytest.mark.parametrize(
        "changes",
        [
            {"minConfidence": 0.0, "defenseThreshold": 0.0, "delaySeconds": 0.0},
            {"minConfidence": 1.0, "defenseThreshold": 1.0, "delaySeconds": 10.0},
            {"strategy": "aggressive"},
            {"strategy": "defensive"},
        ],
    )
    def test_in_range_values_accepted(self, changes):
        config = validate_config({**DEFAULT_CONFIG.to_file_dict(), **changes})
        assert isinstance(config, AutoPlayerConfig)

    def test_validates_unchecked_instances(self):
        candidate = AutoPlayerConfig.model_construct(**{**DEFAULT_CONFIG.model_dump(), "delay_seconds": 60.0})
        with pytest.raises(ConfigValidationError) as excinfo:
            validate_config(candidate)
        assert excinfo.value.field == "delay_seconds"

    def test_unknown_fields_ignored(self):
        config = validate_config({"strategy": "defensive", "theme": "dark"})
        assert config.strategy is StrategyName.DEFENSIVE

    def test_with_changes_revalidates(self):
        with pytest.raises(ConfigValidationError):
            DEFAULT_CONFIG.with_changes(min_confidence=3.0)
        assert DEFAULT_CONFIG.with_changes(strategy="aggressive").strategy is StrategyName.AGGRESSIVE

    def test_file_dict_uses_camel_case(self):
        data = DEFAULT_CONFIG.to_file_dict()
        assert set(data) == {
            "enabled",
            "autoDiscard",
            "autoMeld",
            "autoRiichi",
            "autoAgari",
            "minConfidence",
            "defenseThreshold",
            "delaySeconds",
            "confirmActions",
            "strategy",
        }
        assert data["strategy"] == "balanced"

    def test_format_config_mentions_strategy(self):
        assert "strategy:          balanced" in format_config(DEFAULT_CONFIG)


class TestConfigStore:
    def test_missing_file_writes_and_activates_defaults(self, store):
        store.set(DEFAULT_CONFIG.with_changes(enabled=True))
        config = store.load()
        assert config == DEFAULT_CONFIG
        assert store.get() == DEFAULT_CONFIG
        assert json.loads(store.path.read_text(encoding="utf-8")) == DEFAULT_CONFIG.to_file_dict()

    def test_load_applies_persisted_values(self, store):
        data = {**DEFAULT_CONFIG.to_file_dict(), "enabled": True, "strategy": "aggressive"}
        store.path.write_text(json.dumps(data), encoding="utf-8")
        config = store.load()
        assert config.enabled is True
        assert store.get().strategy is StrategyName.AGGRESSIVE

    def test_invalid_file_is_never_applied(self, store):
        data = {**DEFAULT_CONFIG.to_file_dict(), "enabled": True, "defenseThreshold": 1.5}
        store.path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ConfigValidationError) as excinfo:
            store.load()
        assert excinfo.value.field == "defense_threshold"
        assert store.get() == DEFAULT_CONFIG

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"balanced"'])
    def test_malformed_file_raises_parse_error(self, store, content):
        store.path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigParseError):
            store.load()

    def test_undecodable_file_raises_parse_error(self, store):
        store.path.write_bytes(b'{"strategy": "\xff\xfe"}')
        with pytest.raises(ConfigParseError):
            store.load()
        assert store.get() == DEFAULT_CONFIG

    def test_unreadable_file_raises_read_error(self, tmp_path):
        directory = tmp_path / "config_dir"
        directory.mkdir()
        with pytest.raises(ConfigReadError):
            ConfigStore(directory).load()

    def test_unwritable_path_raises_write_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ConfigStore(blocker / "auto_player_config.json")
        with pytest.raises(ConfigWriteError):
            store.save()

    def test_save_load_save_is_idempotent(self, store):
        store.set(DEFAULT_CONFIG.with_changes(enabled=True, delay_seconds=2.5, strategy="defensive"))
        store.save()
        first = store.path.read_bytes()
        store.load()
        store.save()
        assert store.path.read_bytes() == first

    def test_set_rejects_invalid_candidate(self, store):
        candidate = AutoPlayerConfig.model_construct(**{**DEFAULT_CONFIG.model_dump(), "min_confidence": -1.0})
        with pytest.raises(ConfigValidationError):
            store.set(candidate)
        assert store.get() == DEFAULT_CONFIG

    def test_update_and_reset(self, store):
        store.update(enabled=True, strategy="aggressive")
        assert store.get().enabled is True
        assert store.reset() == DEFAULT_CONFIG
        assert store.get() == DEFAULT_CONFIG
        assert store.path.exists()
