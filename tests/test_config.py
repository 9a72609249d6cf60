"""
Tests for slotgrid.config
==========================
"""

import pytest
from pydantic import ValidationError

from slotgrid.config import SlotgridSettings
from slotgrid.matching.namespaces import KeyKind


class TestSlotgridSettings:

    def test_defaults(self):
        settings = SlotgridSettings.from_env({})
        assert settings.extra_ignored_namespaces == []
        assert settings.parallel_threshold == 256
        assert settings.max_workers == 8
        assert settings.log_level == "info"

    def test_from_env(self):
        settings = SlotgridSettings.from_env({
            "SLOTGRID_IGNORED_NAMESPACES": "appium, bstack:,,",
            "SLOTGRID_PARALLEL_THRESHOLD": "32",
            "SLOTGRID_MAX_WORKERS": "2",
            "SLOTGRID_LOG_LEVEL": "DEBUG",
        })
        assert settings.extra_ignored_namespaces == ["appium", "bstack"]
        assert settings.parallel_threshold == 32
        assert settings.max_workers == 2
        assert settings.log_level == "debug"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SLOTGRID_MAX_WORKERS", "5")
        assert SlotgridSettings.from_env().max_workers == 5

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            SlotgridSettings.from_env({"SLOTGRID_MAX_WORKERS": "0"})
        with pytest.raises(ValidationError):
            SlotgridSettings.from_env({"SLOTGRID_PARALLEL_THRESHOLD": "many"})
        with pytest.raises(ValidationError):
            SlotgridSettings.from_env({"SLOTGRID_LOG_LEVEL": "loud"})

    def test_frozen(self):
        settings = SlotgridSettings()
        with pytest.raises(ValidationError):
            settings.max_workers = 1

    def test_build_matcher_default(self):
        matcher = SlotgridSettings().build_matcher()
        assert matcher.registry.classify("appium:deviceName") is KeyKind.BINDING

    def test_build_matcher_with_extra_namespaces(self):
        matcher = SlotgridSettings(extra_ignored_namespaces=["appium"]).build_matcher()
        assert matcher.registry.classify("appium:deviceName") is KeyKind.IGNORED
        assert matcher.registry.classify("goog:chromeOptions") is KeyKind.IGNORED
