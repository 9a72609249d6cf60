"""
Settings
========

Environment-driven configuration, read once at start-up.

Environment variables:
    SLOTGRID_IGNORED_NAMESPACES: extra vendor namespaces to ignore when
        matching, comma separated (e.g. "appium,bstack")
    SLOTGRID_PARALLEL_THRESHOLD: slot count at which eligibility checks
        fan out to a thread pool (default: 256)
    SLOTGRID_MAX_WORKERS: thread pool size (default: 8)
    SLOTGRID_LOG_LEVEL: log level for the CLI (default: info)
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .matching.matcher import DefaultSlotMatcher
from .matching.namespaces import DEFAULT_REGISTRY

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class SlotgridSettings(BaseModel):
    """Process-wide settings. Frozen once loaded."""

    model_config = {"frozen": True}

    extra_ignored_namespaces: List[str] = Field(default_factory=list)
    parallel_threshold: int = Field(default=256, ge=1)
    max_workers: int = Field(default=8, ge=1)
    log_level: str = "info"

    @field_validator("extra_ignored_namespaces", mode="before")
    @classmethod
    def _split_namespaces(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        return [ns.strip().rstrip(":") for ns in v if ns and ns.strip().rstrip(":")]

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().lower()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SlotgridSettings":
        """Build settings from SLOTGRID_* environment variables."""
        env = os.environ if environ is None else environ
        values = {}
        if env.get("SLOTGRID_IGNORED_NAMESPACES"):
            values["extra_ignored_namespaces"] = env["SLOTGRID_IGNORED_NAMESPACES"]
        if env.get("SLOTGRID_PARALLEL_THRESHOLD"):
            values["parallel_threshold"] = env["SLOTGRID_PARALLEL_THRESHOLD"]
        if env.get("SLOTGRID_MAX_WORKERS"):
            values["max_workers"] = env["SLOTGRID_MAX_WORKERS"]
        if env.get("SLOTGRID_LOG_LEVEL"):
            values["log_level"] = env["SLOTGRID_LOG_LEVEL"]
        return cls(**values)

    def build_matcher(self) -> DefaultSlotMatcher:
        """DefaultSlotMatcher honouring the extra ignored namespaces."""
        if not self.extra_ignored_namespaces:
            return DefaultSlotMatcher()
        return DefaultSlotMatcher(
            registry=DEFAULT_REGISTRY.with_ignored(self.extra_ignored_namespaces),
        )
