"""Runtime settings for the timing tools.

Defaults come from the environment when the settings object is built:
    PERFTIMER_OUTPUT_ROOT  directory for ``TimerRegistry.save_all`` (default ``timings``)
    PERFTIMER_LOG_LEVEL    log level used by the CLI (default ``WARNING``)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TimingSettings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    output_root: Path = Field(default_factory=lambda: Path(os.getenv("PERFTIMER_OUTPUT_ROOT", "timings")))
    log_level: str = Field(default_factory=lambda: os.getenv("PERFTIMER_LOG_LEVEL", "WARNING"))

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level: {v}")
        return v


_settings_singleton: Optional[TimingSettings] = None

def get_settings(force_refresh: bool = False) -> TimingSettings:
    """Return a cached settings instance."""
    global _settings_singleton
    if force_refresh or _settings_singleton is None:
        _settings_singleton = TimingSettings()
    return _settings_singleton


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger. Library code never calls this."""
    level = TimingSettings(log_level=level).log_level if level else get_settings().log_level
    logging.basicConfig(level=getattr(logging, level), format="[perftimer] %(levelname)s %(name)s: %(message)s")


__all__ = ["TimingSettings", "get_settings", "setup_logging"]
