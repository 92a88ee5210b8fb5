"""Configuration management for relver."""

from __future__ import annotations

from relver.config.loader import load_config
from relver.config.models import (
    CommitsConfig,
    LoggingConfig,
    RelverConfig,
    VersionConfig,
)

__all__ = [
    "CommitsConfig",
    "LoggingConfig",
    "RelverConfig",
    "VersionConfig",
    "load_config",
]
