"""Configuration models for relver.

Configuration lives in the ``[tool.relver]`` table of pyproject.toml.
Every field has a default, so an absent table yields a usable config.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from relver.core.version import ChangeLevel, Version
from relver.exceptions import InvalidVersionError


class CommitsConfig(BaseModel):
    """How commit types map to change levels."""

    model_config = ConfigDict(extra="forbid")

    types_major: list[str] = Field(default_factory=list)
    types_minor: list[str] = Field(default_factory=lambda: ["feat"])
    types_patch: list[str] = Field(default_factory=lambda: ["fix", "perf", "revert"])
    nested_change_level: ChangeLevel | None = None
    skip_release_patterns: list[str] = Field(
        default_factory=lambda: ["[skip release]", "[release skip]", "[no release]"]
    )
    exclude_paths: list[str] = Field(default_factory=list)

    @field_validator("nested_change_level", mode="before")
    @classmethod
    def _level_from_name(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return ChangeLevel[value.upper()]
            except KeyError as e:
                raise ValueError(f"unknown change level: {value!r}") from e
        return value


class VersionConfig(BaseModel):
    """Version and tag settings."""

    model_config = ConfigDict(extra="forbid")

    initial_version: str = "0.1.0"
    tag_format: str = "{id}-{version}"

    @field_validator("initial_version")
    @classmethod
    def _valid_version(cls, value: str) -> str:
        try:
            Version.parse(value)
        except InvalidVersionError as e:
            raise ValueError(str(e)) from e
        return value


class LoggingConfig(BaseModel):
    """Diagnostic logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class RelverConfig(BaseModel):
    """Root relver configuration."""

    model_config = ConfigDict(extra="forbid")

    commits: CommitsConfig = Field(default_factory=CommitsConfig)
    version: VersionConfig = Field(default_factory=VersionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
