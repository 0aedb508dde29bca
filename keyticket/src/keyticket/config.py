"""Configuration loading utilities for keyticket."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError
from .paths import runtime_config_dir
from .utils.config import DEFAULT_CHALLENGE_LENGTH, PROTOCOL_KDF, PROTOCOL_VERSION, KdfParams

_LOG_LEVEL_ENV = "KEYTICKET_LOG_LEVEL"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return value

    def normalized_level(self) -> str:
        return (os.getenv(_LOG_LEVEL_ENV) or self.level).upper()


class ChallengeConfig(BaseModel):
    length: int = Field(default=DEFAULT_CHALLENGE_LENGTH, ge=1, description="Random challenge size in bytes")


class OutputConfig(BaseModel):
    encoding: Literal["base64", "hex"] = Field(default="base64", description="Text encoding for binary output")


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    challenge: ChallengeConfig = Field(default_factory=ChallengeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".keyticket" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "ChallengeConfig",
    "DEFAULT_CONFIG",
    "KdfParams",
    "LoggingConfig",
    "OutputConfig",
    "PROTOCOL_KDF",
    "PROTOCOL_VERSION",
    "dump_default_config",
    "load_config",
]
