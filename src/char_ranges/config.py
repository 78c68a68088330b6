"""Configuration loading utilities for char-ranges."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .paths import local_config_path, runtime_config_dir

logger = structlog.get_logger(__name__)

_LEVELS = {"critical", "error", "warning", "info", "debug"}


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.lower() not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value


class OutputConfig(BaseModel):
    indent: Optional[int] = Field(default=2, ge=0, description="JSON indentation, None for compact")
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters in JSON")
    default_offset: int = Field(default=0, ge=0, description="Bias used when --offset is omitted")


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Malformed YAML in {candidate}: {exc}") from exc
            try:
                config = AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
            logger.debug("config.loaded", path=str(candidate))
            return config
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
