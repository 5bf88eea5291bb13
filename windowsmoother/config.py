from __future__ import annotations

from copy import deepcopy
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


class Method(str, Enum):
    SIMPLE_AVERAGE = "simple_average"
    TRIANGULAR_WEIGHTED_AVERAGE = "triangular_weighted_average"


class SmootherSettings(BaseModel):
    window_seconds: float = Field(default=1.0, ge=0.0)
    method: Method = Method.SIMPLE_AVERAGE


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level


class AppConfig(BaseModel):
    channels: dict[str, SmootherSettings]
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def load_config(path: str | Path) -> AppConfig:
    config_path = Path(path)
    data = yaml.safe_load(config_path.read_text())
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ValueError("defaults must be a mapping")

    channels = data.get("channels")
    if not isinstance(channels, dict) or not channels:
        raise ValueError("channels must be a non-empty mapping")

    resolved_channels: dict[str, SmootherSettings] = {}
    for channel_name, channel_data in channels.items():
        if channel_data is None:
            channel_data = {}
        if not isinstance(channel_data, dict):
            raise ValueError(f"channel '{channel_name}' configuration must be a mapping")
        merged = _deep_merge(defaults, channel_data)
        try:
            resolved_channels[str(channel_name)] = SmootherSettings.model_validate(merged)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration for channel '{channel_name}': {exc}") from exc

    try:
        logging_settings = LoggingSettings.model_validate(data.get("logging") or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid logging configuration: {exc}") from exc

    return AppConfig(channels=resolved_channels, logging=logging_settings)
