"""Application configuration with YAML support."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Literal, TypeVar

import yaml
from pydantic import BaseModel, Field, field_validator

TAppConfig = TypeVar("TAppConfig", bound="AppConfig")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseModel):
    data_path: str
    record_type: str = "pokemon"
    score_field: str = Field(default="attack", min_length=1)

    # Log and skip records that fail validation instead of aborting the load
    skip_invalid: bool = False

    log_level: LogLevel = "INFO"
    announce_new_records: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_dict(cls: type[TAppConfig], data: Mapping[str, object]) -> TAppConfig:
        return cls.model_validate(data)


def load_config(yaml_path: str | Path) -> AppConfig:
    """Load application configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        AppConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is invalid or missing required fields
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

    if not data or not isinstance(data, Mapping):
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

    try:
        return AppConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: AppConfig, yaml_path: str | Path) -> None:
    """Save application configuration to YAML file."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.to_dict()

    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
