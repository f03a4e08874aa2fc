"""Configuration file loading (rainbow_config.yaml)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .document import DEFAULT_PROCESSED_ATTRIBUTE
from .exceptions import ConfigError
from .palette import DEFAULT_PALETTE_SIZE
from .theme import ThemeMode


class RainbowConfig(BaseModel):
    """Settings shared by all commands."""

    palette_size: int = Field(default=DEFAULT_PALETTE_SIZE, ge=1)
    theme: ThemeMode = ThemeMode.AUTO
    processed_attribute: str = Field(default=DEFAULT_PROCESSED_ATTRIBUTE, min_length=1)


def load_config(config_path: Path | str) -> RainbowConfig:
    """Load configuration from a YAML file.

    An empty file yields the defaults.

    Args:
        config_path: Path to rainbow_config.yaml

    Returns:
        Validated RainbowConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file is not a mapping or has invalid values
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return RainbowConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {config_path}")

    try:
        return RainbowConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e
