"""Tests for configuration loading."""

from pathlib import Path

import pytest

from rainbow_delimiters.config import RainbowConfig, load_config
from rainbow_delimiters.exceptions import ConfigError
from rainbow_delimiters.theme import ThemeMode


def test_load_config(tmp_path: Path) -> None:
    """Test loading a config with every setting."""
    config_path = tmp_path / "rainbow_config.yaml"
    config_path.write_text(
        """
palette_size: 8
theme: dark
processed_attribute: data-colored
"""
    )

    config = load_config(config_path)

    assert config.palette_size == 8
    assert config.theme is ThemeMode.DARK
    assert config.processed_attribute == "data-colored"


def test_defaults() -> None:
    config = RainbowConfig()

    assert config.palette_size == 32
    assert config.theme is ThemeMode.AUTO
    assert config.processed_attribute == "data-rainbow-processed"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "rainbow_config.yaml"
    config_path.write_text("")

    assert load_config(config_path) == RainbowConfig()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "palette_size: 0\n",
        "theme: sepia\n",
        "processed_attribute: ''\n",
        "- palette_size: 8\n",
        "palette_size: [\n",
    ],
)
def test_invalid_config(tmp_path: Path, content: str) -> None:
    """Test that invalid values raise ConfigError."""
    config_path = tmp_path / "rainbow_config.yaml"
    config_path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(config_path)
