"""Global CLI state: which configuration file applies to this run."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME = "rainbow_config.yaml"


class _Context:
    """Application context for managing global state."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


# Singleton instance
_context = _Context()


def get_config_path() -> Path | None:
    """Get the explicitly requested config path (``--config``), if any."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    """Set the explicitly requested config path."""
    _context.config_path = path


def resolve_config_path(input_path: Path | None = None) -> Path | None:
    """Find the config file for a run.

    An explicit ``--config`` always wins, even if it does not exist (loading
    then fails loudly). Otherwise look next to the input file, then in the
    current directory.

    Returns:
        Path to use, or None if no config file was found
    """
    if _context.config_path is not None:
        return _context.config_path

    candidates: list[Path] = []
    if input_path is not None and str(input_path) != "-":
        candidates.append(Path(input_path).parent / CONFIG_FILENAME)
    candidates.append(Path(CONFIG_FILENAME))

    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None
