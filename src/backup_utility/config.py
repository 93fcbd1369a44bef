"""Copy configuration — loads and validates optional YAML settings files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_BUFFER_SIZE = 1024

KNOWN_KEYS = {"buffer_size", "remove_partial"}


@dataclass
class CopyConfig:
    """Tunable settings for a single copy."""
    buffer_size: int = DEFAULT_BUFFER_SIZE
    remove_partial: bool = False


def load_config(path: str | Path) -> CopyConfig:
    """Load copy settings from a YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A CopyConfig instance. Values are not checked here; call
        validate_config() on the result.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If the file is not a mapping or has unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config YAML must be a mapping at the top level.")

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    return CopyConfig(
        buffer_size=data.get("buffer_size", DEFAULT_BUFFER_SIZE),
        remove_partial=data.get("remove_partial", False),
    )


def validate_config(config: CopyConfig) -> list[str]:
    """Validate loaded settings.

    Returns a list of validation error messages. Empty list means valid.
    """
    errors: list[str] = []

    # bool is an int subclass; reject it explicitly
    if isinstance(config.buffer_size, bool) or not isinstance(config.buffer_size, int):
        errors.append(
            f"buffer_size must be an integer, got {config.buffer_size!r}."
        )
    elif config.buffer_size <= 0:
        errors.append(
            f"buffer_size must be positive, got {config.buffer_size}."
        )

    if not isinstance(config.remove_partial, bool):
        errors.append(
            f"remove_partial must be true or false, got {config.remove_partial!r}."
        )

    return errors
