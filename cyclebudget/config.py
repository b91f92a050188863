"""Configuration file management for cyclebudget."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from cyclebudget.domain.models import CycleStartDay
from cyclebudget.domain.validation import require_start_day

DEFAULT_START_DAY = 1


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "cyclebudget" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "settings": {"start_day": DEFAULT_START_DAY},
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_start_day(config_path: Path | None = None) -> CycleStartDay:
    """Get the configured cycle start day.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Cycle start day, DEFAULT_START_DAY if the file has none.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        InvalidArgument: If the stored value is not a day between 1 and 31.
    """
    config = load_config(config_path)
    settings = config.get("settings", {})
    return require_start_day(settings.get("start_day", DEFAULT_START_DAY))


def set_start_day(day: int, config_path: Path | None = None) -> None:
    """Validate and store the cycle start day.

    Cycles are never cached, so every later calculation uses the new day.

    Args:
        day: Day of month (1-31).
        config_path: Path to config file. If None, uses default location.

    Raises:
        InvalidArgument: If day is out of range. Nothing is written.
    """
    start_day = require_start_day(day)
    config = load_config(config_path)

    settings = config.get("settings", {})
    settings["start_day"] = start_day
    config["settings"] = settings

    save_config(config, config_path)
