"""Configuration file management for expense-tracker."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from expense_tracker.errors import ConfigError
from expense_tracker.store.schema import get_default_data_dir

DEFAULT_CURRENCY = "$"


@dataclass(frozen=True)
class Settings:
    """Resolved settings passed to every command."""

    data_dir: Path
    config_path: Path
    currency: str = DEFAULT_CURRENCY


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
    return get_xdg_config_home() / "expense-tracker" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "currency": DEFAULT_CURRENCY,
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e


def load_settings(config_path: Path | None = None, data_dir: Path | None = None) -> Settings:
    """Resolve settings from the config file and explicit overrides.

    Args:
        config_path: Path to config file. If None, uses default location.
        data_dir: Data directory override, takes precedence over the config file.

    Returns:
        Resolved Settings.

    Raises:
        ConfigError: If the config file is invalid or has wrongly typed keys.
    """
    if config_path is None:
        config_path = get_config_path()
    config = load_config(config_path)

    configured_dir = config.get("data_dir")
    currency = config.get("currency", DEFAULT_CURRENCY)
    if configured_dir is not None and not isinstance(configured_dir, str):
        raise ConfigError("'data_dir' must be a string")
    if not isinstance(currency, str):
        raise ConfigError("'currency' must be a string")

    if data_dir is None:
        data_dir = Path(configured_dir).expanduser() if configured_dir else get_default_data_dir()

    return Settings(data_dir=data_dir, config_path=config_path, currency=currency)
