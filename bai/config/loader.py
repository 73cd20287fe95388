"""TOML configuration loader with deep merge support."""

import os
import tomllib
from pathlib import Path
from typing import Any


def get_config_dir() -> Path:
    """Get the configuration directory path.

    The config directory can be overridden with BAI_CONFIG_DIR env var.
    Defaults to 'config/' in the current directory or one of its parents.

    Raises:
        FileNotFoundError: If BAI_CONFIG_DIR points at a missing directory
    """
    config_dir_env = os.environ.get("BAI_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    # Walk up from the working directory, at most 5 levels
    current = Path.cwd()
    for _ in range(5):
        config_path = current / "config"
        if config_path.exists():
            return config_path
        current = current.parent

    return Path("config")


def get_environment() -> str:
    """Get the current environment from BAI_ENV.

    Defaults to 'development' if not set.
    """
    return os.environ.get("BAI_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read a TOML file into a dictionary.

    Args:
        file_path: TOML file to read (settings or policy file)

    Returns:
        Parsed TOML document, nested tables as nested dicts

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Settings loaded first (default.toml)
        override: Settings layered on top ({env}.toml)

    Returns:
        New dictionary; nested dicts are merged recursively, any other
        value in override replaces the one in base. Neither input is modified.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def flatten_keys(table: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Collapse nested tables back into dotted keys.

    TOML parses ``camelContext.exclude = "a"`` as ``{"camelContext":
    {"exclude": "a"}}``; this turns it into ``{"camelContext.exclude": "a"}``.

    Args:
        table: Parsed TOML table
        prefix: Dotted key of ``table`` itself, empty at the top level

    Returns:
        Flat dictionary of dotted key to leaf value, in document order.
        Leaf values are returned untouched.
    """
    flat: dict[str, Any] = {}
    for name, value in table.items():
        key = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            flat.update(flatten_keys(value, key))
        else:
            flat[key] = value
    return flat


def load_config() -> dict[str, Any]:
    """Load configuration from TOML files.

    Loading order:
    1. config/default.toml (required)
    2. config/{BAI_ENV}.toml (optional)

    Returns:
        Merged configuration dictionary

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    config_dir = get_config_dir()
    env = get_environment()

    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            "Create config/default.toml or set BAI_CONFIG_DIR."
        )

    config = load_toml(default_path)

    # Environment file only overrides what it names
    env_path = config_dir / f"{env}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
