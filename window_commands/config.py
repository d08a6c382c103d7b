"""Config loading/saving, merging, paths.

Provides configuration management with global defaults and project-local overrides.
"""

from __future__ import annotations

import copy
import json
import logging
from enum import Enum
from pathlib import Path

import dacite

from .exceptions import (
    ConfigLoadError,
    ConfigSaveError,
    ConfigValidationError,
)
from .models import AppConfig

logger = logging.getLogger(__name__)

# Configuration file locations
CONFIG_DIR = Path.home() / ".config" / "window-commands"
GLOBAL_CONFIG_PATH = CONFIG_DIR / "config.json"
PROJECT_CONFIG_FILENAME = ".window-commands.json"

# A frame must be splittable once along either axis
MIN_FRAME_SIZE = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def merge_configs(global_config: dict, project_config: dict) -> dict:
    """
    Merge project config into global config.

    Rules:
    - Scalars: project overrides global
    - Lists: project replaces global (no merge)
    - Dicts: recursive merge
    - None in project: removes key from global

    Args:
        global_config: The base configuration dictionary
        project_config: The override configuration dictionary

    Returns:
        Merged configuration dictionary
    """
    result = copy.deepcopy(global_config)

    for key, value in project_config.items():
        if value is None:
            result.pop(key, None)
        elif isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def _read_json(path: Path, description: str) -> dict:
    """Read a JSON object from disk, translating failures to ConfigLoadError."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", description, e)
        raise ConfigLoadError(
            f"Invalid JSON in {description} at line {e.lineno}",
            file_path=str(path),
            context={"line": e.lineno, "column": e.colno},
            cause=e,
        ) from e
    except OSError as e:
        logger.error("Failed to read %s: %s", description, e)
        raise ConfigLoadError(
            f"Failed to read {description}",
            file_path=str(path),
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Expected a JSON object in {description}",
            value=type(data).__name__,
            expected="object",
            context={"file_path": str(path)},
        )
    logger.debug("Loaded %s from %s", description, path)
    return data


def config_from_dict(data: dict, *, source: str | None = None) -> AppConfig:
    """Build an AppConfig from a dictionary.

    Raises:
        ConfigValidationError: If the data doesn't match the schema, the
            frame is too small to split, or the log level is unknown.
    """
    try:
        config = dacite.from_dict(
            data_class=AppConfig,
            data=data,
            config=dacite.Config(cast=[Enum], strict=True),
        )
    except (dacite.DaciteError, ValueError) as e:
        logger.error("Config schema validation failed: %s", e)
        raise ConfigValidationError(
            f"Config schema validation failed: {e}",
            context={"file_path": source} if source else None,
            cause=e,
        ) from e

    _check_values(config, source)
    return config


def _check_values(config: AppConfig, source: str | None) -> None:
    """Reject values that type-check but can't be used."""
    for name in ("width", "height"):
        value = getattr(config.frame, name)
        if value < MIN_FRAME_SIZE:
            raise ConfigValidationError(
                f"Frame {name} must be at least {MIN_FRAME_SIZE}",
                field=f"frame.{name}",
                value=value,
                expected=f">= {MIN_FRAME_SIZE}",
                context={"file_path": source} if source else None,
            )

    if config.settings.log_level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            "Unknown log level",
            field="settings.log_level",
            value=config.settings.log_level,
            expected=", ".join(LOG_LEVELS),
            context={"file_path": source} if source else None,
        )


def load_global_config() -> AppConfig:
    """
    Load global application configuration.

    Loads from ~/.config/window-commands/config.json if it exists,
    otherwise returns a default AppConfig.

    Returns:
        AppConfig instance with global settings

    Raises:
        ConfigLoadError: If the config file exists but cannot be parsed.
        ConfigValidationError: If the config doesn't match the schema.
    """
    if not GLOBAL_CONFIG_PATH.exists():
        logger.debug("No global config found, using defaults")
        return AppConfig()

    data = _read_json(GLOBAL_CONFIG_PATH, "global config")
    return config_from_dict(data, source=str(GLOBAL_CONFIG_PATH))


def save_global_config(config: AppConfig) -> None:
    """
    Save global application configuration.

    Saves to ~/.config/window-commands/config.json, creating the
    directory if needed.

    Args:
        config: AppConfig instance to save

    Raises:
        ConfigSaveError: If the config cannot be saved.
    """
    from .models import model_to_dict

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create config directory: %s", e)
        raise ConfigSaveError(
            f"Failed to create config directory: {CONFIG_DIR}",
            file_path=str(CONFIG_DIR),
            cause=e,
        ) from e

    try:
        data = model_to_dict(config)
        with open(GLOBAL_CONFIG_PATH, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug("Saved global config to %s", GLOBAL_CONFIG_PATH)
    except OSError as e:
        logger.error("Failed to write config file: %s", e)
        raise ConfigSaveError(
            "Failed to write config file",
            file_path=str(GLOBAL_CONFIG_PATH),
            cause=e,
        ) from e
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize config to JSON: %s", e)
        raise ConfigSaveError(
            "Failed to serialize config to JSON",
            file_path=str(GLOBAL_CONFIG_PATH),
            cause=e,
        ) from e


def load_project_config(project_path: str | Path) -> dict:
    """
    Load project-local configuration overrides.

    Args:
        project_path: Path to the project root directory

    Returns:
        Dictionary of project-local overrides, or empty dict if no config exists

    Raises:
        ConfigLoadError: If the config file exists but cannot be parsed.
    """
    config_path = Path(project_path) / PROJECT_CONFIG_FILENAME

    if not config_path.exists():
        logger.debug("No project config found at %s", config_path)
        return {}

    return _read_json(config_path, "project config")


def load_merged_config(project_path: str | Path | None = None) -> AppConfig:
    """
    Load configuration with project-local overrides merged.

    Args:
        project_path: Optional path to project for local overrides

    Returns:
        AppConfig with merged configuration

    Raises:
        ConfigLoadError: If configuration files cannot be read.
        ConfigValidationError: If the merged config is invalid.
    """
    sources: list[str] = []
    if GLOBAL_CONFIG_PATH.exists():
        global_data = _read_json(GLOBAL_CONFIG_PATH, "global config")
        sources.append(str(GLOBAL_CONFIG_PATH))
    else:
        global_data = {}
        logger.debug("Using empty global config for merging")

    if project_path is not None:
        project_data = load_project_config(project_path)
        if project_data:
            sources.append(str(get_project_config_path(project_path)))
        merged_data = merge_configs(global_data, project_data)
        logger.debug("Merged project config from %s", project_path)
    else:
        merged_data = global_data

    return config_from_dict(merged_data, source=", ".join(sources) or None)


def get_global_config_path() -> Path:
    """Return the path to the global config file."""
    return GLOBAL_CONFIG_PATH


def get_config_dir() -> Path:
    """Return the path to the config directory."""
    return CONFIG_DIR


def get_project_config_path(project_path: str | Path) -> Path:
    """Return the path to a project's local config file."""
    return Path(project_path) / PROJECT_CONFIG_FILENAME
