"""
Configuration loader for loading and validating config.json.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import AppConfig


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""
    pass


def _create_default_config(config: AppConfig, config_path: Path) -> None:
    """
    Create a default config.json file.

    Args:
        config: Default AppConfig to save.
        config_path: Path where to create the config file.
    """
    try:
        save_data = {
            "_comment": "Descriptor checksum service configuration (auto-generated).",
            **config.model_dump()
        }

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(save_data, f, indent=2)

        logger.info(f"Created default config file: {config_path}")

    except IOError as e:
        logger.warning(f"Failed to create default config file: {e}")


def load_config(path: Optional[str] = None, create_missing: bool = True) -> AppConfig:
    """
    Load configuration from JSON file.

    Args:
        path: Path to config.json file. If None, looks for config.json in current directory.
        create_missing: Write a default file when none exists.

    Returns:
        Validated AppConfig instance.

    Raises:
        ConfigurationError: If config file is invalid or unreadable.
    """
    config_path = Path(path or DEFAULT_CONFIG_FILE)

    if not config_path.exists():
        logger.info(f"Config file not found: {config_path}. Using default configuration.")
        config = AppConfig()
        if create_missing:
            _create_default_config(config, config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    except IOError as e:
        raise ConfigurationError(f"Failed to read {config_path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Expected a JSON object in {config_path}")

    # Keys starting with '_' are comments
    config_dict = {k: v for k, v in config_dict.items() if not k.startswith("_")}

    try:
        config = AppConfig(**config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field = " -> ".join(str(x) for x in error["loc"])
            errors.append(f"  - {field}: {error['msg']}")

        error_message = "Configuration validation failed:\n" + "\n".join(errors)
        raise ConfigurationError(error_message) from e

    logger.info(f"Configuration loaded from {config_path}")
    return config


def save_config(config: AppConfig, path: Optional[str] = None) -> None:
    """
    Save configuration to JSON file.

    Raises:
        ConfigurationError: If config file cannot be written.
    """
    config_path = Path(path or DEFAULT_CONFIG_FILE)

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

        logger.info(f"Configuration saved to {config_path}")

    except IOError as e:
        raise ConfigurationError(f"Failed to write {config_path}: {e}") from e


def create_example_config(path: str = "config.example.json") -> None:
    """Create an example configuration file with all default values."""
    save_config(AppConfig(), path)
    logger.info(f"Example configuration created: {path}")


if __name__ == "__main__":
    create_example_config()
    print("Created config.example.json with default values")
