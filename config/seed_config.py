"""Demo marketplace seed configuration loader."""

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from core.logger import logger
from core.exceptions import ConfigurationError


def load_seed_config(config_path: str) -> Dict[str, Any]:
    """
    Load seed data from a JSON or YAML file.

    Args:
        config_path: Path to seed file

    Returns:
        Dictionary with "profiles" and "jobs" lists

    Raises:
        ConfigurationError: If file cannot be loaded
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(f"Seed file not found: {config_path}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            if config_file.suffix.lower() in (".yaml", ".yml"):
                config = yaml.safe_load(f)
            else:
                config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in seed file: {str(e)}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in seed file: {str(e)}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Seed file must contain a mapping: {config_path}")

    config.setdefault("profiles", [])
    config.setdefault("jobs", [])
    logger.info(f"Loaded seed data from: {config_path}")
    return config
