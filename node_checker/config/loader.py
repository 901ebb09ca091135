"""
Node Checker Config - YAML loading.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from node_checker.config.models import CheckerConfig
from node_checker.core.exceptions import ConfigError
from node_checker.utils.logger import log_prefix


def load_config_from_string(content: str) -> CheckerConfig:
    """
    Parse and validate a YAML configuration document.

    Raises:
        ConfigError: If the YAML is malformed, empty or fails validation.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping")

    try:
        return CheckerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: str | Path) -> CheckerConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated CheckerConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}", {"path": str(path)})

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Cannot read configuration file {path}: {e}", {"path": str(path)}
        ) from e

    config = load_config_from_string(content)
    logger.debug(f"{log_prefix('📄')} Loaded configuration from {path}")
    return config
