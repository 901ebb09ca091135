"""
Node Checker Config - Configuration management.
"""

from node_checker.config.loader import load_config, load_config_from_string
from node_checker.config.models import (
    BaselineConfig,
    CheckerConfig,
    CollectorConfig,
    EvaluatorsConfig,
    LoggingConfig,
    NodeAddressConfig,
    RunnerConfig,
)

__all__ = [
    "BaselineConfig",
    "CheckerConfig",
    "CollectorConfig",
    "EvaluatorsConfig",
    "LoggingConfig",
    "NodeAddressConfig",
    "RunnerConfig",
    "load_config",
    "load_config_from_string",
]
