"""
Centralized logging for Node Checker.

Provides:
- Console logging with configurable level
- Optional rotated file logging
- Target-bound loggers so concurrent runs can be told apart
"""
from __future__ import annotations

import json
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from node_checker.config.models import LoggingConfig


def use_emoji_logs() -> bool:
    """
    Check if emoji prefixes should be used in log messages.

    Returns True unless USE_EMOJI_LOGS environment variable is set to "0" or "false".
    """
    value = os.environ.get("USE_EMOJI_LOGS", "1").lower()
    return value not in ("0", "false", "no", "off")


_EMOJI_TO_ASCII = {
    "🔄": "[RETRY]",
    "⚠️": "[WARN]",
    "⏱️": "[WAIT]",
    "🌐": "[CONNECT]",
    "✅": "[OK]",
    "❌": "[ERROR]",
    "🔍": "[CHECK]",
    "📊": "[STATS]",
    "🚫": "[MISMATCH]",
    "📄": "[CONFIG]",
}


def log_prefix(emoji: str) -> str:
    """
    Return the appropriate log prefix based on USE_EMOJI_LOGS setting.

    Args:
        emoji: The emoji to use when emoji logs are enabled.

    Returns:
        The emoji if USE_EMOJI_LOGS is enabled, otherwise the ASCII equivalent
        (or empty string if no mapping exists).
    """
    if use_emoji_logs():
        return emoji
    return _EMOJI_TO_ASCII.get(emoji, "")


def setup_logger(config: LoggingConfig | None = None, verbose: bool = False) -> None:
    """
    Configure loguru sinks.

    Args:
        config: Logging settings (defaults to LoggingConfig())
        verbose: Force DEBUG on the console sink
    """
    from node_checker.config.models import LoggingConfig

    config = config or LoggingConfig()
    logger.remove()

    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    logger.add(
        sys.stderr,
        format=console_format,
        level="DEBUG" if verbose else config.console_level.upper(),
        colorize=True,
    )

    if config.log_file is None:
        return

    config.log_file.parent.mkdir(parents=True, exist_ok=True)

    def format_record(record):
        """Format a file record, JSON when configured."""
        target = record["extra"].get("target", "")
        if config.json_logs:
            entry = {
                "timestamp": record["time"].isoformat(),
                "level": record["level"].name,
                "message": record["message"],
                "module": record["name"],
                "line": record["line"],
            }
            if target:
                entry["target"] = target
            # Escape braces, loguru formats the returned string again
            return json.dumps(entry).replace("{", "{{").replace("}", "}}") + "\n"
        if target:
            return (
                "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[target]} | "
                "{name}:{function}:{line} - {message}\n"
            )
        return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}\n"

    logger.add(
        config.log_file,
        rotation=f"{config.max_size_mb} MB",
        retention=f"{config.retention_days} days",
        level=config.file_level.upper(),
        format=format_record,
        enqueue=True,
    )


def get_run_logger(target: str):
    """
    Get a logger bound to a target node.

    Args:
        target: Target node url

    Returns:
        Logger instance bound to the target
    """
    return logger.bind(target=target)
