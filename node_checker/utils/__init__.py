"""
Node Checker Utils - Logging helpers.
"""

from node_checker.utils.logger import get_run_logger, log_prefix, setup_logger, use_emoji_logs

__all__ = ["get_run_logger", "log_prefix", "setup_logger", "use_emoji_logs"]
