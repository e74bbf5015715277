"""Logging configuration package."""

from log_config.logger import configure_logging, get_logger, log_performance, logger

__all__ = ["configure_logging", "get_logger", "log_performance", "logger"]
