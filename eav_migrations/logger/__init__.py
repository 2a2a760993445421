"""Centralized logging configuration for the EAV migration generator.

This module provides a configured logger instance that can be imported and used
throughout the application. The logger is configured from logging_config.json,
with records routed through a queue handler to the console.

Usage:
    from eav_migrations.logger import logger

    logger.info("This is an info message")
    logger.error("This is an error message")
    logger.debug("This is a debug message")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
