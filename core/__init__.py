"""
=======================================
Core infrastructure for the formatter.
=======================================

This package provides centralized configuration management and logging
setup used by the command-line interface and the formatter package.

Modules:
    config: Configuration management from environment variables
    logger: Centralized logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Default indent: {config.indent}")
"""

__version__ = "1.0.0"
__all__ = ['get_logger', 'setup_logging', 'config', 'Config', 'ConfigError']

from core.config import Config, ConfigError, config
from core.logger import get_logger, setup_logging
