"""
==========================================
Configuration management for the formatter.
==========================================

Loads formatter settings from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

Variables:
    SQL_FORMATTER_INDENT_TYPE: Indentation character, 'space' or 'tab' (default: space)
    SQL_FORMATTER_INDENT: Indent characters per level (default: 4)
    SQL_FORMATTER_LOG_LEVEL: Logging level for the CLI (default: WARNING)
    SQL_FORMATTER_LOG_FILE: Optional log file name for the CLI

The configuration is read once at import and treated as read-only afterwards.

Example:
    >>> from core.config import config
    >>>
    >>> print(f"Indent: {config.indent} x {config.indent_type}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# Names accepted for SQL_FORMATTER_INDENT_TYPE; sqlformatter.catalog.IndentType
# maps them to characters.
INDENT_TYPES = ('space', 'tab')


class ConfigError(Exception):
    """Exception raised for invalid configuration values.

    Raised when an environment variable cannot be converted to the expected
    type or is out of range.
    """
    pass


@dataclass
class FormatterConfig:
    """Indentation defaults for the formatters.

    Attributes:
        indent_type: Indentation character name ('space' or 'tab')
        indent: Number of indent characters per level
    """

    indent_type: str
    indent: int

    def __post_init__(self):
        if self.indent_type not in INDENT_TYPES:
            raise ConfigError(f"Indent type must be one of {list(INDENT_TYPES)}, got {self.indent_type!r}")
        if self.indent < 0:
            raise ConfigError(f"Indent must not be negative, got {self.indent}")


@dataclass
class LoggingConfig:
    """Logging settings used by the command-line interface.

    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name; None disables file logging
    """

    level: str
    log_file: Optional[str] = None


def _read_indent(value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"SQL_FORMATTER_INDENT must be an integer, got {value!r}") from e


class Config:
    """Centralized configuration manager.

    Attributes:
        formatter: FormatterConfig with indentation defaults
        logging: LoggingConfig with CLI logging settings

    Properties:
        indent: Default indentation width
        indent_type: Default indentation character
        log_level: Logging level name
        log_file: Log file name or None

    Example:
        >>> config = Config()
        >>> config.indent
        4
    """

    def __init__(self):
        """Initialize configuration from environment variables.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        self.formatter = FormatterConfig(
            indent_type=os.getenv('SQL_FORMATTER_INDENT_TYPE', 'space').strip().lower(),
            indent=_read_indent(os.getenv('SQL_FORMATTER_INDENT', '4'))
        )
        self.logging = LoggingConfig(
            level=os.getenv('SQL_FORMATTER_LOG_LEVEL', 'WARNING').upper(),
            log_file=os.getenv('SQL_FORMATTER_LOG_FILE') or None
        )

    @property
    def indent(self) -> int:
        """Get default indentation width."""
        return self.formatter.indent

    @property
    def indent_type(self) -> str:
        """Get default indentation character type ('space' or 'tab')."""
        return self.formatter.indent_type

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return self.logging.level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file name."""
        return self.logging.log_file


# Global configuration instance
config = Config()
