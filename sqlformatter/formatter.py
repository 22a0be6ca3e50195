"""
==============================
SQL formatter entry points.
==============================

Sniffs the leading keyword of a statement and routes it to the DML layout
engine or to the DDL formatters. Statements of any other kind come back
trimmed but otherwise unchanged: formatting is best-effort, not validating.

Routing (case-insensitive, after trimming):
    - select / insert / update / delete -> DmlFormatter
    - create table / alter table / comment on / create database / drop -> DdlFormatter
    - anything else -> trimmed input

The default indentation comes from core.config (SQL_FORMATTER_INDENT and
SQL_FORMATTER_INDENT_TYPE); format_with_indent overrides the width per call.

Example:
    >>> from sqlformatter.formatter import format_sql, format_with_indent
    >>> print(format_with_indent("update t set a = 1, b = 2 where id = 3", 2))
    update
      t
    set
      a = 1,
      b = 2
    where
      id = 3
"""

import logging
from typing import Optional

from core.config import config
from sqlformatter.catalog import IndentType
from sqlformatter.ddl import DdlFormatter
from sqlformatter.dml import DmlFormatter, is_dml
from sqlformatter.tokenizer import statement_of

logger = logging.getLogger(__name__)


def _validate_indent(indent: int) -> int:
    if isinstance(indent, bool) or not isinstance(indent, int):
        raise TypeError(f"indent must be an integer, got {type(indent).__name__}")
    if indent < 0:
        raise ValueError(f"indent must not be negative, got {indent}")
    return indent


class SqlFormatter:
    """Format SQL statements of any supported kind.

    Attributes:
        indent: Indentation width (number of indent characters per level)
        indent_type: Character used for indentation
        indent_unit: Text written once per indentation level

    Example:
        >>> formatter = SqlFormatter.with_indent(2)
        >>> formatter.format("select a from t")
        'select\\n  a\\nfrom\\n  t'
    """

    def __init__(self, indent: Optional[int] = None, indent_type: Optional[IndentType] = None):
        """Initialize the formatter.

        Args:
            indent: Indentation width; defaults to the configured width
            indent_type: Indentation character; defaults to the configured type

        Raises:
            TypeError: If indent is not an integer
            ValueError: If indent is negative
        """
        self.indent = _validate_indent(config.indent if indent is None else indent)
        self.indent_type = indent_type or IndentType.from_name(config.indent_type)
        self.indent_unit = self.indent_type.char * self.indent

    @classmethod
    def with_indent(cls, indent: int) -> "SqlFormatter":
        """Create a formatter with an explicit indentation width."""
        return cls(indent=indent)

    def format(self, sql: str) -> str:
        """Format a SQL statement.

        Args:
            sql: Raw SQL text

        Returns:
            Formatted SQL, "" for empty input, or the trimmed input when the
            statement kind is not recognized

        Raises:
            TypeError: If sql is None
        """
        if sql is None:
            raise TypeError("sql must not be None")
        trimmed = sql.strip()
        if not trimmed:
            return ""

        if is_dml(trimmed):
            logger.debug("Routing statement to DML formatter")
            return DmlFormatter(self.indent_unit).format(trimmed)

        if statement_of(trimmed) is not None:
            logger.debug("Routing statement to DDL formatter")
            return DdlFormatter(self.indent_unit).format(trimmed)

        logger.debug("Unrecognized statement kind, returning input unchanged")
        return trimmed


def format_sql(sql: str) -> str:
    """Format SQL with the configured default indentation."""
    return SqlFormatter().format(sql)


def format_with_indent(sql: str, indent: int) -> str:
    """Format SQL with an explicit indentation width.

    Args:
        sql: Raw SQL text
        indent: Number of indent characters per level (must not be negative)

    Returns:
        Formatted SQL

    Raises:
        ValueError: If indent is negative
        TypeError: If sql is None or indent is not an integer
    """
    return SqlFormatter(indent=indent).format(sql)
