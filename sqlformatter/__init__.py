"""
==========================================
SQL pretty-printer for DML and DDL statements.
==========================================

Re-emits a SQL statement with normalized line breaks and indentation without
changing any of its tokens. DML (SELECT/INSERT/UPDATE/DELETE) goes through a
single-pass layout engine; CREATE TABLE, ALTER TABLE and COMMENT ON have their
own simpler formatters.

The package is organized as:
    - catalog.py: Keyword enumerations grouped by layout role
    - tokenizer.py: DML and DDL tokenizers
    - appender.py: Indentation tracking and the output buffer
    - trackers.py: Parenthesis, function-call and field-list nesting state
    - dml.py: DML layout engine
    - ddl.py: DDL formatters
    - formatter.py: Statement routing and the public entry points

Example:
    >>> from sqlformatter import format_sql, format_with_indent
    >>>
    >>> print(format_sql("select count(*) from t"))
    select
        count(*)
    from
        t
    >>> format_sql("")
    ''
"""

__version__ = "1.0.0"
__all__ = [
    'SqlFormatter', 'format_sql', 'format_with_indent',
    'DmlFormatter', 'DdlFormatter', 'UnsupportedStatementError',
]

from .ddl import DdlFormatter
from .dml import DmlFormatter
from .formatter import SqlFormatter, format_sql, format_with_indent
from .tokenizer import UnsupportedStatementError
