"""
===========================================
Data Definition Language (DDL) formatting.
===========================================

Bracket and comma layout for the DDL statements the formatter understands.
Each statement kind has its own small formatter; DdlFormatter picks one from
the leading keywords and hands back any other DDL statement trimmed but
otherwise untouched.

Classes:
    CreateTableFormatter: One column/constraint definition per line
    AlterTableFormatter: One line per ADD/DROP/MODIFY/RENAME/... action
    CommentOnFormatter: COLUMN and IS on their own lines, operands indented
    DdlFormatter: Dispatch by leading keywords

Example:
    >>> from sqlformatter.ddl import DdlFormatter
    >>> print(DdlFormatter().format("create table t (id int, name varchar(10))"))
    create table t (
        id int,
        name varchar(10)
    )
"""

import logging

from sqlformatter.appender import SqlAppender
from sqlformatter.catalog import DdlCommentClause, DdlStartClause, DdlStatement
from sqlformatter.tokenizer import DdlTokenizer, statement_of

logger = logging.getLogger(__name__)


class CreateTableFormatter:
    """Formatter for CREATE TABLE statements.

    The outermost parenthesis opens the definition list: each top-level
    comma ends a line and the closing parenthesis goes on its own line.
    Nested parentheses such as ``varchar(10)`` or ``decimal(10, 2)`` stay
    inline.
    """

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit

    def format(self, sql: str) -> str:
        tokenizer = DdlTokenizer(sql)
        out = SqlAppender(self.indent_unit)
        depth = 0

        while tokenizer.advance():
            token = tokenizer.token
            if token == "(":
                out.append(token)
                if depth < 1:
                    out.increment().newline()
                depth += 1
            elif token == "," and depth == 1:
                out.append(token).newline()
            elif token == ")":
                depth -= 1
                if depth < 1:
                    out.decrement().newline()
                out.append(token)
            elif tokenizer.is_whitespace:
                out.space()
            else:
                out.append(token)

        return str(out)


class AlterTableFormatter:
    """Formatter for ALTER TABLE statements.

    Break keywords (add, column, modify, rename, drop, on, change, foreign,
    references) start a new line; ``column`` stays on the line of the keyword
    before it. After a break keyword other than rename and drop, the operand
    moves to the next, indented line.
    """

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit

    def format(self, sql: str) -> str:
        tokenizer = DdlTokenizer(sql)
        out = SqlAppender(self.indent_unit)
        operand_pending = False

        while tokenizer.advance():
            token = tokenizer.token
            lowercase = tokenizer.lowercase_token

            if tokenizer.is_quote():
                if operand_pending:
                    out.increment().newline().decrement()
                    operand_pending = False
                out.append(token)
            elif tokenizer.is_break():
                if not DdlStartClause.COLUMN.matches(lowercase):
                    out.newline()
                out.append(token)
                operand_pending = not (
                    DdlStartClause.RENAME.matches(lowercase) or DdlStatement.DROP.matches(lowercase)
                )
            elif token == ";":
                out.newline().append(token)
                operand_pending = False
            elif tokenizer.is_whitespace:
                out.space()
            else:
                if operand_pending:
                    out.increment().newline().decrement()
                    operand_pending = False
                out.append(token)

        return str(out)


class CommentOnFormatter:
    """Formatter for COMMENT ON statements."""

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit

    def format(self, sql: str) -> str:
        tokenizer = DdlTokenizer(sql)
        out = SqlAppender(self.indent_unit)
        operand_pending = False

        while tokenizer.advance():
            token = tokenizer.token
            if DdlCommentClause.contains(tokenizer.lowercase_token):
                out.newline().append(token)
                operand_pending = True
            elif tokenizer.is_whitespace:
                out.space()
            else:
                if operand_pending:
                    out.increment().newline().decrement()
                    operand_pending = False
                out.append(token)

        return str(out)


class DdlFormatter:
    """Dispatch DDL statements to the formatter for their kind.

    Attributes:
        indent_unit: Text written once per indentation level

    Example:
        >>> DdlFormatter().format("  drop table t  ")
        'drop table t'
    """

    _FORMATTERS = {
        DdlStatement.CREATE_TABLE: CreateTableFormatter,
        DdlStatement.ALTER_TABLE: AlterTableFormatter,
        DdlStatement.COMMENT_ON: CommentOnFormatter,
    }

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit

    def format(self, sql: str) -> str:
        """Lay out a DDL statement.

        Args:
            sql: Raw SQL text

        Returns:
            Formatted SQL for CREATE TABLE, ALTER TABLE and COMMENT ON; the
            trimmed input for anything else

        Raises:
            TypeError: If sql is None
        """
        if sql is None:
            raise TypeError("sql must not be None")
        trimmed = sql.strip()
        statement = statement_of(trimmed)
        formatter_class = self._FORMATTERS.get(statement)
        if formatter_class is None:
            logger.debug(f"No DDL layout for {statement.tag if statement else 'statement'}, returning it trimmed")
            return trimmed

        logger.debug(f"Formatting {statement.tag} statement with {formatter_class.__name__}")
        return formatter_class(self.indent_unit).format(trimmed)
