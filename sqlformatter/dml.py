"""
===========================================
Data Manipulation Language (DML) formatting.
===========================================

Single-pass layout engine for SELECT, INSERT, UPDATE and DELETE statements.
Tokens are classified by their lowercase text and each class decides whether
a line break is emitted and how the indentation changes. There is no parse
tree: clause boundaries, subqueries, function calls, CASE blocks and
BETWEEN ... AND are all resolved from the current token and the one before it.

Layout rules, first match wins:
    - select/insert/update/delete open a statement; SELECT also opens a
      nesting frame for subqueries
    - inner/outer/left/right/order/group start a qualified clause
    - a comma ending an ON condition (at the parenthesis level of its ON)
      starts the next FROM item
    - on goes on its own, further indented line
    - values, then from/where/having/set/by/union/join/into open a clause
    - commas in column, SET, FROM and BY lists break the line
    - parentheses indent subqueries and keep function calls inline
    - and after between stays inline
    - when/else/and/or/end each start a line
    - whitespace collapses to one space, everything else is written as-is

Example:
    >>> from sqlformatter.dml import DmlFormatter
    >>> print(DmlFormatter().format("select a, b from t where a = 1"))
    select
        a,
        b
    from
        t
    where
        a = 1
"""

import logging
import re

from sqlformatter.appender import SqlAppender
from sqlformatter.catalog import (
    DmlStatement,
    EndClause,
    LogicalExpression,
    Quantifier,
    StartClause,
)
from sqlformatter.tokenizer import DmlTokenizer
from sqlformatter.trackers import ClauseTracker, FieldTracker, FunctionTracker, ParenthesisTracker

logger = logging.getLogger(__name__)

_DML_START = re.compile(r"(select|insert|update|delete)\b", re.IGNORECASE)


def is_dml(sql: str) -> bool:
    """Check whether a statement starts with a DML keyword (case-insensitive)."""
    return bool(_DML_START.match(sql.strip()))


def is_function_name(token: str) -> bool:
    """Decide whether the token before ``(`` names a function.

    A bare word in front of a parenthesis is assumed to be a function call
    unless it is a reserved word the layout reacts to. Identifiers that
    happen to collide with those keywords are formatted as keywords.

    Args:
        token: Lowercased previous non-whitespace token

    Returns:
        True if the token starts like an identifier (or a quoted name) and is
        not a logical, end-clause, quantifier or DML keyword
    """
    if not token:
        return False
    start = token[0]
    is_identifier = start.isidentifier() or start in '$"'
    return (
        is_identifier
        and not LogicalExpression.contains(token)
        and not EndClause.contains(token)
        and not Quantifier.contains(token)
        and not DmlStatement.contains(token)
    )


class DmlFormatter:
    """Formatter for DML statements.

    Holds only the indent unit; every call to ``format`` builds its own
    tokenizer, trackers and output buffer, so one instance can be shared.

    Attributes:
        indent_unit: Text written once per indentation level

    Example:
        >>> formatter = DmlFormatter(indent_unit='  ')
        >>> print(formatter.format("select count(*) from t"))
        select
          count(*)
        from
          t
    """

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit

    def format(self, sql: str) -> str:
        """Lay out a DML statement.

        Args:
            sql: Raw SQL text

        Returns:
            Formatted SQL; "" for empty input or input that does not start
            with select/insert/update/delete

        Raises:
            TypeError: If sql is None
        """
        if sql is None:
            raise TypeError("sql must not be None")
        if not is_dml(sql):
            if sql.strip():
                logger.debug("Not a DML statement, nothing to format")
            return ""
        return _DmlLayout(sql, self.indent_unit).run()


class _DmlLayout:
    """Mutable state of one DML formatting pass."""

    def __init__(self, sql: str, indent_unit: str):
        self.tokenizer = DmlTokenizer(sql)
        self.out = SqlAppender(indent_unit)
        self.parenthesis = ParenthesisTracker()
        self.function = FunctionTracker()
        self.field = FieldTracker()
        self.clause = ClauseTracker()

    def run(self) -> str:
        tokenizer = self.tokenizer
        clause = self.clause
        count = 0

        while tokenizer.advance():
            count += 1
            token = tokenizer.token
            lowercase = tokenizer.lowercase_token

            if DmlStatement.contains(lowercase):
                self._dml_statement(lowercase)
            elif StartClause.contains(lowercase):
                self._start_clause()
            elif token == "," and clause.ends_on(self.parenthesis.count) and not self.function.in_function():
                self._comma_after_on()
            elif EndClause.ON.matches(lowercase):
                self._on()
            elif EndClause.VALUES.matches(lowercase):
                self._values()
            elif EndClause.contains(lowercase):
                self._end_clause(lowercase)
            elif self.field.newline and token == "," and not self.function.in_function():
                self._field_item()
            elif token == "(":
                self._open_parenthesis()
            elif token == ")":
                self._close_parenthesis()
            elif clause.after_between and LogicalExpression.AND.matches(lowercase):
                self._and_after_between()
            elif LogicalExpression.contains(lowercase) and not LogicalExpression.CASE.matches(lowercase):
                self._logical(lowercase)
            elif tokenizer.is_whitespace:
                self.out.space()
            else:
                self._other(token, lowercase)

        logger.debug(f"Formatted DML statement: {count} tokens, final depth {self.out.depth}")
        return str(self.out)

    def _dml_statement(self, lowercase: str) -> None:
        self.out.append(self.tokenizer.token)
        if DmlStatement.SELECT.matches(lowercase):
            self.out.increment().newline()
            self.parenthesis.push()
            self.field.push().to_newline()
            self.clause.push()
        else:
            self.out.increment()
            if DmlStatement.UPDATE.matches(lowercase):
                self.out.newline()

    def _close_on(self) -> None:
        if self.clause.after_on:
            self.out.decrement()
            self.clause.after_on = False

    def _close_open_clause(self) -> None:
        # Leave the body of the previous clause, and the ON line below it.
        if not self.clause.in_clause:
            self._close_on()
            self.out.decrement().newline()

    def _start_clause(self) -> None:
        self._close_open_clause()
        self.out.append(self.tokenizer.token)
        self.clause.in_clause = True

    def _end_clause(self, lowercase: str) -> None:
        self._close_open_clause()
        if not EndClause.UNION.matches(lowercase):
            self.out.increment()
        self.out.append(self.tokenizer.token).newline()

        if EndClause.BY.matches(lowercase) or EndClause.SET.matches(lowercase) or EndClause.FROM.matches(lowercase):
            self.field.to_newline()
        else:
            self.field.to_not_newline()
        self.clause.in_clause = False

    def _on(self) -> None:
        self.out.increment().newline().append(self.tokenizer.token)
        self.clause.open_on(self.parenthesis.count)

    def _comma_after_on(self) -> None:
        self.out.append(self.tokenizer.token).decrement().newline()
        self.field.to_newline()
        self.clause.after_on = False

    def _values(self) -> None:
        self.out.decrement().newline()
        self.out.append(self.tokenizer.token)
        self.out.increment().newline()

    def _field_item(self) -> None:
        self.out.append(self.tokenizer.token).newline()

    def _open_parenthesis(self) -> None:
        self.parenthesis.increment()
        if is_function_name(self.tokenizer.last_token) or self.function.in_function():
            self.function.increment()

        self.out.append(self.tokenizer.token)
        if not self.function.in_function() and not self.field.newline:
            self.out.increment().newline()

    def _close_parenthesis(self) -> None:
        self.parenthesis.decrement()
        if self.parenthesis.closes_frame():
            # End of a subquery: drop its open ON line, then go back to the
            # enclosing SELECT's state, where this parenthesis was opened.
            self._close_on()
            self.out.decrement()
            self.parenthesis.pop().decrement()
            self.field.pop()
            self.clause.pop()

        if self.function.in_function():
            self.function.decrement()
        elif not self.field.newline:
            self.out.decrement().newline()
        self.out.append(self.tokenizer.token)

    def _and_after_between(self) -> None:
        self.out.append(self.tokenizer.token)
        self.clause.after_between = False

    def _logical(self, lowercase: str) -> None:
        if LogicalExpression.END.matches(lowercase):
            self.out.decrement()
        self.out.newline().append(self.tokenizer.token)

    def _other(self, token: str, lowercase: str) -> None:
        if token == ";":
            # Next statement of a script starts from scratch.
            self.out.reset().newline()
            self.clause.reset()
        self.out.append(token)

        if DmlStatement.INSERT.matches(self.tokenizer.last_token):
            self.out.newline()
        elif LogicalExpression.CASE.matches(lowercase):
            self.out.increment()
        elif Quantifier.BETWEEN.matches(lowercase):
            self.clause.after_between = True
