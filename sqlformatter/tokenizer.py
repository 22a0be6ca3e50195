"""
===========================
Tokenizers for SQL layout.
===========================

Splits raw SQL text into the lexical tokens the formatters walk over. Every
delimiter character is returned as its own one-character token and every
maximal run of other characters (identifiers, keywords, numbers, dotted names)
becomes a single token. Quoted literals are kept whole: once a ``'``, ``"`` or
``[`` is seen, the following raw tokens are concatenated until the matching
closer is consumed, so the layout never breaks a line inside a literal.

Classes:
    DmlTokenizer: Tokenizer for SELECT/INSERT/UPDATE/DELETE statements
    DdlTokenizer: Tokenizer for CREATE TABLE/ALTER TABLE/COMMENT ON statements

Example:
    >>> tokenizer = DmlTokenizer("select 'it''s' from t")
    >>> tokens = []
    >>> while tokenizer.advance():
    ...     tokens.append(tokenizer.token)
    >>> tokens
    ['select', ' ', "'it'", "'s'", ' ', 'from', ' ', 't']
"""

import re
from typing import Iterator, List, Optional

from sqlformatter.catalog import (
    DdlConstraint,
    DdlEndClause,
    DdlStartClause,
    DdlStatement,
)

WHITESPACES = " \n\r\f\t"

DML_DELIMITERS = ";()+*/-=<>'`\"[]," + WHITESPACES
CREATE_TABLE_DELIMITERS = ";(,)'[]\"" + WHITESPACES
ALTER_TABLE_DELIMITERS = ";(,)'[]\"" + WHITESPACES
COMMENT_ON_DELIMITERS = ";'[]\"" + WHITESPACES

# Opening quote/bracket -> closing character
QUOTE_CLOSERS = {"'": "'", '"': '"', '[': ']'}


class UnsupportedStatementError(Exception):
    """Exception raised when a tokenizer is given a statement it cannot split.

    Raised by DdlTokenizer for statements other than CREATE TABLE, ALTER TABLE
    and COMMENT ON.
    """
    pass


def is_whitespace(token: Optional[str]) -> bool:
    """Check whether a token is exactly one recognized whitespace character."""
    return bool(token) and len(token) == 1 and token in WHITESPACES


def _compile(delimiters: str) -> "re.Pattern":
    escaped = re.escape(delimiters)
    return re.compile(f"[^{escaped}]+|[{escaped}]")


def _split(pattern: "re.Pattern", sql: str) -> Iterator[str]:
    for match in pattern.finditer(sql):
        yield match.group(0)


class _QuoteAwareTokenizer:
    """Shared advance loop: one raw token at a time, quoted literals joined."""

    def __init__(self, sql: str, pattern: "re.Pattern"):
        self._raw = _split(pattern, sql)
        self.token = ""
        self.lowercase_token = ""

    def _next_raw(self) -> Optional[str]:
        raw = next(self._raw, None)
        if raw is None:
            return None

        closer = QUOTE_CLOSERS.get(raw)
        if closer is None:
            return raw

        parts: List[str] = [raw]
        for symbol in self._raw:
            parts.append(symbol)
            if symbol == closer:
                break
        return "".join(parts)

    def advance(self) -> bool:
        """Move to the next token.

        Returns:
            True if a token was produced, False once the input is exhausted
        """
        raw = self._next_raw()
        if raw is None:
            return False
        self.token = raw
        self.lowercase_token = raw.lower()
        return True

    @property
    def is_whitespace(self) -> bool:
        """Whether the current token is a single whitespace character."""
        return is_whitespace(self.token)

    def is_quote(self) -> bool:
        """Whether the current token is a quoted or bracketed literal."""
        return bool(self.token) and self.token[0] in QUOTE_CLOSERS


class DmlTokenizer(_QuoteAwareTokenizer):
    """Tokenizer for DML statements.

    Besides the current token it remembers the previous non-whitespace token
    (lowercased) in ``last_token``, which the layout engine uses for lookbehind
    decisions such as function-name detection.

    Attributes:
        token: Current token, case preserved
        lowercase_token: Current token lowercased
        last_token: Previous non-whitespace token lowercased ("" at the start)

    Example:
        >>> tokenizer = DmlTokenizer("select count(*)")
        >>> while tokenizer.advance():
        ...     if tokenizer.token == '(':
        ...         break
        >>> tokenizer.last_token
        'count'
    """

    _PATTERN = _compile(DML_DELIMITERS)

    def __init__(self, sql: str):
        if sql is None:
            raise TypeError("sql must not be None")
        super().__init__(sql.strip(), self._PATTERN)
        self.last_token = ""

    def advance(self) -> bool:
        if self.token and not self.is_whitespace:
            self.last_token = self.lowercase_token
        return super().advance()


class DdlTokenizer(_QuoteAwareTokenizer):
    """Tokenizer for DDL statements.

    The delimiter set depends on the statement: CREATE TABLE and ALTER TABLE
    split on parentheses and commas, COMMENT ON does not.

    Raises:
        UnsupportedStatementError: If the statement is not CREATE TABLE,
            ALTER TABLE or COMMENT ON
    """

    _PATTERNS = (
        (DdlStatement.CREATE_TABLE, _compile(CREATE_TABLE_DELIMITERS)),
        (DdlStatement.ALTER_TABLE, _compile(ALTER_TABLE_DELIMITERS)),
        (DdlStatement.COMMENT_ON, _compile(COMMENT_ON_DELIMITERS)),
    )

    def __init__(self, sql: str):
        if sql is None:
            raise TypeError("sql must not be None")
        self.statement = statement_of(sql)
        for statement, pattern in self._PATTERNS:
            if statement is self.statement:
                super().__init__(sql.strip(), pattern)
                return
        raise UnsupportedStatementError(f"Unsupported DDL query was given: {sql}")

    def is_break(self) -> bool:
        """Whether the current token starts a new line in ALTER TABLE layout."""
        token = self.lowercase_token
        return (
            DdlStatement.DROP.matches(token)
            or DdlStartClause.contains(token)
            or DdlEndClause.contains(token)
            or DdlConstraint.contains(token)
        )


_LEADING_WORDS = re.compile(r"\s*([A-Za-z_]+)(?:\s+([A-Za-z_]+))?")


def leading_keywords(sql: str) -> str:
    """Get the first one or two words of a statement, lowercased and space-joined.

    Example:
        >>> leading_keywords("  CREATE   TABLE t (id int)")
        'create table'
    """
    match = _LEADING_WORDS.match(sql or "")
    if not match:
        return ""
    return " ".join(word.lower() for word in match.groups() if word)


def statement_of(sql: str) -> Optional[DdlStatement]:
    """Identify which DDL statement a SQL string starts with.

    Returns:
        The matching DdlStatement member, or None for anything else
    """
    words = leading_keywords(sql)
    for statement in DdlStatement:
        if words == statement.tag or words.split(" ")[0] == statement.tag:
            return statement
    return None
