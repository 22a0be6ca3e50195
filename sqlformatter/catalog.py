"""
=================================
Keyword catalogs for the formatter.
=================================

Fixed enumerations of the SQL keywords the formatters react to, grouped by the
role they play in the layout. Every member carries a numeric code and its
canonical lowercase tag, so membership tests are always done against lowercased
token text.

DML catalogs:
    DmlStatement: statement starters (select, insert, update, delete)
    StartClause: qualifiers opening a sub-clause (inner, outer, left, ...)
    EndClause: keywords opening a new top-level clause (from, where, ...)
    LogicalExpression: case / when / else / end / and / or
    Quantifier: in, all, exists, any, some, between

DDL catalogs:
    DdlStatement: create table, alter table, comment on, create database, drop
    DdlStartClause, DdlEndClause, DdlConstraint: ALTER TABLE break keywords
    DdlCommentClause: keywords that break a COMMENT ON statement

Example:
    >>> from sqlformatter.catalog import EndClause
    >>> EndClause.contains('from')
    True
    >>> EndClause.FROM.tag
    'from'
"""

from enum import Enum
from typing import Optional


class Catalog(Enum):
    """Base class for ``(code, tag)`` keyword enumerations."""

    def __init__(self, code: int, tag: str):
        self.code = code
        self.tag = tag

    @classmethod
    def contains(cls, token: Optional[str]) -> bool:
        """Check whether a lowercase token is one of the catalog tags.

        Args:
            token: Lowercased token text (None is never a member)

        Returns:
            True if any member's tag equals the token
        """
        if not token:
            return False
        return token in cls.tags()

    @classmethod
    def tags(cls) -> frozenset:
        """Get the set of tags defined by the catalog."""
        return frozenset(member.tag for member in cls)

    @classmethod
    def from_code(cls, code: int) -> "Catalog":
        """Look up a member by its numeric code.

        Raises:
            ValueError: If no member has the given code
        """
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"{cls.__name__} has no member with code {code}")

    def matches(self, token: Optional[str]) -> bool:
        """Check whether a lowercase token is exactly this keyword."""
        return self.tag == token


# ============================================================================
# DML
# ============================================================================


class DmlStatement(Catalog):
    SELECT = (0, 'select')
    INSERT = (1, 'insert')
    UPDATE = (2, 'update')
    DELETE = (3, 'delete')


class StartClause(Catalog):
    INNER = (0, 'inner')
    OUTER = (1, 'outer')
    LEFT = (2, 'left')
    RIGHT = (3, 'right')
    ORDER = (4, 'order')
    GROUP = (5, 'group')


class EndClause(Catalog):
    FROM = (0, 'from')
    WHERE = (1, 'where')
    HAVING = (2, 'having')
    SET = (3, 'set')
    BY = (4, 'by')
    UNION = (5, 'union')
    JOIN = (6, 'join')
    INTO = (7, 'into')
    VALUES = (8, 'values')
    ON = (9, 'on')


class LogicalExpression(Catalog):
    WHEN = (0, 'when')
    ELSE = (1, 'else')
    AND = (2, 'and')
    OR = (3, 'or')
    END = (4, 'end')
    CASE = (5, 'case')


class Quantifier(Catalog):
    IN = (0, 'in')
    ALL = (1, 'all')
    EXISTS = (2, 'exists')
    ANY = (3, 'any')
    SOME = (4, 'some')
    BETWEEN = (5, 'between')


# ============================================================================
# DDL
# ============================================================================


class DdlStatement(Catalog):
    CREATE_TABLE = (0, 'create table')
    ALTER_TABLE = (1, 'alter table')
    COMMENT_ON = (2, 'comment on')
    CREATE_DATABASE = (3, 'create database')
    DROP = (4, 'drop')


class DdlStartClause(Catalog):
    ADD = (0, 'add')
    COLUMN = (1, 'column')
    MODIFY = (2, 'modify')
    RENAME = (3, 'rename')


class DdlEndClause(Catalog):
    ON = (0, 'on')
    CHANGE = (1, 'change')


class DdlConstraint(Catalog):
    FOREIGN = (0, 'foreign')
    REFERENCES = (1, 'references')


class DdlCommentClause(Catalog):
    COLUMN = (0, 'column')
    IS = (1, 'is')


# ============================================================================
# Indentation
# ============================================================================


class IndentType(Catalog):
    """Character used as one unit of indentation."""

    SPACE = (0, 'space')
    TAB = (1, 'tab')

    @property
    def char(self) -> str:
        """Get the literal character repeated per indentation step."""
        return '\t' if self is IndentType.TAB else ' '

    @classmethod
    def from_name(cls, name: str) -> "IndentType":
        """Resolve an indent type from its tag (``space``/``tab``), any case.

        Raises:
            ValueError: If the name is not a known tag
        """
        value = name.strip().lower()
        for member in cls:
            if member.tag == value:
                return member
        raise ValueError(f"Unknown indent type: {name!r}")
