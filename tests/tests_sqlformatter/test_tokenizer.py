"""
Tests for sqlformatter.tokenizer.

Covers:
- Delimiter splitting and whitespace tokens
- Quoted and bracketed literals kept whole
- Previous non-whitespace token tracking
- DDL statement detection and tokenizer selection
"""

import pytest

from sqlformatter.catalog import DdlStatement
from sqlformatter.tokenizer import (
    DdlTokenizer,
    DmlTokenizer,
    UnsupportedStatementError,
    is_whitespace,
    leading_keywords,
    statement_of,
)


def tokens_of(tokenizer):
    tokens = []
    while tokenizer.advance():
        tokens.append(tokenizer.token)
    return tokens


# ====================
# DmlTokenizer
# ====================

@pytest.mark.unit
def test_dml_tokens():
    assert tokens_of(DmlTokenizer('select a,b from t')) == [
        'select', ' ', 'a', ',', 'b', ' ', 'from', ' ', 't',
    ]


@pytest.mark.unit
def test_dml_operators_are_single_characters():
    assert tokens_of(DmlTokenizer('select x>=1')) == ['select', ' ', 'x', '>', '=', '1']


@pytest.mark.unit
def test_dml_dotted_names_stay_together():
    assert tokens_of(DmlTokenizer('select t.a from s.t')) == ['select', ' ', 't.a', ' ', 'from', ' ', 's.t']


@pytest.mark.unit
def test_dml_input_is_trimmed():
    assert tokens_of(DmlTokenizer('  \n select a \t')) == ['select', ' ', 'a']


@pytest.mark.unit
def test_dml_each_whitespace_character_is_a_token():
    assert tokens_of(DmlTokenizer('select\t\na')) == ['select', '\t', '\n', 'a']


@pytest.mark.unit
@pytest.mark.parametrize('sql, literal', [
    ("select 'a, b (c)' from t", "'a, b (c)'"),
    ('select "my col" from t', '"my col"'),
    ('select [my col] from t', '[my col]'),
])
def test_dml_quoted_literal_is_one_token(sql, literal):
    tokens = tokens_of(DmlTokenizer(sql))

    assert tokens[2] == literal
    assert tokens[3:] == [' ', 'from', ' ', 't']


@pytest.mark.unit
def test_dml_escaped_quote_gives_adjacent_literals():
    assert tokens_of(DmlTokenizer("select 'it''s'")) == ['select', ' ', "'it'", "'s'"]


@pytest.mark.edge_case
def test_dml_unterminated_literal_runs_to_end():
    assert tokens_of(DmlTokenizer("select 'abc from t")) == ['select', ' ', "'abc from t"]


@pytest.mark.unit
def test_dml_backtick_is_a_plain_delimiter():
    assert tokens_of(DmlTokenizer('select `a b`')) == ['select', ' ', '`', 'a', ' ', 'b', '`']


@pytest.mark.unit
def test_dml_lowercase_token():
    tokenizer = DmlTokenizer('SELECT A')
    tokenizer.advance()

    assert tokenizer.token == 'SELECT'
    assert tokenizer.lowercase_token == 'select'


@pytest.mark.unit
def test_dml_last_token_skips_whitespace():
    tokenizer = DmlTokenizer('select  COUNT (*)')
    while tokenizer.advance():
        if tokenizer.token == '(':
            break

    assert tokenizer.last_token == 'count'


@pytest.mark.unit
def test_dml_last_token_empty_at_start():
    tokenizer = DmlTokenizer('select a')
    tokenizer.advance()

    assert tokenizer.last_token == ''


@pytest.mark.edge_case
def test_dml_empty_input():
    tokenizer = DmlTokenizer('   ')

    assert tokenizer.advance() is False


@pytest.mark.edge_case
def test_dml_none_input():
    with pytest.raises(TypeError):
        DmlTokenizer(None)


@pytest.mark.unit
def test_is_quote():
    tokenizer = DmlTokenizer("'x' y")
    tokenizer.advance()
    assert tokenizer.is_quote()

    tokenizer.advance()
    tokenizer.advance()
    assert not tokenizer.is_quote()


@pytest.mark.unit
@pytest.mark.parametrize('token, expected', [
    (' ', True),
    ('\t', True),
    ('\n', True),
    ('\r', True),
    ('\f', True),
    ('  ', False),
    ('a', False),
    ('', False),
    (None, False),
])
def test_is_whitespace(token, expected):
    assert is_whitespace(token) is expected


# ====================
# DDL detection
# ====================

@pytest.mark.unit
@pytest.mark.parametrize('sql, expected', [
    ('  CREATE   TABLE t (id int)', 'create table'),
    ('drop', 'drop'),
    ('comment on column t.a is', 'comment on'),
    ('(select 1)', ''),
    ('', ''),
])
def test_leading_keywords(sql, expected):
    assert leading_keywords(sql) == expected


@pytest.mark.unit
@pytest.mark.parametrize('sql, expected', [
    ('create table t (id int)', DdlStatement.CREATE_TABLE),
    ('ALTER TABLE t add c int', DdlStatement.ALTER_TABLE),
    ('comment on table t is ...', DdlStatement.COMMENT_ON),
    ('create database db', DdlStatement.CREATE_DATABASE),
    ('drop table t', DdlStatement.DROP),
    ('create index i on t (a)', None),
    ('select a from t', None),
])
def test_statement_of(sql, expected):
    assert statement_of(sql) is expected


# ====================
# DdlTokenizer
# ====================

@pytest.mark.unit
def test_ddl_create_table_tokens():
    tokenizer = DdlTokenizer('create table t (id int,x varchar(10))')

    assert tokenizer.statement is DdlStatement.CREATE_TABLE
    assert tokens_of(tokenizer) == [
        'create', ' ', 'table', ' ', 't', ' ', '(', 'id', ' ', 'int', ',',
        'x', ' ', 'varchar', '(', '10', ')', ')',
    ]


@pytest.mark.unit
def test_ddl_comment_on_keeps_parentheses_and_commas():
    tokenizer = DdlTokenizer("comment on table t is 'a, (b)'")

    assert tokens_of(tokenizer) == [
        'comment', ' ', 'on', ' ', 'table', ' ', 't', ' ', 'is', ' ', "'a, (b)'",
    ]


@pytest.mark.unit
def test_ddl_is_break():
    tokenizer = DdlTokenizer('alter table t add column c int')
    breaks = []
    while tokenizer.advance():
        if tokenizer.is_break():
            breaks.append(tokenizer.lowercase_token)

    assert breaks == ['add', 'column']


@pytest.mark.edge_case
@pytest.mark.parametrize('sql', ['drop table t', 'create database db', 'select a from t'])
def test_ddl_unsupported_statement(sql):
    with pytest.raises(UnsupportedStatementError, match='Unsupported DDL query'):
        DdlTokenizer(sql)
