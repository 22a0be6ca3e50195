"""
Tests for sqlformatter.appender (Indenter and SqlAppender).
"""

import pytest

from sqlformatter.appender import LINE_SEPARATOR, Indenter, SqlAppender


@pytest.mark.unit
def test_indenter_newline_uses_depth():
    indenter = Indenter('  ')
    indenter.increment().increment()

    assert indenter.newline() == LINE_SEPARATOR + '    '


@pytest.mark.edge_case
def test_indenter_negative_depth_renders_no_indentation():
    indenter = Indenter('  ')
    indenter.decrement().decrement()

    assert indenter.depth == -2
    assert indenter.newline() == '\n'


@pytest.mark.unit
def test_indenter_reset():
    indenter = Indenter()
    indenter.increment().increment().reset()

    assert indenter.depth == 0


@pytest.mark.unit
def test_appender_chaining():
    appender = SqlAppender('\t')
    appender.append('select').increment().newline().append('a')

    assert str(appender) == 'select\n\ta'
    assert appender.depth == 1


@pytest.mark.unit
def test_space_is_written_between_tokens():
    appender = SqlAppender()
    appender.append('a').space().space().append('=')

    assert str(appender) == 'a ='


@pytest.mark.unit
def test_pending_space_dropped_before_newline():
    appender = SqlAppender()
    appender.append('a').space().newline().append('b')

    assert str(appender) == 'a\nb'


@pytest.mark.unit
def test_space_ignored_at_start_of_line():
    appender = SqlAppender('  ')
    appender.append('a').increment().newline().space().append('b')

    assert str(appender) == 'a\n  b'


@pytest.mark.edge_case
def test_space_ignored_on_empty_buffer():
    appender = SqlAppender()
    appender.space().append('a')

    assert str(appender) == 'a'


@pytest.mark.unit
def test_start_line_tracking():
    appender = SqlAppender()
    assert appender.start_line is False

    appender.append('a').newline()
    assert appender.start_line is True

    appender.append('b')
    assert appender.start_line is False


@pytest.mark.edge_case
def test_trailing_line_break_is_not_rendered():
    appender = SqlAppender('  ')
    appender.append('select').increment().newline()

    assert str(appender) == 'select'

    appender.append('a')
    assert str(appender) == 'select\n  a'
