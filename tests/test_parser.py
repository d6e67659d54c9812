## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from rpncalc.types import Token, INT_MIN, INT_MAX
from rpncalc.parser import tokenize, format_expression_context


def _types(source: str):
    return [t.type for t in tokenize(source)]

def _values(source: str):
    return [t.value for t in tokenize(source)]


def test_numbers_and_operators_are_classified():
    assert _types("5 2 +") == [Token.NUMBER, Token.NUMBER, Token.OPERATOR]
    assert _values("5 2 +") == [5, 2, '+']


def test_signed_numbers_versus_sign_operators():
    # A sign only belongs to a number when digits follow within the same token.
    assert _values("-3 +7 - +") == [-3, 7, '-', '+']
    assert _types("-3 +7 - +") == [Token.NUMBER, Token.NUMBER, Token.OPERATOR, Token.OPERATOR]


def test_all_operator_symbols():
    assert _types("x ? & + - * / ^") == [Token.OPERATOR] * 8


def test_operators_are_case_insensitive():
    [tok] = tokenize("X")
    assert tok.type == Token.OPERATOR
    assert tok.value == 'x'
    assert tok.text == 'X'


def test_store_and_recall_directives_strip_sigil():
    store, recall = tokenize("!temp @temp")
    assert (store.type, store.value) == (Token.STORE, 'temp')
    assert (recall.type, recall.value) == (Token.RECALL, 'temp')


def test_bare_sigils_have_empty_names():
    assert [(t.type, t.value) for t in tokenize("! @")] == [(Token.STORE, ''), (Token.RECALL, '')]


def test_directive_names_may_contain_anything_but_whitespace():
    assert _values("!5 @@x") == ['5', '@x']


@pytest.mark.parametrize("source", ["5abc", "x5", "++", "--5", "3.5", "foo", "1_000"])
def test_partial_matches_are_invalid_tokens(source):
    [tok] = tokenize(source)
    assert tok.type == Token.INVALID
    assert tok.text == source


def test_empty_and_blank_input_yield_no_tokens():
    assert tokenize("") == []
    assert tokenize("  \t\n  ") == []


def test_any_whitespace_separates_tokens():
    assert _values("1\t2\n+   3\r\n*") == [1, 2, '+', 3, '*']


def test_tokens_carry_index_and_column():
    tokens = tokenize("5  22 +", filename="<test>")
    assert [t.meta['index'] for t in tokens] == [0, 1, 2]
    assert [t.meta['column'] for t in tokens] == [1, 4, 7]
    assert tokens[0].meta['filename'] == "<test>"


def test_expression_context_highlights_token():
    context = format_expression_context("1 2 foo +", 1, 5, "foo")
    assert "1 2 " in context
    assert "\033[1;97mfoo\033[0m" in context


def test_out_of_range_numbers_are_invalid_tokens():
    tokens = tokenize(f"{INT_MAX} {INT_MAX + 1} {INT_MIN} {INT_MIN - 1}")
    assert [t.type for t in tokens] == [Token.NUMBER, Token.INVALID, Token.NUMBER, Token.INVALID]
    assert tokens[1].value == str(INT_MAX + 1)
