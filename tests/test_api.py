## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

import rpncalc.api as R


def test_calculate_returns_top_of_stack():
    assert R.calculate("5 5 ^ 125 - 30 /") == "100"


def test_calculate_uses_fresh_state():
    assert R.calculate("1 2 + !a") == "3"
    with pytest.raises(R.RpnUndefinedVariable):
        R.calculate("@a 1 +")


def test_calculate_with_nothing_left_on_stack():
    with pytest.raises(R.RpnStackUnderflow):
        R.calculate("?")


def test_errors_share_base_class_and_builtin_kinds():
    with pytest.raises(R.RpnError):
        R.calculate("5")
    with pytest.raises(ZeroDivisionError):
        R.calculate("1 0 /")
    with pytest.raises(OverflowError):
        R.calculate("64 2 ^")
    with pytest.raises(NameError):
        R.calculate("@nope 1 +")


def test_tokenize_is_exposed():
    assert [t.type for t in R.tokenize("1 @a !b")] == [R.Token.NUMBER, R.Token.RECALL, R.Token.STORE]
