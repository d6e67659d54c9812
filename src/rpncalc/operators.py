## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import INT_MIN, INT_MAX, INT_BITS
from .errors import RpnOverflowError, RpnDivisionByZero, RpnInvalidExponent, RpnNotANumber


_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


def checked(value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise RpnOverflowError(f"Value `{value}` does not fit in a {INT_BITS}-bit signed integer.")
    return value

def parse_integer(text: str) -> int:
    """Strict decimal parse of a stack value; no whitespace, underscores or non-ASCII digits."""
    if not _INTEGER_RE.fullmatch(text):
        raise RpnNotANumber(f"Value `{text}` is not an integer.")
    return checked(int(text))


# All binary operators receive `a` (popped first, top of stack) and `b` (popped second).


## ARITHMETIC
def op_add(a: int, b: int) -> int: return checked(a + b)
def op_sub(a: int, b: int) -> int: return checked(b - a)
def op_mul(a: int, b: int) -> int: return checked(a * b)

def op_div(a: int, b: int) -> int:
    if a == 0:
        raise RpnDivisionByZero(f"Cannot divide `{b}` by zero.")
    # Truncate toward zero like native integer division, not floor like `//`.
    quotient = abs(b) // abs(a)
    return checked(quotient if (a < 0) == (b < 0) else -quotient)

def op_pow(base: int, power: int) -> int:
    if power < 0:
        raise RpnInvalidExponent(f"Exponent `{power}` must not be negative.")
    if base in (0, 1, -1) or power <= 1:
        return checked(base ** power)
    # Any base of magnitude 2+ overflows well before this many squarings.
    if power >= INT_BITS:
        raise RpnOverflowError(f"Result of `{base}` raised to `{power}` does not fit in a {INT_BITS}-bit signed integer.")
    result = 1
    for _ in range(power):
        result = checked(result * base)
    return result


# Symbols are matched case-insensitively by the tokenizer, values are descriptive names.
ARITHMETIC = {
    '+': ('add', op_add),
    '-': ('sub', op_sub),
    '*': ('mul', op_mul),
    '/': ('div', op_div),
    '^': ('pow', op_pow),
}
