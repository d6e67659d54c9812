## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any


# Arithmetic happens on 64-bit signed integers, anything outside is an overflow.
INT_BITS = 64
INT_MIN = -2 ** (INT_BITS - 1)
INT_MAX = 2 ** (INT_BITS - 1) - 1


class Token:
    NUMBER = 'NUMBER'
    OPERATOR = 'OPERATOR'
    STORE = 'STORE'
    RECALL = 'RECALL'
    INVALID = 'INVALID'

    __slots__ = ('type', 'text', 'value', 'meta')

    def __init__(self, type: str, text: str, value: Any, meta: dict | None = None):
        self.type = type
        self.text = text
        self.value = value
        self.meta = meta or {}

    def __repr__(self):
        return f"Token({self.type}, {self.text!r})"

    def __str__(self):
        return self.text
