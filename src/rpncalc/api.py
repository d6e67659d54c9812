## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Token
from .errors import *
from .parser import tokenize
from .interpreter import Evaluator


def calculate(expression: str) -> str:
    """Evaluate on a fresh evaluator and return the value left on top of the stack."""
    evaluator = Evaluator()
    evaluator.evaluate(expression)
    return evaluator.peek()
