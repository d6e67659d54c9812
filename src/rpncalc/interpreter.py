## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys

from .types import Token
from .errors import RpnError, RpnStackUnderflow, RpnUndefinedVariable, RpnUnknownToken, RpnTrailingOperand
from .parser import tokenize
from .operators import ARITHMETIC, parse_integer
from .formatting import show_tokens_and_stack


class Evaluator:
    """Stack machine for Reverse Polish Notation expressions, with a small variable store.

    The stack holds the textual form of every value, and both the stack and the variables
    persist across calls to `evaluate` until `clear` is called.
    """

    def __init__(self, output=None):
        self.stack: list[str] = []
        self.variables: dict[str, str] = {}
        self.output = output

    def _out(self):
        return self.output if self.output is not None else sys.stdout

    # Stack ───────────────────────────────────────────────────────────────────────────────────
    def push(self, value: str) -> None:
        self.stack.append(value)

    def pop(self) -> str:
        if not self.stack:
            raise RpnStackUnderflow("Cannot pop, the stack is empty.", rpn_stack=[])
        return self.stack.pop()

    def peek(self) -> str:
        if not self.stack:
            raise RpnStackUnderflow("Cannot peek, the stack is empty.", rpn_stack=[])
        return self.stack[-1]

    def clear(self) -> None:
        self.stack.clear()
        self.variables.clear()

    def exchange(self) -> None:
        if len(self.stack) < 2:
            raise RpnStackUnderflow(f"`x` needs at least 2 items on the stack, but {len(self.stack)} available.")
        self.stack[-1], self.stack[-2] = self.stack[-2], self.stack[-1]

    def to_list(self) -> list[str]:
        """Copy of the stack with the top item first."""
        return list(reversed(self.stack))

    # Diagnostics ─────────────────────────────────────────────────────────────────────────────
    def stack_dump(self) -> None:
        if not self.stack: return
        out = self._out()
        print("STACK:", file=out)
        for item in reversed(self.stack):
            print(f"\tStack = {item}", file=out)
        print(file=out)

    def var_dump(self) -> None:
        # Gated on the stack, not on the variables.
        if not self.stack: return
        out = self._out()
        print("TEMP VARS:", file=out)
        for key, value in self.variables.items():
            print(f"\tKey = {key} = {value}", file=out)
        print(file=out)

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def evaluate(self, expression: str, filename: str | None = None, verbosity: int = 0, stats: dict | None = None) -> None:
        tokens = tokenize(expression, filename=filename)
        if not tokens:
            if verbosity > 0: print("\033[90m  ~ :\033[0m  Nothing to evaluate!", file=self._out())
            return

        final = len(tokens) - 1
        step = 0
        for index, token in enumerate(tokens):
            if verbosity == 2 or (verbosity == 1 and (token.type == Token.OPERATOR or step == 0)):
                print(f"\033[90m{step:>3} :\033[0m  ", end='', file=self._out())
                show_tokens_and_stack(tokens[index:], self.stack, file=self._out())

            step += 1
            try:
                self.execute(token, is_final=(index == final))
            except RpnError as exc:
                exc.rpn_token = token.text
                exc.rpn_meta = token.meta
                exc.rpn_stack = list(self.stack)
                raise

        if verbosity > 0:
            print(f"\033[90m{step:>3} :\033[0m  ", end='', file=self._out())
            show_tokens_and_stack([], self.stack, file=self._out())
        if stats is not None:
            stats['steps'] = stats.get('steps', 0) + step

    def execute(self, token: Token, is_final: bool = False) -> None:
        match token.type:
            case Token.NUMBER:
                if is_final:
                    raise RpnTrailingOperand(f"Last item needs to be an operator, got number `{token.text}`.")
                self.push(str(token.value))
            case Token.OPERATOR:
                self._apply(token.value)
            case Token.STORE:
                self.variables[token.value] = self.peek()
            case Token.RECALL:
                # A bare `@` pushes an empty value rather than failing.
                if not token.value:
                    self.push('')
                elif (value := self.variables.get(token.value)) is not None:
                    self.push(value)
                else:
                    raise RpnUndefinedVariable(f"Variable `{token.value}` is not defined.")
            case _:
                raise RpnUnknownToken(f"Unknown operator or number `{token.text}`.")

    def _apply(self, symbol: str) -> None:
        match symbol:
            case 'x': self.exchange()
            case '?': self.stack_dump()
            case '&': self.var_dump()
            case _:
                _, fn = ARITHMETIC[symbol]
                a = self._operand(1, symbol)
                b = self._operand(2, symbol)
                result = fn(a, b)
                # Operands are only removed once the operation succeeded.
                del self.stack[-2:]
                self.push(str(result))

    def _operand(self, depth: int, symbol: str) -> int:
        if len(self.stack) < depth:
            raise RpnStackUnderflow(f"`{symbol}` needs at least 2 items on the stack, but {len(self.stack)} available.")
        return parse_integer(self.stack[-depth])
