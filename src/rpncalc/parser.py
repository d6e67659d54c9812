## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Token, INT_MIN, INT_MAX
from .errors import RpnParseError


# Each terminal must cover a whole whitespace-delimited token, so everything except
# the catch-all is anchored with `(?!\S)` or consumes up to the next whitespace.
# Priorities decide the classification order when several terminals would match.
GRAMMAR = r"""start: (NUMBER | OPERATOR | STORE | RECALL | INVALID)*

NUMBER.5: /[+-]?[0-9]+(?!\S)/
OPERATOR.4: /[xX?&+\-*\/^](?!\S)/
STORE.3: /!\S*/
RECALL.3: /@\S*/
INVALID: /\S+/

WHITESPACE: /\s+/
%ignore WHITESPACE
"""

_PARSER = lark.Lark(GRAMMAR, start='start', parser='lalr', lexer='basic')


def _classify(tok: lark.Token, index: int, filename: str | None) -> Token:
    text = str(tok)
    meta = {'filename': filename, 'index': index, 'line': tok.line, 'column': tok.column}
    match tok.type:
        case 'NUMBER' if INT_MIN <= (value := int(text)) <= INT_MAX:
            return Token(Token.NUMBER, text, value, meta)
        case 'OPERATOR':
            return Token(Token.OPERATOR, text, text.lower(), meta)
        case 'STORE':
            return Token(Token.STORE, text, text[1:], meta)
        case 'RECALL':
            return Token(Token.RECALL, text, text[1:], meta)
        case _:
            return Token(Token.INVALID, text, text, meta)


def tokenize(expression: str, filename=None) -> list[Token]:
    """Split an expression on whitespace and classify every token, left to right."""
    try:
        tree = _PARSER.parse(expression)
    except lark.exceptions.UnexpectedInput as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        raise RpnParseError(str(exc), filename=filename, line=attr('line'), column=attr('column'), token=token_val) from None
    return [_classify(tok, i, filename) for i, tok in enumerate(tree.children)]


def format_expression_context(expression: str, line: int | None, column: int | None, token_value: str) -> str:
    lines = expression.splitlines() or ['']
    line = line or 1
    start_line, end_line = max(0, line - 3), min(len(lines), line + 2)
    result = []

    for i in range(start_line, end_line):
        line_content = lines[i]
        line_color = '\033[90m'
        if i+1 == line:
            line_color = '\033[97m'
            if column and 0 < column <= len(line_content):
                line_content = (
                    line_content[:column-1] +
                    f"\033[48;5;30m\033[1;97m{line_content[column-1:column+len(token_value)-1]}\033[0m" +
                    line_content[column+len(token_value)-1:]
                )
        result.append(f"{line_color}{i+1:>5} |\033[0m {line_content}")
    return '\n' + '\n'.join(result) + '\n'
