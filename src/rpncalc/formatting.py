## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_item(it) -> str:
    # Empty strings come from a bare `@` recall, keep them visible.
    if isinstance(it, str) and it == '':
        return '""'
    return str(it)

def show_stack(stack: list, width=72, end='\n', file=None):
    stack_str = ' '.join(format_item(s) for s in stack) if stack else '∅'
    if width is not None and len(stack_str) > width:
        stack_str = '… ' + stack_str[-width+2:]
    print(f"{stack_str:>{width}}" if width else stack_str, end=end, file=file)

def show_tokens_and_stack(tokens, stack: list, width=72, file=None):
    tokens_str = ' '.join(t.text for t in tokens) if tokens else '∅'
    if len(tokens_str) > width:
        tokens_str = tokens_str[:+width-2] + ' …'
    show_stack(stack, end='', file=file)
    print(f" \033[36m <=> \033[0m {tokens_str:<{width}}", file=file)
