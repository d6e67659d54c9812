## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# rpncalc — Reverse Polish Notation calculator with a small variable store.
#

import sys
from dataclasses import dataclass

import click

from .errors import (RpnError, RpnParseError, RpnStackUnderflow, RpnUndefinedVariable,
                     RpnUnknownToken, RpnTrailingOperand)
from .parser import format_expression_context
from .formatting import write_without_ansi, show_stack
from .interpreter import Evaluator


__version__ = '0.1.0'


@dataclass(frozen=True)
class RunnerConfig:
    verbose: int
    plain: bool


class RpnRunner:
    def __init__(self, config: RunnerConfig):
        self.verbose = config.verbose
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.evaluator = Evaluator()
        self.failure = False

    def _maybe_fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '',
                           stack: list | None = None, is_repl: bool = False) -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        if stack is not None:
            print('\033[1;33m  Stack content is\033[0;33m\n    ', end='', file=sys.stderr)
            show_stack(stack, width=None, file=sys.stderr)
            print('\033[0m', file=sys.stderr)
        if not is_repl:
            self.failure = True

    def _handle_exception(self, exc: RpnError, expression: str, is_repl: bool = False) -> None:
        if isinstance(exc, (RpnParseError, RpnUnknownToken, RpnTrailingOperand)):
            category = "SYNTAX ERROR."
        elif isinstance(exc, RpnStackUnderflow):
            category = "STACK ERROR."
        elif isinstance(exc, RpnUndefinedVariable):
            category = "NAME ERROR."
        else:
            category = "ARITHMETIC ERROR."

        detail = str(exc)
        if exc.rpn_token is not None:
            detail = f"Token `\033[1;97m{exc.rpn_token}\033[0m` failed: {detail}"
        context = ''
        if (meta := exc.rpn_meta) and meta.get('column') is not None:
            context = format_expression_context(expression, meta.get('line'), meta['column'], exc.rpn_token or '')
        self._maybe_fatal_error(category, detail, type(exc).__name__, context, exc.rpn_stack, is_repl)

    def run_expression(self, expression: str) -> None:
        try:
            self.evaluator.evaluate(expression, filename='<EXPRESSION>', verbosity=self.verbose)
            print(self.evaluator.peek())
        except RpnError as exc:
            self._handle_exception(exc, expression)

    def test_info(self) -> None:
        calc = self.evaluator
        try:
            print("\t===STACK DUMP===\n")
            print("Equation: 10 + 20")
            print("Expression: 10 20 +")
            for value in ("10", "20", "+"):
                calc.push(value)
            print("Dumping stack:\n")
            calc.stack_dump()
            print("Clearing parser memory...\n")
            calc.clear()
            print("\t===VAR DUMP===\n")
            print("Equation: !temp = 50 + 20")
            print("Expression: 50 20 + !temp")
            calc.evaluate("50 20 + !temp", filename='<TEST-INFO>', verbosity=self.verbose)
            calc.var_dump()
        except RpnError as exc:
            self._handle_exception(exc, "50 20 + !temp")

    def repl(self) -> None:
        if sys.platform != "win32": import readline

        print('rpncalc - Reverse Polish Notation calculator; type Ctrl+C to exit.')
        while True:
            try:
                line = input("\033[36m<<< \033[0m")
                if len(line.strip()) == 0: continue
                if line.strip() in ('quit', 'exit'): break

                try:
                    self.evaluator.evaluate(line, filename='<REPL>', verbosity=self.verbose)
                    if self.evaluator.stack: print("\033[90m>>>\033[0m", self.evaluator.peek())
                except RpnError as exc:
                    self._handle_exception(exc, line, is_repl=True)

            except (KeyboardInterrupt, EOFError):
                print(""); break

    def finalize(self) -> int:
        return 1 if self.failure else 0


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--expression', '-e', default=None, help='Reverse Polish Notation expression to evaluate.')
@click.option('--test-info', '-t', is_flag=True, help='Show some test info and exit.')
@click.option('--repl', '-r', is_flag=True, help='Start an interactive session that keeps the stack between lines.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace the stack while evaluating.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.version_option(__version__, prog_name='rpncalc')
@click.pass_context
def cli(ctx: click.Context, expression: str | None, test_info: bool, repl: bool, verbose: int, plain: bool) -> None:
    if sum((expression is not None, test_info, repl)) > 1:
        raise click.UsageError("Options --expression, --test-info and --repl are mutually exclusive.")
    if expression is None and not test_info and not repl:
        click.echo(ctx.get_help())
        ctx.exit(0)

    runner = RpnRunner(RunnerConfig(verbose=verbose, plain=plain))
    if test_info:
        runner.test_info()
    elif repl:
        runner.repl()
    else:
        runner.run_expression(expression)
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='rpncalc')


if __name__ == "__main__":
    main()
