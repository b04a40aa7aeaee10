from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, TextIO

from nock import config
from nock.errors import NockError
from nock.types.noun import Noun
from nock.reader.parser import lex, TokenStream, Operation, Expression
from nock.evaluation import evaluate, fas, is_cell, increment, are_equal, Fuel, evaluate_with_fuel
from nock.debug_utils.pprint import pprint_noun, DEFAULT_OPTIONS, COLOR_OPTIONS


OPERATIONS: dict[str, Callable[[Noun], Noun]] = {
    "*": evaluate,
    "/": fas,
    "?": is_cell,
    "+": increment,
    "=": are_equal,
}


class Interpreter:
    """
    Reads Nock source text and evaluates each expression in turn.
    A bare noun evaluates to itself; an operator applies to its evaluated operand.
    """

    def __init__(self, fuel: Optional[int] = None):
        self.fuel = fuel
        self.operations = dict(OPERATIONS)
        if fuel is not None:
            Fuel(fuel)  # validate eagerly
            self.operations["*"] = lambda value: evaluate_with_fuel(value, fuel)

    def eval_expr(self, expr: Expression) -> Noun:
        if isinstance(expr, Operation):
            return self.operations[expr.operator](self.eval_expr(expr.operand))
        return expr

    def eval_all(self, code: str) -> list[Noun]:
        stream = TokenStream(lex(code))
        results: list[Noun] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_expr(expr))
        return results

    def eval(self, code: str) -> Noun | list[Noun] | None:
        results = self.eval_all(code)
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results


def bracket_depth(line: str) -> int:
    code = line.split("::", 1)[0]
    return code.count("[") - code.count("]")


def repl(
    interp: Interpreter,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    options: dict = DEFAULT_OPTIONS,
    prompt: str | None = "nock> ",
    continuation: str = "  ... ",
) -> int:
    """Read-eval-print loop. Input is buffered until its brackets balance.

    Errors are reported and the loop continues. Returns the number of
    inputs that failed.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    failures = 0
    buffer: list[str] = []
    depth = 0
    while True:
        if prompt is not None:
            stdout.write(continuation if buffer else prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        buffer.append(line)
        depth += bracket_depth(line)
        if depth > 0:
            continue
        source = "".join(buffer)
        buffer, depth = [], 0
        try:
            results = interp.eval_all(source)
        except (NockError, RecursionError) as ex:
            failures += 1
            print(f"error: {type(ex).__name__}: {ex}", file=stderr)
            continue
        for result in results:
            print(pprint_noun(result, options), file=stdout)
    if buffer:
        failures += 1
        print("error: NockSyntaxError: Unmatched '['", file=stderr)
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nock", description="Evaluate Nock expressions.")
    parser.add_argument("file", nargs="?", help="source file to evaluate (default: interactive REPL)")
    parser.add_argument("--fuel", type=int, default=None, help="maximum reductions per evaluation")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    args = parser.parse_args(argv)

    config.apply_recursion_limit()
    fuel = args.fuel if args.fuel is not None else config.get_fuel()
    interp = Interpreter(fuel=fuel or None)
    color = not args.no_color and config.use_color()
    options = COLOR_OPTIONS if color else DEFAULT_OPTIONS

    if args.file is None:
        interactive = sys.stdin.isatty()
        failures = repl(interp, options=options, prompt="nock> " if interactive else None)
        return 1 if failures and not interactive else 0

    with open(args.file, encoding="utf-8") as f:
        source = f.read()
    try:
        results = interp.eval_all(source)
    except (NockError, RecursionError) as ex:
        print(f"error: {type(ex).__name__}: {ex}", file=sys.stderr)
        return 1
    for result in results:
        print(pprint_noun(result, options))
    return 0


if __name__ == "__main__":
    sys.exit(main())
