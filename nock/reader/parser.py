"""
  Noun Reader, Lexer and Parser

- Streaming, lazy parsing of the bracket notation used to write Nock:

    - atoms -> decimal digits, optionally grouped with dots (65.537)
    - hex atoms -> 0x prefix, optionally grouped with dots (0xdead.beef)
    - cells -> [a b c], right-associative, so [a b c] is [a [b c]]
    - comments -> :: to end of line
    - operators -> * / ? + = applied to the following expression,
      e.g. *[subject formula] or +*[42 [1 1]]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from nock.errors import NockSyntaxError
from nock.types.noun import Noun, Atom, noun


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>::[^\n]*)"  # single-line comment
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<operator>[*/?+=])"  # * / ? + =
    r"|(?P<hex>0x[0-9a-fA-F]+(?:\.[0-9a-fA-F]+)*)"  # hex atom
    r"|(?P<atom>\d{1,3}(?:\.\d{3})+|\d+)"  # decimal atom
    r")",
)

OPERATORS = ("*", "/", "?", "+", "=")


@dataclass(frozen=True)
class Operation:
    """A Nock operator applied to an expression, e.g. `*[a b]`."""

    operator: str
    operand: "Expression"

    def __str__(self):
        return f"{self.operator}{self.operand}"


Expression = Union[Noun, Operation]


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        match = TOKEN_RE.match(source, pos)
        if not match:
            while pos < n and source[pos].isspace():
                pos += 1
            if pos >= n:
                break
            raise NockSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = match.end()
        if match.lastgroup == "comment":
            continue
        yield match.lastgroup, match.group(match.lastgroup)


def atom_from_token(tok_type: str, tok_val: str) -> Atom:
    digits = tok_val.replace(".", "")
    if tok_type == "hex":
        return Atom(int(digits[2:], 16))
    try:
        return Atom(int(digits))
    except ValueError:
        # str-to-int digit limit; hex has none
        raise NockSyntaxError(
            f"Decimal atom of {len(digits)} digits is too long to read, write it in hex"
        ) from None


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Expression]:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type in ("atom", "hex"):
            self.advance()
            return atom_from_token(tok_type, tok_val)

        if tok_type == "operator":
            self.advance()
            operand = self.parse_expr()
            if operand is None:
                raise NockSyntaxError(f"Operator {tok_val!r} needs an operand")
            return Operation(tok_val, operand)

        if tok_type == "lbracket":
            self.advance()
            items: list[Noun] = []
            while True:
                if self.peek()[0] == "rbracket":
                    self.advance()
                    break
                if self.peek()[0] is None:
                    raise NockSyntaxError("Unmatched '['")
                item = self.parse_expr()
                if isinstance(item, Operation):
                    raise NockSyntaxError(f"Operators cannot appear inside a cell: {item}")
                items.append(item)
            if len(items) < 2:
                raise NockSyntaxError(f"A cell needs at least two nouns, got {len(items)}")
            return noun(items)

        if tok_type == "rbracket":
            raise NockSyntaxError("Unexpected ']'")

        raise NockSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_noun(source: str) -> Noun:
    """Read exactly one noun (no operators) from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise NockSyntaxError("Expected a noun, got end of input")
    if isinstance(expr, Operation):
        raise NockSyntaxError(f"Expected a noun, got an operation: {expr}")
    if stream.peek()[0] is not None:
        raise NockSyntaxError(f"Unexpected input after noun: {stream.peek()[1]!r}")
    return expr
