"""Registry of the macro opcodes 6-10.

Each handler receives the body of a formula (everything after the opcode)
and returns the formula it expands to. The evaluator runs the expansion
against the same subject, re-entering dispatch from the top.
"""

from __future__ import annotations

from nock.errors import FormulaError
from nock.types.noun import Noun, Cell, noun


def if_opcode(body: Noun) -> Noun:
    """[6 b c d]: if b then c else d."""
    match body:
        case Cell(b, Cell(c, d)):
            return noun(2, [0, 1], 2, [1, c, d], [1, 0], 2, [1, 2, 3], [1, 0], 4, 4, b)
    raise FormulaError("6 requires [test yes no]", body)


def compose_opcode(body: Noun) -> Noun:
    """[7 b c]: evaluate c against the product of b."""
    match body:
        case Cell(b, c):
            return noun(2, b, 1, c)
    raise FormulaError("7 requires [first then]", body)


def push_opcode(body: Noun) -> Noun:
    """[8 b c]: evaluate c against [product-of-b subject]."""
    match body:
        case Cell(b, c):
            return noun(7, [[7, [0, 1], b], 0, 1], c)
    raise FormulaError("8 requires [pin then]", body)


def invoke_opcode(body: Noun) -> Noun:
    """[9 b c]: produce a core with c, then run the arm at address b of it."""
    match body:
        case Cell(b, c):
            return noun(7, c, 2, [0, 1], 0, b)
    raise FormulaError("9 requires [axis core]", body)


def hint_opcode(body: Noun) -> Noun:
    """[10 hint d]: a dynamic hint [b c] has c computed and discarded; a static one is ignored."""
    match body:
        case Cell(Cell(_, c), d):
            return noun(8, c, 7, [0, 3], d)
        case Cell(_, c):
            return c
    raise FormulaError("10 requires [hint formula]", body)


MACRO_OPCODES = {
    6: if_opcode,
    7: compose_opcode,
    8: push_opcode,
    9: invoke_opcode,
    10: hint_opcode,
}
