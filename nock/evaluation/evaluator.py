"""Core reducer for Nock (`*`).

Interprets a noun [subject formula] and produces the formula's product.
Dispatch is structural and ordered: a cell-headed formula is an autocons,
then opcodes 0-5 are primitive and 6-10 expand into other formulas.

Every rule whose result is "evaluate this new [subject formula]" loops in
place rather than recursing (a trampoline), so long-running programs are
not bounded by Python's recursion limit. Non-tail subterms still recurse.
"""

from __future__ import annotations

from typing import Callable, Optional

from nock.errors import FormulaError
from nock.types.noun import Noun, Atom, Cell, NounLike, noun
from nock.evaluation.slot import slot
from nock.evaluation.axioms import is_cell, increment, are_equal
from nock.evaluation.macro_opcodes import MACRO_OPCODES

# Called once per reduction with the current subject and formula.
StepFn = Callable[[Noun, Noun], None]


def evaluate(value: NounLike, step: Optional[StepFn] = None) -> Noun:
    """Evaluate [subject formula]."""
    value = noun(value)
    if not isinstance(value, Cell):
        raise FormulaError("Cannot evaluate an atom, expected [subject formula]", value)
    return evaluate0(value.head, value.tail, step)


def evaluate0(subject: Noun, formula: Noun, step: Optional[StepFn] = None) -> Noun:
    """Evaluate `formula` against `subject`."""
    while True:
        if step is not None:
            step(subject, formula)

        match formula:
            case Cell(Cell() as first, second):
                return Cell(
                    evaluate0(subject, first, step), evaluate0(subject, second, step)
                )
            case Cell(Atom(0), b):
                return slot(b, subject)
            case Cell(Atom(1), b):
                return b
            case Cell(Atom(2), Cell(b, c)):
                # Both products come from the old subject.
                subject, formula = evaluate0(subject, b, step), evaluate0(subject, c, step)
                continue
            case Cell(Atom(3), b):
                return is_cell(evaluate0(subject, b, step))
            case Cell(Atom(4), b):
                return increment(evaluate0(subject, b, step))
            case Cell(Atom(5), b):
                return are_equal(evaluate0(subject, b, step))
            case Cell(Atom(opcode), body) if opcode in MACRO_OPCODES:
                formula = MACRO_OPCODES[opcode](body)
                continue

        raise FormulaError("Invalid formula", formula)


def tar(value: NounLike) -> Noun:
    """`*[subject formula]`, the classical name for evaluate."""
    return evaluate(value)
