# Public surface of the Nock interpreter.
#
# Layers, each built only on the one below:
# - Noun:     Atom | Cell, immutable, structural equality (nock.types)
# - Address:  slot / fas (nock.evaluation.slot)
# - Axioms:   is_cell / increment / are_equal, alias wut / lus / tis
# - Reduce:   evaluate / tar, the twelve-rule reducer (nock.evaluation.evaluator)

from nock.errors import (
    NockError,
    NockTypeError,
    NockSyntaxError,
    EmptyConstructionError,
    AddressError,
    DomainError,
    FormulaError,
    FuelExhausted,
)
from nock.types.noun import Noun, Atom, Cell, NounLike, YES, NO, noun
from nock.evaluation import (
    slot,
    fas,
    is_cell,
    increment,
    are_equal,
    wut,
    lus,
    tis,
    evaluate,
    tar,
    evaluate_with_fuel,
)
from nock.reader.parser import read_noun
