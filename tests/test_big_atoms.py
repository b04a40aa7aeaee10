"""Atoms past the interpreter's int-to-str digit limit (4300 by default)."""

import sys

import pytest

from nock.errors import AddressError, DomainError, FormulaError, NockSyntaxError
from nock.types.noun import Atom, Cell, noun, format_atom
from nock.reader.parser import read_noun
from nock.evaluation.slot import slot
from nock.evaluation.axioms import increment, are_equal
from nock.evaluation.evaluator import evaluate
from nock.debug_utils.pprint import pprint_noun, DEFAULT_OPTIONS


BIG = 2**20000

needs_digit_limit = pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="no int-to-str digit limit in this interpreter",
)


@needs_digit_limit
def test_format_atom_switches_to_hex():
    assert format_atom(42) == "42"
    assert format_atom(BIG) == hex(BIG)


def test_increment_of_a_cell_with_a_big_atom():
    with pytest.raises(DomainError) as info:
        increment(Cell(BIG, 1))
    assert info.value.noun == Cell(BIG, 1)


def test_are_equal_of_a_big_atom():
    with pytest.raises(DomainError):
        are_equal(Atom(BIG))


def test_slot_into_a_big_atom():
    with pytest.raises(AddressError):
        slot(2, Atom(BIG))
    with pytest.raises(AddressError):
        slot(BIG, Atom(1))


def test_malformed_formula_with_a_big_atom():
    with pytest.raises(FormulaError):
        evaluate(noun([1, BIG, 1]))


def test_increment_of_a_big_atom():
    assert increment(Atom(BIG)) == BIG + 1


def test_big_atoms_print_and_read_back():
    n = noun([BIG, 1, BIG + 1])
    assert read_noun(str(n)) == n
    assert read_noun(pprint_noun(n)) == n
    assert read_noun(pprint_noun(n, {**DEFAULT_OPTIONS, "group_digits": True})) == n
    assert repr(Atom(BIG)) == f"Atom({hex(BIG)})"


@needs_digit_limit
def test_overlong_decimal_is_a_syntax_error():
    with pytest.raises(NockSyntaxError):
        read_noun("9" * 5000)
