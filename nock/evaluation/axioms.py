"""The three axiomatic operators: `?` (is_cell), `+` (increment), `=` (are_equal)."""

from __future__ import annotations

from nock.errors import DomainError
from nock.types.noun import Atom, Cell, NounLike, YES, NO, noun


def is_cell(value: NounLike) -> Atom:
    return YES if isinstance(noun(value), Cell) else NO


def increment(value: NounLike) -> Atom:
    value = noun(value)
    if isinstance(value, Cell):
        raise DomainError("Cannot increment a cell", value)
    return Atom(value.value + 1)


def are_equal(value: NounLike) -> Atom:
    value = noun(value)
    if not isinstance(value, Cell):
        raise DomainError("Cannot compare the head and tail of an atom", value)
    return YES if value.head == value.tail else NO


# Classical Nock names.
wut = is_cell
lus = increment
tis = are_equal
