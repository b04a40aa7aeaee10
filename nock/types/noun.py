"""Nouns: the single data type of Nock.

A noun is an Atom (an unbounded natural number) or a Cell (an ordered pair
of nouns). Nouns are immutable and compare structurally. Cells cache their
hash at construction so hashing and equality never recurse on the Python
stack, however deep the tree.
"""

from __future__ import annotations

from typing import Iterable, Union

from nock.errors import NockTypeError, DomainError, EmptyConstructionError


class Noun:
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_cell(self) -> bool:
        return isinstance(self, Cell)

    def is_atom(self) -> bool:
        return isinstance(self, Atom)

    def __eq__(self, other):
        if isinstance(other, Noun):
            return nouns_equal(self, other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __str__(self):
        return _render(self, "[", " ", "]", lambda atom: format_atom(atom.value))

    def __repr__(self):
        return _render(self, "Cell(", ", ", ")", lambda atom: f"Atom({format_atom(atom.value)})")


class Atom(Noun):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: int):
        # bool is an int subclass; loobeans go through noun() instead
        if isinstance(value, bool) or not isinstance(value, int):
            raise NockTypeError(f"Atom value must be an int, got {type(value).__name__}")
        if value < 0:
            raise DomainError(f"Atom value must be non-negative, got {format_atom(value)}")
        object.__setattr__(self, "value", value)

    def __eq__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __reduce__(self):
        return Atom, (self.value,)


class Cell(Noun):
    __slots__ = ("head", "tail", "_hash")
    __match_args__ = ("head", "tail")

    def __init__(self, head: NounLike, tail: NounLike):
        head = noun(head)
        tail = noun(tail)
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)
        object.__setattr__(self, "_hash", hash((hash(head), hash(tail))))

    def __hash__(self) -> int:
        return self._hash

    def __reduce__(self):
        return Cell, (self.head, self.tail)


NounLike = Union[Noun, int, bool, list, tuple]

# Loobeans: Nock's truth values are inverted, 0 is yes and 1 is no.
YES = Atom(0)
NO = Atom(1)


def format_atom(value: int) -> str:
    """Decimal text for an atom, or 0x hex once it passes the interpreter's
    int-to-str digit limit (hex conversion has no limit)."""
    try:
        return str(value)
    except ValueError:
        return hex(value)


def nouns_equal(left: Noun, right: Noun) -> bool:
    """Structural equality, walked with an explicit stack."""
    stack = [(left, right)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if isinstance(a, Cell):
            if not isinstance(b, Cell) or a._hash != b._hash:
                return False
            stack.append((a.tail, b.tail))
            stack.append((a.head, b.head))
        elif isinstance(b, Cell) or a.value != b.value:
            return False
    return True


def noun(*values: NounLike) -> Noun:
    """Build a noun from Python values.

    A single argument may be a noun, a bool (True -> 0, False -> 1), a
    non-negative int, or a non-empty list/tuple. Sequences, and multiple
    arguments, nest right-associatively: noun(1, 2, 3) == [1 [2 3]].
    """
    if len(values) == 1:
        value = values[0]
        if isinstance(value, Noun):
            return value
        if isinstance(value, bool):
            return YES if value else NO
        if isinstance(value, int):
            return Atom(value)
        if isinstance(value, (list, tuple)):
            return _from_sequence(value)
        raise NockTypeError(f"Cannot build a noun from {type(value).__name__}")
    return _from_sequence(values)


def _from_sequence(items: Iterable[NounLike]) -> Noun:
    items = list(items)
    if not items:
        raise EmptyConstructionError("Cannot build a noun from an empty sequence")
    result = noun(items[-1])
    for item in reversed(items[:-1]):
        result = Cell(item, result)
    return result


def _render(root: Noun, opening: str, separator: str, closing: str, atom_text) -> str:
    parts: list[str] = []
    stack: list = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Cell):
            stack.extend((closing, item.tail, separator, item.head, opening))
        else:
            parts.append(atom_text(item))
    return "".join(parts)
