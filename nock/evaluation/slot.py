"""Tree addressing (Nock's `/`).

Every noun is a binary tree: address 1 is the root, and the head and tail
of the subtree at address n are at 2n and 2n + 1. Reading an address in
binary after its leading 1, each 0 bit steps into a head and each 1 bit
steps into a tail.
"""

from __future__ import annotations

from nock.errors import AddressError
from nock.types.noun import Noun, Atom, Cell, NounLike, noun, format_atom


def address_value(address) -> int:
    """Return the positive int an address atom denotes."""
    if isinstance(address, Atom):
        value = address.value
    elif isinstance(address, int) and not isinstance(address, bool):
        value = address
    elif isinstance(address, Cell):
        raise AddressError("Address must be an atom, not a cell", address)
    else:
        raise AddressError(f"Address must be an atom, got {type(address).__name__}")
    if value < 1:
        raise AddressError(f"Address must be positive, got {format_atom(value)}")
    return value


def slot(address: Atom | int, tree: NounLike) -> Noun:
    n = address_value(address)
    tree = noun(tree)
    for bit in bin(n)[3:]:
        if not isinstance(tree, Cell):
            raise AddressError(f"Address {format_atom(n)} descends into an atom", tree)
        tree = tree.tail if bit == "1" else tree.head
    return tree


def fas(noun_: NounLike) -> Noun:
    """`/[address tree]`, the classical one-argument form of slot."""
    subject = noun(noun_)
    if not isinstance(subject, Cell):
        raise AddressError("/ requires a cell of [address tree]", subject)
    return slot(subject.head, subject.tail)
