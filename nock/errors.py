from __future__ import annotations


class NockError(Exception):
    """ Base class for all Nock errors"""

    def __init__(self, message: str, noun=None):
        if noun is not None:
            message = f"{message}: {noun}"
        super().__init__(message)
        self.noun = noun


class NockTypeError(NockError):
    """ Raised when a Python value cannot be used as a noun"""


class NockSyntaxError(NockError):
    """ Raised when noun source text cannot be read"""


class EmptyConstructionError(NockError):
    """ Raised when a noun is built from zero elements"""


class AddressError(NockError):
    """ Raised when a tree address is not a positive atom, or descends into an atom"""


class DomainError(NockError):
    """ Raised when an axiom is applied outside its domain (increment of a cell, equality of an atom)"""


class FormulaError(NockError):
    """ Raised when a formula matches none of the reduction rules"""


class FuelExhausted(NockError):
    """ Raised by the governor when an evaluation runs out of reduction steps"""

    def __init__(self, fuel: int, noun=None):
        super().__init__(f"evaluation exceeded {fuel} reductions", noun)
        self.fuel = fuel
