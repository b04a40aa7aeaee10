"""Fuel-limited evaluation.

Nock is Turing-complete and the core reducer never bounds its own work.
This wrapper counts reductions through the evaluator's step hook and stops
a run that exceeds its budget.
"""

from __future__ import annotations

from nock.errors import FuelExhausted
from nock.types.noun import Noun, NounLike
from nock.evaluation.evaluator import evaluate


class Fuel:
    __slots__ = ("limit", "used")

    def __init__(self, limit: int):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"fuel must be a positive int, got {limit!r}")
        self.limit = limit
        self.used = 0

    def __call__(self, subject: Noun, formula: Noun) -> None:
        self.used += 1
        if self.used > self.limit:
            raise FuelExhausted(self.limit, formula)


def evaluate_with_fuel(value: NounLike, fuel: int) -> Noun:
    """Evaluate [subject formula], allowing at most `fuel` reductions."""
    return evaluate(value, step=Fuel(fuel))
