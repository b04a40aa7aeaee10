from nock.evaluation.slot import slot, fas
from nock.evaluation.axioms import is_cell, increment, are_equal, wut, lus, tis
from nock.evaluation.evaluator import evaluate, evaluate0, tar
from nock.evaluation.governor import Fuel, evaluate_with_fuel

__all__ = [
    "slot", "fas",
    "is_cell", "increment", "are_equal", "wut", "lus", "tis",
    "evaluate", "evaluate0", "tar",
    "Fuel", "evaluate_with_fuel",
]
