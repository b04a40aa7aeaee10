from timeit import timeit

from nock.types.noun import Atom, Cell
from nock.reader.parser import read_noun
from nock.evaluation.slot import slot
from nock.evaluation.evaluator import evaluate
from nock.evaluation.governor import evaluate_with_fuel


DECREMENT_CODE = "[8 [1 0] 8 [1 6 [5 [0 7] 4 0 6] [0 6] 9 2 [0 2] [4 0 6] 0 7] 9 2 0 1]"


def time_evaluate(subject: int, code: str, rounds: int) -> float:
    """Time the reducer only: parse once, then evaluate the same noun."""
    value = Cell(Atom(subject), read_noun(code))
    # Warmup
    evaluate(value)
    # Timed
    return timeit(lambda: evaluate(value), number=rounds)


def time_governed(subject: int, code: str, rounds: int) -> float:
    """Same as time_evaluate, through the fuel governor's step hook."""
    value = Cell(Atom(subject), read_noun(code))
    evaluate_with_fuel(value, 10**9)
    return timeit(lambda: evaluate_with_fuel(value, 10**9), number=rounds)


def bench_deep_slot(depth: int = 1000, n_lookups: int = 10000) -> float:
    # Build a head-spine tree and address its deepest atom
    tree = Atom(0)
    for _ in range(depth):
        tree = Cell(tree, Atom(1))
    address = 2**depth
    slot(address, tree)
    return timeit(lambda: slot(address, tree), number=n_lookups)


def _print_pair(name: str, subject: int, code: str, rounds: int) -> None:
    tfree = time_evaluate(subject, code, rounds)
    tgov = time_governed(subject, code, rounds)
    print(f"Benchmark: {name}")
    print(f"  evaluate: {tfree:.6f}s  |  with fuel: {tgov:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: slot lookup at depth 1000")
    print(f"  time: {bench_deep_slot():.6f}s")

    _print_pair("autocons", 41, "[[4 0 1] [4 0 1]]", rounds=20000)
    _print_pair("decrement 100", 100, DECREMENT_CODE, rounds=200)
    _print_pair("decrement 1000", 1000, DECREMENT_CODE, rounds=20)
