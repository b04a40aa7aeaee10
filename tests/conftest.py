import pytest

from nock.interpreter import Interpreter
from nock.types.noun import noun


# Decrement by counting up from zero: *[n DECREMENT] == n - 1.
DECREMENT_SOURCE = "[8 [1 0] 8 [1 6 [5 [0 7] 4 0 6] [0 6] 9 2 [0 2] [4 0 6] 0 7] 9 2 0 1]"
DECREMENT = noun(
    8, [1, 0],
    8, [1, 6, [5, [0, 7], 4, 0, 6], [0, 6], 9, 2, [0, 2], [4, 0, 6], 0, 7],
    9, 2, 0, 1,
)


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def decrement():
    return DECREMENT
