import itertools

import numpy as np
import pandas as pd
import pytest
from foldwise.core.errors import InvalidInputError
from foldwise.functional.repeat import frepeat


def test_frepeat_calls_n_times():
    counter = itertools.count()
    assert frepeat(lambda: next(counter), 3) == [0, 1, 2]


def test_frepeat_passes_arguments():
    assert frepeat(pow, 2, 2, 5) == [32, 32]
    assert frepeat(round, 2, 3.14159, ndigits=2) == [3.14, 3.14]


def test_frepeat_simplify():
    rng = np.random.default_rng(0)
    draws = frepeat(rng.normal, 5, simplify=True)
    assert isinstance(draws, pd.Series)
    assert len(draws) == 5


def test_frepeat_parallel():
    assert frepeat(sum, 4, [1, 2, 3], cores=2) == [6, 6, 6, 6]


def test_frepeat_zero_times():
    assert frepeat(int, 0) == []


@pytest.mark.parametrize("times", [-1, 1.5, "3", True])
def test_frepeat_invalid_times(times):
    with pytest.raises(InvalidInputError):
        frepeat(int, times)
