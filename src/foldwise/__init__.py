"""foldwise: fold, map, compose, walk and repeat over lists and pandas data.

Usage:
    from foldwise import fold, fmap, frows, fgroups

    total = fold([1, 2, 3, 4, 5], "+")
    running = fold([1, 2, 3, 4], "+", accumulate=True)
    squares = fmap(lambda x: x * x, range(10), cores=4, progress=True)
    per_group = fgroups(lambda g: g["value"].sum(), df, by="key")
"""

from foldwise.core import (
    MISSING,
    Box,
    EmptyInputError,
    FoldwiseError,
    InvalidInputError,
    Settings,
    settings,
)
from foldwise.functional import (
    compose,
    fcols,
    fgroups,
    fmap,
    fold,
    freduce,
    frepeat,
    frows,
    scan,
    walk,
)

__version__ = "0.1.0"
__all__ = [
    "fold",
    "freduce",
    "scan",
    "fmap",
    "frows",
    "fcols",
    "fgroups",
    "compose",
    "walk",
    "frepeat",
    "Box",
    "MISSING",
    "FoldwiseError",
    "InvalidInputError",
    "EmptyInputError",
    "Settings",
    "settings",
]
