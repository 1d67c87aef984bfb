"""Functional primitives for foldwise.

Folding, mapping, composing, walking and repeating. Everything except
:func:`fold` goes through the shared map dispatcher in
:mod:`foldwise.core.parallel`, so ``cores`` and ``progress`` behave the same
across operations.
"""

from foldwise.functional.compose import compose
from foldwise.functional.fold import fold, freduce, scan
from foldwise.functional.mapping import fcols, fgroups, fmap, frows
from foldwise.functional.repeat import frepeat
from foldwise.functional.walk import walk

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
]
