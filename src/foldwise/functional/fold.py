"""Generalized fold (reduce / scan).

:func:`fold` collapses an ordered sequence into a single value by repeatedly
applying a binary combining function, or, in accumulate mode, returns every
intermediate state of that computation.

Options:
    - **seed**: starting accumulator. Without a seed the first processed
      element is the starting state.
    - **reverse_direction**: process the sequence from its last element
      towards its first. The combining function is still called as
      ``combine(accumulator, element)``; only the processing order changes.
    - **accumulate**: return the trace of states instead of the final one.
    - **simplify**: in accumulate mode, return plain scalars instead of
      :class:`~foldwise.core.types.Box` wrappers when every state is a scalar.

Examples:
    >>> from operator import add, concat
    >>> fold([1, 2, 3, 4, 5], add)
    15
    >>> fold([1, 2, 3], add, seed=10)
    16
    >>> fold(["1", "2", "3"], concat, reverse_direction=True)
    '321'
    >>> fold([1, 2, 3, 4], add, accumulate=True)
    [1, 3, 6, 10]
    >>> fold([1, 2], "+", accumulate=True, simplify=False)
    [Box(value=1), Box(value=3)]

Note:
    Results of non-associative combining functions depend on the direction.
"""

import typing as tp
from functools import reduce

from foldwise.core.errors import EmptyInputError
from foldwise.core.shape import all_scalar
from foldwise.core.types import MISSING, Box, Trace
from foldwise.core.validation import resolve_function

__all__ = ["fold", "freduce", "scan"]

A = tp.TypeVar("A")
T = tp.TypeVar("T")


def _states(
    combine: tp.Callable[[A, T], A], items: tp.List[T], seed: tp.Any
) -> tp.Iterator[A]:
    # Yields the starting state, then one state per combination step
    if seed is MISSING:
        acc, rest = items[0], items[1:]
    else:
        acc, rest = seed, items
    yield acc
    for item in rest:
        acc = combine(acc, item)
        yield acc


def fold(
    sequence: tp.Iterable[T],
    combine: tp.Union[tp.Callable[[A, T], A], str],
    seed: tp.Any = MISSING,
    reverse_direction: bool = False,
    accumulate: bool = False,
    simplify: bool = True,
) -> tp.Union[A, Trace]:
    """Fold ``sequence`` with ``combine``.

    Args:
        sequence: Finite iterable of elements. It is materialized first.
        combine: Binary function ``(accumulator, element) -> accumulator``,
            or a binary operator symbol such as ``"+"`` or ``"*"``.
        seed: Initial accumulator. ``None`` is a valid seed; leave the
            argument out for a seedless fold.
        reverse_direction: Fold from the last element to the first. A seed,
            if any, is the starting point on the right end.
        accumulate: Return all intermediate states in the order they were
            computed instead of only the final state.
        simplify: Only used with ``accumulate``. If True and every state is a
            scalar, states are returned as a flat list; otherwise each state
            is wrapped in a :class:`Box`.

    Returns:
        The final accumulator, or the list of states (``len(sequence) + 1``
        entries with a seed, ``len(sequence)`` without).

    Raises:
        InvalidInputError: If ``combine`` is not a two-argument callable or a
            known operator symbol. Checked before any element is combined.
        EmptyInputError: If ``sequence`` is empty and no seed is given.
    """
    combine = resolve_function(combine, arity=2, name="combine")

    items = list(sequence)
    if reverse_direction:
        items.reverse()

    if not items and seed is MISSING:
        raise EmptyInputError("Cannot fold an empty sequence without a seed.")

    if not accumulate:
        if seed is MISSING:
            return reduce(combine, items)
        return reduce(combine, items, seed)

    trace = list(_states(combine, items, seed))
    if simplify and all_scalar(trace):
        return trace
    return [Box(state) for state in trace]


freduce = fold


def scan(
    sequence: tp.Iterable[T],
    combine: tp.Union[tp.Callable[[A, T], A], str],
    seed: tp.Any = MISSING,
    reverse_direction: bool = False,
    simplify: bool = True,
) -> Trace:
    """Shorthand for ``fold(..., accumulate=True)``."""
    return fold(
        sequence,
        combine,
        seed=seed,
        reverse_direction=reverse_direction,
        accumulate=True,
        simplify=simplify,
    )
