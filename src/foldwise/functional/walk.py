"""Side-effect iteration."""

import typing as tp
from collections.abc import Mapping

from foldwise.core.parallel import dispatch
from foldwise.core.validation import resolve_function

__all__ = ["walk"]

X = tp.TypeVar("X")


def walk(
    func: tp.Callable[[tp.Any], tp.Any],
    x: X,
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
) -> X:
    """Call ``func`` on each element of ``x`` for its side effects.

    Mappings are walked over their values. Return values of ``func`` are
    discarded and ``x`` itself is returned, so ``walk`` can sit in the middle
    of a pipeline.
    """
    func = resolve_function(func, arity=1)
    values = x.values() if isinstance(x, Mapping) else x
    dispatch(func, values, cores, progress, description="walk")
    return x
