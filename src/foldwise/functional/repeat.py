"""Repeated evaluation of a function."""

import typing as tp
from functools import partial

from foldwise.core.parallel import dispatch
from foldwise.core.shape import simplify_results
from foldwise.core.validation import resolve_function, validate_count

__all__ = ["frepeat"]


def _call(func: tp.Callable[..., tp.Any], args: tuple, kwargs: dict, _: int) -> tp.Any:
    return func(*args, **kwargs)


def frepeat(
    func: tp.Callable[..., tp.Any],
    times: int,
    *args: tp.Any,
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
    simplify: bool = False,
    **kwargs: tp.Any,
) -> tp.Union[tp.List[tp.Any], tp.Any]:
    """Evaluate ``func(*args, **kwargs)`` ``times`` times.

    Useful for simulations where ``func`` draws random numbers.

    Args:
        func: Function to call.
        times: Number of calls, a non-negative integer.
        *args: Positional arguments for every call.
        cores: Number of workers.
        progress: Show a progress bar.
        simplify: Shape the results with ``simplify_results``.
        **kwargs: Keyword arguments for every call.

    Returns:
        List of the results in call order, or a pandas container when
        ``simplify`` is on and the results allow it.
    """
    func = resolve_function(func)
    times = validate_count(times)

    results = dispatch(
        partial(_call, func, args, kwargs),
        range(times),
        cores,
        progress,
        description="frepeat",
    )
    if simplify:
        return simplify_results(results)
    return results
