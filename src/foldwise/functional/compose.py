"""Function composition."""

import typing as tp

from foldwise.core.errors import InvalidInputError
from foldwise.core.validation import resolve_function
from foldwise.functional.fold import fold

__all__ = ["compose"]


def _compose2(
    first: tp.Callable[..., tp.Any], second: tp.Callable[[tp.Any], tp.Any]
) -> tp.Callable[..., tp.Any]:
    def composed(*args, **kwargs):
        return second(first(*args, **kwargs))

    return composed


def compose(*funcs: tp.Callable[..., tp.Any], right: bool = False) -> tp.Callable[..., tp.Any]:
    """Compose functions into a single callable.

    By default the functions form a left-to-right pipeline::

        compose(f, g, h)(x) == h(g(f(x)))

    With ``right=True`` the order is the mathematical one::

        compose(f, g, h, right=True)(x) == f(g(h(x)))

    The function applied first receives all call arguments; every other
    function receives the previous result.

    Raises:
        InvalidInputError: If no functions are given or one is not callable.
    """
    if not funcs:
        raise InvalidInputError("'compose' needs at least one function.")
    funcs = tuple(resolve_function(f, name="funcs") for f in funcs)
    return fold(funcs, _compose2, reverse_direction=right)
