"""Eager argument checks shared by the functional operations."""

import inspect
import operator
import typing as tp

from foldwise.core.errors import InvalidInputError

__all__ = ["OPERATOR_SYMBOLS", "resolve_function", "validate_cores", "validate_count"]

OPERATOR_SYMBOLS: tp.Dict[str, tp.Callable[[tp.Any, tp.Any], tp.Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "//": operator.floordiv,
    "%": operator.mod,
    "**": operator.pow,
    "&": operator.and_,
    "|": operator.or_,
    "^": operator.xor,
    "@": operator.matmul,
}


def resolve_function(
    func: tp.Any, arity: tp.Optional[int] = None, name: str = "func"
) -> tp.Callable[..., tp.Any]:
    """Turn ``func`` into a callable accepting ``arity`` positional arguments.

    Args:
        func: A callable, or one of the binary operator symbols in
            ``OPERATOR_SYMBOLS`` (e.g. ``"+"``).
        arity: Number of positional arguments the callable must accept.
            ``None`` skips the signature check.
        name: Argument name used in error messages.

    Returns:
        The resolved callable.

    Raises:
        InvalidInputError: If ``func`` is an unknown symbol, not callable, or
            its signature cannot bind ``arity`` positional arguments.
    """
    if isinstance(func, str):
        try:
            func = OPERATOR_SYMBOLS[func]
        except KeyError:
            raise InvalidInputError(
                f"Unknown operator symbol {func!r} for '{name}'. "
                f"Expected one of {sorted(OPERATOR_SYMBOLS)}."
            ) from None

    if not callable(func):
        raise InvalidInputError(
            f"'{name}' must be callable, got {type(func).__name__}."
        )

    if arity is None:
        return func

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins and C extensions expose no signature
        return func

    try:
        signature.bind(*([None] * arity))
    except TypeError as exc:
        raise InvalidInputError(
            f"'{name}' must accept {arity} positional argument(s): {exc}"
        ) from None

    return func


def validate_cores(cores: tp.Optional[int]) -> tp.Optional[int]:
    """Check a ``cores`` option; ``None`` means the configured default."""
    if cores is None:
        return None
    if isinstance(cores, bool) or not isinstance(cores, int) or cores < 1:
        raise InvalidInputError(f"'cores' must be a positive integer, got {cores!r}.")
    return cores


def validate_count(times: tp.Any, name: str = "times") -> int:
    """Check a repetition count is a non-negative integer."""
    if isinstance(times, bool) or not isinstance(times, int) or times < 0:
        raise InvalidInputError(
            f"'{name}' must be a non-negative integer, got {times!r}."
        )
    return times
