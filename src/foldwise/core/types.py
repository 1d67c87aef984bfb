"""Reusable type definitions for foldwise.

Type Aliases:
    CombineFunc: A binary function ``(accumulator, element) -> accumulator``.
    Trace: The accumulate-mode output of a fold, either flat scalars or boxes.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, TypeVar, Union

__all__ = ["Box", "CombineFunc", "Trace", "MISSING"]

T = TypeVar("T")
A = TypeVar("A")

CombineFunc = Callable[[A, T], A]


@dataclass(frozen=True)
class Box(Generic[T]):
    """A single fold state kept in its own container.

    Accumulate-mode folds return a list of boxes whenever the states cannot be
    (or were asked not to be) flattened into plain scalars.
    """

    value: T


Trace = Union[List[Any], List[Box[Any]]]


class _Missing:
    """Marker for an argument that was not supplied; ``None`` is a valid seed."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return "MISSING"


MISSING: Any = _Missing()
