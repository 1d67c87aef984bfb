"""Progress reporting for dispatched iterations."""

import typing as tp

from tqdm import tqdm

__all__ = ["progress_iter"]

T = tp.TypeVar("T")


def progress_iter(
    iterable: tp.Iterable[T],
    enabled: bool,
    total: tp.Optional[int] = None,
    description: tp.Optional[str] = None,
) -> tp.Iterable[T]:
    """Wrap ``iterable`` in a ``tqdm`` bar when ``enabled``.

    Args:
        iterable: Items to iterate over.
        enabled: If False, ``iterable`` is returned untouched.
        total: Number of expected items, used when ``iterable`` has no length.
        description: Label shown in front of the bar.

    Returns:
        The (possibly wrapped) iterable.
    """
    if not enabled:
        return iterable
    return tqdm(iterable, total=total, desc=description, unit="it")
