"""Output shaping for mapped results."""

import typing as tp

import pandas as pd
from pandas.api.types import is_scalar

__all__ = ["all_scalar", "simplify_results"]


def all_scalar(values: tp.Iterable[tp.Any]) -> bool:
    """True if every value is a scalar in the pandas sense (numbers, strings, None...)."""
    return all(is_scalar(value) for value in values)


def simplify_results(
    results: tp.List[tp.Any], keys: tp.Optional[tp.Sequence[tp.Any]] = None
) -> tp.Union[pd.Series, pd.DataFrame, tp.List[tp.Any]]:
    """Collapse a list of per-item results into a pandas container when shapes allow.

    Args:
        results: One result per input item, in input order.
        keys: Labels of the input items (positions, dict keys, row labels,
            column labels or group keys). Defaults to positions.

    Returns:
        - a ``Series`` indexed by ``keys`` when every result is a scalar,
        - a ``DataFrame`` with one row per key when every result is a ``Series``,
        - ``results`` unchanged otherwise.
    """
    if keys is None:
        keys = range(len(results))
    index = pd.Index(list(keys)) if not isinstance(keys, pd.Index) else keys

    if all_scalar(results):
        # empty Series need an explicit dtype
        dtype = None if results else object
        return pd.Series(results, index=index, dtype=dtype)

    if results and all(isinstance(result, pd.Series) for result in results):
        frame = pd.DataFrame(results)
        frame.index = index
        return frame

    return results
