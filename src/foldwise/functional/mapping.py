"""Mapping over lists, dicts, DataFrame rows, DataFrame columns and groups.

All functions share the same execution options:

    - ``cores``: number of workers (``1`` = sequential). Defaults to
      ``settings.cores``.
    - ``progress``: show a ``tqdm`` bar. Defaults to ``settings.progress``.

and the same result shaping when ``simplify`` is on: scalar results become a
``pandas.Series`` keyed like the input, ``Series`` results become a
``DataFrame`` with one row per input item, anything else is returned as is.

Example:
    >>> import pandas as pd
    >>> df = pd.DataFrame({"a": [1, 2], "b": [10, 20]}, index=["x", "y"])
    >>> frows(lambda row: row["a"] + row["b"], df).to_dict()
    {'x': 11, 'y': 22}
    >>> fcols(lambda col: col.max(), df).to_dict()
    {'a': 2, 'b': 20}
"""

import typing as tp
from collections.abc import Mapping

import pandas as pd
from pandas.core.groupby import DataFrameGroupBy

from foldwise.core.errors import InvalidInputError
from foldwise.core.parallel import dispatch
from foldwise.core.shape import simplify_results
from foldwise.core.validation import resolve_function

__all__ = ["fmap", "frows", "fcols", "fgroups"]


def fmap(
    func: tp.Callable[[tp.Any], tp.Any],
    x: tp.Union[tp.Iterable[tp.Any], tp.Mapping[tp.Any, tp.Any]],
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
    simplify: bool = False,
) -> tp.Union[tp.List[tp.Any], tp.Dict[tp.Any, tp.Any], pd.Series, pd.DataFrame]:
    """Apply ``func`` to each element of ``x``.

    Args:
        func: Unary function.
        x: Iterable of elements, or a mapping whose values are mapped.
        cores: Number of workers.
        progress: Show a progress bar.
        simplify: Shape the results with ``simplify_results``.

    Returns:
        A list (or a dict with the keys of ``x``), or a pandas container when
        ``simplify`` is on and the results allow it.
    """
    func = resolve_function(func, arity=1)

    if isinstance(x, Mapping):
        keys = list(x.keys())
        results = dispatch(func, x.values(), cores, progress, description="fmap")
        if simplify:
            shaped = simplify_results(results, keys)
            if shaped is not results:
                return shaped
        return dict(zip(keys, results))

    results = dispatch(func, x, cores, progress, description="fmap")
    if simplify:
        return simplify_results(results)
    return results


def _require_frame(df: tp.Any, name: str) -> pd.DataFrame:
    if not isinstance(df, pd.DataFrame):
        raise InvalidInputError(
            f"'{name}' expects a pandas DataFrame, got {type(df).__name__}."
        )
    return df


def frows(
    func: tp.Callable[[pd.Series], tp.Any],
    df: pd.DataFrame,
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
    simplify: bool = True,
) -> tp.Union[pd.Series, pd.DataFrame, tp.List[tp.Any]]:
    """Apply ``func`` to every row of ``df``; each row is passed as a ``Series``."""
    df = _require_frame(df, "frows")
    func = resolve_function(func, arity=1)

    rows = [row for _, row in df.iterrows()]
    results = dispatch(func, rows, cores, progress, description="frows")
    if simplify:
        return simplify_results(results, df.index)
    return results


def fcols(
    func: tp.Callable[[pd.Series], tp.Any],
    df: pd.DataFrame,
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
    simplify: bool = True,
) -> tp.Union[pd.Series, pd.DataFrame, tp.List[tp.Any]]:
    """Apply ``func`` to every column of ``df``; each column is passed as a ``Series``."""
    df = _require_frame(df, "fcols")
    func = resolve_function(func, arity=1)

    columns = [column for _, column in df.items()]
    results = dispatch(func, columns, cores, progress, description="fcols")
    if simplify:
        return simplify_results(results, df.columns)
    return results


def fgroups(
    func: tp.Callable[[pd.DataFrame], tp.Any],
    data: tp.Union[pd.DataFrame, DataFrameGroupBy],
    by: tp.Any = None,
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
    simplify: bool = True,
) -> tp.Union[pd.Series, pd.DataFrame, tp.Dict[tp.Any, tp.Any]]:
    """Apply ``func`` to the sub-frame of every group.

    Args:
        func: Function receiving one group's ``DataFrame``.
        data: Either an existing ``DataFrameGroupBy`` or a ``DataFrame``
            grouped with ``by``.
        by: Grouping key(s) forwarded to ``DataFrame.groupby`` when ``data``
            is a ``DataFrame``.
        cores: Number of workers.
        progress: Show a progress bar.
        simplify: Shape the results with ``simplify_results``.

    Returns:
        A ``Series``/``DataFrame`` indexed by group key, or a dict mapping
        group keys to results when they cannot be simplified.

    Raises:
        InvalidInputError: If ``data`` is neither a grouped frame nor a
            ``DataFrame`` with ``by``.
    """
    if isinstance(data, pd.DataFrame):
        if by is None:
            raise InvalidInputError("'fgroups' needs 'by' when given a DataFrame.")
        data = data.groupby(by)
    elif not isinstance(data, DataFrameGroupBy):
        raise InvalidInputError(
            f"'fgroups' expects a DataFrame or DataFrameGroupBy, got {type(data).__name__}."
        )
    func = resolve_function(func, arity=1)

    keys, frames = [], []
    for key, frame in data:
        keys.append(key)
        frames.append(frame)

    results = dispatch(func, frames, cores, progress, description="fgroups")
    if simplify:
        shaped = simplify_results(results, keys)
        if shaped is not results:
            return shaped
    return dict(zip(keys, results))
