"""Sequential and parallel map dispatch.

Every mapping style operation in foldwise (``fmap``, ``frows``, ``fcols``,
``fgroups``, ``walk`` and ``frepeat``) ends up in :func:`dispatch`, which
decides between a plain loop and a ``concurrent.futures`` executor and
optionally reports progress through ``tqdm``.

Backends:
    - ``"thread"``: ``ThreadPoolExecutor``. Works with any callable, best for
      I/O bound functions or functions releasing the GIL (NumPy, pandas).
    - ``"process"``: ``ProcessPoolExecutor``. ``func`` and the items must be
      picklable, i.e. module level functions rather than lambdas.

Results always come back in input order. The first exception raised by
``func`` (in input order) is re-raised as is and pending work is cancelled.
"""

import typing as tp
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor

from foldwise.core.config import settings
from foldwise.core.errors import InvalidInputError
from foldwise.core.progress import progress_iter
from foldwise.core.validation import validate_cores
from foldwise.logger.logger import get_logger

__all__ = ["BACKENDS", "dispatch"]

logger = get_logger(__name__)

BACKENDS: tp.Dict[str, tp.Type[Executor]] = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}

T = tp.TypeVar("T")
R = tp.TypeVar("R")


def dispatch(
    func: tp.Callable[[T], R],
    items: tp.Iterable[T],
    cores: tp.Optional[int] = None,
    progress: tp.Optional[bool] = None,
    backend: tp.Optional[str] = None,
    description: tp.Optional[str] = None,
) -> tp.List[R]:
    """Apply ``func`` to every item and collect the results in order.

    Args:
        func: Unary function applied to each item.
        items: Finite iterable of inputs; materialized before dispatch.
        cores: Number of workers. ``1`` runs in the calling thread.
            Defaults to ``settings.cores``.
        progress: Show a ``tqdm`` progress bar. Defaults to ``settings.progress``.
        backend: ``"thread"`` or ``"process"``. Defaults to ``settings.backend``.
        description: Label of the progress bar.

    Returns:
        List with ``func(item)`` for each item, in input order.

    Raises:
        InvalidInputError: If ``cores`` or ``backend`` is invalid.
    """
    cores = validate_cores(cores) or settings.cores
    progress = settings.progress if progress is None else progress
    backend = backend or settings.backend

    if backend not in BACKENDS:
        raise InvalidInputError(
            f"Unknown backend {backend!r}. Expected one of {sorted(BACKENDS)}."
        )

    items = list(items)
    n_items = len(items)
    workers = min(cores, n_items)

    if workers <= 1:
        logger.debug(f"Dispatching {n_items} item(s) sequentially")
        return [
            func(item)
            for item in progress_iter(items, progress, n_items, description)
        ]

    logger.debug(
        f"Dispatching {n_items} item(s) to {workers} {backend} worker(s)"
    )
    executor = BACKENDS[backend](max_workers=workers)
    try:
        mapped = executor.map(func, items)
        return list(progress_iter(mapped, progress, n_items, description))
    finally:
        executor.shutdown(wait=True, cancel_futures=True)
