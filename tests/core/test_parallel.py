import threading
import time

import pytest
from foldwise.core import parallel
from foldwise.core.config import settings
from foldwise.core.errors import InvalidInputError
from foldwise.core.parallel import dispatch


def slow_identity(x):
    # later items finish first
    time.sleep(0.001 * (10 - x))
    return x


def test_dispatch_sequential():
    assert dispatch(str, [1, 2, 3], cores=1) == ["1", "2", "3"]


def test_dispatch_threads_keep_order():
    assert dispatch(slow_identity, range(10), cores=4) == list(range(10))


def test_dispatch_uses_worker_threads():
    names = dispatch(lambda _: threading.current_thread().name, range(8), cores=4)
    assert any(name != threading.current_thread().name for name in names)


def test_dispatch_processes():
    assert dispatch(abs, [-1, -2, 3], cores=2, backend="process") == [1, 2, 3]


def test_dispatch_empty():
    assert dispatch(str, [], cores=4) == []


def test_dispatch_more_cores_than_items():
    assert dispatch(str, [1], cores=16) == ["1"]


def test_dispatch_progress_bar(capsys):
    assert dispatch(str, [1, 2], progress=True, description="demo") == ["1", "2"]
    assert "demo" in capsys.readouterr().err


def test_dispatch_reads_defaults_from_settings(monkeypatch):
    seen = []

    class RecordingExecutor(parallel.ThreadPoolExecutor):
        def __init__(self, max_workers=None):
            seen.append(max_workers)
            super().__init__(max_workers=max_workers)

    monkeypatch.setattr(settings, "cores", 3)
    monkeypatch.setitem(parallel.BACKENDS, "thread", RecordingExecutor)
    assert dispatch(str, [1, 2, 3, 4]) == ["1", "2", "3", "4"]
    assert seen == [3]


def test_dispatch_propagates_first_error_in_input_order():
    def fail_on_odd(x):
        if x % 2:
            raise ValueError(x)
        return x

    with pytest.raises(ValueError) as info:
        dispatch(fail_on_odd, [0, 2, 3, 5], cores=4)
    assert info.value.args == (3,)


@pytest.mark.parametrize("cores", [0, -2, 1.5, True, "2"])
def test_dispatch_rejects_bad_cores(cores):
    with pytest.raises(InvalidInputError):
        dispatch(str, [1], cores=cores)


def test_dispatch_rejects_unknown_backend():
    with pytest.raises(InvalidInputError, match="backend"):
        dispatch(str, [1, 2], cores=2, backend="gpu")
