import threading

from foldwise.functional.walk import walk


def test_walk_returns_input_object():
    seen = []
    items = [1, 2, 3]
    assert walk(seen.append, items) is items
    assert seen == [1, 2, 3]


def test_walk_mapping_values():
    seen = []
    data = {"a": 1, "b": 2}
    assert walk(seen.append, data) is data
    assert seen == [1, 2]


def test_walk_in_parallel():
    lock = threading.Lock()
    seen = []

    def record(x):
        with lock:
            seen.append(x)

    walk(record, range(50), cores=4, progress=True)
    assert sorted(seen) == list(range(50))
