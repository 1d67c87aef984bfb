import logging

from foldwise.logger.logger import get_logger, logger, setup_logger


def test_setup_logger_is_idempotent():
    first = setup_logger()
    handlers = list(first.handlers)
    second = setup_logger()
    assert first is second is logger
    assert second.handlers == handlers
    assert second.propagate is False


def test_get_logger_nests_under_package_logger():
    assert get_logger("foldwise.core.parallel").name == "foldwise.core.parallel"
    assert get_logger("my_script").name == "foldwise.my_script"
    assert get_logger("foldwise") is logger


def test_child_records_reach_package_handler():
    records = []

    class Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    handler = Collect(level=logging.DEBUG)
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        get_logger("foldwise.core.parallel").debug("dispatching")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)

    assert [record.getMessage() for record in records] == ["dispatching"]
