import operator

import pytest
from foldwise.core.errors import FoldwiseError, InvalidInputError
from foldwise.core.validation import (
    OPERATOR_SYMBOLS,
    resolve_function,
    validate_cores,
    validate_count,
)


@pytest.mark.parametrize(
    "symbol, expected",
    [("+", operator.add), ("*", operator.mul), ("**", operator.pow), ("@", operator.matmul)],
)
def test_resolve_symbols(symbol, expected):
    assert resolve_function(symbol, arity=2) is expected


def test_every_symbol_is_binary():
    for func in OPERATOR_SYMBOLS.values():
        assert resolve_function(func, arity=2) is func


def test_resolve_keeps_callables():
    def combine(a, b):
        return a

    assert resolve_function(combine, arity=2) is combine
    assert resolve_function(lambda *args: args, arity=2) is not None


def test_resolve_errors_are_type_errors():
    with pytest.raises(InvalidInputError) as info:
        resolve_function("not callable", arity=2, name="combine")
    assert isinstance(info.value, TypeError)
    assert isinstance(info.value, FoldwiseError)


def test_resolve_arity_mismatch_names_argument():
    with pytest.raises(InvalidInputError, match="'combine' must accept 2"):
        resolve_function(lambda a, b, c: a, arity=2, name="combine")


def test_resolve_without_arity_skips_signature():
    def three(a, b, c):
        return a

    assert resolve_function(three) is three


def test_validate_cores():
    assert validate_cores(None) is None
    assert validate_cores(2) == 2
    with pytest.raises(InvalidInputError):
        validate_cores(0)


def test_validate_count():
    assert validate_count(0) == 0
    with pytest.raises(InvalidInputError, match="'n'"):
        validate_count(-3, name="n")
