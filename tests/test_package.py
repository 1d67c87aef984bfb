from operator import add

import foldwise


def test_public_api():
    assert foldwise.fold([1, 2, 3, 4, 5], add) == 15
    assert foldwise.freduce is foldwise.fold
    assert foldwise.fmap(abs, [-1, 2]) == [1, 2]
    assert foldwise.compose(abs, str)(-4) == "4"
    assert foldwise.frepeat(int, 2) == [0, 0]
    assert issubclass(foldwise.EmptyInputError, foldwise.FoldwiseError)
    assert repr(foldwise.MISSING) == "MISSING"
