from functools import partial, wraps

import pytest

from poniard import injectable_parameters


def _names(func):
    return [p.name for p in injectable_parameters(func)]


def f(a, /, b, *args, c, d=1, **kwargs):
    ...


class Thing:
    def __init__(self, x, y=None):
        ...

    def method(self, z):
        ...


def test_injectable_parameters():
    assert _names(f) == ["a", "b", "c", "d"]
    assert _names(lambda: None) == []
    assert _names(Thing) == ["x", "y"]
    assert _names(Thing(1).method) == ["z"]
    assert _names(Thing.method) == ["self", "z"]
    assert _names(partial(f, 1)) == ["b", "c", "d"]


def test_wrapped_functions():
    def func(foo):
        return foo

    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    assert _names(wrapper) == ["foo"]


def test_not_callable():
    with pytest.raises(TypeError):
        injectable_parameters(1)
