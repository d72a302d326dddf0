from typing import Any, List

import pytest

from poniard import Injector


class Things:
    """An object source whose methods depend on other injected names."""

    def two_things(self, thing: Any) -> List[Any]:
        return [thing, thing]

    def greeting(self, name: str) -> str:
        return f"hello {name}"

    def shout(self, greeting: str) -> str:
        return greeting.upper()


class Cyclic:
    def a(self, b: Any) -> Any:
        return b

    def b(self, a: Any) -> Any:
        return a

    def itself(self, itself: Any) -> Any:
        return itself


@pytest.fixture
def empty_injector() -> Injector:
    return Injector()


@pytest.fixture
def things() -> Things:
    return Things()


@pytest.fixture
def cyclic_injector() -> Injector:
    return Injector([Cyclic()])
