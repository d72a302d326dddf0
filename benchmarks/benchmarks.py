# flake8: noqa
from typing import Tuple

import poniard


class Source:
    def b(self, a: int) -> int:
        return a + 1


def some_func(a: int, b: int) -> Tuple[int, int]:
    return a, b


class DispatchSuite:
    def setup(self):
        self.injector = poniard.Injector([{"a": 1}, Source()])
        self.injected_func = self.injector.inject(some_func)

    def time_direct_call(self):
        some_func(1, 2)

    def time_create_injector(self):
        poniard.Injector([{"a": 1}, Source()])

    def time_dispatch(self):
        self.injector.dispatch(some_func)

    def time_eager_dispatch(self):
        self.injector.eager_dispatch(some_func)

    def time_run_injected_func(self):
        self.injected_func()
