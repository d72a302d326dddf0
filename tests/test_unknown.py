import operator

import pytest

from poniard import Injector, UnknownInjectable, UnknownParameterError, is_unknown

MSG = "Tried to call capability on an uninjected parameter: thing"


@pytest.fixture
def unknown() -> UnknownInjectable:
    return Injector().dispatch(lambda thing: thing)


def test_unknown_is_injected(unknown):
    assert is_unknown(unknown)
    assert not is_unknown(None)
    assert not is_unknown(UnknownInjectable)
    assert repr(unknown) == "<UnknownInjectable 'thing'>"


@pytest.mark.parametrize(
    "use",
    [
        lambda u: u.bogus,
        lambda u: u.bogus(),
        lambda u: setattr(u, "x", 1),
        lambda u: delattr(u, "x"),
        lambda u: u(),
        lambda u: u["key"],
        lambda u: operator.setitem(u, "key", 1),
        lambda u: list(u),
        lambda u: len(u),
        lambda u: 1 in u,
        lambda u: u + 1,
        lambda u: 1 + u,
        lambda u: u < 1,
        lambda u: -u,
        lambda u: str(u),
        lambda u: f"{u}",
        lambda u: bool(u),
        lambda u: int(u),
    ],
)
def test_any_use_fails(unknown, use):
    with pytest.raises(UnknownParameterError, match=MSG) as exc_info:
        use(unknown)
    assert exc_info.value.name == "thing"


def test_identity_still_works(unknown):
    assert unknown is unknown
    assert unknown == unknown
    assert unknown != 1
    assert unknown in {unknown}


def test_unused_unknowns_are_harmless():
    def handler(user, mailer, logger):
        return user

    assert Injector([{"user": "bob"}]).dispatch(handler) == "bob"
