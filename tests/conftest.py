from typing import Any, Callable

import pytest

from typeclasses import dispatch
from typeclasses.demo import half as _half


class Spy:
    """ Wraps a function and records every argument it was called with """
    def __init__(self, func: Callable[[Any], Any]):
        self.func = func
        self.calls: list[Any] = []

    def __call__(self, x):
        self.calls.append(x)
        return self.func(x)


@pytest.fixture
def half():
    return _half


@pytest.fixture
def spy():
    return Spy


@pytest.fixture
def isolated_registry(monkeypatch):
    """ Lets a test register kinds and instances without leaking them """
    monkeypatch.setattr(dispatch, "KINDS", dict(dispatch.KINDS))
    monkeypatch.setattr(dispatch, "INSTANCES", dict(dispatch.INSTANCES))
