""" monad type class
"""
from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, Callable, TypeVar

from .dispatch import kind_of, resolve

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


class Monad(ABC):
    """
    Base class for Monad instances.
    Stands on its own: a Monad instance does not need an Applicative one,
    but where both exist they must agree (see ap).
    """
    requires: tuple[type, ...] = ()

    @abstractmethod
    def wrap(self, value: A) -> Any:
        """ Wraps a value in the monadic context """

    @abstractmethod
    def bind(self, ma: Any, m: Callable[[A], Any]) -> Any:
        """
        Chains computations by passing the value inside ma to function m,
        which decides the state of the next container.
        """


def wrap(kind: Any, value: A) -> Any:
    """ Monadic return for the given container kind """
    return resolve(Monad, kind).wrap(value)


def bind(ma, m: Callable[[Any], Any]):
    """ Passes the value inside ma to the step m """
    return resolve(Monad, kind_of(ma)).bind(ma, m)


def chain(start, *steps: Callable[[Any], Any]):
    """
    Binds each step in turn, left to right.
    chain(x, f, g) is the same as x >> f >> g.
    """
    return reduce(bind, steps, start)


def compose_kleisli(g: Callable[[B], Any], f: Callable[[A], Any]) \
    -> Callable[[A], Any]:
    """
    Composes two Kleisli functions: f runs first, then g.
    """
    return lambda x: bind(f(x), g)


def ap(mf, mx, kind):
    """
    Applicative apply written in terms of bind and wrap
    Any lawful kind gives the same result as apply(mf, mx)
    """
    return \
        bind(mf, lambda f:
        bind(mx, lambda x:
        wrap(kind, f(x))
        ))


def identity(x):
    """
    Returns the argument unchanged.
    """
    return x
