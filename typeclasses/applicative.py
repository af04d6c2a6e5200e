"""
Applicative functor type class for typeclasses.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from .dispatch import kind_of, resolve
from .functor import Functor, map  # pylint:disable=W0622

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')


class Applicative(ABC):
    """
    Base class for Applicative instances, providing pure
    and applicative application.
    An Applicative instance can only be registered for a kind
    that already has a Functor instance.
    """
    requires: tuple[type, ...] = (Functor,)

    @abstractmethod
    def pure(self, value: T) -> Any:
        """
        Wraps a value in the Applicative context.
        """

    @abstractmethod
    def apply(self, ff: Any, fa: Any) -> Any:
        """
        Applies the function wrapped in ff to the value wrapped in fa.
        """


def pure(kind: Any, value: T) -> Any:
    """ Wraps a value in the context of the given container kind """
    return resolve(Applicative, kind).pure(value)


def apply(ff, fa):
    """ Applies a wrapped function to a wrapped value """
    return resolve(Applicative, kind_of(ff)).apply(ff, fa)


def lift_a2(f: Callable[[T, U], V], fa, fb):
    """
    Lifts a binary function to work on two containers of the same kind.
    """
    return apply(map(lambda a: lambda b: f(a, b), fa), fb)
