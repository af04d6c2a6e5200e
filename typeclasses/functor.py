""" Abstract base class for Functor """
from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from .dispatch import kind_of, resolve

# pylint:disable=C0105
A = TypeVar('A')
B = TypeVar('B')


class Functor(ABC):
    """Base class for Functor instances.

    To implement a functor instance for a container kind, create a sub-class
    of Functor, override the map method ensuring that the functor laws hold,
    and register it with instancedef(Functor, kind).
    """
    requires: tuple[type, ...] = ()

    @abstractmethod
    def map(self, f: Callable[[A], B], fa: Any) -> Any:
        """Applies a function to the value inside the container."""


def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the value inside the functor
    'f' using the Functor instance registered for its kind."""
    return resolve(Functor, kind_of(f)).map(fn, f)
