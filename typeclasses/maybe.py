""" Implementation of Maybe in Python."""
from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .applicative import Applicative, apply
from .dispatch import instancedef, register_kind
from .errors import NothingExtractionError
from .functor import Functor, map  # pylint:disable=W0622
from .monad import Monad, bind

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

type Maybe[A] = Just[A] | _Nothing


class _Nothing(Enum):
    NOTHING = "Nothing"

    def __rand__(self, other: Callable[[A], B]) -> "_Nothing":
        return map(other, self)

    def map(self, f: Callable[[A], B]) -> "_Nothing":
        return map(f, self)

    def __mul__(self, other: Maybe) -> "_Nothing":
        return apply(self, other)

    def __rshift__(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return bind(self, m)

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

    def __str__(self):
        return "Nothing"

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING


@dataclass(frozen=True)
class Just[A]:
    a: A

    @classmethod
    def make(cls, value) -> 'Just':
        return cls(value)

    def map(self, f: Callable[[A], B]) -> "Just[B]":
        return map(f, self)

    def __rand__(self, other: Callable[[A], B]) -> "Just[B]":
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    def __mul__(self: "Just[Callable[[B], C]]", other: "Maybe[B]") -> Maybe[C]:
        """Applies a function wrapped in Just to a value wrapped in Maybe."""
        return apply(self, other)

    def __rshift__(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Chains computations by passing the value inside Just to function m."""
        return bind(self, m)

    def is_just(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"

    def __str__(self):
        return f"Just {self.a}"


register_kind(Maybe, Just, _Nothing)


@instancedef(Functor, Maybe)
class MaybeFunctor(Functor):
    """ Maps over Just, leaves Nothing alone without calling f """

    def map(self, f: Callable[[A], B], fa: Maybe[A]) -> Maybe[B]:
        match fa:
            case Just(value):
                return Just.make(f(value))
            case _:
                return Nothing


@instancedef(Applicative, Maybe)
class MaybeApplicative(Applicative):

    def pure(self, value: A) -> Maybe[A]:
        return Just.make(value)

    def apply(self, ff: Maybe[Callable[[A], B]], fa: Maybe[A]) -> Maybe[B]:
        # a missing function wins before the argument is looked at
        match ff:
            case Just(f):
                return map(f, fa)
            case _:
                return Nothing


@instancedef(Monad, Maybe)
class MaybeMonad(Monad):

    def wrap(self, value: A) -> Maybe[A]:
        return Just.make(value)

    def bind(self, ma: Maybe[A], m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        match ma:
            case Just(value):
                return m(value)
            case _:
                return Nothing


def is_just(m: Maybe[Any]) -> bool:
    """True if the Maybe holds a value."""
    return isinstance(m, Just)


def is_nothing(m: Maybe[Any]) -> bool:
    """True if the Maybe is Nothing."""
    return m is Nothing


def from_just(m: Maybe[A]) -> A:
    """
    Extracts the value from a Just.
    Calling it on Nothing is a programmer error and raises
    NothingExtractionError; check is_just first.
    """
    match m:
        case Just(value):
            return value
        case _:
            raise NothingExtractionError(f"cannot extract a value from {m!r}")


def from_maybe(default: A, m: Maybe[A]) -> A:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default


def from_optional(value: A | None) -> Maybe[A]:
    """Converts a value that may be None into a Maybe."""
    return Nothing if value is None else Just.make(value)
