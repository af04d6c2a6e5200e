from dataclasses import dataclass

import pytest

from typeclasses import Applicative, Functor, Just, Maybe, Monad, Nothing, \
    DuplicateInstanceError, MissingInstanceError, apply, bind, chain, \
    instancedef, kind_of, map, pure, register_kind, resolve, wrap  # pylint:disable=W0622
from typeclasses import dispatch
from typeclasses.maybe import MaybeFunctor, _Nothing


@dataclass(frozen=True)
class Box:
    """ A container that always holds exactly one value """
    value: object


def test_kind_of_maybe_members():
    assert kind_of(Just(1)) is Maybe
    assert kind_of(Nothing) is Maybe


def test_resolve_maybe_instances():
    assert isinstance(resolve(Functor, Maybe), MaybeFunctor)
    assert isinstance(resolve(Applicative, Maybe), Applicative)
    assert isinstance(resolve(Monad, Maybe), Monad)


def test_unregistered_value_is_rejected():
    with pytest.raises(MissingInstanceError):
        map(str, [1, 2])
    with pytest.raises(TypeError):
        bind(3, lambda x: x)


def test_duplicate_instance_is_rejected(isolated_registry):
    with pytest.raises(DuplicateInstanceError):
        @instancedef(Functor, Maybe)
        class _Again(Functor):
            def map(self, f, fa):
                return fa


def test_member_of_two_kinds_is_rejected(isolated_registry):
    with pytest.raises(DuplicateInstanceError):
        register_kind("Other", _Nothing)


def test_applicative_needs_functor(isolated_registry):
    register_kind(Box, Box)
    with pytest.raises(MissingInstanceError):
        @instancedef(Applicative, Box)
        class _BoxApplicative(Applicative):
            def pure(self, value):
                return Box(value)

            def apply(self, ff, fa):
                return Box(ff.value(fa.value))


def test_incomplete_instance_cannot_be_registered(isolated_registry):
    with pytest.raises(TypeError):
        @instancedef(Monad, Box)
        class _Half(Monad):
            def wrap(self, value):
                return Box(value)


def test_second_kind_uses_the_same_generic_functions(isolated_registry):
    register_kind(Box, Box)

    @instancedef(Functor, Box)
    class _BoxFunctor(Functor):
        def map(self, f, fa):
            return Box(f(fa.value))

    @instancedef(Applicative, Box)
    class _BoxApplicative(Applicative):
        def pure(self, value):
            return Box(value)

        def apply(self, ff, fa):
            return map(ff.value, fa)

    @instancedef(Monad, Box)
    class _BoxMonad(Monad):
        def wrap(self, value):
            return Box(value)

        def bind(self, ma, m):
            return m(ma.value)

    assert map(lambda x: x + 1, Box(1)) == Box(2)
    assert apply(pure(Box, str), Box(5)) == Box("5")
    assert chain(wrap(Box, 2), lambda x: Box(x * 10)) == Box(20)
    # Maybe is untouched
    assert map(lambda x: x + 1, Just(1)) == Just(2)


def test_parameterised_kind_resolves_to_the_same_instance():
    assert resolve(Monad, Maybe[int]) is resolve(Monad, Maybe)
    assert wrap(Maybe[str], "a") == Just("a")


def test_failed_kind_registration_leaves_registry_unchanged(isolated_registry):
    before = dict(dispatch.KINDS)
    with pytest.raises(DuplicateInstanceError):
        register_kind("Other", Box, _Nothing)
    assert dispatch.KINDS == before
    assert Box not in dispatch.KINDS
