""" imports for typeclasses """
from .applicative import Applicative, pure, apply, lift_a2
from .dispatch import instancedef, register_kind, resolve, kind_of
from .errors import TypeclassError, NothingExtractionError, \
    MissingInstanceError, DuplicateInstanceError
from .functor import Functor, map #pylint: disable=redefined-builtin
from .maybe import Maybe, Just, Nothing, from_just, from_maybe, \
    from_optional, is_just, is_nothing
from .monad import Monad, wrap, bind, chain, ap, compose_kleisli, identity
