"""
Maps container kinds to the type class instances that serve them
"""
import logging
from typing import Any, Callable, TypeVar, get_origin

from .errors import DuplicateInstanceError, MissingInstanceError

logger = logging.getLogger(__name__)

D = TypeVar('D', bound=type)

# runtime class -> container kind it belongs to
KINDS: dict[type, Any] = {}
# (type class, container kind) -> instance
INSTANCES: dict[tuple[type, Any], Any] = {}


def base_kind(kind: Any) -> Any:
    """Strips type arguments, so Maybe[int] names the same kind as Maybe."""
    return get_origin(kind) or kind


def kind_name(kind: Any) -> str:
    """Readable name of a container kind for messages."""
    return getattr(kind, '__name__', repr(kind))


def register_kind(kind: Any, *members: type) -> None:
    """
    Declares the runtime classes whose values belong to a container kind.
    A class can belong to only one kind.
    """
    kind = base_kind(kind)
    for member in members:
        owner = KINDS.get(member)
        if owner is not None and owner is not kind:
            raise DuplicateInstanceError(
                f"{member.__name__} already belongs to {kind_name(owner)}")
    for member in members:
        KINDS[member] = kind
        logger.debug("%s is a member of %s", member.__name__, kind_name(kind))


def instancedef(typeclass: type, kind: Any) -> Callable[[D], D]:
    """
    Decorator for type class instances
    Registers an instance of the decorated class in the INSTANCES dictionary
    """
    def decorator(cls: D) -> D:
        key = (typeclass, base_kind(kind))
        if key in INSTANCES:
            raise DuplicateInstanceError(
                f"{typeclass.__name__} instance for {kind_name(kind)} "
                "is already registered")
        for required in getattr(typeclass, 'requires', ()):
            if (required, key[1]) not in INSTANCES:
                raise MissingInstanceError(
                    f"{typeclass.__name__} {kind_name(kind)} needs a "
                    f"{required.__name__} instance registered first")
        INSTANCES[key] = cls()
        logger.debug("registered %s as %s %s",
                     cls.__name__, typeclass.__name__, kind_name(kind))
        return cls
    return decorator


def kind_of(value: Any) -> Any:
    """Returns the container kind a value belongs to."""
    for cls in type(value).__mro__:
        if cls in KINDS:
            return KINDS[cls]
    logger.error("%r does not belong to any registered kind", value)
    raise MissingInstanceError(
        f"{type(value).__name__} is not a registered container kind")


def resolve(typeclass: type, kind: Any) -> Any:
    """Looks up the instance of a type class for a container kind."""
    try:
        return INSTANCES[(typeclass, base_kind(kind))]
    except KeyError:
        logger.error("no %s instance for %s",
                     typeclass.__name__, kind_name(kind))
        raise MissingInstanceError(
            f"no {typeclass.__name__} instance for {kind_name(kind)}") \
            from None
