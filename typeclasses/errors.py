"""
Exceptions raised by the type class machinery
"""

class TypeclassError(Exception):
    """Base class for all errors raised by typeclasses."""


class NothingExtractionError(TypeclassError, AssertionError):
    """
    A value was extracted from Nothing.
    Callers must check for presence first, so this is a programmer error.
    """


class MissingInstanceError(TypeclassError, TypeError):
    """No instance of a type class is registered for a container kind."""


class DuplicateInstanceError(TypeclassError):
    """An instance or kind member was registered twice."""
