"""
Errors raised by the timber facade

Every error is raised synchronously to the caller of the offending
operation. Each one also derives from the closest builtin exception.
"""


class TimberError(Exception):
    """Base class for all timber errors."""


class InvalidPlantArgument(TimberError, TypeError):
    """A None or non-Tree value was passed to plant()."""


class SelfPlantRejected(TimberError, ValueError):
    """A forest was asked to plant its own dispatcher."""


class NotPlanted(TimberError, ValueError):
    """uproot() was given a tree that is not currently planted."""


class ConstructionForbidden(TimberError, TypeError):
    """The static Timber facade was instantiated."""


class MisuseError(TimberError, NotImplementedError):
    """The dispatcher's write hook was called directly."""
