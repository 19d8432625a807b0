"""
Timber - process-wide logging facade

Static entry point over one default Forest, created at import time and
never replaced.
"""

from __future__ import annotations
from typing import Any

from timber.core.exceptions import ConstructionForbidden
from timber.core.forest import Forest
from timber.core.tree import Tree


class Timber:
    """
    Static logging facade.

    Has no instances; all state is process-wide.

    Example:
        Timber.plant(DebugTree())

        Timber.debug("debug")
        Timber.tag("net").warn("Retrying", attempt)
    """

    _forest: Forest = Forest()

    def __init__(self):
        raise ConstructionForbidden("No instances.")

    @classmethod
    def forest(cls) -> Forest:
        """
        Get the process-wide forest.

        Returns:
            The default Forest behind this facade
        """
        return cls._forest

    @classmethod
    def debug(cls, message: Any = None, *args: Any) -> None:
        """Log debug message."""
        cls._forest.debug(message, *args)

    @classmethod
    def info(cls, message: Any = None, *args: Any) -> None:
        """Log info message."""
        cls._forest.info(message, *args)

    @classmethod
    def warn(cls, message: Any = None, *args: Any) -> None:
        """Log warning message."""
        cls._forest.warn(message, *args)

    @classmethod
    def error(cls, message: Any = None, *args: Any) -> None:
        """Log error message."""
        cls._forest.error(message, *args)

    @classmethod
    def tag(cls, tag: str) -> Tree:
        """
        Set a one-time tag for use on the next logging call.

        Args:
            tag: The tag for logging

        Returns:
            A tree whose level methods log to every planted tree
        """
        return cls._forest.tag(tag)

    @classmethod
    def plant(cls, *trees: Tree) -> None:
        """
        Add new logging trees.

        Args:
            trees: Tree implementations

        Raises:
            InvalidPlantArgument: If an argument is None or not a Tree
            SelfPlantRejected: If an argument is the facade's own dispatcher
        """
        cls._forest.plant(*trees)

    @classmethod
    def uproot(cls, *trees: Tree) -> None:
        """
        Remove planted trees.

        Raises:
            NotPlanted: If a tree is not currently planted
        """
        cls._forest.uproot(*trees)

    @classmethod
    def uproot_all(cls) -> None:
        """Remove all planted trees."""
        cls._forest.uproot_all()

    @classmethod
    def tree_count(cls) -> int:
        """Get number of planted trees."""
        return cls._forest.tree_count()
