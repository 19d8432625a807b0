"""
Forest - registry of planted trees

Owns the ordered list of trees and the dispatcher that fans calls out
to them. The process-wide Timber facade wraps one default Forest;
independent forests can be created freely, e.g. one per test.
"""

from __future__ import annotations
from typing import Any, List
import logging
import threading

from timber.core.dispatcher_tree import DispatcherTree
from timber.core.exceptions import InvalidPlantArgument, NotPlanted, SelfPlantRejected
from timber.core.tree import Tree

logger = logging.getLogger(__name__)


class Forest:
    """
    Ordered registry of trees with a uniform logging entry point.

    The same tree may be planted more than once; each occurrence
    receives its own call on fan-out and is uprooted separately.

    Multi-argument plant() and uproot() are processed left to right and
    stop at the first invalid argument. Trees handled before the failure
    stay committed.

    Thread Safety:
        Registry reads and writes are guarded by a lock. Fan-out iterates
        a snapshot outside the lock, so trees may re-enter the forest.

    Example:
        forest = Forest()
        forest.plant(DebugTree())
        forest.info("Application started")
        forest.tag("db").warn("Slow query", elapsed)
    """

    def __init__(self):
        """Initialize an empty forest."""
        self._trees: List[Tree] = []
        self._lock = threading.RLock()
        self._tree_of_souls = DispatcherTree(self)

    @property
    def dispatcher(self) -> DispatcherTree:
        """The tree that delegates to every tree in this forest."""
        return self._tree_of_souls

    def plant(self, *trees: Tree) -> None:
        """
        Add new logging trees.

        Args:
            trees: Tree implementations, appended in argument order

        Raises:
            InvalidPlantArgument: If an argument is None or not a Tree
            SelfPlantRejected: If an argument is this forest's dispatcher
        """
        with self._lock:
            for tree in trees:
                if tree is None:
                    raise InvalidPlantArgument("trees contains None")
                if tree is self._tree_of_souls:
                    raise SelfPlantRejected("Cannot plant Timber into itself.")
                if not isinstance(tree, Tree):
                    raise InvalidPlantArgument(
                        f"trees contains {type(tree).__name__}, expected Tree"
                    )
                self._trees.append(tree)
                logger.debug("Planted %r (%d trees)", tree, len(self._trees))

    def uproot(self, *trees: Tree) -> None:
        """
        Remove planted trees.

        Each argument removes the first occurrence of that tree.

        Args:
            trees: Previously planted trees

        Raises:
            NotPlanted: If a tree is not currently planted
        """
        with self._lock:
            for tree in trees:
                index = self._index_of(tree)
                if index == -1:
                    raise NotPlanted("Cannot uproot tree which is not planted.")
                del self._trees[index]
                logger.debug("Uprooted %r (%d trees)", tree, len(self._trees))

    def uproot_all(self) -> None:
        """Remove all planted trees."""
        with self._lock:
            self._trees.clear()
        logger.debug("Uprooted all trees")

    def tree_count(self) -> int:
        """
        Get number of planted trees.

        Returns:
            Number of trees, counting repeated plants
        """
        with self._lock:
            return len(self._trees)

    def trees(self) -> List[Tree]:
        """
        Get planted trees in dispatch order.

        Returns:
            Copy of trees list
        """
        with self._lock:
            return self._trees.copy()

    def tag(self, tag: str) -> Tree:
        """
        Set a one-time tag on every planted tree.

        Args:
            tag: The tag for logging

        Returns:
            The dispatcher, so the next level call can be chained

        Example:
            forest.tag("network").error("Connection lost")
        """
        self._tree_of_souls.set_tag(tag)
        return self._tree_of_souls

    def debug(self, message: Any = None, *args: Any) -> None:
        """Log debug message to every planted tree."""
        self._tree_of_souls.debug(message, *args)

    def info(self, message: Any = None, *args: Any) -> None:
        """Log info message to every planted tree."""
        self._tree_of_souls.info(message, *args)

    def warn(self, message: Any = None, *args: Any) -> None:
        """Log warning message to every planted tree."""
        self._tree_of_souls.warn(message, *args)

    def error(self, message: Any = None, *args: Any) -> None:
        """Log error message to every planted tree."""
        self._tree_of_souls.error(message, *args)

    def _index_of(self, tree: Tree) -> int:
        # Identity, not equality
        for i, planted in enumerate(self._trees):
            if planted is tree:
                return i
        return -1

    def __repr__(self) -> str:
        """String representation."""
        with self._lock:
            names = [type(tree).__name__ for tree in self._trees]
        return f"Forest(trees={names})"
