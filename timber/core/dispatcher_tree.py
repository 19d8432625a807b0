"""
Dispatcher tree - fans one call out to every planted tree
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from timber.core.exceptions import MisuseError
from timber.core.log_level import Level
from timber.core.tree import Tree

if TYPE_CHECKING:
    from timber.core.forest import Forest


# Level -> entry point invoked on each planted tree
LEVEL_CALLS: Dict[Level, Callable[..., None]] = {
    Level.DEBUG: lambda tree, *args: tree.debug(*args),
    Level.INFO: lambda tree, *args: tree.info(*args),
    Level.WARN: lambda tree, *args: tree.warn(*args),
    Level.ERROR: lambda tree, *args: tree.error(*args),
}


class DispatcherTree(Tree):
    """
    A tree that delegates to all trees planted in a forest.

    Level methods skip the tag/filter pipeline: each planted tree runs
    its own pipeline when called. set_tag() tags the planted trees
    instead of the dispatcher, so a nested forest keeps the tag. The
    forest is read on every call, so plants and uproots are visible
    immediately.

    Every Forest owns exactly one instance; it is never planted in it.
    """

    def __init__(self, forest: "Forest"):
        super().__init__()
        self._forest = forest

    def debug(self, message: Any = None, *args: Any) -> None:
        self._dispatch_log(Level.DEBUG, message, *args)

    def info(self, message: Any = None, *args: Any) -> None:
        self._dispatch_log(Level.INFO, message, *args)

    def warn(self, message: Any = None, *args: Any) -> None:
        self._dispatch_log(Level.WARN, message, *args)

    def error(self, message: Any = None, *args: Any) -> None:
        self._dispatch_log(Level.ERROR, message, *args)

    def set_tag(self, tag: str) -> None:
        """Set the one-time tag on every tree in the forest."""
        for tree in self._forest.trees():
            tree.set_tag(tag)

    def log(
        self,
        level: Level,
        tag: Optional[str] = None,
        message: Any = None,
        *args: Any
    ) -> None:
        raise MisuseError("Missing override for log method.")

    def _dispatch_log(self, level: Level, message: Any = None, *args: Any) -> None:
        call = LEVEL_CALLS[level]
        # Snapshot; trees planted during fan-out join the next call
        for tree in self._forest.trees():
            call(tree, message, *args)

    def __repr__(self) -> str:
        """String representation."""
        return f"DispatcherTree(trees={self._forest.tree_count()})"
