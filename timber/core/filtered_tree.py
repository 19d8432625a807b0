"""
Filtered tree - a tree whose is_loggable() is driven by filter objects
"""

from __future__ import annotations
from abc import ABC
from typing import Callable, Iterable, List, Optional

from timber.core.log_level import Level
from timber.core.tree import Tree

TreeFilter = Callable[[Level, Optional[str]], bool]


class FilteredTree(Tree, ABC):
    """
    Abstract tree that consults a list of filters.

    A call is loggable when every filter accepts it. With no filters,
    every call is loggable. Filter exceptions propagate to the caller.
    """

    _filters: List[TreeFilter] = []

    def __init__(self, filters: Optional[Iterable[TreeFilter]] = None):
        """
        Initialize filtered tree.

        Args:
            filters: BaseFilter instances or callables taking (level, tag)
        """
        super().__init__()
        self._filters: List[TreeFilter] = []
        for log_filter in filters or ():
            self.add_filter(log_filter)

    def add_filter(self, log_filter: TreeFilter) -> None:
        """
        Add a filter.

        Args:
            log_filter: BaseFilter instance or callable taking (level, tag)

        Raises:
            TypeError: If log_filter is not callable
        """
        if not callable(log_filter):
            raise TypeError("filter must be callable")
        self._filters = self._filters + [log_filter]

    def get_filters(self) -> List[TreeFilter]:
        """Get a copy of the attached filters."""
        return self._filters.copy()

    def is_loggable(self, level: Level, tag: Optional[str] = None) -> bool:
        for log_filter in self._filters:
            if not log_filter(level, tag):
                return False
        return True
