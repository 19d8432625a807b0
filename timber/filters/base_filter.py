"""
Base filter interface

Filters back FilteredTree.is_loggable()
"""

from abc import ABC, abstractmethod
from typing import Optional

from timber.core.log_level import Level


class BaseFilter(ABC):
    """
    Abstract base class for tree filters.

    Filters decide whether a call at a given level and tag is written.
    """

    @abstractmethod
    def should_log(self, level: Level, tag: Optional[str] = None) -> bool:
        """
        Determine if a call should be logged.

        Args:
            level: Log level of the call
            tag: Tag of the call, or None

        Returns:
            True if the call should be logged, False otherwise
        """
        pass

    def __call__(self, level: Level, tag: Optional[str] = None) -> bool:
        """Allow filters to be callable."""
        return self.should_log(level, tag)
