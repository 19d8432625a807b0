"""
Level-based filter

Filters calls based on log level range
"""

from typing import Optional

from timber.core.log_level import Level
from timber.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter calls based on log level.

    Allows filtering by minimum and/or maximum log level. Applies to the
    tree it is attached to, not to the whole forest.
    """

    def __init__(
        self,
        min_level: Optional[Level] = None,
        max_level: Optional[Level] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Raises:
            ValueError: If min_level is above max_level

        Example:
            # Only log WARN and above
            filter = LevelFilter(min_level=Level.WARN)

            # Only log DEBUG to INFO
            filter = LevelFilter(min_level=Level.DEBUG, max_level=Level.INFO)
        """
        if min_level is not None and max_level is not None and min_level > max_level:
            raise ValueError("min_level cannot exceed max_level")
        self.min_level = min_level
        self.max_level = max_level

    def should_log(self, level: Level, tag: Optional[str] = None) -> bool:
        """
        Check if level is within the specified range.

        Args:
            level: Log level of the call
            tag: Ignored

        Returns:
            True if level is within range, False otherwise
        """
        if self.min_level is not None and level < self.min_level:
            return False

        if self.max_level is not None and level > self.max_level:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
