"""
Tag-based filter using regular expressions
"""

import re
from typing import Optional, Pattern, Union

from timber.core.log_level import Level
from timber.filters.base_filter import BaseFilter


class TagFilter(BaseFilter):
    """
    Filter calls based on regex matching of the one-time tag.

    Can be configured to include or exclude matching tags.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True,
        match_untagged: bool = False
    ):
        """
        Initialize tag filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, exclude matching tags. If False, include only matching tags.
            case_sensitive: Whether pattern matching is case-sensitive
            match_untagged: Whether calls without a tag pass the filter

        Example:
            # Only log calls tagged "db" or "db.*"
            filter = TagFilter(r"^db(\\.|$)")

            # Drop noisy tags, keep untagged calls
            filter = TagFilter(r"^heartbeat$", exclude=True, match_untagged=True)
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude
        self.match_untagged = match_untagged

    def should_log(self, level: Level, tag: Optional[str] = None) -> bool:
        """
        Check if the tag matches the pattern.

        Args:
            level: Ignored
            tag: Tag of the call, or None

        Returns:
            True if the call should be logged based on tag match, False otherwise
        """
        if tag is None:
            return self.match_untagged

        matches = self.pattern.search(tag) is not None
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"TagFilter(pattern='{self.pattern.pattern}', mode={mode})"
