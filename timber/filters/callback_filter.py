"""
Callback-based filter

Filters calls using custom callback functions
"""

from typing import Callable, Optional

from timber.core.log_level import Level
from timber.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter calls using a custom callback function.

    Provides maximum flexibility for filtering logic.
    """

    def __init__(self, callback: Callable[[Level, Optional[str]], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes (level, tag) and returns bool.
                     Should return True to log the call, False to discard it.

        Raises:
            TypeError: If callback is not callable

        Example:
            # Errors always, everything else only when tagged
            def tagged_or_error(level, tag):
                return level >= Level.ERROR or tag is not None

            filter = CallbackFilter(tagged_or_error)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, level: Level, tag: Optional[str] = None) -> bool:
        """
        Use callback to determine if the call should be logged.

        Raises:
            Exception: If callback raises an exception, it's propagated
        """
        return bool(self.callback(level, tag))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
