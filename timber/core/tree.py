"""
Tree - abstract log handler

A tree consumes log calls. Concrete trees implement log(); everything
else has a working default.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional
import threading

from timber.core.log_level import Level


class Tree(ABC):
    """
    Abstract base class for log handlers.

    Install instances via Timber.plant() or Forest.plant().

    Each level method funnels into the same pipeline:
    the one-time tag is read and cleared, is_loggable() decides whether
    the call proceeds, and log() writes it.

    Example:
        class ListTree(Tree):
            def __init__(self):
                super().__init__()
                self.lines = []

            def log(self, level, tag=None, message=None, *args):
                self.lines.append((level, tag, message) + args)
    """

    _tag: Optional[str] = None

    # Guards lazy creation of per-instance tag locks
    _lock_guard = threading.Lock()

    def __init__(self):
        self._tag = None
        self._tag_lock = threading.Lock()

    def debug(self, message: Any = None, *args: Any) -> None:
        """Log debug message."""
        self._prepare_log(Level.DEBUG, message, *args)

    def info(self, message: Any = None, *args: Any) -> None:
        """Log info message."""
        self._prepare_log(Level.INFO, message, *args)

    def warn(self, message: Any = None, *args: Any) -> None:
        """Log warning message."""
        self._prepare_log(Level.WARN, message, *args)

    def error(self, message: Any = None, *args: Any) -> None:
        """Log error message."""
        self._prepare_log(Level.ERROR, message, *args)

    def set_tag(self, tag: str) -> None:
        """
        Set a one-time tag for use on the next logging call.

        Args:
            tag: The tag for logging
        """
        with self._get_tag_lock():
            self._tag = tag

    def _get_tag(self) -> Optional[str]:
        """
        Retrieve the tag then clear it for one-time use.

        Returns:
            The pending tag, or None if no tag was set
        """
        with self._get_tag_lock():
            tag, self._tag = self._tag, None
        return tag

    def _get_tag_lock(self) -> threading.Lock:
        # Subclasses may skip Tree.__init__
        lock = self.__dict__.get("_tag_lock")
        if lock is None:
            with Tree._lock_guard:
                lock = self.__dict__.setdefault("_tag_lock", threading.Lock())
        return lock

    def is_loggable(self, level: Level, tag: Optional[str] = None) -> bool:
        """
        Return whether a message at level or tag should be logged.

        Args:
            level: Log level of the call
            tag: Tag of the call, already cleared from the tree

        Returns:
            True to write the message, False to drop it
        """
        return True

    @abstractmethod
    def log(
        self,
        level: Level,
        tag: Optional[str] = None,
        message: Any = None,
        *args: Any
    ) -> None:
        """
        Write a log message to its destination.

        Called for all level-specific methods by default.

        Args:
            level: Log level
            tag: Log tag, or None
            message: Log message, forwarded unchanged
            args: Extra values, forwarded unchanged
        """
        pass

    def _prepare_log(self, level: Level, message: Any = None, *args: Any) -> None:
        tag = self._get_tag()
        if not self.is_loggable(level, tag):
            return
        self.log(level, tag, message, *args)
