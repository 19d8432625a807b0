"""
Tree filters module

Provides filter implementations for controlling which calls a tree writes.
"""

from timber.filters.base_filter import BaseFilter
from timber.filters.level_filter import LevelFilter
from timber.filters.tag_filter import TagFilter
from timber.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "TagFilter",
    "CallbackFilter",
]
