"""Trees module - concrete log handlers"""

from timber.trees.debug_tree import DebugTree
from timber.trees.logging_tree import LoggingTree

__all__ = ["DebugTree", "LoggingTree"]
