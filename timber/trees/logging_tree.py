"""
Bridge tree forwarding calls to the standard logging module
"""

import logging
from typing import Any, Iterable, Optional, Union

from timber.core.filtered_tree import FilteredTree, TreeFilter
from timber.core.log_level import Level
from timber.core.timber_config import TimberConfig


class LoggingTree(FilteredTree):
    """
    Forward calls to a stdlib logger.

    Tagged calls go to the child logger named after the tag, so
    Timber.tag("db").warn(...) lands on "timber.db". Levels map to the
    stdlib level with the same number. The message and extra values are
    joined into one string and never %-interpolated.
    """

    def __init__(
        self,
        logger: Union[str, logging.Logger, None] = None,
        config: Optional[TimberConfig] = None,
        filters: Optional[Iterable[TreeFilter]] = None
    ):
        """
        Initialize logging tree.

        Args:
            logger: Logger or logger name (default: config.logger_name)
            config: Formatting settings (default: TimberConfig.default())
            filters: Filters deciding which calls are written
        """
        super().__init__(filters)
        self.config = config or TimberConfig.default()
        if logger is None:
            logger = self.config.logger_name
        if isinstance(logger, str):
            logger = logging.getLogger(logger)
        self.logger = logger

    def log(
        self,
        level: Level,
        tag: Optional[str] = None,
        message: Any = None,
        *args: Any
    ) -> None:
        target = self.logger.getChild(tag) if tag else self.logger
        msg = self.config.separator.join(str(part) for part in (message, *args))
        target.log(int(level), "%s", msg)

    def __repr__(self) -> str:
        """String representation."""
        return f"LoggingTree(logger={self.logger.name!r})"
