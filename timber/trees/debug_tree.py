"""Console tree with optional ANSI colors"""

import sys
from typing import Any, Iterable, Optional

from timber.core.filtered_tree import FilteredTree, TreeFilter
from timber.core.log_level import Level
from timber.core.timber_config import TimberConfig


class DebugTree(FilteredTree):
    """A tree for debug builds. All logs go to the console."""

    def __init__(
        self,
        stream=None,
        error_stream=None,
        config: Optional[TimberConfig] = None,
        filters: Optional[Iterable[TreeFilter]] = None
    ):
        """
        Initialize debug tree.

        Args:
            stream: Output stream for DEBUG/INFO (default: sys.stdout)
            error_stream: Output stream for WARN/ERROR (default: sys.stderr)
            config: Formatting settings (default: TimberConfig.default())
            filters: Filters deciding which calls are written
        """
        super().__init__(filters)
        self.config = config or TimberConfig.default()
        self.stream = stream or sys.stdout
        self.error_stream = error_stream or sys.stderr

    def log(
        self,
        level: Level,
        tag: Optional[str] = None,
        message: Any = None,
        *args: Any
    ) -> None:
        """Write one line to the stream selected by level."""
        parts = [message, *args]
        if tag:
            parts.insert(0, self.config.format_tag(tag))
        msg = self.config.separator.join(str(part) for part in parts)

        if self.config.colored_output:
            msg = f"{level.color_code}{msg}{level.reset_code}"

        stream = self._stream_for(level)
        stream.write(msg + "\n")
        stream.flush()

    def _stream_for(self, level: Level):
        if self.config.split_streams and level >= Level.WARN:
            return self.error_stream
        return self.stream

    def flush(self):
        """Flush streams."""
        self.stream.flush()
        self.error_stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"DebugTree(colored={self.config.colored_output})"
