"""
Log level enumeration

Severities understood by every tree
"""

from enum import IntEnum


class Level(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    """

    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            Level enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            Level.DEBUG: "\033[36m",    # Cyan
            Level.INFO: "\033[32m",     # Green
            Level.WARN: "\033[33m",     # Yellow
            Level.ERROR: "\033[31m",    # Red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"
