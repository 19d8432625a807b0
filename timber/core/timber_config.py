"""
Timber configuration management

Settings shared by the built-in trees
"""

from dataclasses import dataclass


@dataclass
class TimberConfig:
    """
    Configuration for the built-in trees.

    Attributes:
        tag_format: Template for the tag marker, must contain {tag}
        separator: Joins tag marker, message and extra values
        colored_output: Wrap console lines in ANSI level colors
        split_streams: Send WARN/ERROR to the error stream
        logger_name: stdlib logger used by LoggingTree
    """

    # Format settings
    tag_format: str = "[{tag}]"
    separator: str = " "

    # Console settings
    colored_output: bool = False
    split_streams: bool = True

    # stdlib bridge settings
    logger_name: str = "timber"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if "{tag}" not in self.tag_format:
            raise ValueError("tag_format must contain '{tag}'")
        if not self.logger_name:
            raise ValueError("logger_name cannot be empty")

    def format_tag(self, tag: str) -> str:
        """Render the tag marker."""
        return self.tag_format.format(tag=tag)

    @classmethod
    def default(cls) -> "TimberConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "TimberConfig":
        """Create configuration for interactive debugging."""
        return cls(colored_output=True)

    @classmethod
    def plain_config(cls) -> "TimberConfig":
        """Create configuration with uncolored output on a single stream."""
        return cls(colored_output=False, split_streams=False)
