"""Forest builder pattern"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Dict, List, Optional, Union
import logging

from timber.core.filtered_tree import TreeFilter
from timber.core.forest import Forest
from timber.core.timber import Timber
from timber.core.timber_config import TimberConfig
from timber.core.tree import Tree
from timber.trees.debug_tree import DebugTree
from timber.trees.logging_tree import LoggingTree


class ForestBuilder:
    """Builder pattern for forest construction."""

    def __init__(self):
        self._config = TimberConfig()
        self._debug_tree: Optional[Dict[str, Any]] = None
        self._logging_tree: Optional[Dict[str, Any]] = None
        self._custom_trees: List[Tree] = []
        self._custom_filters: List[TreeFilter] = []

    def with_config(self, config: TimberConfig) -> "ForestBuilder":
        """Set configuration used by built-in trees."""
        self._config = config
        return self

    def with_debug_tree(
        self,
        stream=None,
        error_stream=None,
        colored: Optional[bool] = None
    ) -> "ForestBuilder":
        """
        Add a console tree.

        Args:
            stream: Output stream for DEBUG/INFO
            error_stream: Output stream for WARN/ERROR
            colored: Override config.colored_output

        Returns:
            Self for method chaining
        """
        self._debug_tree = {
            "stream": stream,
            "error_stream": error_stream,
            "colored": colored,
        }
        return self

    def with_logging_tree(
        self,
        logger: Union[str, logging.Logger, None] = None
    ) -> "ForestBuilder":
        """Add a tree forwarding to the stdlib logger (default: config.logger_name)."""
        self._logging_tree = {"logger": logger}
        return self

    def with_tree(self, tree: Tree) -> "ForestBuilder":
        """Add a user-defined tree, planted as is."""
        self._custom_trees.append(tree)
        return self

    def with_filter(self, log_filter: TreeFilter) -> "ForestBuilder":
        """
        Add a filter to the built-in trees.

        Args:
            log_filter: BaseFilter instance or callable taking (level, tag)

        Returns:
            Self for method chaining

        Example:
            forest = (ForestBuilder()
                .with_debug_tree()
                .with_filter(LevelFilter(min_level=Level.INFO))
                .build())
        """
        self._custom_filters.append(log_filter)
        return self

    def build_trees(self) -> List[Tree]:
        """
        Create the configured trees.

        Returns:
            Built-in trees first, then user-defined trees in added order
        """
        trees: List[Tree] = []

        if self._debug_tree is not None:
            config = self._config
            colored = self._debug_tree["colored"]
            if colored is not None and colored != config.colored_output:
                config = replace(config, colored_output=colored)
            trees.append(DebugTree(
                stream=self._debug_tree["stream"],
                error_stream=self._debug_tree["error_stream"],
                config=config,
                filters=self._custom_filters,
            ))

        if self._logging_tree is not None:
            trees.append(LoggingTree(
                logger=self._logging_tree["logger"],
                config=self._config,
                filters=self._custom_filters,
            ))

        trees.extend(self._custom_trees)
        return trees

    def build(self) -> Forest:
        """Build a new forest with the configured trees planted."""
        forest = Forest()
        forest.plant(*self.build_trees())
        return forest

    def install(self) -> List[Tree]:
        """
        Plant the configured trees into the process-wide Timber facade.

        Returns:
            The planted trees, e.g. for a later Timber.uproot()
        """
        trees = self.build_trees()
        Timber.plant(*trees)
        return trees
