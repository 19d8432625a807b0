"""
Core module for timber

This module contains the fundamental classes:
- Timber: Process-wide logging facade
- Forest: Registry of planted trees
- Tree: Abstract log handler
- FilteredTree: Tree driven by filter objects
- DispatcherTree: Fan-out tree owned by each forest
- Level: Log level enumeration
- TimberConfig: Configuration management
- ForestBuilder: Builder pattern for forest construction
"""

from timber.core.log_level import Level
from timber.core.exceptions import (
    TimberError,
    InvalidPlantArgument,
    SelfPlantRejected,
    NotPlanted,
    ConstructionForbidden,
    MisuseError,
)
from timber.core.tree import Tree
from timber.core.filtered_tree import FilteredTree
from timber.core.dispatcher_tree import DispatcherTree
from timber.core.forest import Forest
from timber.core.timber import Timber
from timber.core.timber_config import TimberConfig
from timber.core.forest_builder import ForestBuilder

__all__ = [
    "Level",
    "TimberError",
    "InvalidPlantArgument",
    "SelfPlantRejected",
    "NotPlanted",
    "ConstructionForbidden",
    "MisuseError",
    "Tree",
    "FilteredTree",
    "DispatcherTree",
    "Forest",
    "Timber",
    "TimberConfig",
    "ForestBuilder",
]
