"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Timber - A minimal logging facade
Routes leveled, optionally tagged calls to pluggable trees
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from timber.core.timber import Timber
from timber.core.forest import Forest
from timber.core.forest_builder import ForestBuilder
from timber.core.tree import Tree
from timber.core.filtered_tree import FilteredTree
from timber.core.log_level import Level
from timber.core.timber_config import TimberConfig
from timber.core.exceptions import (
    TimberError,
    InvalidPlantArgument,
    SelfPlantRejected,
    NotPlanted,
    ConstructionForbidden,
    MisuseError,
)
from timber.trees import DebugTree, LoggingTree

# Import submodules (not all classes by default)
from timber import filters
from timber import trees

__all__ = [
    "Timber",
    "Forest",
    "ForestBuilder",
    "Tree",
    "FilteredTree",
    "Level",
    "TimberConfig",
    "TimberError",
    "InvalidPlantArgument",
    "SelfPlantRejected",
    "NotPlanted",
    "ConstructionForbidden",
    "MisuseError",
    "DebugTree",
    "LoggingTree",
    "filters",
    "trees",
]
