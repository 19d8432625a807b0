"""Tests for the process-wide Timber facade"""

import pytest
from unittest.mock import patch

from timber import (
    Timber,
    Forest,
    Level,
    Tree,
    ConstructionForbidden,
    InvalidPlantArgument,
    SelfPlantRejected,
    NotPlanted,
)


class RecordingTree(Tree):
    """Tree recording every write."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def log(self, level, tag=None, message=None, *args):
        self.calls.append((level, tag, message) + args)


class TestTimber:
    """Test static facade behaviour."""

    def setup_method(self):
        """Reset planted trees before each test."""
        Timber.uproot_all()

    def teardown_method(self):
        """Reset planted trees after each test."""
        Timber.uproot_all()

    def test_no_instances(self):
        with pytest.raises(ConstructionForbidden, match="No instances"):
            Timber()

    def test_forest_is_stable(self):
        assert isinstance(Timber.forest(), Forest)
        assert Timber.forest() is Timber.forest()

    def test_plant_adds_one_tree(self):
        assert Timber.tree_count() == 0

        Timber.plant(RecordingTree())

        assert Timber.tree_count() == 1

    def test_plant_rejects_none(self):
        with pytest.raises(InvalidPlantArgument):
            Timber.plant(None)
        assert Timber.tree_count() == 0

    def test_plant_rejects_facade_dispatcher(self):
        with pytest.raises(SelfPlantRejected):
            Timber.plant(Timber.tag("t"))
        assert Timber.tree_count() == 0

    def test_uproot(self):
        tree1, tree2 = RecordingTree(), RecordingTree()
        Timber.plant(tree1, tree2)

        Timber.uproot(tree1, tree2)

        assert Timber.tree_count() == 0

    def test_uproot_not_planted(self):
        with pytest.raises(NotPlanted):
            Timber.uproot(RecordingTree())

    def test_uproot_all(self):
        trees = [RecordingTree(), RecordingTree(), RecordingTree()]
        for tree in trees:
            Timber.plant(tree)
        assert Timber.tree_count() == len(trees)

        Timber.uproot_all()

        assert Timber.tree_count() == 0

    def test_tag_calls_set_tag_on_all_trees(self):
        trees = [RecordingTree(), RecordingTree()]
        Timber.plant(*trees)

        with patch.object(trees[0], "set_tag") as set0, \
                patch.object(trees[1], "set_tag") as set1:
            Timber.tag("tag")

        set0.assert_called_once_with("tag")
        set1.assert_called_once_with("tag")

    @pytest.mark.parametrize("level", list(Level))
    def test_level_calls_level_on_all_trees(self, level):
        method = level.name.lower()
        trees = [RecordingTree(), RecordingTree()]
        Timber.plant(*trees)

        getattr(Timber, method)("whatever")

        for tree in trees:
            assert tree.calls == [(level, None, "whatever")]


class TestTimberScenarios:
    """End-to-end scenarios through the facade."""

    def setup_method(self):
        Timber.uproot_all()

    def teardown_method(self):
        Timber.uproot_all()

    def test_single_tree_debug(self):
        tree = RecordingTree()
        Timber.plant(tree)

        Timber.debug("x")

        assert tree.calls == [(Level.DEBUG, None, "x")]

    def test_tag_consumed_by_next_call(self):
        tree1, tree2 = RecordingTree(), RecordingTree()
        Timber.plant(tree1, tree2)

        Timber.tag("t").warn("y")
        Timber.warn("z")

        for tree in (tree1, tree2):
            assert tree.calls == [
                (Level.WARN, "t", "y"),
                (Level.WARN, None, "z"),
            ]

    def test_same_tree_planted_twice(self):
        tree = RecordingTree()
        Timber.plant(tree)
        Timber.plant(tree)

        Timber.info("m")

        assert tree.calls == [(Level.INFO, None, "m")] * 2

    def test_uprooted_tree_receives_nothing(self):
        tree = RecordingTree()
        Timber.plant(tree)
        Timber.uproot(tree)

        Timber.error("e")

        assert tree.calls == []

    def test_extras_forwarded(self):
        tree = RecordingTree()
        Timber.plant(tree)

        Timber.tag("req").info("served", 200, {"ms": 12})

        assert tree.calls == [(Level.INFO, "req", "served", 200, {"ms": 12})]
