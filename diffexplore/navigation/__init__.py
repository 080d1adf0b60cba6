"""Navigation engine: list model, range selection, view stack and controller."""

from .controller import NavigationController, NavigationState
from .list_model import NO_INDEX, WindowedListModel
from .range_select import WORKING_TREE, CommitRange, select_commit_range
from .view_stack import (
    COMMITS_VIEW,
    DIFF_VIEW,
    STATS_VIEW,
    CommitsScreen,
    DiffScreen,
    StatsScreen,
    ViewStack,
)

__all__ = [
    "COMMITS_VIEW",
    "CommitRange",
    "CommitsScreen",
    "DIFF_VIEW",
    "DiffScreen",
    "NO_INDEX",
    "NavigationController",
    "NavigationState",
    "STATS_VIEW",
    "StatsScreen",
    "ViewStack",
    "WORKING_TREE",
    "WindowedListModel",
    "select_commit_range",
]
