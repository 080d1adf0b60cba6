from __future__ import annotations

import unittest

from diffexplore.git.types import Commit
from diffexplore.navigation.list_model import WindowedListModel
from diffexplore.navigation.range_select import (
    WORKING_TREE,
    WORKING_TREE_LABEL,
    CommitRange,
    select_commit_range,
)


def _commits(count: int) -> list[Commit]:
    return [
        Commit(revision=f"{index:02d}" * 20, author_name="Dev", timestamp=0, subject=f"c{index}")
        for index in range(count)
    ]


class SelectCommitRangeTests(unittest.TestCase):
    def test_unmarked_cursor_selects_range_to_working_tree(self) -> None:
        commits = _commits(5)
        model = WindowedListModel.create(5, height=10)
        model.next_item()
        model.next_item()

        selected = select_commit_range(commits, model)

        self.assertEqual(selected, CommitRange(start=commits[2].revision))
        self.assertEqual(selected.end, WORKING_TREE)
        self.assertTrue(selected.open_ended)

    def test_older_commit_is_always_start(self) -> None:
        commits = _commits(5)

        mark_first = WindowedListModel.create(5, height=10)
        mark_first.next_item()
        mark_first.toggle_mark()
        for _ in range(3):
            mark_first.next_item()

        mark_last = WindowedListModel.create(5, height=10)
        for _ in range(4):
            mark_last.next_item()
        mark_last.toggle_mark()
        for _ in range(3):
            mark_last.prev_item()

        expected = CommitRange(start=commits[4].revision, end=commits[1].revision)
        self.assertEqual(select_commit_range(commits, mark_first), expected)
        self.assertEqual(select_commit_range(commits, mark_last), expected)

    def test_mark_on_cursor_row_selects_single_revision_range(self) -> None:
        commits = _commits(3)
        model = WindowedListModel.create(3, height=10)
        model.next_item()
        model.toggle_mark()

        selected = select_commit_range(commits, model)

        self.assertEqual(selected.start, commits[1].revision)
        self.assertEqual(selected.end, commits[1].revision)
        self.assertFalse(selected.open_ended)


class CommitRangeLabelTests(unittest.TestCase):
    def test_label_abbreviates_both_revisions(self) -> None:
        selected = CommitRange(start="0123456789abcdef", end="fedcba9876543210")
        self.assertEqual(selected.label(), "01234567..fedcba98")

    def test_label_names_working_tree_end(self) -> None:
        selected = CommitRange(start="0123456789abcdef")
        self.assertEqual(selected.label(), f"01234567..{WORKING_TREE_LABEL}")


if __name__ == "__main__":
    unittest.main()
