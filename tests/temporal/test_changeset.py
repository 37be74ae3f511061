"""Tests for sprint change-set collection."""

import pytest

from ui_adoption.config import TrackerConfig
from ui_adoption.scanning.filters import FileFilter
from ui_adoption.temporal.changeset import collect_changed_files
from ui_adoption.temporal.models import ChangedFile, Commit, GitHistory


@pytest.fixture
def file_filter(tmp_path):
    return FileFilter.from_config(TrackerConfig(source_repo_path=str(tmp_path)))


def make_history(*commits):
    return GitHistory(commits=list(commits), since="2024-01-01", until="2024-01-14")


def make_commit(sha, timestamp, author, files):
    return Commit(hash=sha * 40, timestamp=timestamp, author=author, files=list(files))


class TestCollectChangedFiles:
    def test_newest_author_wins(self, file_filter):
        history = make_history(
            make_commit("b", 2000, "bob", ["packages/components/src/A.tsx"]),
            make_commit("a", 1000, "alice", ["packages/components/src/A.tsx"]),
        )

        assert collect_changed_files(history, file_filter) == [
            ChangedFile(path="packages/components/src/A.tsx", author="bob")
        ]

    def test_each_path_listed_once_in_first_appearance_order(self, file_filter):
        history = make_history(
            make_commit(
                "c", 3000, "carol", ["packages/modules/src/Z.jsx", "packages/components/src/A.tsx"]
            ),
            make_commit("b", 2000, "bob", ["packages/components/src/A.tsx"]),
            make_commit("a", 1000, "alice", ["packages/modules/src/B.ts"]),
        )

        changed = collect_changed_files(history, file_filter)

        assert [c.path for c in changed] == [
            "packages/modules/src/Z.jsx",
            "packages/components/src/A.tsx",
            "packages/modules/src/B.ts",
        ]
        assert [c.author for c in changed] == ["carol", "carol", "alice"]

    def test_non_candidates_filtered(self, file_filter):
        history = make_history(
            make_commit(
                "a",
                1000,
                "alice",
                [
                    "packages/components/src/A.test.tsx",
                    "packages/components/src/notes.md",
                    "packages/other/src/A.tsx",
                    "package.json",
                    "packages/playbook/src/Chip.tsx",
                ],
            )
        )

        changed = collect_changed_files(history, file_filter)

        assert [c.path for c in changed] == ["packages/playbook/src/Chip.tsx"]

    def test_missing_history_yields_nothing(self, file_filter):
        assert collect_changed_files(None, file_filter) == []

    def test_empty_history(self, file_filter):
        assert collect_changed_files(make_history(), file_filter) == []
