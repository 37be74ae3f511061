"""Data models for git-based change-set analysis."""

from dataclasses import dataclass


@dataclass
class Commit:
    hash: str
    timestamp: int  # unix seconds
    author: str
    files: list[str]  # repo-relative paths changed
    subject: str = ""


@dataclass
class GitHistory:
    commits: list[Commit]  # newest first
    since: str
    until: str

    @property
    def total_commits(self) -> int:
        return len(self.commits)


@dataclass(frozen=True)
class ChangedFile:
    path: str
    author: str  # author of the most recent commit touching the path
