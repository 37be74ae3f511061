"""Extract git history for a time window via subprocess."""

import subprocess
from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from .models import Commit, GitHistory

logger = get_logger(__name__)

# Record separator before each commit, unit separator between header fields
_RECORD_SEP = "\x1e"
_FIELD_SEP = "\x1f"
_LOG_FORMAT = "%x1e%H%x1f%at%x1f%an%x1f%s"


class GitExtractor:
    """Parse ``git log`` for one time window into a GitHistory."""

    def __init__(self, repo_path: str, since: str, until: str, timeout_seconds: int = 30):
        self.repo_path = str(Path(repo_path).resolve())
        self.since = since
        self.until = until
        self.timeout_seconds = timeout_seconds

    def extract(self) -> Optional[GitHistory]:
        """Run git log and parse it. Return None if git is unavailable or fails."""
        if not self._is_git_repo():
            logger.warning("Not a git repository: %s", self.repo_path)
            return None

        raw = self._run_git_log()
        if raw is None:
            return None

        commits = self._parse_log(raw)
        logger.info("Parsed %d commits between %s and %s", len(commits), self.since, self.until)
        return GitHistory(commits=commits, since=self.since, until=self.until)

    def _is_git_repo(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-parse", "--git-dir"],
                capture_output=True,
                text=True,
                timeout=5,
            )
            return result.returncode == 0
        except (OSError, subprocess.TimeoutExpired):
            return False

    def _run_git_log(self) -> Optional[str]:
        cmd = [
            "git",
            "-c",
            "core.quotepath=off",
            "-C",
            self.repo_path,
            "log",
            "--relative",
            f"--format={_LOG_FORMAT}",
            "--name-only",
            f"--since={self.since}",
            f"--until={self.until}",
        ]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning("git log error: %s", e)
            return None

        if result.returncode != 0:
            logger.warning("git log failed: %s", result.stderr.strip())
            return None
        return result.stdout

    def _parse_log(self, raw: str) -> list[Commit]:
        """Parse git log output into Commit objects, newest first.

        Each record starts with a record separator; its first line holds the
        unit-separated header fields and the remaining lines are file paths.
        Commits without files (merges, changes outside the root) are dropped.
        """
        commits: list[Commit] = []

        for record in raw.split(_RECORD_SEP):
            lines = record.split("\n")
            fields = lines[0].split(_FIELD_SEP, 3)
            if len(fields) < 3 or not fields[1].strip().isdigit():
                continue

            files = [line.strip() for line in lines[1:] if line.strip()]
            if not files:
                continue

            commits.append(
                Commit(
                    hash=fields[0].strip(),
                    timestamp=int(fields[1]),
                    author=fields[2],
                    files=files,
                    subject=fields[3].strip() if len(fields) > 3 else "",
                )
            )

        return commits
