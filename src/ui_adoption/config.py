"""Configuration loading and management for UI Adoption Tracker.

Configuration sources are merged in priority order:
    1. Defaults (defined in TrackerConfig)
    2. The JSON config file written by ``ui-adoption setup``
    3. Environment variables (UI_ADOPTION_* prefix)
    4. Explicit overrides (passed as kwargs)

The result is a frozen ``TrackerConfig`` that every entry point receives
explicitly; nothing reads configuration from module-level state.

Example:
    >>> config = load_config(Path("config.json"))
    >>> config.sprint_length_days
    14
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Tuple, get_type_hints

from .exceptions import (
    ConfigNotFoundError,
    InvalidConfigError,
    InvalidPathError,
    MissingManifestError,
)

ENV_PREFIX = "UI_ADOPTION_"
HOME_ENV = "UI_ADOPTION_HOME"

CONFIG_FILENAME = "config.json"
SPRINT_REPORT_FILENAME = "sprint-report.json"
SPRINT_DASHBOARD_FILENAME = "sprint-dashboard.html"
SYSTEM_REPORT_FILENAME = "system-report.json"
SYSTEM_DASHBOARD_FILENAME = "system-dashboard.html"

DEFAULT_TARGET_DIRECTORIES: Tuple[str, ...] = (
    "packages/modules/src",
    "packages/components/src",
    "packages/playbook/src",
)

DEFAULT_TARGET_LIBRARIES: Tuple[str, ...] = (
    "@mui/material",
    "@mui/icons-material",
    "@mui/lab",
    "@mui/base",
    "@mui/x-data-grid-pro",
    "@mui/x-data-grid-premium",
    "@mui/x-date-pickers-pro",
    "@mui/x-charts",
    "@kitman/playbook",
)

DEFAULT_LEGACY_LIBRARIES: Tuple[str, ...] = (
    "bootstrap",
    "react-bootstrap",
    "reactstrap",
    "react-bootstrap-table",
    "react-bootstrap-table2",
    "react-bootstrap-table-next",
    "semantic-ui-react",
    "antd",
    "chakra-ui",
    "styled-components",
    "emotion",
    "@emotion/react",
    "@emotion/styled",
    "react-select",
    "react-select/async",
    "react-datepicker",
    "react-modal",
)

DEFAULT_UI_FILE_PATTERNS: Tuple[str, ...] = (r"\.jsx?$", r"\.tsx?$")

DEFAULT_IGNORED_FILE_PATTERNS: Tuple[str, ...] = (
    r"\.test\.",
    r"\.spec\.",
    r"\.stories\.",
    r"\.mdx?$",
    r"\.config\.",
    r"\.setup\.",
    r"\.d\.ts$",
)


@dataclass(frozen=True)
class TrackerConfig:
    """Configuration for one analysis run.

    Only ``source_repo_path`` is required; the rest have defaults matching a
    monorepo laid out as ``packages/<module>/src``.

    Attributes:
        Source repository:
            source_repo_path: Root of the frontend repository
            manifest_marker: File that must exist at the root (package manifest)
            target_directories: Repo-relative subtrees that are analyzed
            packages_root: Path segment whose child names the module

        Sprint window:
            sprint_length_days: Length of a sprint in days
            days_since_sprint_end: How many days ago the last sprint ended
            git_timeout_seconds: Timeout for the git log subprocess

        Classification:
            target_libraries: Identifiers of the library being adopted
            legacy_libraries: Identifiers of libraries being migrated away from
            ui_file_patterns: Regexes a file name must match
            ignored_file_patterns: Regexes that exclude a file name

        Output:
            max_report_records: Cap on records embedded in a system report
            verbose: Enable DEBUG logging
    """

    source_repo_path: str
    manifest_marker: str = "package.json"
    target_directories: Tuple[str, ...] = DEFAULT_TARGET_DIRECTORIES
    packages_root: str = "packages"

    sprint_length_days: int = 14
    days_since_sprint_end: int = 2
    git_timeout_seconds: int = 30

    target_libraries: Tuple[str, ...] = DEFAULT_TARGET_LIBRARIES
    legacy_libraries: Tuple[str, ...] = DEFAULT_LEGACY_LIBRARIES
    ui_file_patterns: Tuple[str, ...] = DEFAULT_UI_FILE_PATTERNS
    ignored_file_patterns: Tuple[str, ...] = DEFAULT_IGNORED_FILE_PATTERNS

    max_report_records: int = 1000
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.source_repo_path:
            raise ValueError("source_repo_path must not be empty")
        if self.sprint_length_days < 1:
            raise ValueError("sprint_length_days must be at least 1")
        if self.days_since_sprint_end < 0:
            raise ValueError("days_since_sprint_end must be non-negative")
        if self.git_timeout_seconds < 1:
            raise ValueError("git_timeout_seconds must be at least 1")
        if self.max_report_records < 1:
            raise ValueError("max_report_records must be at least 1")
        if not self.target_libraries:
            raise ValueError("target_libraries must not be empty")
        if not self.target_directories:
            raise ValueError("target_directories must not be empty")

    @property
    def root(self) -> Path:
        """Source repository root as a resolved path."""
        return Path(self.source_repo_path).expanduser().resolve()


def data_dir() -> Path:
    """Directory holding the config file and generated reports."""
    home = os.environ.get(HOME_ENV)
    return Path(home) if home else Path.cwd()


def default_config_path() -> Path:
    return data_dir() / CONFIG_FILENAME


def load_config(
    config_file: Optional[Path] = None, check_paths: bool = True, **overrides: Any
) -> TrackerConfig:
    """Load configuration from the JSON config file and the environment.

    Args:
        config_file: Config file path (defaults to ``<data dir>/config.json``)
        check_paths: Verify the source repository and its manifest exist
        **overrides: Direct overrides (highest priority)

    Returns:
        Validated TrackerConfig instance

    Raises:
        ConfigNotFoundError: If the config file does not exist
        InvalidConfigError: If the file is malformed or a value is invalid
        InvalidPathError: If the source repository path is unusable
        MissingManifestError: If the manifest marker is missing
    """
    path = config_file if config_file is not None else default_config_path()
    if not path.exists():
        raise ConfigNotFoundError(path)

    merged: dict[str, Any] = dict(_load_json_file(path))
    merged.update(_load_env_vars())
    merged.update(overrides)

    known = {f.name for f in fields(TrackerConfig)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown configuration key")

    if not merged.get("source_repo_path"):
        raise InvalidConfigError("source_repo_path", None, "source_repo_path is required")

    # JSON arrays arrive as lists; the dataclass stores tuples
    for key, value in list(merged.items()):
        if isinstance(value, list):
            merged[key] = tuple(value)

    try:
        config = TrackerConfig(**merged)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(str(path), "", str(e))

    if check_paths:
        validate_source_repo(config.root, config.manifest_marker)
    return config


def validate_source_repo(root: Path, manifest_marker: str = "package.json") -> None:
    """Fail fast when the repository root or its manifest is missing."""
    if not root.exists():
        raise InvalidPathError(root, "path does not exist")
    if not root.is_dir():
        raise InvalidPathError(root, "path is not a directory")
    if not (root / manifest_marker).exists():
        raise MissingManifestError(root, manifest_marker)


def save_config(config: TrackerConfig, path: Optional[Path] = None) -> Path:
    """Write the user-facing settings of ``config`` as a JSON config file."""
    target = path if path is not None else default_config_path()
    data = {
        "source_repo_path": config.source_repo_path,
        "sprint_length_days": config.sprint_length_days,
        "days_since_sprint_end": config.days_since_sprint_end,
    }
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return target


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from UI_ADOPTION_* environment variables.

    Supported environment variables (tuple fields are file-only):
        UI_ADOPTION_SOURCE_REPO_PATH: str
        UI_ADOPTION_SPRINT_LENGTH_DAYS: int
        UI_ADOPTION_DAYS_SINCE_SPRINT_END: int
        UI_ADOPTION_GIT_TIMEOUT_SECONDS: int
        UI_ADOPTION_MAX_REPORT_RECORDS: int
        UI_ADOPTION_VERBOSE: bool (true/false/1/0)

    ``UI_ADOPTION_HOME`` selects the data directory and is not a field.
    """
    type_hints = get_type_hints(TrackerConfig)
    result: dict[str, Any] = {}

    for f in fields(TrackerConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[f.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot be expressed in a single variable.
    """
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str:
        return value

    return None


def _load_json_file(path: Path) -> dict:
    """Load a JSON config file and return the parsed object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigError(str(path), "", f"cannot parse JSON: {e}")

    if not isinstance(data, dict):
        raise InvalidConfigError(str(path), type(data).__name__, "expected a JSON object")
    return data
