"""Configuration exceptions: missing config, bad paths, invalid settings."""

from pathlib import Path
from typing import Any

from .base import UIAdoptionError

SETUP_HINT = "Run `ui-adoption setup` first."


class ConfigurationError(UIAdoptionError):
    """Base class for configuration-related errors.

    Every configuration error is fatal: the CLI reports it and exits with
    status 1 before any analysis starts.
    """

    pass


class ConfigNotFoundError(ConfigurationError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: Path):
        super().__init__(
            f"Configuration file not found: {path}",
            details={"path": str(path)},
            hint=SETUP_HINT,
        )
        self.path = path


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
            hint=SETUP_HINT,
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidPathError(ConfigurationError):
    """Raised when the configured source repository path is unusable."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Invalid path: {path}",
            details={"path": str(path), "reason": reason},
            hint=SETUP_HINT,
        )
        self.path = path
        self.reason = reason


class MissingManifestError(ConfigurationError):
    """Raised when the source repository has no package manifest."""

    def __init__(self, path: Path, marker: str):
        super().__init__(
            f"No {marker} found at: {path}",
            details={"path": str(path), "marker": marker},
            hint="Point the configuration at the root of your frontend repository. " + SETUP_HINT,
        )
        self.path = path
        self.marker = marker
