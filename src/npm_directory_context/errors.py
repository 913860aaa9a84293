"""Errors raised while resolving a directory context."""

from __future__ import annotations

from pathlib import Path


class DirectoryContextError(RuntimeError):
    """Base error for failures while resolving a directory context."""


class ManifestNotFoundError(DirectoryContextError):
    """Raised when no manifest exists in a directory or any of its ancestors."""


class ManifestParseError(DirectoryContextError):
    """Raised when a manifest or workspace config is not a valid document."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigError(DirectoryContextError):
    """Raised when the settings file cannot be loaded or is invalid."""
