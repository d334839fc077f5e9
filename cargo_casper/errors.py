"""Exceptions raised while scaffolding a project.

Every failure the tool can hit is a ``ScaffoldError``.  Generators raise;
only the CLI entry point prints the message and exits.
"""

from __future__ import annotations

from pathlib import Path

FAILURE_EXIT_CODE = 101


class ScaffoldError(Exception):
    """Base class for all fatal scaffolding errors."""


class UsageError(ScaffoldError):
    """Raised when the command-line arguments are invalid or conflicting."""


class DestinationExistsError(ScaffoldError):
    """Raised when the destination path is already present on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"destination '{path}' already exists")


class FileSystemError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, action: str, path: Path, error: OSError) -> None:
        self.action = action
        self.path = path
        self.error = error
        super().__init__(f"failed to {action} '{path}': {_describe_os_error(error)}")


def _describe_os_error(error: OSError) -> str:
    if error.strerror and error.errno is not None:
        return f"{error.strerror} (os error {error.errno})"
    return str(error)
