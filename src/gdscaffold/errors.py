"""Custom exception types raised while scaffolding projects."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "BuildFailedError",
    "BuildLaunchError",
    "EmptyNameError",
    "FilesystemWriteError",
    "ProjectExistsError",
    "ScaffoldError",
    "TemplatesUnavailableError",
]


class ScaffoldError(RuntimeError):
    """Base class for every error raised by gdscaffold."""


class EmptyNameError(ScaffoldError):
    """Raised when a project is requested without a name."""

    def __init__(self) -> None:
        super().__init__("Project name cannot be empty.")


class ProjectExistsError(ScaffoldError):
    """Raised when the project directory would collide with an existing entry."""

    def __init__(self, path: Path) -> None:
        super().__init__("Project with this name already exists.")
        self.path = path


class TemplatesUnavailableError(ScaffoldError):
    """Raised when no template set has been loaded."""

    def __init__(self) -> None:
        super().__init__("Templates are not available.")


class FilesystemWriteError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Failed to create {path}: {reason.strerror or reason}")
        self.path = path
        self.reason = reason


class BuildLaunchError(ScaffoldError):
    """Raised when the external build command cannot be started."""


class BuildFailedError(ScaffoldError):
    """Raised when the external build command exits unsuccessfully."""

    def __init__(self, returncode: int) -> None:
        super().__init__(f"build command exited with status {returncode}")
        self.returncode = returncode
