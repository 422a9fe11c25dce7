"""Exception hierarchy for the scaffolder.

Every failure the generator can surface derives from ``ScaffoldError`` so the
top-level ``generate()`` can turn it into a ``GenerationResult`` with a
stable ``error_kind``.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    kind = "scaffold"


class UsageError(ScaffoldError):
    """Raised when the required command-line input is missing."""

    kind = "usage"


class FilesystemError(ScaffoldError):
    """Raised when a directory, file, or asset cannot be created."""

    kind = "filesystem"

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class DirectoryExistsError(FilesystemError):
    """Raised when the project root directory is already present."""


class ExternalCommandError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    kind = "external_command"

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class InvalidRequestError(ScaffoldError):
    """Raised when supplied command-line input is present but unusable."""

    kind = "invalid_request"


class ConfigError(ScaffoldError):
    """Raised when an environment setting cannot be turned into a ``Config``."""

    kind = "config"
