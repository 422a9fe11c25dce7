"""Pydantic v2 models describing a scaffolding run.

A ``GenerationRequest`` is built once from command-line input and handed to
every generation group.  Groups describe their output as ``FileEntry`` and
``InstallCommand`` values before anything touches the filesystem, and the
whole run is summarised by a ``GenerationResult``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidRequestError, UsageError

USAGE = "npx next-firebase [project_name] [project_id]"

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_project_name(name: str) -> str:
    """Collapse whitespace runs to single hyphens and lowercase the result.

    E.g. ``'My App'`` -> ``'my-app'``.  Normalising an already-normalised name
    returns it unchanged.
    """
    return _WHITESPACE_RUN.sub("-", name).lower()


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """Validated, immutable input to a scaffolding run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Normalised project directory name")
    backend_id: str = Field(..., min_length=1, description="Firebase project identifier")
    static_mode: bool = Field(default=False, description="Statically exported frontend, no SSR function")

    @field_validator("project_name")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_project_name(value)

    @classmethod
    def from_args(
        cls,
        project_name: Optional[str],
        backend_id: Optional[str],
        static_mode: bool = False,
    ) -> "GenerationRequest":
        """Build a request from raw CLI values.

        Raises:
            UsageError: If either positional value is missing or empty.
            InvalidRequestError: If a value is present but still rejected,
                e.g. a name that is not valid unicode.
        """
        for value in (project_name, backend_id):
            if not (isinstance(value, str) and value):
                raise UsageError(USAGE)
        try:
            return cls(
                project_name=project_name,
                backend_id=backend_id,
                static_mode=static_mode,
            )
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise InvalidRequestError(f"Invalid {field}: {error['msg']}") from exc


# ---------------------------------------------------------------------------
# Planned output
# ---------------------------------------------------------------------------

class FileEntry(BaseModel):
    """A file to write, relative to the project root.

    ``content=None`` marks a file that does not exist in the current mode;
    it is skipped rather than written empty.
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: Optional[str] = None


class InstallCommand(BaseModel):
    """One dependency install scoped to a generated subtree."""

    model_config = ConfigDict(frozen=True)

    subtree: str = Field(..., description="Directory relative to the project root")
    packages: tuple[str, ...]
    dev: bool = False

    def argv(self, package_manager: str = "npm") -> list[str]:
        """Return the full command line for *package_manager*."""
        cmd = [package_manager, "install"]
        if self.dev:
            cmd.append("--save-dev")
        cmd.extend(self.packages)
        return cmd


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class GenerationResult(BaseModel):
    """Outcome of ``generate()``; failures are reported here, not raised."""

    success: bool
    project_root: Optional[Path] = None
    error: str = ""
    error_kind: str = ""
