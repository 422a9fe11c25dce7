"""next-firebase configuration.

Typed runtime settings for a scaffolding run.  The settings use a Pydantic v2
model so they are validated at construction time and can be loaded from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global scaffolder configuration.

    Created once by the CLI entry point and passed to the generator.  None of
    these settings change the catalogue of generated files except
    ``node_engine``, which is written into ``functions/package.json``.
    """

    output_dir: Path = Field(
        default=Path("."), description="Parent directory of the generated project"
    )
    package_manager: str = Field(
        default="npm", min_length=1, description="Binary used to install dependencies"
    )
    install_dependencies: bool = Field(
        default=True, description="Run the dependency installs after writing files"
    )
    install_timeout: Optional[float] = Field(
        default=None, gt=0, description="Per-install timeout in seconds; None waits forever"
    )
    node_engine: str = Field(
        default="10", min_length=1, description="engines.node of the functions package"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NEXT_FIREBASE_OUTPUT_DIR, NEXT_FIREBASE_PACKAGE_MANAGER,
            NEXT_FIREBASE_SKIP_INSTALL, NEXT_FIREBASE_INSTALL_TIMEOUT,
            NEXT_FIREBASE_NODE_ENGINE.

        Raises:
            ConfigError: If a variable holds a value the model rejects.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NEXT_FIREBASE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["NEXT_FIREBASE_OUTPUT_DIR"])
        if os.environ.get("NEXT_FIREBASE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["NEXT_FIREBASE_PACKAGE_MANAGER"]
        if os.environ.get("NEXT_FIREBASE_SKIP_INSTALL"):
            skip = os.environ["NEXT_FIREBASE_SKIP_INSTALL"].strip().lower() in _TRUTHY
            kwargs["install_dependencies"] = not skip
        if os.environ.get("NEXT_FIREBASE_INSTALL_TIMEOUT"):
            raw = os.environ["NEXT_FIREBASE_INSTALL_TIMEOUT"]
            try:
                kwargs["install_timeout"] = float(raw)
            except ValueError as exc:
                raise ConfigError(
                    f"NEXT_FIREBASE_INSTALL_TIMEOUT must be a number of seconds, got {raw!r}"
                ) from exc
        if os.environ.get("NEXT_FIREBASE_NODE_ENGINE"):
            kwargs["node_engine"] = os.environ["NEXT_FIREBASE_NODE_ENGINE"]

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ConfigError(f"Invalid {field} setting: {error['msg']}") from exc
