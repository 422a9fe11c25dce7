"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and produces a Next.js + Firebase project:
root config files, a Cloud Functions subtree, a Next.js frontend subtree and
the Firebase security rules.  The four groups share nothing but the
read-only request, so they run concurrently.

A failed run is not rolled back: whatever the groups managed to write before
the first error stays on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config import Config
from ..errors import ScaffoldError
from ..utils import gather_all
from .files import create_root
from .functions_gen import FunctionsGenerator
from .functions_gen import install_plan as functions_install_plan
from .models import FileEntry, GenerationRequest, GenerationResult, InstallCommand
from .public_gen import PublicGenerator
from .public_gen import install_plan as public_install_plan
from .root_gen import RootGenerator
from .rules_gen import RulesGenerator
from .templates import TemplateRenderer

# Directories created by the groups, relative to the project root.
DIRECTORIES: tuple[str, ...] = (
    "functions",
    "functions/src",
    "public",
    "public/public",
    "public/pages",
    "public/styles",
    "rules",
)


class ProjectGenerator:
    """Scaffolding orchestrator.

    Given a ``GenerationRequest``, generates a directory tree containing:
    - ``package.json``, ``firebase.json``, ``.firebaserc`` and friends
    - Cloud Functions sources (with an SSR handler unless in static mode)
    - A minimal Next.js app with SCSS styles and a favicon
    - Permissive Firestore and Storage rules
    """

    def __init__(self, request: GenerationRequest, config: Optional[Config] = None) -> None:
        self.request = request
        self.config = config or Config()
        self.renderer = TemplateRenderer()
        self.root_gen = RootGenerator(self.renderer)
        self.functions_gen = FunctionsGenerator(self.renderer)
        self.public_gen = PublicGenerator(self.renderer)
        self.rules_gen = RulesGenerator(self.renderer)

    @property
    def project_root(self) -> Path:
        return self.config.output_dir / self.request.project_name

    # -- Planning (no I/O) -------------------------------------------------

    def plan_files(self) -> list[FileEntry]:
        """Every file entry the run would write, including skipped ones."""
        return [
            *self.root_gen.entries(self.request),
            *self.functions_gen.entries(self.request, self.config),
            *self.public_gen.entries(self.request),
            *self.rules_gen.entries(self.request),
        ]

    def plan_installs(self) -> list[InstallCommand]:
        """Install commands in per-subtree execution order."""
        return [
            *functions_install_plan(self.request),
            *public_install_plan(self.request),
        ]

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Create the project and return its root.

        Raises:
            DirectoryExistsError: If the project root already exists.
            FilesystemError: If any directory, file or asset write fails.
            ExternalCommandError: If a dependency install fails.
        """
        root = await create_root(self.project_root)
        await gather_all(
            self.root_gen.generate(root, self.request, self.config),
            self.functions_gen.generate(root, self.request, self.config),
            self.public_gen.generate(root, self.request, self.config),
            self.rules_gen.generate(root, self.request, self.config),
        )
        return root


async def generate(
    request: GenerationRequest, config: Optional[Config] = None
) -> GenerationResult:
    """Run a scaffolding pass and report the outcome as a value."""
    generator = ProjectGenerator(request, config)
    try:
        root = await generator.generate()
    except ScaffoldError as exc:
        return GenerationResult(success=False, error=str(exc), error_kind=exc.kind)
    return GenerationResult(success=True, project_root=root)
