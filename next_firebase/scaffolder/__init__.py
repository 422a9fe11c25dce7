"""next-firebase scaffolder -- generates Next.js + Firebase projects.

Quick usage::

    from next_firebase.scaffolder import GenerationRequest, generate

    request = GenerationRequest.from_args("My App", "my-app-123")
    result = await generate(request)
    if not result.success:
        print(result.error)
"""

from next_firebase.scaffolder.generator import ProjectGenerator, generate
from next_firebase.scaffolder.models import (
    FileEntry,
    GenerationRequest,
    GenerationResult,
    InstallCommand,
    normalize_project_name,
)
from next_firebase.scaffolder.templates import TemplateRenderer

__all__ = [
    "FileEntry",
    "GenerationRequest",
    "GenerationResult",
    "InstallCommand",
    "ProjectGenerator",
    "TemplateRenderer",
    "generate",
    "normalize_project_name",
]
