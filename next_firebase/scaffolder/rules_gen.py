"""Firestore and Cloud Storage security rules (``rules/``).

Both rule sets start fully open; they are placeholders for the user to lock
down before going to production.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..utils import print_success, print_waiting
from .files import make_dir, write_entries
from .models import FileEntry, GenerationRequest
from .templates import TemplateRenderer

SUBTREE = "rules"

_RULE_FILES = ("firestore.rules", "storage.rules")


class RulesGenerator:
    """Writes the default access-policy files."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def entries(self, request: GenerationRequest) -> list[FileEntry]:
        return [
            FileEntry(
                relative_path=f"{SUBTREE}/{name}",
                content=self.renderer.render(f"rules/{name}.j2", {}),
            )
            for name in _RULE_FILES
        ]

    async def generate(
        self, root: Path, request: GenerationRequest, config: Config
    ) -> list[Path]:
        print_waiting("Making Firebase rules directory...")
        await make_dir(root, SUBTREE)
        written = await write_entries(root, self.entries(request))
        print_success("Made Firebase rules directory")
        return written
