"""Top-level project files: npm scripts, Firebase config, README.

The only mode-dependent fragments are the ``clean`` script target and the
Hosting rewrite that routes every request to the ``app`` function.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from ..config import Config
from ..utils import print_success, print_waiting
from .files import write_entries
from .models import FileEntry, GenerationRequest
from .templates import TemplateRenderer, to_json

ONE_DAY_CACHE = "public, max-age=86400, s-maxage=86400"
ONE_YEAR_CACHE = "public, max-age=31536000, s-maxage=31536000"


# ---------------------------------------------------------------------------
# Mode-dependent fragments
# ---------------------------------------------------------------------------

def next_build_dir(static_mode: bool) -> str:
    """Subtree that holds the ``.next`` build output."""
    return "public" if static_mode else "functions"


def hosting_rewrites(static_mode: bool) -> Optional[list[dict[str, str]]]:
    """Hosting rewrites; only server-rendered mode routes to the function."""
    if static_mode:
        return None
    return [{"source": "**", "function": "app"}]


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

def package_json(request: GenerationRequest) -> dict[str, Any]:
    return {
        "name": request.project_name,
        "scripts": {
            "clean": f"rm -rf public/out {next_build_dir(request.static_mode)}/.next",
            "predeploy": "npm run clean && npm run build -C public",
            "deploy": "firebase deploy",
            "postdeploy": "npm run clean",
            "start": "npm run dev -C public",
        },
        "private": True,
    }


def firebase_json(request: GenerationRequest) -> dict[str, Any]:
    hosting: dict[str, Any] = {
        "public": "public/out",
        "cleanUrls": True,
        "trailingSlash": False,
        "ignore": ["firebase.json", "**/.*", "**/node_modules/**"],
    }
    rewrites = hosting_rewrites(request.static_mode)
    if rewrites is not None:
        hosting["rewrites"] = rewrites
    hosting["headers"] = [
        {
            "source": "**",
            "headers": [{"key": "Cache-Control", "value": ONE_DAY_CACHE}],
        },
        {
            "source": "/_next/static/**",
            "headers": [{"key": "Cache-Control", "value": ONE_YEAR_CACHE}],
        },
    ]
    return {
        "firestore": {
            "rules": "rules/firestore.rules",
            "indexes": "firestore.indexes.json",
        },
        "storage": {"rules": "rules/storage.rules"},
        "functions": {"predeploy": ['npm run build -C "$RESOURCE_DIR"']},
        "hosting": hosting,
    }


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class RootGenerator:
    """Writes the files that live directly in the project root."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def entries(self, request: GenerationRequest) -> list[FileEntry]:
        """Return the planned root files for *request*."""
        return [
            FileEntry(relative_path="package.json", content=to_json(package_json(request))),
            FileEntry(
                relative_path="firestore.indexes.json",
                content=to_json({"indexes": [], "fieldOverrides": []}),
            ),
            FileEntry(relative_path="firebase.json", content=to_json(firebase_json(request))),
            FileEntry(
                relative_path=".gitignore",
                content="\n".join(["**/*.DS_Store", ".firebase/", "*.log"]),
            ),
            FileEntry(
                relative_path=".firebaserc",
                content=to_json({"projects": {"default": request.backend_id}}),
            ),
            FileEntry(
                relative_path="README.md",
                content=self.renderer.render(
                    "root/README.md.j2", {"project_name": request.project_name}
                ),
            ),
        ]

    async def generate(
        self, root: Path, request: GenerationRequest, config: Config
    ) -> list[Path]:
        print_waiting("Making root files...")
        written = await write_entries(root, self.entries(request))
        print_success("Made root files")
        return written
