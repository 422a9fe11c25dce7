"""Cloud Functions subtree (``functions/``).

In server-rendered mode the subtree also carries ``src/app.ts``, the HTTPS
function that hands every request to Next.js, together with the Next.js
runtime packages it needs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from ..config import Config
from ..utils import print_success, print_waiting
from .files import make_dir, write_entries
from .installer import install_subtree
from .models import FileEntry, GenerationRequest, InstallCommand
from .root_gen import ONE_DAY_CACHE
from .templates import TemplateRenderer, to_json

SUBTREE = "functions"

FIREBASE_PACKAGES: tuple[str, ...] = ("firebase-admin", "firebase-functions")
NEXT_RUNTIME_PACKAGES: tuple[str, ...] = ("next", "react", "react-dom")
DEV_PACKAGES: tuple[str, ...] = ("typescript",)


# ---------------------------------------------------------------------------
# Mode-dependent fragments
# ---------------------------------------------------------------------------

def runtime_packages(static_mode: bool) -> tuple[str, ...]:
    """Runtime dependencies; the Next.js runtime is only needed for SSR."""
    if static_mode:
        return FIREBASE_PACKAGES
    return FIREBASE_PACKAGES + NEXT_RUNTIME_PACKAGES


def gitignore_lines(static_mode: bool) -> list[str]:
    lines = ["**/*.DS_Store", "node_modules/", "lib/"]
    if not static_mode:
        lines.append(".next/")
    return lines


def install_plan(request: GenerationRequest) -> list[InstallCommand]:
    """Ordered install commands for the functions subtree."""
    return [
        InstallCommand(subtree=SUBTREE, packages=runtime_packages(request.static_mode)),
        InstallCommand(subtree=SUBTREE, packages=DEV_PACKAGES, dev=True),
    ]


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

def package_json(node_engine: str) -> dict[str, Any]:
    return {
        "name": "functions",
        "main": "lib/index.js",
        "scripts": {
            "lint": "tslint --project tsconfig.json",
            "build": "tsc",
            "serve": "npm run build && firebase emulators:start --only functions",
            "shell": "npm run build && firebase functions:shell",
            "start": "npm run shell",
            "deploy": "firebase deploy --only functions",
            "logs": "firebase functions:log",
        },
        "engines": {"node": node_engine},
        "dependencies": {},
        "devDependencies": {},
        "private": True,
    }


def tsconfig_json() -> dict[str, Any]:
    return {
        "compilerOptions": {
            "module": "commonjs",
            "noImplicitReturns": True,
            "noUnusedLocals": True,
            "outDir": "lib",
            "sourceMap": True,
            "strict": True,
            "target": "es2017",
            "skipLibCheck": True,
            "incremental": True,
            "baseUrl": "src",
        },
        "compileOnSave": True,
        "include": ["src"],
    }


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class FunctionsGenerator:
    """Writes the Cloud Functions sources and installs their dependencies."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def _app_source(self, static_mode: bool) -> Optional[str]:
        if static_mode:
            return None
        return self.renderer.render("functions/src/app.ts.j2", {"cache_control": ONE_DAY_CACHE})

    def entries(self, request: GenerationRequest, config: Config) -> list[FileEntry]:
        """Return the planned files of ``functions/`` for *request*."""
        index_ctx = {
            "storage_bucket": f"{request.backend_id}.appspot.com",
            "static_mode": request.static_mode,
        }
        return [
            FileEntry(
                relative_path="functions/src/index.ts",
                content=self.renderer.render("functions/src/index.ts.j2", index_ctx),
            ),
            FileEntry(
                relative_path="functions/src/app.ts",
                content=self._app_source(request.static_mode),
            ),
            FileEntry(
                relative_path="functions/.gitignore",
                content="\n".join(gitignore_lines(request.static_mode)),
            ),
            FileEntry(
                relative_path="functions/package.json",
                content=to_json(package_json(config.node_engine)),
            ),
            FileEntry(relative_path="functions/tsconfig.json", content=to_json(tsconfig_json())),
        ]

    async def generate(
        self, root: Path, request: GenerationRequest, config: Config
    ) -> list[Path]:
        print_waiting("Making functions directory...")

        await make_dir(root, SUBTREE)
        await make_dir(root, f"{SUBTREE}/src")
        written = await write_entries(root, self.entries(request, config))

        print_success("Made functions directory")

        await install_subtree(root, SUBTREE, install_plan(request), config)
        return written
