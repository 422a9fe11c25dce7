"""Next.js frontend subtree (``public/``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import Config
from ..utils import gather_all, print_success, print_waiting
from .files import copy_asset, make_dir, make_dirs, write_entries
from .installer import install_subtree
from .models import FileEntry, GenerationRequest, InstallCommand
from .templates import TemplateRenderer, to_json

SUBTREE = "public"

FAVICON = Path(__file__).parent / "assets" / "favicon.ico"

RUNTIME_PACKAGES: tuple[str, ...] = ("next", "react", "react-dom", "sass")
DEV_PACKAGES: tuple[str, ...] = ("typescript", "@types/react", "@types/node")

# Rendered verbatim, keyed by output path under ``public/``.
_TEMPLATED_FILES: dict[str, str] = {
    "pages/_document.tsx": "public/pages/_document.tsx.j2",
    "pages/_app.tsx": "public/pages/_app.tsx.j2",
    "pages/index.tsx": "public/pages/index.tsx.j2",
    "styles/global.scss": "public/styles/global.scss.j2",
    "styles/Home.module.scss": "public/styles/Home.module.scss.j2",
    "next-env.d.ts": "public/next-env.d.ts.j2",
}


# ---------------------------------------------------------------------------
# Mode-dependent fragments
# ---------------------------------------------------------------------------

def build_script(static_mode: bool) -> str:
    """``npm run build``; SSR builds hand ``.next`` over to the functions."""
    script = "next build && next export"
    if not static_mode:
        script += " && mv .next ../functions"
    return script


def install_plan(request: GenerationRequest) -> list[InstallCommand]:
    """Ordered install commands for the public subtree."""
    return [
        InstallCommand(subtree=SUBTREE, packages=RUNTIME_PACKAGES),
        InstallCommand(subtree=SUBTREE, packages=DEV_PACKAGES, dev=True),
    ]


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

def package_json(static_mode: bool) -> dict[str, Any]:
    return {
        "name": "public",
        "version": "1.0.0",
        "scripts": {
            "dev": "next dev",
            "build": build_script(static_mode),
            "start": "next start",
        },
        "dependencies": {},
        "devDependencies": {},
        "private": True,
    }


def tsconfig_json() -> dict[str, Any]:
    return {
        "compilerOptions": {
            "target": "es5",
            "lib": ["dom", "dom.iterable", "esnext"],
            "allowJs": True,
            "skipLibCheck": True,
            "strict": False,
            "forceConsistentCasingInFileNames": True,
            "noEmit": True,
            "esModuleInterop": True,
            "module": "esnext",
            "moduleResolution": "node",
            "resolveJsonModule": True,
            "isolatedModules": True,
            "jsx": "preserve",
            "baseUrl": ".",
        },
        "exclude": ["node_modules"],
        "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx"],
    }


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class PublicGenerator:
    """Writes the Next.js app shell and installs the frontend dependencies."""

    def __init__(self, renderer: TemplateRenderer, favicon: Path = FAVICON) -> None:
        self.renderer = renderer
        self.favicon = favicon

    def entries(self, request: GenerationRequest) -> list[FileEntry]:
        """Return the planned files of ``public/`` for *request*."""
        entries = [
            FileEntry(
                relative_path=f"{SUBTREE}/{output}",
                content=self.renderer.render(template, {}),
            )
            for output, template in _TEMPLATED_FILES.items()
        ]
        entries.extend([
            FileEntry(
                relative_path=f"{SUBTREE}/.gitignore",
                content="\n".join(["**/*.DS_Store", "node_modules/", ".next/", "out/"]),
            ),
            FileEntry(
                relative_path=f"{SUBTREE}/package.json",
                content=to_json(package_json(request.static_mode)),
            ),
            FileEntry(relative_path=f"{SUBTREE}/tsconfig.json", content=to_json(tsconfig_json())),
        ])
        return entries

    async def generate(
        self, root: Path, request: GenerationRequest, config: Config
    ) -> list[Path]:
        print_waiting("Making public directory...")

        await make_dir(root, SUBTREE)
        await make_dirs(root, f"{SUBTREE}/public", f"{SUBTREE}/pages", f"{SUBTREE}/styles")

        favicon, written = await gather_all(
            copy_asset(self.favicon, root, f"{SUBTREE}/public"),
            write_entries(root, self.entries(request)),
        )

        print_success("Made public directory")

        await install_subtree(root, SUBTREE, install_plan(request), config)
        return [favicon, *written]
