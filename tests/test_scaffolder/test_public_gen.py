"""Tests for the Next.js frontend subtree."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from next_firebase.errors import FilesystemError
from next_firebase.scaffolder.public_gen import (
    FAVICON,
    PublicGenerator,
    build_script,
    install_plan,
    package_json,
)
from next_firebase.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def public_gen() -> PublicGenerator:
    return PublicGenerator(TemplateRenderer())


class TestFragments:
    def test_build_script_ssr_moves_next(self):
        assert build_script(False) == "next build && next export && mv .next ../functions"

    def test_build_script_static(self):
        assert build_script(True) == "next build && next export"

    def test_package_json_scripts(self):
        scripts = package_json(True)["scripts"]
        assert scripts["dev"] == "next dev"
        assert scripts["start"] == "next start"

    def test_install_plan_same_in_both_modes(self, ssr_request, static_request):
        assert install_plan(ssr_request) == install_plan(static_request)
        runtime, dev = install_plan(ssr_request)
        assert runtime.packages == ("next", "react", "react-dom", "sass")
        assert dev.dev is True
        assert dev.packages == ("typescript", "@types/react", "@types/node")


class TestEntries:
    def test_file_set(self, public_gen, ssr_request):
        paths = {e.relative_path for e in public_gen.entries(ssr_request)}
        assert paths == {
            "public/pages/_document.tsx",
            "public/pages/_app.tsx",
            "public/pages/index.tsx",
            "public/styles/global.scss",
            "public/styles/Home.module.scss",
            "public/next-env.d.ts",
            "public/.gitignore",
            "public/package.json",
            "public/tsconfig.json",
        }

    def test_app_imports_global_styles(self, public_gen, ssr_request):
        entries = {e.relative_path: e.content for e in public_gen.entries(ssr_request)}
        assert "import 'styles/global.scss'" in entries["public/pages/_app.tsx"]
        assert "<Component {...pageProps} />" in entries["public/pages/_app.tsx"]

    def test_landing_page(self, public_gen, ssr_request):
        entries = {e.relative_path: e.content for e in public_gen.entries(ssr_request)}
        assert "If you see this, your Next.js app is working!" in entries["public/pages/index.tsx"]


class TestGenerate:
    async def test_creates_tree_and_copies_favicon(
        self, public_gen, static_request, no_install_config, tmp_path: Path
    ):
        root = tmp_path / "proj"
        root.mkdir()
        written = await public_gen.generate(root, static_request, no_install_config)

        for sub in ("public", "pages", "styles"):
            assert (root / "public" / sub).is_dir()
        favicon = root / "public" / "public" / "favicon.ico"
        assert favicon.read_bytes() == FAVICON.read_bytes()
        assert favicon in written
        assert json.loads((root / "public" / "package.json").read_text())["name"] == "public"

    async def test_missing_asset_is_filesystem_error(
        self, static_request, no_install_config, tmp_path: Path
    ):
        gen = PublicGenerator(TemplateRenderer(), favicon=tmp_path / "nope.ico")
        root = tmp_path / "proj"
        root.mkdir()
        with pytest.raises(FilesystemError):
            await gen.generate(root, static_request, no_install_config)
        # Sibling writes still ran to completion.
        assert (root / "public" / "pages" / "index.tsx").is_file()

    async def test_installs_after_files(
        self, public_gen, ssr_request, config, mock_run_command, tmp_path: Path
    ):
        root = tmp_path / "proj"
        root.mkdir()
        await public_gen.generate(root, ssr_request, config)

        assert mock_run_command.await_count == 2
        first = mock_run_command.await_args_list[0]
        assert first.args[0] == ["npm", "install", "next", "react", "react-dom", "sass"]
        assert first.kwargs["cwd"] == root / "public"
