"""Tests for the project-root files (package.json, firebase.json, ...)."""

from __future__ import annotations

import json

import pytest

from next_firebase.scaffolder.root_gen import (
    ONE_DAY_CACHE,
    ONE_YEAR_CACHE,
    RootGenerator,
    firebase_json,
    hosting_rewrites,
    next_build_dir,
    package_json,
)
from next_firebase.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def root_gen() -> RootGenerator:
    return RootGenerator(TemplateRenderer())


def _by_path(entries):
    return {e.relative_path: e.content for e in entries}


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------


class TestFragments:
    def test_next_build_dir(self):
        assert next_build_dir(True) == "public"
        assert next_build_dir(False) == "functions"

    def test_rewrites_only_when_server_rendered(self):
        assert hosting_rewrites(True) is None
        assert hosting_rewrites(False) == [{"source": "**", "function": "app"}]


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class TestPackageJson:
    def test_name_is_normalised(self, ssr_request):
        assert package_json(ssr_request)["name"] == "my-project"

    def test_clean_script_ssr(self, ssr_request):
        assert package_json(ssr_request)["scripts"]["clean"] == "rm -rf public/out functions/.next"

    def test_clean_script_static(self, static_request):
        assert package_json(static_request)["scripts"]["clean"] == "rm -rf public/out public/.next"

    def test_private(self, ssr_request):
        assert package_json(ssr_request)["private"] is True


class TestFirebaseJson:
    def test_rules_paths(self, ssr_request):
        data = firebase_json(ssr_request)
        assert data["firestore"]["rules"] == "rules/firestore.rules"
        assert data["firestore"]["indexes"] == "firestore.indexes.json"
        assert data["storage"]["rules"] == "rules/storage.rules"

    def test_ssr_rewrites_to_app(self, ssr_request):
        hosting = firebase_json(ssr_request)["hosting"]
        assert hosting["rewrites"] == [{"source": "**", "function": "app"}]

    def test_static_has_no_rewrites(self, static_request):
        assert "rewrites" not in firebase_json(static_request)["hosting"]

    def test_cache_headers_same_in_both_modes(self, ssr_request, static_request):
        ssr = firebase_json(ssr_request)["hosting"]["headers"]
        static = firebase_json(static_request)["hosting"]["headers"]
        assert ssr == static
        assert ssr[0]["headers"][0]["value"] == ONE_DAY_CACHE
        assert ssr[1]["source"] == "/_next/static/**"
        assert ssr[1]["headers"][0]["value"] == ONE_YEAR_CACHE


# ---------------------------------------------------------------------------
# RootGenerator.entries
# ---------------------------------------------------------------------------


class TestRootEntries:
    def test_file_set(self, root_gen, ssr_request):
        assert set(_by_path(root_gen.entries(ssr_request))) == {
            "package.json",
            "firestore.indexes.json",
            "firebase.json",
            ".gitignore",
            ".firebaserc",
            "README.md",
        }

    def test_firebaserc_binds_backend_id(self, root_gen, ssr_request):
        content = _by_path(root_gen.entries(ssr_request))[".firebaserc"]
        assert json.loads(content) == {"projects": {"default": "myproj-123"}}

    def test_json_is_tab_indented(self, root_gen, ssr_request):
        content = _by_path(root_gen.entries(ssr_request))["firestore.indexes.json"]
        assert content == '{\n\t"indexes": [],\n\t"fieldOverrides": []\n}'

    def test_gitignore(self, root_gen, ssr_request):
        content = _by_path(root_gen.entries(ssr_request))[".gitignore"]
        assert content.splitlines() == ["**/*.DS_Store", ".firebase/", "*.log"]

    def test_readme_title(self, root_gen, ssr_request):
        content = _by_path(root_gen.entries(ssr_request))["README.md"]
        assert content.startswith("# my-project\n")
        assert "npm run deploy" in content
