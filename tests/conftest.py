"""Shared pytest fixtures for the next-firebase test suite.

Provides reusable fixtures for:
- Generation requests in server-rendered and static mode
- A configuration rooted in a temporary directory
- A mocked ``run_command`` so no real package manager is invoked
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from next_firebase.config import Config
from next_firebase.scaffolder.models import GenerationRequest


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def ssr_request() -> GenerationRequest:
    """Server-rendered request with a name that needs normalising."""
    return GenerationRequest.from_args("My Project", "myproj-123")


@pytest.fixture
def static_request() -> GenerationRequest:
    """Static-export request."""
    return GenerationRequest.from_args("my-project", "myproj-123", static_mode=True)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    yield out


@pytest.fixture
def config(output_dir: Path) -> Config:
    """Config writing into ``output_dir`` with installs enabled."""
    return Config(output_dir=output_dir)


@pytest.fixture
def no_install_config(output_dir: Path) -> Config:
    """Config writing into ``output_dir`` that skips dependency installs."""
    return Config(output_dir=output_dir, install_dependencies=False)


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the installer's ``run_command`` to succeed without spawning npm."""
    mock = AsyncMock(return_value=(0, "added 1 package", ""))
    with patch("next_firebase.scaffolder.installer.run_command", mock):
        yield mock


@pytest.fixture
def failing_run_command():
    """Patch the installer's ``run_command`` to fail like a broken npm."""
    mock = AsyncMock(return_value=(1, "", "npm ERR! code E404\nnpm ERR! 404 Not Found"))
    with patch("next_firebase.scaffolder.installer.run_command", mock):
        yield mock
