"""Dependency installation for generated subtrees.

Installs run one after another inside a subtree (runtime packages first, then
dev dependencies), each as ``<package_manager> install`` with the subtree as
working directory.  A non-zero exit aborts the enclosing group.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..errors import ExternalCommandError
from ..utils import print_success, print_waiting, run_command
from .models import InstallCommand


async def run_install(root: Path, command: InstallCommand, config: Config) -> None:
    """Run a single install command.

    Raises:
        ExternalCommandError: If the package manager exits non-zero or
            cannot be started.
    """
    argv = command.argv(config.package_manager)
    cmd_str = " ".join(argv)
    try:
        returncode, _stdout, stderr = await run_command(
            argv, cwd=root / command.subtree, timeout=config.install_timeout
        )
    except OSError as exc:
        raise ExternalCommandError(
            f"Could not run `{cmd_str}` in {command.subtree}: {exc}",
            command=cmd_str,
        ) from exc

    if returncode != 0:
        detail = stderr.splitlines()[-1] if stderr else "no output"
        raise ExternalCommandError(
            f"`{cmd_str}` failed in {command.subtree} (exit {returncode}): {detail}",
            command=cmd_str,
            returncode=returncode,
            stderr=stderr,
        )


async def install_subtree(
    root: Path, subtree: str, commands: list[InstallCommand], config: Config
) -> None:
    """Run every install for *subtree* in order, with progress messages."""
    if not config.install_dependencies:
        return
    print_waiting(f"Installing dependencies for {subtree} (this might take some time)...")
    for command in commands:
        await run_install(root, command, config)
    print_success(f"Installed dependencies for {subtree}")
