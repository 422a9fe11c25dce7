"""Shared utility functions for next-firebase.

Provides async command execution, the "wait for all, surface first error"
join used by every generation group, and Rich-based console reporting.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Program and arguments.  No shell is involved.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits indefinitely.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timed-out process yields
        returncode ``-1`` with an explanatory stderr.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Concurrency helpers
# ---------------------------------------------------------------------------


async def gather_all(*aws: Awaitable[Any]) -> list[Any]:
    """Await every awaitable concurrently, then raise the first failure.

    Unlike a plain ``asyncio.gather`` a failure does not leave siblings
    orphaned: all of them run to completion (or their own failure) before the
    first exception, in submission order, is re-raised.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_start(target: str | Path) -> None:
    """Announce where the project is being created."""
    console.print()
    console.print(
        f"[bold cyan][START][/bold cyan] [cyan]Creating your Next.js app in[/cyan] "
        f"[bold cyan]{escape(str(target))}[/bold cyan]"
    )
    console.print()


def print_waiting(message: str) -> None:
    """Print a yellow in-progress message."""
    console.print(f"[bold yellow][WAITING][/bold yellow] [yellow]{escape(message)}[/yellow]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green][SUCCESS] {escape(message)}[/bold green]")


def print_end(project_name: str) -> None:
    """Print the completion message with the first-run command."""
    console.print()
    console.print(
        f"[bold cyan][END][/bold cyan] [cyan]All done! cd into {escape(project_name)} "
        f'and run the dev server with "npm start".[/cyan]'
    )
    console.print()


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print()
    console.print(
        f"[bold red][ERROR][/bold red] [red]An error occurred:[/red] "
        f"[bold red]{escape(message)}[/bold red]"
    )
    console.print()


def print_usage(usage: str) -> None:
    """Print the one-line usage hint."""
    console.print(f"[bold red]{escape(usage)}[/bold red]")
