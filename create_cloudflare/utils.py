"""Shared terminal and process helpers for create-cloudflare.

Provides async command execution and the Rich-based output helpers used for
banners, section headers, prompt confirmations and status messages.  All
output goes through the module-level ``console`` so tests can capture it in
one place.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

BRAND_COLOR = "#f6821f"

TIMEOUT_RETURNCODE = -1

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits until the process exits.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams, which lets interactive tools such as
            ``npm create`` talk to the user).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.  A timeout is reported as
        returncode ``TIMEOUT_RETURNCODE`` with the reason in stderr.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    if timeout is None:
        stdout_bytes, stderr_bytes = await process.communicate()
        return _result(process, stdout_bytes, stderr_bytes)

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (TIMEOUT_RETURNCODE, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    return _result(process, stdout_bytes, stderr_bytes)


def _result(process, stdout_bytes: bytes | None, stderr_bytes: bytes | None) -> tuple[int, str, str]:
    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Markup helpers
# ---------------------------------------------------------------------------


def dim(text: str) -> str:
    """Wrap *text* in dim markup, escaping any markup it contains."""
    return f"[dim]{escape(text)}[/dim]"


def brand_color(text: str) -> str:
    """Wrap *text* in the orange brand colour."""
    return f"[bold {BRAND_COLOR}]{escape(text)}[/bold {BRAND_COLOR}]"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def log_raw(markup: str) -> None:
    """Print pre-formatted markup as-is."""
    console.print(markup)


def start_section(heading: str, subheading: str | None = None) -> None:
    """Print a section header.

    Renders a full-width rule with the heading in the brand colour and an
    optional dimmed step indicator (e.g. ``Step 1 of 3``) on the right.
    """
    title = f"[bold {BRAND_COLOR}]{escape(heading)}[/bold {BRAND_COLOR}]"
    if subheading:
        title = f"{title} {dim(subheading)}"
    console.print(Rule(title, style=BRAND_COLOR, align="left"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
