"""Workers project generator.

Renders a small Worker starter (``package.json``, ``wrangler.toml``, a
``src/index`` entry point and, for TypeScript, a ``tsconfig.json``) from the
``templates/workers/`` tree.  The ``pre-existing`` type instead asks Wrangler
to pull an already deployed script down from the dashboard.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from create_cloudflare.config import config
from create_cloudflare.errors import GeneratorError
from create_cloudflare.interactive import text_input
from create_cloudflare.models import ValidatedArgs
from create_cloudflare.templates import WorkerTemplate, worker_types
from create_cloudflare.utils import (
    brand_color,
    console,
    dim,
    print_success,
    print_summary_table,
    run_command,
    start_section,
)

GIT_TIMEOUT = 120


async def run_workers_generator(args: ValidatedArgs) -> None:
    """Create a Worker project in ``args.project_name``."""
    project_path = Path(args.project_name)
    start_section("Configuring your application for Cloudflare", "Step 2 of 3")

    if args.type == "pre-existing":
        written = await _init_from_dashboard(args, project_path)
    else:
        written = await _render_worker(args, project_path)

    if args.git:
        await init_git(project_path)

    print_summary_table(
        {
            "Directory": str(project_path),
            "Type": args.type,
            "Language": "TypeScript" if args.ts else "JavaScript",
            "Files": str(len(written)) if written else "from dashboard",
        },
        title="Project",
    )
    _print_next_steps(project_path)


async def _render_worker(args: ValidatedArgs, project_path: Path) -> list[Path]:
    template = WorkerTemplate(args.type)
    if not template.exists:
        raise GeneratorError(
            f"No Worker template available for type `{args.type}`. "
            f"Available: {', '.join(worker_types())}"
        )

    ext = "ts" if args.ts else "js"
    context: dict[str, Any] = {
        "name": project_path.name,
        "type": args.type,
        "ts": bool(args.ts),
        "main": f"src/index.{ext}",
        "compatibility_date": config.compatibility_date,
    }

    written = await template.write(project_path, context)
    console.print(f"{brand_color('files')} {dim(f'{len(written)} written to {project_path}')}")
    return written


async def _init_from_dashboard(args: ValidatedArgs, project_path: Path) -> list[Path]:
    script = args.existing_script
    if not script:
        if args.wrangler_defaults:
            raise GeneratorError(
                "The name of an existing Worker is required; pass --existing-script"
            )
        script = await text_input(
            "Please specify the name of the existing worker in this account?",
            "",
            validate=lambda value: None if value else "A Worker name is required.",
            render_submitted=lambda value: f"{brand_color('worker')} {dim(value)}",
        )

    cmd = [
        "npx",
        "wrangler@latest",
        "init",
        project_path.name,
        "--from-dash",
        script,
    ]
    returncode, _, stderr = await run_command(
        cmd, cwd=project_path.parent, capture=False
    )
    if returncode != 0:
        raise GeneratorError(
            f"Wrangler could not download `{script}`: {stderr or f'exit code {returncode}'}",
            command=cmd,
        )
    return []


async def init_git(project_path: Path) -> None:
    """Initialise a git repository in *project_path*."""
    cmd = ["git", "init", "--quiet"]
    returncode, _, stderr = await run_command(cmd, cwd=project_path, timeout=GIT_TIMEOUT)
    if returncode != 0:
        raise GeneratorError(f"git init failed: {stderr}", command=cmd)
    console.print(f"{brand_color('git')} {dim('initialized')}")


def _print_next_steps(project_path: Path) -> None:
    start_section("Done", "Step 3 of 3")
    print_success(f"Your project is ready in {project_path}")
    console.print(dim(f"  cd {project_path}"))
    console.print(dim("  npm install"))
    console.print(dim("  npm run start"))
    console.print()
