"""Pages (web framework) project generator.

Delegates the project skeleton to the framework's own ``npm create`` starter,
run in the parent of the target directory so the user can answer its prompts.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from create_cloudflare.errors import GeneratorError
from create_cloudflare.interactive import select_input
from create_cloudflare.models import Option, ValidatedArgs
from create_cloudflare.utils import (
    brand_color,
    dim,
    print_success,
    print_summary_table,
    run_command,
    start_section,
)
from create_cloudflare.workers import init_git

DEFAULT_FRAMEWORK = "react"


class FrameworkConfig(BaseModel):
    """How to create a project for one framework.

    ``command`` may contain ``{name}``, which is replaced by the project
    directory name.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    command: tuple[str, ...]


FRAMEWORK_MAP: MappingProxyType[str, FrameworkConfig] = MappingProxyType({
    "angular": FrameworkConfig(
        label="Angular",
        command=("npx", "@angular/cli@latest", "new", "{name}", "--defaults"),
    ),
    "react": FrameworkConfig(
        label="React",
        command=("npm", "create", "vite@latest", "{name}", "--", "--template", "react"),
    ),
    "solid": FrameworkConfig(
        label="Solid",
        command=("npm", "create", "solid@latest", "{name}"),
    ),
    "svelte": FrameworkConfig(
        label="Svelte",
        command=("npm", "create", "svelte@latest", "{name}"),
    ),
    "vue": FrameworkConfig(
        label="Vue",
        command=("npm", "create", "vue@latest", "{name}"),
    ),
})


async def run_pages_generator(args: ValidatedArgs) -> None:
    """Create a web application in ``args.project_name``."""
    project_path = Path(args.project_name)
    start_section("Configuring your web framework", "Step 2 of 3")

    framework = await select_input(
        "Which development framework do you want to use?",
        [Option(value=key, label=f.label) for key, f in FRAMEWORK_MAP.items()],
        args.framework or DEFAULT_FRAMEWORK,
        accept_default=bool(args.wrangler_defaults or args.framework),
        render_submitted=lambda option: f"{brand_color('framework')} {dim(option.label)}",
    )
    if framework not in FRAMEWORK_MAP:
        raise GeneratorError(
            f"Unsupported framework `{framework}`. "
            f"Choose one of: {', '.join(FRAMEWORK_MAP)}"
        )

    cmd = [part.format(name=project_path.name) for part in FRAMEWORK_MAP[framework].command]
    returncode, _, stderr = await run_command(cmd, cwd=project_path.parent, capture=False)
    if returncode != 0:
        raise GeneratorError(
            f"Creating the {FRAMEWORK_MAP[framework].label} project failed: "
            f"{stderr or f'exit code {returncode}'}",
            command=cmd,
        )

    if args.git:
        await init_git(project_path)

    print_summary_table(
        {"Directory": str(project_path), "Framework": FRAMEWORK_MAP[framework].label},
        title="Project",
    )
    start_section("Done", "Step 3 of 3")
    print_success(f"Your {FRAMEWORK_MAP[framework].label} project is ready in {project_path}")
