"""Worker starter templates.

Every Worker type owns a directory under ``templates/workers/<type>/`` and
shares the files in ``templates/workers/_shared/`` (``package.json``,
``wrangler.toml`` and friends).  Files are Jinja2 templates ending in
``.j2``; the rendered output keeps the relative layout with the suffix
dropped.

Entry points are always written as ``src/index.js.j2`` and become
``src/index.ts`` when TypeScript is requested, in which case the shared
``tsconfig.json`` is emitted as well.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

WORKERS_TEMPLATE_DIR = Path(__file__).parent / "templates" / "workers"

SHARED_DIR = "_shared"
ENTRY_POINT = "src/index.js"
TS_ONLY = frozenset({"tsconfig.json"})
# Stored without the dot so packaging and editors don't treat them specially.
DOTFILES = frozenset({"gitignore"})


def slugify(value: str) -> str:
    """Lower-case *value* and collapse anything non-alphanumeric to ``-``."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def pascal_case(value: str) -> str:
    """``my-worker`` -> ``MyWorker``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word.capitalize() for word in parts if word)


def worker_types(template_dir: Path = WORKERS_TEMPLATE_DIR) -> list[str]:
    """Return the Worker types that ship a template directory."""
    if not template_dir.is_dir():
        return []
    return sorted(
        p.name for p in template_dir.iterdir() if p.is_dir() and p.name != SHARED_DIR
    )


class WorkerTemplate:
    """The template files for one Worker type.

    ``sources()`` yields the shared files first and the type's own files
    second, so a type can override a shared file by shipping one with the
    same relative path.
    """

    def __init__(self, type_key: str, template_dir: Path = WORKERS_TEMPLATE_DIR) -> None:
        self.type_key = type_key
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["slugify"] = slugify
        self.env.filters["pascal_case"] = pascal_case

    @property
    def exists(self) -> bool:
        if self.type_key == SHARED_DIR:
            return False
        return (self.template_dir / self.type_key).is_dir()

    def sources(self) -> list[str]:
        """Template paths relative to the template directory, shared first."""
        found: list[str] = []
        for subdir in (SHARED_DIR, self.type_key):
            root = self.template_dir / subdir
            if root.is_dir():
                found.extend(
                    p.relative_to(self.template_dir).as_posix()
                    for p in sorted(root.rglob("*.j2"))
                )
        return found

    @staticmethod
    def output_name(source: str, ts: bool) -> str | None:
        """Map a template path to its path in the project, or ``None`` to skip it."""
        name = source.split("/", 1)[1][: -len(".j2")]
        if name in TS_ONLY and not ts:
            return None
        if name in DOTFILES:
            return f".{name}"
        if name == ENTRY_POINT and ts:
            return "src/index.ts"
        return name

    async def write(self, project_path: Path, context: dict[str, Any]) -> list[Path]:
        """Render every template into *project_path*.

        ``context["ts"]`` selects the TypeScript layout.

        Returns:
            The written files, in render order.
        """
        ts = bool(context.get("ts"))
        outputs: dict[str, str] = {}
        for source in self.sources():
            name = self.output_name(source, ts)
            if name is not None:
                outputs[name] = self.env.get_template(source).render(**context)

        written: list[Path] = []
        for name, content in outputs.items():
            target = Path(project_path) / name
            await asyncio.to_thread(_write_file, target, content)
            written.append(target)
        return written


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
