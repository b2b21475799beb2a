"""The application types create-cloudflare can generate.

``TEMPLATE_MAP`` is fixed at import time and read-only: its keys are the only
valid values of ``--type``, its order is the order of the interactive list,
and hidden entries are left out of that list while staying dispatchable.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from create_cloudflare.models import Option, ValidatedArgs
from create_cloudflare.pages import run_pages_generator
from create_cloudflare.workers import run_workers_generator

Handler = Callable[[ValidatedArgs], Awaitable[None]]


class TemplateConfig(BaseModel):
    """Label, generator and visibility of one application type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    label: str
    handler: Handler
    hidden: bool = False


async def run_chatgpt_plugin_generator(args: ValidatedArgs) -> None:
    """ChatGPT plugins are always generated as TypeScript."""
    await run_workers_generator(args.model_copy(update={"ts": True}))


TEMPLATE_MAP: Mapping[str, TemplateConfig] = MappingProxyType({
    "webFramework": TemplateConfig(
        label="Website or web app",
        handler=run_pages_generator,
    ),
    "hello-world": TemplateConfig(
        label='"Hello World" Worker',
        handler=run_workers_generator,
    ),
    "common": TemplateConfig(
        label="Example router & proxy Worker",
        handler=run_workers_generator,
    ),
    "scheduled": TemplateConfig(
        label="Scheduled Worker (Cron Trigger)",
        handler=run_workers_generator,
    ),
    "queues": TemplateConfig(
        label="Queue consumer & producer Worker",
        handler=run_workers_generator,
    ),
    "chatgptPlugin": TemplateConfig(
        label="ChatGPT plugin",
        handler=run_chatgpt_plugin_generator,
    ),
    "pre-existing": TemplateConfig(
        label="Pre-existing Worker (from Dashboard)",
        handler=run_workers_generator,
        hidden=True,
    ),
})


def template_options(registry: Mapping[str, TemplateConfig] = TEMPLATE_MAP) -> list[Option]:
    """Return the visible entries of *registry* as select options, in order."""
    return [
        Option(value=key, label=entry.label)
        for key, entry in registry.items()
        if not entry.hidden
    ]
