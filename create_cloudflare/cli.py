"""create-cloudflare entry point.

Parses the command line, asks for the project directory and application
type (or takes the defaults under ``--wrangler-defaults``) and hands the
result to the generator registered for that type.

Usage::

    create-cloudflare [<name>] [--type <key>] [--framework <name>] [--ts] ...
    python -m create_cloudflare --wrangler-defaults
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Mapping, Sequence

from haikunator import Haikunator

from create_cloudflare.args import parse_args
from create_cloudflare.common import validate_project_directory
from create_cloudflare.config import config
from create_cloudflare.errors import C3Error
from create_cloudflare.interactive import select_input, text_input
from create_cloudflare.models import ValidatedArgs
from create_cloudflare.registry import TEMPLATE_MAP, TemplateConfig, template_options
from create_cloudflare.utils import brand_color, dim, log_raw, print_error, print_warning, start_section

MISSING_TYPE_MESSAGE = "An application type must be specified to continue."


async def run(
    argv: Sequence[str],
    registry: Mapping[str, TemplateConfig] = TEMPLATE_MAP,
) -> None:
    """Run one create-cloudflare session.

    Raises:
        C3Error: On a fatal validation or selection failure.  Anything the
            generator raises propagates unchanged.
    """
    args = parse_args(argv)

    print_banner()

    accept_default = bool(args.wrangler_defaults)
    validated = ValidatedArgs(
        **args.model_dump(exclude={"project_name", "type"}),
        project_name=await validate_name(args.project_name, accept_default=accept_default),
        type=await validate_type(args.type, accept_default=accept_default, registry=registry),
    )

    await registry[validated.type].handler(validated)


def print_banner() -> None:
    log_raw(dim(f"\nusing {config.script_name} version {config.version}\n"))
    start_section(config.banner_title, config.step_indicator)


async def validate_name(name: str | None, *, accept_default: bool = False) -> str:
    """Resolve the project directory, formatted as ``./<name>``.

    Without *name* a random slug is offered as the default.
    """
    default_value = name or Haikunator().haikunate(token_hex=True)
    return await text_input(
        "In which directory do you want to create your application?",
        default_value,
        help_text="also used as application name",
        accept_default=accept_default,
        validate=lambda value: validate_project_directory(value or default_value),
        format=lambda value: f"./{value}",
        render_submitted=lambda value: f"{brand_color('dir')} {dim(value)}",
    )


async def validate_type(
    type: str | None,
    *,
    accept_default: bool = False,
    registry: Mapping[str, TemplateConfig] = TEMPLATE_MAP,
) -> str:
    """Resolve the application type.

    Raises:
        C3Error: If the result is empty or not a key of *registry*.
    """
    resolved = await select_input(
        "What type of application do you want to create?",
        template_options(registry),
        type or config.default_type,
        accept_default=accept_default,
        render_submitted=lambda option: f"{brand_color('type')} {dim(option.label)}",
    )

    if not resolved or resolved not in registry:
        raise C3Error(MISSING_TYPE_MESSAGE)

    return resolved


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-cloudflare``."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        asyncio.run(run(argv))
    except KeyboardInterrupt:
        print_warning("Operation cancelled.")
        sys.exit(130)
    except C3Error as exc:
        print_error(f"ERROR {exc}")
        sys.exit(1)
    except Exception as exc:
        print_error(f"ERROR {type(exc).__name__}: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
