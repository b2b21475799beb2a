"""Command-line parsing for ``create-cloudflare``."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from create_cloudflare.config import config
from create_cloudflare.models import ParsedArgs
from create_cloudflare.registry import TEMPLATE_MAP


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    ``--existing-script`` only shows up in ``--help`` while the
    ``pre-existing`` type is visible; ``--wrangler-defaults`` never does.
    """
    parser = argparse.ArgumentParser(
        prog=config.script_name,
        usage="%(prog)s [args]",
        description="Create a new Cloudflare Workers or Pages application",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {config.script_name}\n"
            f"  {config.script_name} my-app --type hello-world --ts\n"
            f"  {config.script_name} my-site --type webFramework --framework vue\n"
        ),
    )

    parser.add_argument("name", nargs="?", default=None, help="Project directory")
    parser.add_argument(
        "--type",
        default=None,
        help=f"Application type, one of: {', '.join(k for k, v in TEMPLATE_MAP.items() if not v.hidden)}",
    )
    parser.add_argument("--framework", default=None, help="Web framework for webFramework apps")
    parser.add_argument(
        "--deploy", action=argparse.BooleanOptionalAction, default=None,
        help="Deploy the application after it is created",
    )
    parser.add_argument(
        "--ts", action=argparse.BooleanOptionalAction, default=None,
        help="Generate TypeScript instead of JavaScript",
    )
    parser.add_argument(
        "--git", action=argparse.BooleanOptionalAction, default=None,
        help="Initialise a git repository",
    )
    parser.add_argument(
        "--open",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="opens your browser after your deployment, set --no-open to disable",
    )
    parser.add_argument(
        "--existing-script",
        default=None,
        help=(
            argparse.SUPPRESS
            if TEMPLATE_MAP["pre-existing"].hidden
            else "Name of an existing Worker to start from"
        ),
    )
    parser.add_argument(
        "--wrangler-defaults", action="store_true", default=None, help=argparse.SUPPRESS
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {config.version}"
    )
    return parser


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Parse *argv* (without the program name) into ``ParsedArgs``.

    Help, version and usage errors exit through ``SystemExit`` as argparse
    does.
    """
    ns = build_parser().parse_args(list(argv))
    return ParsedArgs(
        project_name=ns.name,
        type=ns.type,
        framework=ns.framework,
        deploy=ns.deploy,
        ts=ns.ts,
        git=ns.git,
        open=ns.open,
        existing_script=ns.existing_script,
        wrangler_defaults=ns.wrangler_defaults,
    )
