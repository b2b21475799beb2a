"""Interactive prompts.

Two async prompts are provided:

- :func:`text_input` -- free text with a pre-filled default, a validator that
  returns an error description (or ``None``) and a formatter for the result.
- :func:`select_input` -- an arrow-key single-select list drawn with a Rich
  ``Live`` panel and driven by ``readchar`` key presses.

Both accept an ``accept_default`` flag that skips the terminal entirely and
resolves to the default value.  Blocking terminal reads run in a worker
thread so the event loop stays free.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

import readchar
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from create_cloudflare.errors import C3Error
from create_cloudflare.models import Option
from create_cloudflare.utils import console, dim, print_error

Validator = Callable[[str], str | None]
Formatter = Callable[[str], str]


def _identity(value: str) -> str:
    return value


def _no_validation(value: str) -> str | None:
    return None


# ---------------------------------------------------------------------------
# Free text
# ---------------------------------------------------------------------------


async def text_input(
    question: str,
    default_value: str,
    *,
    help_text: str = "",
    accept_default: bool = False,
    validate: Validator = _no_validation,
    format: Formatter = _identity,
    render_submitted: Callable[[str], str] | None = None,
) -> str:
    """Resolve a free-text value.

    With *accept_default* the default is validated and returned (formatted)
    without prompting; a validation error is fatal.  Otherwise the user is
    asked until *validate* accepts the answer.  An empty answer stands for
    *default_value*.

    Raises:
        C3Error: When *accept_default* is set and the default is invalid.
    """
    if accept_default:
        error = validate(default_value)
        if error:
            raise C3Error(error)
        value = format(default_value)
        _render(render_submitted, value)
        return value

    prompt_text = f"[bold]{question}[/bold]"
    if help_text:
        prompt_text = f"{prompt_text} {dim(help_text)}"

    while True:
        answer = await asyncio.to_thread(
            Prompt.ask, prompt_text, default=default_value, console=console
        )
        answer = (answer or "").strip()
        error = validate(answer or default_value)
        if error is None:
            break
        print_error(error)

    value = format(answer or default_value)
    _render(render_submitted, value)
    return value


# ---------------------------------------------------------------------------
# Single select
# ---------------------------------------------------------------------------


def get_key() -> str:
    """Read one key press and name the ones the selector cares about."""
    key = readchar.readkey()

    if key == readchar.key.UP:
        return "up"
    if key == readchar.key.DOWN:
        return "down"
    if key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
        return "enter"
    if key == readchar.key.ESC:
        return "escape"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def _selection_panel(question: str, options: Sequence[Option], selected: int) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="left", width=3)
    table.add_column(justify="left")

    for i, option in enumerate(options):
        marker = "▶" if i == selected else " "
        style = "bold cyan" if i == selected else "white"
        table.add_row(marker, f"[{style}]{escape(option.label)}[/{style}]")

    table.add_row("", "")
    table.add_row("", dim("Use ↑/↓ to navigate, Enter to select, Esc to cancel"))

    return Panel(table, title=f"[bold]{question}[/bold]", border_style="cyan", padding=(1, 2))


def _run_selection(question: str, options: Sequence[Option], selected: int) -> Option:
    with Live(
        _selection_panel(question, options, selected),
        console=console,
        transient=True,
        auto_refresh=False,
    ) as live:
        while True:
            key = get_key()
            if key == "up":
                selected = (selected - 1) % len(options)
            elif key == "down":
                selected = (selected + 1) % len(options)
            elif key == "enter":
                return options[selected]
            elif key == "escape":
                raise C3Error("Operation cancelled.")
            live.update(_selection_panel(question, options, selected), refresh=True)


async def select_input(
    question: str,
    options: Sequence[Option],
    default_value: str,
    *,
    accept_default: bool = False,
    render_submitted: Callable[[Option], str] | None = None,
) -> str:
    """Resolve one value out of *options*.

    With *accept_default* *default_value* is returned as-is, even when it is
    not one of the options; the caller decides whether it is acceptable.
    Only a default found among the options is echoed back.
    Otherwise an arrow-key list is shown with the option matching
    *default_value* highlighted.

    Raises:
        C3Error: When the user cancels with Esc or there is nothing to pick.
    """
    if accept_default:
        match = next((o for o in options if o.value == default_value), None)
        if match is not None:
            _render(render_submitted, match)
        return default_value

    if not options:
        raise C3Error(f"No options available for: {question}")

    values = [o.value for o in options]
    selected = values.index(default_value) if default_value in values else 0

    console.print()
    option = await asyncio.to_thread(_run_selection, question, options, selected)
    _render(render_submitted, option)
    return option.value


def _render(render_submitted, value) -> None:
    if render_submitted is not None:
        console.print(render_submitted(value))
