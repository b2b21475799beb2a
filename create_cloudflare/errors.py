"""Exceptions raised by create-cloudflare.

Library code raises these; only :func:`create_cloudflare.cli.main` turns them
into a process exit.
"""

from __future__ import annotations


class C3Error(Exception):
    """A fatal, user-facing failure that ends the current run."""


class GeneratorError(C3Error):
    """Raised when a project generator cannot finish."""

    def __init__(self, message: str, command: list[str] | None = None) -> None:
        self.command = command
        if command:
            message = f"{message} (command: {' '.join(command)})"
        super().__init__(message)
