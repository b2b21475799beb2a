"""Checks shared by every generator."""

from __future__ import annotations

import os
from pathlib import Path


def validate_project_directory(name: str) -> str | None:
    """Return an error description if *name* cannot be used as a new project
    directory, or ``None`` when it is fine.
    """
    if not name or not name.strip():
        return "Please enter a directory name."
    if name.endswith(("/", os.sep)):
        return "Please enter a directory name without a trailing slash."
    if Path(name).exists():
        return f"Directory `{name}` already exists. Please choose a new name."
    return None
