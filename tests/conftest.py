"""Shared pytest fixtures for the create-cloudflare test suite.

Provides reusable fixtures for:
- A clean working directory for generated projects
- A registry whose handlers are mocks
- Patched subprocess execution
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_cloudflare.registry import TEMPLATE_MAP, TemplateConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_registry() -> dict[str, TemplateConfig]:
    """``TEMPLATE_MAP`` with every handler replaced by an ``AsyncMock``.

    Keys, labels, order and visibility are identical to the real registry.
    """
    return {
        key: TemplateConfig(label=entry.label, handler=AsyncMock(), hidden=entry.hidden)
        for key, entry in TEMPLATE_MAP.items()
    }


# ---------------------------------------------------------------------------
# Subprocesses
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_workers_run_command():
    """Patch ``run_command`` in the workers generator to succeed."""
    with patch(
        "create_cloudflare.workers.run_command",
        new_callable=AsyncMock,
        return_value=(0, "", ""),
    ) as mock:
        yield mock


@pytest.fixture
def mock_pages_run_command():
    """Patch ``run_command`` in the pages generator to succeed."""
    with patch(
        "create_cloudflare.pages.run_command",
        new_callable=AsyncMock,
        return_value=(0, "", ""),
    ) as mock:
        yield mock
