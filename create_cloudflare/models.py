"""Pydantic models passed between the CLI, the prompts and the generators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParsedArgs(BaseModel):
    """Command-line options exactly as the user supplied them.

    Every field except ``open`` is optional: ``None`` means the flag was not
    given and the value is still to be decided by a prompt or a generator.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str | None = None
    type: str | None = None
    framework: str | None = None
    deploy: bool | None = None
    ts: bool | None = None
    git: bool | None = None
    open: bool = True
    existing_script: str | None = None
    wrangler_defaults: bool | None = None


class ValidatedArgs(ParsedArgs):
    """``ParsedArgs`` after the project name and type have been resolved."""

    project_name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)


class Option(BaseModel):
    """One entry of a single-select prompt."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
