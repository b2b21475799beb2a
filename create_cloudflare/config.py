"""create-cloudflare configuration.

Static, typed settings for a single run. Nothing here is read from the
environment or from disk; the values are fixed for a given release.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from create_cloudflare import __version__


class Config(BaseModel):
    """Global settings shared by the CLI and the generators."""

    model_config = ConfigDict(frozen=True)

    script_name: str = Field(default="create-cloudflare", min_length=1)
    version: str = Field(default=__version__, min_length=1)
    default_type: str = Field(
        default="hello-world", description="Type used when none is given"
    )
    banner_title: str = Field(default="Create an application with Cloudflare")
    step_indicator: str = Field(default="Step 1 of 3")
    compatibility_date: str = Field(
        default_factory=lambda: date.today().isoformat(),
        description="Written into generated wrangler.toml files",
    )


config = Config()
