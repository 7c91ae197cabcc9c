"""
Profile model — a saved selection read from tuxmate.yml.

A profile records what the user would otherwise pick interactively:
the target distro, the apps, and which AUR helper to use on Arch.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from tuxmate.core.models.catalog import DistroId

AurHelper = Literal["yay", "paru"]


class Profile(BaseModel):
    """Selection profile."""

    name: str = ""
    distro: DistroId
    apps: list[str] = Field(default_factory=list)
    helper: AurHelper = "yay"

    @field_validator("apps")
    @classmethod
    def _dedupe_apps(cls, value: list[str]) -> list[str]:
        # Selection is a set; keep first-seen order
        return list(dict.fromkeys(v.strip() for v in value if v and v.strip()))
