"""
Generate use cases — selection in, script or one-liner out.

Both use cases report unknown app ids and the AUR / Nix-unfree notices
alongside the generated text so the CLI (or any other caller) can show
them without re-resolving the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from tuxmate.core.config.loader import ProfileError, load_profile
from tuxmate.core.data import DataRegistry, get_registry
from tuxmate.core.models.profile import Profile
from tuxmate.core.models.template import GeneratedScript
from tuxmate.core.services.generators.command import command_for
from tuxmate.core.services.generators.script import build_install_script
from tuxmate.core.services.packages import (
    FlaggedPackages,
    aur_package_info,
    resolve_selected_packages,
    unfree_package_info,
    unknown_app_ids,
)

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """Resolved request: where the distro, apps and helper came from."""

    distro_id: str
    app_ids: list[str]
    helper: str = "yay"
    profile_path: Path | None = None


@dataclass
class GenerateResult:
    """Common fields for script and command results."""

    distro_id: str = ""
    package_count: int = 0
    unknown_apps: list[str] = field(default_factory=list)
    aur: FlaggedPackages = field(default_factory=FlaggedPackages)
    unfree: FlaggedPackages = field(default_factory=FlaggedPackages)
    error: str | None = None

    def _base_dict(self) -> dict:
        return {
            "distro": self.distro_id,
            "package_count": self.package_count,
            "unknown_apps": self.unknown_apps,
            "aur": self.aur.to_dict(),
            "unfree": self.unfree.to_dict(),
            "error": self.error,
        }


@dataclass
class ScriptResult(GenerateResult):
    script: GeneratedScript | None = None

    def to_dict(self) -> dict:
        data = self._base_dict()
        data["script"] = self.script.model_dump() if self.script else None
        return data


@dataclass
class CommandResult(GenerateResult):
    command: str = ""

    def to_dict(self) -> dict:
        data = self._base_dict()
        data["command"] = self.command
        return data


def resolve_selection(
    distro_id: str | None,
    app_ids: Iterable[str],
    *,
    helper: str | None = None,
    profile_path: Path | None = None,
) -> Selection:
    """Merge CLI arguments with a profile.

    Explicit arguments win.  A profile is read only when one is named
    or when the distro or app list is missing from the arguments.

    Raises:
        ProfileError: If a profile is needed but cannot be loaded.
    """
    apps = list(app_ids)
    profile: Profile | None = None
    if profile_path is not None or not distro_id or not apps:
        profile = load_profile(profile_path)

    if profile is None:
        return Selection(distro_id=distro_id or "", app_ids=apps, helper=helper or "yay")

    return Selection(
        distro_id=distro_id or profile.distro,
        app_ids=apps or list(profile.apps),
        helper=helper or profile.helper,
        profile_path=profile_path,
    )


def _annotate(result: GenerateResult, selection: Selection, registry: DataRegistry) -> None:
    result.distro_id = selection.distro_id
    result.unknown_apps = unknown_app_ids(selection.app_ids, registry=registry)
    result.package_count = len(
        resolve_selected_packages(selection.app_ids, selection.distro_id, registry=registry)
    )
    result.aur = aur_package_info(selection.app_ids, selection.distro_id, registry=registry)
    result.unfree = unfree_package_info(selection.app_ids, selection.distro_id, registry=registry)
    if result.unknown_apps:
        logger.debug("Unknown app ids ignored: %s", ", ".join(result.unknown_apps))


def generate_script(
    selection: Selection,
    *,
    registry: DataRegistry | None = None,
) -> ScriptResult:
    """Build the full install script for a selection."""
    registry = registry or get_registry()
    result = ScriptResult()
    if registry.get_distro(selection.distro_id) is None:
        result.distro_id = selection.distro_id
        result.error = f"Unknown distribution: {selection.distro_id}"
        return result

    _annotate(result, selection, registry)
    result.script = build_install_script(
        selection.distro_id,
        selection.app_ids,
        helper=selection.helper,
        registry=registry,
    )
    logger.debug("Generated %s (%d packages)", result.script.filename, result.package_count)
    return result


def generate_command(
    selection: Selection,
    *,
    registry: DataRegistry | None = None,
) -> CommandResult:
    """Build the one-line install command for a selection."""
    registry = registry or get_registry()
    result = CommandResult()
    if registry.get_distro(selection.distro_id) is None:
        result.distro_id = selection.distro_id
        result.error = f"Unknown distribution: {selection.distro_id}"
        return result

    _annotate(result, selection, registry)
    result.command = command_for(selection.distro_id, selection.app_ids, registry=registry)
    return result


__all__ = [
    "CommandResult",
    "GenerateResult",
    "ProfileError",
    "ScriptResult",
    "Selection",
    "generate_command",
    "generate_script",
    "resolve_selection",
]
