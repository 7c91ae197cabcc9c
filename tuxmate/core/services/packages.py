"""
Package resolution — selected app ids → package names for one distro.

Also holds the small classifiers the generators and the CLI share:
AUR detection on Arch, unfree detection on Nix, and shell escaping of
display names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from tuxmate.core.data import DataRegistry, get_registry
from tuxmate.core.models.catalog import PackageInfo

logger = logging.getLogger(__name__)

AUR_SUFFIXES = ("-bin", "-git", "-appimage")

# Order matters: backslash first so later escapes are not doubled
_SHELL_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("$", "\\$"),
    ("`", "\\`"),
    ("!", "\\!"),
)


def escape_shell_string(value: str) -> str:
    """Escape a string for interpolation inside double quotes in bash.

    Not idempotent: escaping twice doubles the backslashes, so callers
    must escape each display name exactly once.
    """
    for raw, escaped in _SHELL_ESCAPES:
        value = value.replace(raw, escaped)
    return value


def resolve_selected_packages(
    selected_ids: Iterable[str],
    distro_id: str,
    *,
    registry: DataRegistry | None = None,
) -> list[PackageInfo]:
    """Resolve app ids to (app, package name) pairs for ``distro_id``.

    Unknown ids and apps with no package on the distro are dropped
    silently.  Output order follows the iteration order of
    ``selected_ids``; duplicate ids resolve once.
    """
    registry = registry or get_registry()
    packages: list[PackageInfo] = []
    seen: set[str] = set()

    for app_id in selected_ids:
        if app_id in seen:
            continue
        seen.add(app_id)

        app = registry.get_app(app_id)
        if app is None:
            logger.debug("Unknown app id: %s", app_id)
            continue
        pkg = app.package_for(distro_id)
        if pkg is None:
            logger.debug("%s is not packaged for %s", app_id, distro_id)
            continue
        packages.append(PackageInfo(app=app, pkg=pkg))

    return packages


def unknown_app_ids(
    selected_ids: Iterable[str],
    *,
    registry: DataRegistry | None = None,
) -> list[str]:
    """Return the ids that do not exist in the catalog."""
    registry = registry or get_registry()
    return [i for i in dict.fromkeys(selected_ids) if registry.get_app(i) is None]


def is_app_available(
    app_id: str,
    distro_id: str,
    *,
    registry: DataRegistry | None = None,
) -> bool:
    registry = registry or get_registry()
    app = registry.get_app(app_id)
    return app is not None and app.is_available(distro_id)


# ── Arch: AUR classification ────────────────────────────────────


def is_aur_package(name: str, *, registry: DataRegistry | None = None) -> bool:
    """Heuristic AUR check: curated list, or a ``-bin``/``-git``/``-appimage`` suffix.

    Unrecognised AUR-only names without one of those suffixes are
    classified as official.
    """
    registry = registry or get_registry()
    if name in registry.aur_packages:
        return True
    return name.endswith(AUR_SUFFIXES)


# ── Nix: unfree classification ──────────────────────────────────


def is_unfree_package(name: str, *, registry: DataRegistry | None = None) -> bool:
    """True if the Nix attribute needs ``nixpkgs.config.allowUnfree``.

    Matches exact names and nested attributes that contain a known
    unfree name (``jetbrains.idea-ultimate``).
    """
    registry = registry or get_registry()
    clean = name.strip().lower()
    if clean in registry.nix_unfree_packages:
        return True
    return any(unfree in clean for unfree in registry.nix_unfree_packages)


# ── Caller display helpers ──────────────────────────────────────


@dataclass
class FlaggedPackages:
    """Packages in a selection that need a notice shown to the user."""

    packages: list[str] = field(default_factory=list)
    app_names: list[str] = field(default_factory=list)

    @property
    def any(self) -> bool:
        return bool(self.packages)

    def to_dict(self) -> dict:
        return {"packages": self.packages, "apps": self.app_names}


def aur_package_info(
    selected_ids: Iterable[str],
    distro_id: str,
    *,
    registry: DataRegistry | None = None,
) -> FlaggedPackages:
    """AUR packages in the selection (always empty unless distro is arch)."""
    info = FlaggedPackages()
    if distro_id != "arch":
        return info
    for p in resolve_selected_packages(selected_ids, distro_id, registry=registry):
        if is_aur_package(p.pkg, registry=registry):
            info.packages.append(p.pkg)
            info.app_names.append(p.app.name)
    return info


def unfree_package_info(
    selected_ids: Iterable[str],
    distro_id: str,
    *,
    registry: DataRegistry | None = None,
) -> FlaggedPackages:
    """Unfree Nix packages in the selection (always empty unless distro is nix)."""
    info = FlaggedPackages()
    if distro_id != "nix":
        return info
    for p in resolve_selected_packages(selected_ids, distro_id, registry=registry):
        if is_unfree_package(p.pkg, registry=registry):
            info.packages.append(p.pkg)
            info.app_names.append(p.app.name)
    return info
