"""
Install script generator — resolved packages → full bash script.

``generate_install_script`` is the umbrella entry point: it resolves
the selection, handles the unknown-distro and empty cases with inert
scripts, and dispatches to the distro's adapter.  The per-distro
``generate_*_script`` functions take already-resolved packages and are
thin wrappers over the adapters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tuxmate.adapters.apt import AptAdapter
from tuxmate.adapters.dnf import DnfAdapter
from tuxmate.adapters.flatpak import FlatpakAdapter
from tuxmate.adapters.homebrew import HomebrewAdapter
from tuxmate.adapters.nix import NixAdapter
from tuxmate.adapters.pacman import AUR_HELPERS, PacmanAdapter
from tuxmate.adapters.registry import build_registry
from tuxmate.adapters.snap import SnapAdapter
from tuxmate.adapters.zypper import ZypperAdapter
from tuxmate.core.data import DataRegistry, get_registry
from tuxmate.core.models.catalog import PackageInfo
from tuxmate.core.models.template import GeneratedScript, mime_type_for, suggested_filename
from tuxmate.core.services.packages import resolve_selected_packages

logger = logging.getLogger(__name__)

UNKNOWN_DISTRO_SCRIPT = '#!/bin/bash\necho "Error: Unknown distribution"\nexit 1'
NO_PACKAGES_SCRIPT = '#!/bin/bash\necho "No packages selected"\nexit 0'
UNKNOWN_HELPER_SCRIPT = '#!/bin/bash\necho "Error: Unknown AUR helper"\nexit 1'


# ── Umbrella ────────────────────────────────────────────────────


def generate_install_script(
    distro_id: str,
    selected_ids: Iterable[str],
    *,
    helper: str = "yay",
    registry: DataRegistry | None = None,
) -> str:
    """Full install script (or Nix fragment) for a selection.

    Never raises for bad input: an unknown distro (or an unknown AUR
    helper on Arch) yields a script that exits 1, an empty resolution
    yields one that exits 0.  The helper is ignored on other distros.
    """
    registry = registry or get_registry()
    if registry.get_distro(distro_id) is None:
        logger.debug("Unknown distro requested: %s", distro_id)
        return UNKNOWN_DISTRO_SCRIPT

    packages = resolve_selected_packages(selected_ids, distro_id, registry=registry)
    if not packages:
        return NO_PACKAGES_SCRIPT

    if distro_id != "arch":
        helper = AUR_HELPERS[0]
    elif helper not in AUR_HELPERS:
        logger.debug("Unknown AUR helper requested: %s", helper)
        return UNKNOWN_HELPER_SCRIPT

    adapter = build_registry(helper, data=registry).get(distro_id)
    logger.debug("Rendering %d packages with %r", len(packages), adapter)
    return adapter.render(packages)


def build_install_script(
    distro_id: str,
    selected_ids: Iterable[str],
    *,
    helper: str = "yay",
    registry: DataRegistry | None = None,
) -> GeneratedScript:
    """Like ``generate_install_script`` but with download metadata attached."""
    selected = list(selected_ids)
    content = generate_install_script(distro_id, selected, helper=helper, registry=registry)
    return GeneratedScript(
        filename=suggested_filename(distro_id),
        content=content,
        mime_type=mime_type_for(distro_id),
        reason=f"Install script for {len(selected)} selected app(s) on {distro_id}",
    )


# ── Per-distro entry points ─────────────────────────────────────


def generate_ubuntu_script(packages: list[PackageInfo]) -> str:
    return AptAdapter("ubuntu", "Ubuntu").render(packages)


def generate_debian_script(packages: list[PackageInfo]) -> str:
    return AptAdapter("debian", "Debian").render(packages)


def generate_arch_script(
    packages: list[PackageInfo],
    helper: str = "yay",
    *,
    registry: DataRegistry | None = None,
) -> str:
    return PacmanAdapter("arch", "Arch Linux", helper=helper, registry=registry).render(packages)


def generate_fedora_script(packages: list[PackageInfo]) -> str:
    return DnfAdapter("fedora", "Fedora").render(packages)


def generate_opensuse_script(packages: list[PackageInfo]) -> str:
    return ZypperAdapter("opensuse", "openSUSE").render(packages)


def generate_flatpak_script(packages: list[PackageInfo]) -> str:
    return FlatpakAdapter("flatpak", "Flatpak").render(packages)


def generate_snap_script(packages: list[PackageInfo]) -> str:
    return SnapAdapter("snap", "Snap").render(packages)


def generate_homebrew_script(packages: list[PackageInfo]) -> str:
    return HomebrewAdapter("homebrew", "Homebrew").render(packages)


def generate_nix_config(packages: list[PackageInfo]) -> str:
    return NixAdapter("nix", "Nix").render(packages)
