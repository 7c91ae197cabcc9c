"""
One-liner generator — a single copy-paste command, no scaffolding.

No retries, no per-package error handling.  Join rules per distro:

    apt / dnf / zypper / flatpak   install prefix + all packages
    arch                           always ``yay`` (no helper bootstrap)
    snap                           one ``sudo snap install`` per package, &&-chained
    homebrew                       formulae and casks as up to two &&-chained commands
    nix                            the declarative fragment, same as the script
"""

from __future__ import annotations

from collections.abc import Iterable

from tuxmate.adapters.homebrew import split_cask
from tuxmate.adapters.nix import render_nix_config
from tuxmate.core.data import DataRegistry, get_registry
from tuxmate.core.models.catalog import PackageInfo
from tuxmate.core.services.packages import resolve_selected_packages

NO_PACKAGES_COMMAND = "# No packages selected"

# TODO: honour the selected helper (and offer a bootstrap prefix) once the
# one-liner takes the same options as the script generator.
ARCH_ONE_LINER = "yay -S --needed --noconfirm"
SNAP_INSTALL = "sudo snap install"


def _snap(packages: list[PackageInfo], prefix: str) -> str:
    if len(packages) == 1:
        return f"{prefix} {packages[0].pkg}"
    return " && ".join(f"{SNAP_INSTALL} {p.pkg}" for p in packages)


def _homebrew(packages: list[PackageInfo], prefix: str) -> str:
    formulae: list[str] = []
    casks: list[str] = []
    for p in packages:
        token, is_cask = split_cask(p.pkg)
        (casks if is_cask else formulae).append(token)

    parts: list[str] = []
    if formulae:
        parts.append(f"brew install {' '.join(formulae)}")
    if casks:
        parts.append(f"brew install --cask {' '.join(casks)}")
    return " && ".join(parts) or NO_PACKAGES_COMMAND


def _arch(packages: list[PackageInfo], prefix: str) -> str:
    return f"{ARCH_ONE_LINER} {' '.join(p.pkg for p in packages)}"


def _nix(packages: list[PackageInfo], prefix: str) -> str:
    return render_nix_config(p.pkg for p in packages)


def _joined(packages: list[PackageInfo], prefix: str) -> str:
    return f"{prefix} {' '.join(p.pkg for p in packages)}"


_JOINERS = {
    "arch": _arch,
    "snap": _snap,
    "homebrew": _homebrew,
    "nix": _nix,
}


def command_for(
    distro_id: str,
    selected_ids: Iterable[str],
    *,
    registry: DataRegistry | None = None,
) -> str:
    """One-line install command for the selection on ``distro_id``."""
    registry = registry or get_registry()
    packages = resolve_selected_packages(selected_ids, distro_id, registry=registry)
    if not packages:
        return NO_PACKAGES_COMMAND

    # packages only resolve for known distros
    distro = registry.get_distro(distro_id)
    joiner = _JOINERS.get(distro_id, _joined)
    return joiner(packages, distro.install_prefix)
