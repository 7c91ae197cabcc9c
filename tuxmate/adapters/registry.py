"""
Adapter registry — maps distro ids to package-manager adapters.

The script driver never instantiates adapters itself; it asks the
registry for the one bound to the target distro.  Ubuntu and Debian
share the apt adapter class under different display names.
"""

from __future__ import annotations

import logging

from tuxmate.adapters.apt import AptAdapter
from tuxmate.adapters.base import PackageManagerAdapter
from tuxmate.adapters.dnf import DnfAdapter
from tuxmate.adapters.flatpak import FlatpakAdapter
from tuxmate.adapters.homebrew import HomebrewAdapter
from tuxmate.adapters.nix import NixAdapter
from tuxmate.adapters.pacman import PacmanAdapter
from tuxmate.adapters.snap import SnapAdapter
from tuxmate.adapters.zypper import ZypperAdapter
from tuxmate.core.data import DataRegistry

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Central lookup of adapters by distro id."""

    def __init__(self) -> None:
        self._adapters: dict[str, PackageManagerAdapter] = {}

    def register(self, adapter: PackageManagerAdapter) -> None:
        distro_id = adapter.distro_id
        if distro_id in self._adapters:
            logger.warning("Overwriting existing adapter for distro: %s", distro_id)
        self._adapters[distro_id] = adapter
        logger.debug("Registered adapter: %r", adapter)

    def get(self, distro_id: str) -> PackageManagerAdapter | None:
        return self._adapters.get(distro_id)


def build_registry(
    helper: str = "yay",
    *,
    data: DataRegistry | None = None,
) -> AdapterRegistry:
    """Registry with every supported distro.

    Args:
        helper: AUR helper the Arch adapter bootstraps and uses.
        data: Catalog registry for AUR classification (default: process singleton).
    """
    registry = AdapterRegistry()
    registry.register(AptAdapter("ubuntu", "Ubuntu"))
    registry.register(AptAdapter("debian", "Debian"))
    registry.register(PacmanAdapter("arch", "Arch Linux", helper=helper, registry=data))
    registry.register(DnfAdapter("fedora", "Fedora"))
    registry.register(ZypperAdapter("opensuse", "openSUSE"))
    registry.register(NixAdapter("nix", "Nix"))
    registry.register(FlatpakAdapter("flatpak", "Flatpak"))
    registry.register(SnapAdapter("snap", "Snap"))
    registry.register(HomebrewAdapter("homebrew", "Homebrew"))
    return registry
