"""
Nix adapter — declarative, so the output is a configuration fragment.

There is nothing to execute: the user pastes the block into
``configuration.nix`` and rebuilds.  Install/skip/fail states do not
apply.
"""

from __future__ import annotations

from collections.abc import Iterable

from tuxmate.adapters.base import PackageManagerAdapter
from tuxmate.core.models.catalog import PackageInfo


def render_nix_config(package_names: Iterable[str]) -> str:
    """``environment.systemPackages`` block, sorted and deduplicated."""
    names = sorted({name.strip() for name in package_names if name.strip()})
    body = "\n".join(f"    {name}" for name in names)
    return f"environment.systemPackages = with pkgs; [\n{body}\n];"


class NixAdapter(PackageManagerAdapter):

    declarative = True

    @property
    def name(self) -> str:
        return "nix"

    def render(self, packages: list[PackageInfo]) -> str:
        return render_nix_config(p.pkg for p in packages)
