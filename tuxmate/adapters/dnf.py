"""
dnf adapter — Fedora.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.models.catalog import PackageInfo


class DnfAdapter(ScriptAdapter):

    @property
    def name(self) -> str:
        return "dnf"

    def installed_check(self) -> str:
        return 'is_installed() { rpm -q "$1" &>/dev/null; }\n'

    def install_command(self) -> str:
        return 'sudo dnf install -y "$pkg"'

    def preflight(self, packages: list[PackageInfo]) -> str:
        return (
            self.refuse_root()
            + self.require_command("dnf", "dnf not found")
            + "\n"
            + self.cache_credentials()
        )
