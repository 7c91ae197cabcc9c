"""
zypper adapter — openSUSE.

zypper's lock is its pid file, found under /run on current releases
and /var/run on older ones.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.models.catalog import PackageInfo

ZYPP_LOCKS = ("/run/zypp.pid", "/var/run/zypp.pid")


class ZypperAdapter(ScriptAdapter):

    @property
    def name(self) -> str:
        return "zypper"

    def installed_check(self) -> str:
        return 'is_installed() { rpm -q "$1" &>/dev/null; }\n'

    def install_command(self) -> str:
        return 'sudo zypper --non-interactive install --auto-agree-with-licenses "$pkg"'

    def preflight(self, packages: list[PackageInfo]) -> str:
        primary, fallback = ZYPP_LOCKS
        lock_wait = (
            f"if [ -f {primary} ]; then\n"
            f"    wait_for_lock {primary}\n"
            f"elif [ -f {fallback} ]; then\n"
            f"    wait_for_lock {fallback}\n"
            "fi\n"
        )
        return (
            self.refuse_root()
            + self.require_command("zypper", "zypper not found")
            + "\n"
            + self.cache_credentials()
            + "\n"
            + lock_wait
            + "\n"
            + self.soft_refresh(
                "sudo zypper --non-interactive refresh",
                message="Refreshing repositories...",
                label="Refreshing...",
                done="Refreshed",
                failed="Refresh failed",
            )
        )
