"""
apt adapter — Ubuntu and Debian.

Installs with ``apt-get install -y`` under retry.  If an install still
fails and the log shows "unmet dependencies", one ``--fix-broken`` pass
is attempted before the package is recorded as failed.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.models.catalog import PackageInfo

DPKG_LOCK = "/var/lib/dpkg/lock-frontend"

_RECOVERY = r"""        if tail -n 50 "$LOG" | grep -q "unmet dependencies"; then
            warn "Fixing dependencies for $name..."
            if sudo apt-get --fix-broken install -y >/dev/null 2>&1; then
                sudo apt-get install -y "$pkg" &
                if animate_progress "$name (retry)" $!; then
                    local elapsed=$(($(date +%s) - start))
                    printf "\r\033[K" >&3
                    success "$name" "${elapsed}s, deps fixed"
                    SUCCEEDED+=("$name")
                    return 0
                fi
                printf "\r\033[K" >&3
            fi
        fi
"""


class AptAdapter(ScriptAdapter):
    """dpkg-backed installs for Debian-family distros."""

    @property
    def name(self) -> str:
        return "apt"

    def environment(self) -> str:
        return "export DEBIAN_FRONTEND=noninteractive\n"

    def installed_check(self) -> str:
        return 'is_installed() { dpkg -l "$1" 2>/dev/null | grep -q "^ii"; }\n'

    def install_command(self) -> str:
        return 'sudo apt-get install -y "$pkg"'

    def recovery(self) -> str:
        return _RECOVERY

    def preflight(self, packages: list[PackageInfo]) -> str:
        return (
            self.refuse_root()
            + "\n"
            + self.cache_credentials()
            + "\n"
            + f"wait_for_lock {DPKG_LOCK}\n"
            # Finish any half-configured packages from an interrupted run
            + "sudo dpkg --configure -a >/dev/null 2>&1 || true\n"
            + "\n"
            + self.soft_refresh(
                "sudo apt-get update -qq",
                message="Updating package lists...",
                label="Updating...",
                done="Updated",
                failed="Update failed",
            )
        )
