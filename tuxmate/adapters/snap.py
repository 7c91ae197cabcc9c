"""
Snap adapter.

Catalog entries may carry flags after the snap name (``code --classic``),
so the package token is left unquoted in the install command and only
its first word is used for the installed check.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.models.catalog import PackageInfo

_INSTALLED_CHECK = """\
is_installed() {
    local snap_name
    snap_name=$(echo "$1" | awk '{print $1}')
    snap list 2>/dev/null | grep -q "^$snap_name "
}
"""

_START_SNAPD = r"""if command -v systemctl &>/dev/null && ! systemctl is-active --quiet snapd; then
    info "Starting snapd..."
    if ! { sudo systemctl enable --now snapd.socket && sudo systemctl start snapd; } >/dev/null 2>&1; then
        error "Failed to start snapd"
        exit 1
    fi
    sleep 2
    printf "\r\033[K" >&3
    success "snapd started"
fi
"""


class SnapAdapter(ScriptAdapter):

    @property
    def name(self) -> str:
        return "snap"

    def installed_check(self) -> str:
        return _INSTALLED_CHECK

    def install_command(self) -> str:
        return "sudo snap install $pkg"

    def preflight(self, packages: list[PackageInfo]) -> str:
        return (
            self.require_command(
                "snap",
                "Snap not installed",
                hint="Install: sudo apt/dnf/pacman install snapd",
            )
            + "\n"
            + self.cache_credentials()
            + "\n"
            + _START_SNAPD
        )
