"""
Flatpak adapter — Flathub app ids.

User installs need no root, so credentials are only requested when
the flathub remote has to be added.  Without the remote nothing can
install, so a failed remote-add stops the script.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.models.catalog import PackageInfo

FLATHUB_REPO = "https://dl.flathub.org/repo/flathub.flatpakrepo"

_ADD_REMOTE = """\
if ! flatpak remotes 2>/dev/null | grep -q flathub; then
{credentials}
    info "Adding Flathub..."
    if ! flatpak remote-add --if-not-exists flathub {repo} >/dev/null 2>&1; then
        error "Failed to add Flathub"
        exit 1
    fi
    success "Flathub added"
fi
"""


class FlatpakAdapter(ScriptAdapter):

    install_params = "name=$1 appid=$2"
    installed_call = 'is_installed "$appid"'

    @property
    def name(self) -> str:
        return "flatpak"

    def installed_check(self) -> str:
        return (
            "is_installed() { flatpak list --app --columns=application 2>/dev/null"
            ' | grep -Fxq "$1"; }\n'
        )

    def install_command(self) -> str:
        return 'flatpak install flathub -y "$appid"'

    def preflight(self, packages: list[PackageInfo]) -> str:
        credentials = "\n".join(
            f"    {line}" if line else ""
            for line in self.cache_credentials("Caching sudo credentials to add Flathub...").splitlines()
        )
        return (
            self.require_command(
                "flatpak",
                "Flatpak not installed",
                hint="Install: sudo apt/dnf/pacman install flatpak",
            )
            + "\n"
            + _ADD_REMOTE.format(credentials=credentials, repo=FLATHUB_REPO)
        )

    def epilogue(self) -> str:
        return 'echo >&3\ninfo "Restart session for new apps to appear in menu."\n'
