"""
pacman adapter — Arch Linux, with AUR support.

Packages are split into official and AUR by ``is_aur_package``.
Official ones go through ``sudo pacman``; AUR ones through the chosen
helper (yay or paru).  When the selection has AUR packages and the
helper is missing, the script builds it from the AUR first.  A failed
build only warns: official packages still install and the AUR block
is skipped.  Scripts without AUR packages never mention a helper.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.data import DataRegistry
from tuxmate.core.models.catalog import PackageInfo
from tuxmate.core.services.packages import is_aur_package

PACMAN_LOCK = "/var/lib/pacman/db.lck"
AUR_HELPERS = ("yay", "paru")
NATIVE_COMMAND = "sudo pacman"

_BOOTSTRAP = """\
if ! command -v {helper} &>/dev/null; then
    warn "{helper} not found, installing for AUR packages..."
    if tmp=$(mktemp -d) \\
        && sudo pacman -S --needed --noconfirm git base-devel >/dev/null 2>&1 \\
        && git clone "https://aur.archlinux.org/{helper}.git" "$tmp/{helper}" >/dev/null 2>&1 \\
        && (cd "$tmp/{helper}" && makepkg -si --noconfirm >/dev/null 2>&1) \\
        && command -v {helper} &>/dev/null; then
        success "{helper} ready"
    else
        warn "Could not install {helper}, skipping AUR packages"
    fi
    [ -z "${{tmp:-}}" ] || rm -rf "$tmp"
fi
"""


class PacmanAdapter(ScriptAdapter):
    """pacman for official repos, yay/paru for the AUR."""

    install_params = "name=$1 pkg=$2 cmd=$3"

    def __init__(
        self,
        distro_id: str = "arch",
        display_name: str = "Arch Linux",
        *,
        helper: str = "yay",
        registry: DataRegistry | None = None,
    ):
        super().__init__(distro_id, display_name)
        if helper not in AUR_HELPERS:
            raise ValueError(f"Unknown AUR helper: {helper!r} (expected one of {AUR_HELPERS})")
        self.helper = helper
        self._registry = registry

    @property
    def name(self) -> str:
        return "pacman"

    def partition(self, packages: list[PackageInfo]) -> tuple[list[PackageInfo], list[PackageInfo]]:
        """Split into (official, aur), each keeping input order."""
        official: list[PackageInfo] = []
        aur: list[PackageInfo] = []
        for p in packages:
            if is_aur_package(p.pkg, registry=self._registry):
                aur.append(p)
            else:
                official.append(p)
        return official, aur

    def installed_check(self) -> str:
        return 'is_installed() { pacman -Qi "$1" &>/dev/null; }\n'

    def install_command(self) -> str:
        # $cmd is unquoted on purpose: "sudo pacman" must split into two words
        return '$cmd -S --needed --noconfirm "$pkg"'

    def preflight(self, packages: list[PackageInfo]) -> str:
        _, aur = self.partition(packages)
        text = (
            self.refuse_root()
            + "\n"
            + self.cache_credentials()
            + "\n"
            + f"wait_for_lock {PACMAN_LOCK}\n"
            + "\n"
            + self.soft_refresh(
                "sudo pacman -Sy --noconfirm",
                message="Syncing package databases...",
                label="Syncing...",
                done="Synced",
                failed="Sync failed",
            )
        )
        if aur:
            text += "\n" + self.helper_bootstrap()
        return text

    def helper_bootstrap(self) -> str:
        """Build the AUR helper from source when it is not on PATH."""
        return _BOOTSTRAP.format(helper=self.helper)

    def install_line(self, package: PackageInfo, command: str = NATIVE_COMMAND) -> str:
        return super().install_line(package) + f' "{command}"'

    def install_lines(self, packages: list[PackageInfo]) -> str:
        official, aur = self.partition(packages)
        lines = [self.install_line(p) for p in official]
        if aur:
            lines.append("")
            lines.append(f"if command -v {self.helper} &>/dev/null; then")
            lines.extend(f"    {self.install_line(p, self.helper)}" for p in aur)
            lines.append("fi")
        return "\n".join(lines) + "\n"
