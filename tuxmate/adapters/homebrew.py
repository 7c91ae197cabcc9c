"""
Homebrew adapter — macOS and Linuxbrew.

Catalog entries prefixed with ``--cask `` are casks; everything else is
a formula.  Casks only exist on macOS, so on other platforms they are
recorded as skipped rather than failed.
"""

from __future__ import annotations

from tuxmate.adapters.base import ScriptAdapter
from tuxmate.core.models.catalog import PackageInfo
from tuxmate.core.services.packages import escape_shell_string

CASK_PREFIX = "--cask "

# Checked in order; the first prefix with an executable brew wins
BREW_PREFIXES = ("/opt/homebrew", "/usr/local", "/home/linuxbrew/.linuxbrew")

_ENVIRONMENT = """\
export HOMEBREW_NO_AUTO_UPDATE=1
export HOMEBREW_NO_ENV_HINTS=1

for brew_prefix in {prefixes}; do
    if [ -x "$brew_prefix/bin/brew" ]; then
        export PATH="$brew_prefix/bin:$brew_prefix/sbin:$PATH"
        break
    fi
done

IS_MACOS=false
if [[ "$OSTYPE" == "darwin"* ]]; then
    IS_MACOS=true
fi
"""

_INSTALLED_CHECK = """\
is_installed() {
    local pkg=$1 kind=${2:-}
    if [ "$kind" = "--cask" ]; then
        brew list --cask 2>/dev/null | grep -Fxq "$pkg"
    else
        brew list --formula 2>/dev/null | grep -Fxq "$pkg"
    fi
}
"""

_CASK_GUARD = """\
    if [ "$kind" = "--cask" ] && [ "$IS_MACOS" = false ]; then
        skip "$name" "cask, macOS only"
        SKIPPED+=("$name")
        return 0
    fi
"""

_PLATFORM_NOTICE = """\
if [ "$IS_MACOS" = true ]; then
    info "Detected macOS - casks enabled"
else
    info "Detected Linux - formulae only (casks will be skipped)"
fi
"""


def split_cask(pkg: str) -> tuple[str, bool]:
    """Return (token, is_cask) for a catalog Homebrew entry."""
    if pkg.startswith(CASK_PREFIX):
        return pkg[len(CASK_PREFIX):].strip(), True
    return pkg, False


class HomebrewAdapter(ScriptAdapter):

    install_params = "name=$1 pkg=$2 kind=${3:-}"
    installed_call = 'is_installed "$pkg" "$kind"'

    @property
    def name(self) -> str:
        return "brew"

    def environment(self) -> str:
        return _ENVIRONMENT.format(prefixes=" ".join(BREW_PREFIXES))

    def installed_check(self) -> str:
        return _INSTALLED_CHECK

    def install_command(self) -> str:
        # $kind is unquoted so an empty value drops out of the argv
        return 'brew install $kind "$pkg"'

    def pre_check(self) -> str:
        return _CASK_GUARD

    def preflight(self, packages: list[PackageInfo]) -> str:
        return (
            self.refuse_root("Homebrew should not be run as root. Please run as a normal user.")
            + self.require_command("brew", "Homebrew not found. Install from https://brew.sh")
            + "\n"
            + _PLATFORM_NOTICE
            + "\n"
            + self.soft_refresh(
                "brew update",
                message="Updating Homebrew...",
                label="Updating...",
                done="Updated",
                failed="Update failed",
            )
        )

    def install_line(self, package: PackageInfo) -> str:
        token, is_cask = split_cask(package.pkg)
        line = f'install_pkg "{escape_shell_string(package.app.name)}" "{token}"'
        return f'{line} "--cask"' if is_cask else line
