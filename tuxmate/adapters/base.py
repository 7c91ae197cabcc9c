"""
Adapter base — the contract between the script driver and package managers.

Every supported ecosystem is a ``PackageManagerAdapter``.  The shell
ones subclass ``ScriptAdapter``, which owns the shared install loop and
only asks each package manager for the pieces that differ:

    installed_check()   bash ``is_installed`` definition
    install_command()   what ``with_retry`` runs for one package
    preflight()         root check, credentials, locks, refresh
    pre_check()         optional early-skip inside ``install_pkg``
    recovery()          optional repair attempt before recording a failure

Each package walks the same states in the generated script:
pending → skipped (already installed) | installed | failed (after retries).

To add a package manager:
    1. Subclass ScriptAdapter (or PackageManagerAdapter for non-scripts)
    2. Implement name and the abstract pieces
    3. Register it in ``tuxmate.adapters.registry``
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tuxmate.core.models.catalog import PackageInfo
from tuxmate.core.services.generators.shared import RULE, header, runtime_utils
from tuxmate.core.services.packages import escape_shell_string


class PackageManagerAdapter(ABC):
    """Abstract base for every package-manager adapter.

    Adapters are pure: ``render`` turns resolved packages into text and
    never touches the machine it runs on.
    """

    #: True when the output is a configuration fragment, not a script
    declarative: bool = False

    def __init__(self, distro_id: str, display_name: str):
        self.distro_id = distro_id
        self.display_name = display_name

    @property
    @abstractmethod
    def name(self) -> str:
        """The package manager identifier (e.g. 'apt', 'pacman')."""

    @abstractmethod
    def render(self, packages: list[PackageInfo]) -> str:
        """Produce the complete artifact for ``packages`` (non-empty)."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} distro={self.distro_id!r}>"


_INSTALL_FUNCTION = r"""install_pkg() {
    local __PARAMS__
    CURRENT=$((CURRENT + 1))
__PRE_CHECK__
    if __INSTALLED__; then
        skip "$name"
        SKIPPED+=("$name")
        return 0
    fi

    local start=$(date +%s)

    with_retry __INSTALL__ &
    local pid=$!

    if animate_progress "$name" $pid; then
        local elapsed=$(($(date +%s) - start))
        printf "\r\033[K" >&3
        success "$name" "${elapsed}s"
        SUCCEEDED+=("$name")
    else
        printf "\r\033[K" >&3
__RECOVERY__        error "$name"
        FAILED+=("$name")
    fi
}
"""

_SOFT_REFRESH = r"""info "__MESSAGE__"
with_retry __COMMAND__ &
if animate_progress "__LABEL__" $!; then
    printf "\r\033[K" >&3
    success "__DONE__"
else
    printf "\r\033[K" >&3
    warn "__FAILED__, continuing..."
fi
"""

_CREDENTIALS = """\
info "{message}"
sudo -v || exit 1
while true; do sudo -n true; sleep 60; kill -0 "$$" || exit; done 2>/dev/null &
"""


class ScriptAdapter(PackageManagerAdapter):
    """Base for adapters that emit a self-contained bash script."""

    #: ``local`` declarations at the top of ``install_pkg``
    install_params: str = "name=$1 pkg=$2"
    #: Condition that is true when the package is already present
    installed_call: str = 'is_installed "$pkg"'

    # ── Package-manager specific pieces ─────────────────────────

    @abstractmethod
    def installed_check(self) -> str:
        """Bash definition of ``is_installed``."""

    @abstractmethod
    def install_command(self) -> str:
        """Command line run under ``with_retry`` for one package."""

    @abstractmethod
    def preflight(self, packages: list[PackageInfo]) -> str:
        """Checks and setup that run before any package is touched."""

    def environment(self) -> str:
        """Exports and platform probes placed before the helpers."""
        return ""

    def pre_check(self) -> str:
        """Early-exit block inside ``install_pkg`` (runs before the installed check)."""
        return ""

    def recovery(self) -> str:
        """Repair block run after retries are exhausted, before recording a failure."""
        return ""

    def epilogue(self) -> str:
        """Lines appended after the summary."""
        return ""

    def install_line(self, package: PackageInfo) -> str:
        return f'install_pkg "{escape_shell_string(package.app.name)}" "{package.pkg}"'

    def install_lines(self, packages: list[PackageInfo]) -> str:
        return "\n".join(self.install_line(p) for p in packages) + "\n"

    # ── Rendering ───────────────────────────────────────────────

    def install_function(self) -> str:
        pre_check = self.pre_check()
        recovery = self.recovery()
        return (
            _INSTALL_FUNCTION.replace("__PARAMS__", self.install_params)
            .replace("__PRE_CHECK__", f"\n{pre_check}" if pre_check else "")
            .replace("__INSTALLED__", self.installed_call)
            .replace("__INSTALL__", self.install_command())
            .replace("__RECOVERY__", recovery)
        )

    def render(self, packages: list[PackageInfo]) -> str:
        if not packages:
            raise ValueError(f"{self.name}: no packages to install")

        total = len(packages)
        parts = [
            header(self.display_name, total),
            runtime_utils(self.distro_id, total),
        ]
        env = self.environment()
        if env:
            parts.append(env + "\n")
        parts += [
            self.installed_check() + "\n",
            self.install_function() + "\n",
            RULE + "\n\n",
            self.preflight(packages) + "\n",
            'echo >&3\ninfo "Installing $TOTAL packages"\necho >&3\n\n',
            self.install_lines(packages) + "\n",
            "print_summary\n",
        ]
        epilogue = self.epilogue()
        if epilogue:
            parts.append(epilogue)
        return "".join(parts)

    # ── Pre-flight building blocks ──────────────────────────────

    @staticmethod
    def refuse_root(message: str = "Do not run as root.") -> str:
        return f'[ "$EUID" -eq 0 ] && {{ error "{message}"; exit 1; }}\n'

    @staticmethod
    def require_command(binary: str, message: str, hint: str = "") -> str:
        if not hint:
            return f'command -v {binary} &>/dev/null || {{ error "{message}"; exit 1; }}\n'
        return (
            f"command -v {binary} &>/dev/null || {{\n"
            f'    error "{message}"\n'
            f'    info "{hint}"\n'
            "    exit 1\n"
            "}\n"
        )

    @staticmethod
    def cache_credentials(message: str = "Caching sudo credentials...") -> str:
        """Prompt for sudo once, then keep the timestamp fresh until the script exits."""
        return _CREDENTIALS.format(message=message)

    @staticmethod
    def soft_refresh(command: str, message: str, label: str, done: str, failed: str) -> str:
        """Run a refresh step under retry; failure only warns."""
        return (
            _SOFT_REFRESH.replace("__MESSAGE__", message)
            .replace("__COMMAND__", command)
            .replace("__LABEL__", label)
            .replace("__DONE__", done)
            .replace("__FAILED__", failed)
        )
