"""
Shared runtime — the bash boilerplate every generated script embeds.

``header()`` produces the banner and strict-mode preamble.
``runtime_utils()`` produces the helper library the package-manager
bodies call into:

    info / success / warn / error / skip   status lines (terminal + log)
    animate_progress NAME PID              progress bar while PID runs
    with_retry CMD...                      3 attempts, 5s then 10s backoff
    wait_for_lock PATH                     poll a lock file, fatal after 60s
    print_summary                          counts, elapsed time, log path

All script output goes to a per-run log file; FD 3 keeps the user's
terminal for the single-line status feed.
"""

from __future__ import annotations

import re
from datetime import date

RULE = "# " + "-" * 75

MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 5
LOCK_TIMEOUT_SECONDS = 60
LOCK_POLL_SECONDS = 2
PROGRESS_POLL_SECONDS = 0.1
EXIT_CANCELLED = 130

SAFE_PATH = "/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin"

_BANNER = """\
#  ████████╗██╗   ██╗██╗  ██╗███╗   ███╗ █████╗ ████████╗███████╗
#  ╚══██╔══╝██║   ██║╚██╗██╔╝████╗ ████║██╔══██╗╚══██╔══╝██╔════╝
#     ██║   ██║   ██║ ╚███╔╝ ██╔████╔██║███████║   ██║   █████╗
#     ██║   ██║   ██║ ██╔██╗ ██║╚██╔╝██║██╔══██║   ██║   ██╔══╝
#     ██║   ╚██████╔╝██╔╝ ██╗██║ ╚═╝ ██║██║  ██║   ██║   ███████╗
#     ╚═╝    ╚═════╝ ╚═╝  ╚═╝╚═╝     ╚═╝╚═╝  ╚═╝   ╚═╝   ╚══════╝"""


def header(distro_name: str, package_count: int, *, generated: date | None = None) -> str:
    """Script banner plus strict mode, sanitized PATH and umask."""
    stamp = (generated or date.today()).isoformat()
    return f"""\
#!/bin/bash
#
{_BANNER}
#
#  Linux App Installer
#  https://github.com/abusoww/tuxmate
#
#  Distribution: {distro_name}
#  Packages: {package_count}
#  Generated: {stamp}
#
{RULE}

set -euo pipefail

export PATH="{SAFE_PATH}"
export LC_ALL=C
umask 077

"""


def log_slug(distro_name: str) -> str:
    """Lower-case, hyphenated distro name used in the log file path."""
    return re.sub(r"\s+", "-", distro_name.strip().lower())


# ── Runtime library ─────────────────────────────────────────────

_STATUS_HELPERS = r"""
# Save original stdout to FD 3
exec 3>&1
# Everything else goes to the log to keep the terminal clean
exec > "$LOG" 2>&1

if [ -t 3 ]; then
    RED='\033[0;31m' GREEN='\033[0;32m' YELLOW='\033[1;33m'
    BLUE='\033[0;34m' CYAN='\033[0;36m' BOLD='\033[1m' DIM='\033[2m' NC='\033[0m'
else
    RED='' GREEN='' YELLOW='' BLUE='' CYAN='' BOLD='' DIM='' NC=''
fi

# Coloured line on FD 3, plain mirror in the log
info()    { echo -e "${BLUE}::${NC} $1" >&3; echo ":: $1"; }
success() {
    if [ -n "${2:-}" ]; then
        echo -e "${GREEN}[+]${NC} $1 ${DIM}($2)${NC}" >&3
        echo "[+] $1 ($2)"
    else
        echo -e "${GREEN}[+]${NC} $1" >&3
        echo "[+] $1"
    fi
}
warn()    { echo -e "${YELLOW}[!]${NC} $1" >&3; echo "[!] $1"; }
error()   { echo -e "${RED}[x]${NC} $1" >&3; echo "[x] $1" >&2; }
skip()    {
    local reason="${2:-already installed}"
    echo -e "${DIM}[-]${NC} $1 ${DIM}($reason)${NC}" >&3
    echo "[-] $1 ($reason)"
}
"""

_PROGRESS = r"""
animate_progress() {
    local name=$1 pid=$2
    local start=$(date +%s)
    local spinstr='|/-\'
    local spin_idx=0

    while kill -0 $pid 2>/dev/null; do
        local elapsed=$(($(date +%s) - start))
        local percent=$((CURRENT * 100 / TOTAL))
        local filled=$((percent / 5))
        local empty=$((20 - filled))

        local hash="####################"
        local dash="--------------------"
        local bar="${CYAN}${hash:0:filled}${NC}${dash:0:empty}"
        local spin_char="${spinstr:$spin_idx:1}"
        spin_idx=$(( (spin_idx + 1) % 4 ))

        printf "\r\033[K[%b] %3d%% (%d/%d) ${BOLD}%s${NC} [%c] %ds" "$bar" "$percent" "$CURRENT" "$TOTAL" "$name" "$spin_char" "$elapsed" >&3

        sleep __POLL__
    done
    wait $pid
    return $?
}
"""

_RETRY = r"""
with_retry() {
    local attempt=1 max=__ATTEMPTS__ delay=__DELAY__
    while [ $attempt -le $max ]; do
        echo "=== Executing (Attempt $attempt/$max): $* ==="
        if "$@"; then return 0; fi
        echo "=== Command failed ==="
        if [ $attempt -lt $max ]; then
            echo "Retrying in ${delay}s..."
            sleep $delay
            delay=$((delay * 2))
        fi
        attempt=$((attempt + 1))
    done
    return 1
}
"""

_LOCK_WAIT = r"""
wait_for_lock() {
    local file=$1 timeout=__TIMEOUT__ elapsed=0
    while [ -f "$file" ] || fuser "$file" >/dev/null 2>&1; do
        if [ $elapsed -ge $timeout ]; then
            error "Lock timeout after ${timeout}s: $file"
            exit 1
        fi
        warn "Waiting for lock: $file"
        sleep __LOCK_POLL__
        elapsed=$((elapsed + __LOCK_POLL__))
    done
}
"""

_SUMMARY = r"""
print_summary() {
    local end_time=$(date +%s)
    local duration=$((end_time - START_TIME))
    local mins=$((duration / 60))
    local secs=$((duration % 60))

    echo >&3
    echo "---------------------------------------------------------------------------" >&3
    local installed=${#SUCCEEDED[@]}
    local skipped_count=${#SKIPPED[@]}
    local failed_count=${#FAILED[@]}

    if [ $failed_count -eq 0 ]; then
        if [ $skipped_count -gt 0 ]; then
            echo -e "${GREEN}[+]${NC} Done: $installed installed, $skipped_count skipped ${DIM}(${mins}m ${secs}s)${NC}" >&3
        else
            echo -e "${GREEN}[+]${NC} All $TOTAL packages installed ${DIM}(${mins}m ${secs}s)${NC}" >&3
        fi
    else
        echo -e "${YELLOW}[!]${NC} $installed installed, $skipped_count skipped, $failed_count failed ${DIM}(${mins}m ${secs}s)${NC}" >&3
        echo >&3
        echo -e "${RED}Failed:${NC}" >&3
        for pkg in "${FAILED[@]}"; do
            echo "  - $pkg" >&3
        done
    fi
    echo "---------------------------------------------------------------------------" >&3
    echo -e "${DIM}Log: $LOG${NC}" >&3
}
"""


def _section(title: str) -> str:
    return f"{RULE}\n#  {title}\n{RULE}\n"


def runtime_utils(distro_name: str, total_count: int) -> str:
    """Helper library shared by every package-manager body.

    Args:
        distro_name: Used to name the log file.
        total_count: Number of packages the script will process.
    """
    log_line = f'LOG="/tmp/tuxmate-{log_slug(distro_name)}-$(date +%Y%m%d-%H%M%S).log"\n'

    # Counters must exist before the INT trap is armed (set -u)
    state = (
        f"TOTAL={total_count}\n"
        "CURRENT=0\n"
        "FAILED=()\n"
        "SUCCEEDED=()\n"
        "SKIPPED=()\n"
        "START_TIME=$(date +%s)\n"
    )
    trap = (
        f"trap 'printf \"\\n\" >&3; warn \"Cancelled by user\"; "
        f"print_summary; exit {EXIT_CANCELLED}' INT\n"
    )

    progress = _PROGRESS.replace("__POLL__", str(PROGRESS_POLL_SECONDS))
    retry = (
        _RETRY.replace("__ATTEMPTS__", str(MAX_ATTEMPTS))
        .replace("__DELAY__", str(RETRY_DELAY_SECONDS))
    )
    lock_wait = (
        _LOCK_WAIT.replace("__TIMEOUT__", str(LOCK_TIMEOUT_SECONDS))
        .replace("__LOCK_POLL__", str(LOCK_POLL_SECONDS))
    )

    return (
        _section("Logging & Colors")
        + "\n"
        + log_line
        + _STATUS_HELPERS
        + "\n"
        + state
        + "\n"
        + trap
        + progress
        + retry
        + lock_wait
        + _SUMMARY
        + "\n"
    )
