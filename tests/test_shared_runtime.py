"""
Tests for the shared bash runtime — header and helper library.
"""

from datetime import date

from tuxmate.core.services.generators.shared import (
    LOCK_TIMEOUT_SECONDS,
    SAFE_PATH,
    header,
    log_slug,
    runtime_utils,
)


class TestHeader:
    def test_shebang_first(self):
        assert header("Ubuntu", 3).startswith("#!/bin/bash\n")

    def test_metadata(self):
        text = header("Arch Linux", 7, generated=date(2024, 5, 1))
        assert "#  Distribution: Arch Linux" in text
        assert "#  Packages: 7" in text
        assert "#  Generated: 2024-05-01" in text

    def test_strict_mode_and_environment(self):
        text = header("Fedora", 1)
        assert "set -euo pipefail" in text
        assert f'export PATH="{SAFE_PATH}"' in text
        assert "export LC_ALL=C" in text
        assert "umask 077" in text

    def test_strict_mode_after_banner(self):
        text = header("Fedora", 1)
        assert text.index("Distribution:") < text.index("set -euo pipefail")


class TestLogSlug:
    def test_lowercase_hyphenated(self):
        assert log_slug("Arch Linux") == "arch-linux"

    def test_collapses_whitespace(self):
        assert log_slug("  Open   SUSE ") == "open-suse"


class TestRuntimeUtils:
    def test_log_path(self):
        text = runtime_utils("ubuntu", 2)
        assert 'LOG="/tmp/tuxmate-ubuntu-$(date +%Y%m%d-%H%M%S).log"' in text

    def test_dual_channel_output(self):
        text = runtime_utils("ubuntu", 2)
        assert "exec 3>&1" in text
        assert 'exec > "$LOG" 2>&1' in text

    def test_status_helpers_defined(self):
        text = runtime_utils("ubuntu", 2)
        for fn in ("info()", "success()", "warn()", "error()", "skip()"):
            assert fn in text

    def test_counters(self):
        text = runtime_utils("arch", 5)
        assert "TOTAL=5\n" in text
        assert "CURRENT=0\n" in text
        for arr in ("FAILED=()", "SUCCEEDED=()", "SKIPPED=()"):
            assert arr in text

    def test_interrupt_trap_exits_130(self):
        text = runtime_utils("arch", 1)
        trap_line = next(line for line in text.splitlines() if line.startswith("trap "))
        assert "print_summary" in trap_line
        assert "exit 130" in trap_line
        assert trap_line.endswith(" INT")

    def test_counters_defined_before_trap(self):
        text = runtime_utils("arch", 1)
        assert text.index("FAILED=()") < text.index("trap ")

    def test_retry_parameters(self):
        text = runtime_utils("fedora", 1)
        assert "local attempt=1 max=3 delay=5" in text
        assert "delay=$((delay * 2))" in text

    def test_lock_wait(self):
        text = runtime_utils("fedora", 1)
        assert f"timeout={LOCK_TIMEOUT_SECONDS}" in text
        assert "sleep 2" in text
        assert "exit 1" in text

    def test_functions_present(self):
        text = runtime_utils("snap", 1)
        for fn in ("animate_progress()", "with_retry()", "wait_for_lock()", "print_summary()"):
            assert fn in text

    def test_no_unreplaced_placeholders(self):
        assert "__" not in runtime_utils("snap", 1)
