"""
Tests for package resolution, escaping, and AUR / unfree classification.
"""

import pytest

from tuxmate.core.models.catalog import DISTRO_IDS
from tuxmate.core.services.packages import (
    aur_package_info,
    escape_shell_string,
    is_app_available,
    is_aur_package,
    is_unfree_package,
    resolve_selected_packages,
    unfree_package_info,
    unknown_app_ids,
)

# ── Resolution ───────────────────────────────────────────────────


class TestResolveSelectedPackages:
    def test_resolves_in_selection_order(self, sample_registry):
        result = resolve_selected_packages(["gadget", "widget"], "ubuntu", registry=sample_registry)
        assert [p.pkg for p in result] == ["gadget", "widget"]
        assert result[0].app.name == "Gadget Toolkit"

    def test_duplicates_resolve_once(self, sample_registry):
        result = resolve_selected_packages(
            ["widget", "widget", "gadget"], "arch", registry=sample_registry
        )
        assert [p.pkg for p in result] == ["widget", "gadget-bin"]

    def test_unknown_ids_dropped(self, sample_registry):
        result = resolve_selected_packages(["nope", "widget"], "fedora", registry=sample_registry)
        assert [p.app.id for p in result] == ["widget"]

    def test_null_target_dropped(self, sample_registry):
        assert resolve_selected_packages(["curated"], "fedora", registry=sample_registry) == []

    @pytest.mark.parametrize("distro_id", DISTRO_IDS)
    def test_never_borrows_another_distros_package(self, sample_registry, distro_id):
        all_ids = [a.id for a in sample_registry.apps]
        for p in resolve_selected_packages(all_ids, distro_id, registry=sample_registry):
            assert p.app.targets.get(distro_id) == p.pkg

    def test_ubuntu_only_app(self, sample_registry):
        assert resolve_selected_packages(["foo-app"], "fedora", registry=sample_registry) == []
        on_ubuntu = resolve_selected_packages(["foo-app"], "ubuntu", registry=sample_registry)
        assert [p.pkg for p in on_ubuntu] == ["foo"]

    def test_empty_selection(self, sample_registry):
        assert resolve_selected_packages([], "arch", registry=sample_registry) == []


class TestAvailability:
    def test_unknown_app_ids(self, sample_registry):
        assert unknown_app_ids(["widget", "ghost", "ghost", "x"], registry=sample_registry) == [
            "ghost",
            "x",
        ]

    def test_is_app_available(self, sample_registry):
        assert is_app_available("foo-app", "ubuntu", registry=sample_registry)
        assert not is_app_available("foo-app", "debian", registry=sample_registry)
        assert not is_app_available("ghost", "ubuntu", registry=sample_registry)


# ── Escaping ─────────────────────────────────────────────────────


class TestEscapeShellString:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain name", "plain name"),
            ('say "hi"', 'say \\"hi\\"'),
            ("$HOME", "\\$HOME"),
            ("`cmd`", "\\`cmd\\`"),
            ("wow!", "wow\\!"),
            ("back\\slash", "back\\\\slash"),
        ],
    )
    def test_escapes(self, raw, expected):
        assert escape_shell_string(raw) == expected

    def test_backslash_escaped_before_quote(self):
        assert escape_shell_string('\\"') == '\\\\\\"'

    @pytest.mark.parametrize("raw", ["a\\b", 'q"', "$x", "`y`", "hey!"])
    def test_not_idempotent(self, raw):
        once = escape_shell_string(raw)
        assert escape_shell_string(once) != once

    def test_idempotent_without_special_characters(self):
        assert escape_shell_string(escape_shell_string("VS Code")) == "VS Code"


# ── AUR classification ───────────────────────────────────────────


class TestIsAurPackage:
    def test_bin_suffix(self):
        assert is_aur_package("yay-bin")

    @pytest.mark.parametrize("name", ["foo-git", "bar-appimage", "brave-bin"])
    def test_other_suffixes(self, name):
        assert is_aur_package(name)

    def test_official_package(self):
        assert not is_aur_package("firefox")

    def test_curated_without_suffix(self):
        assert is_aur_package("google-chrome")
        assert is_aur_package("spotify")

    def test_curated_list_comes_from_registry(self, sample_registry):
        assert is_aur_package("curated-player", registry=sample_registry)
        assert not is_aur_package("google-chrome", registry=sample_registry)

    def test_suffix_must_be_at_end(self):
        assert not is_aur_package("bin-utils")


class TestIsUnfreePackage:
    def test_exact_match(self):
        assert is_unfree_package("spotify")

    def test_case_and_whitespace(self):
        assert is_unfree_package("  Discord ")

    def test_nested_attribute(self):
        assert is_unfree_package("jetbrains.idea-ultimate")

    def test_free_package(self):
        assert not is_unfree_package("firefox")


# ── Caller display helpers ───────────────────────────────────────


class TestFlaggedPackages:
    def test_aur_info_on_arch(self, sample_registry):
        info = aur_package_info(["widget", "gadget", "curated"], "arch", registry=sample_registry)
        assert info.packages == ["gadget-bin", "curated-player"]
        assert info.app_names == ["Gadget Toolkit", "Curated Player"]
        assert info.any

    def test_aur_info_empty_off_arch(self, sample_registry):
        info = aur_package_info(["gadget"], "ubuntu", registry=sample_registry)
        assert not info.any
        assert info.to_dict() == {"packages": [], "apps": []}

    def test_unfree_info_on_nix(self, sample_registry):
        info = unfree_package_info(["widget", "curated"], "nix", registry=sample_registry)
        assert info.packages == ["closedsource"]
        assert info.app_names == ["Curated Player"]

    def test_unfree_info_empty_off_nix(self, sample_registry):
        assert not unfree_package_info(["curated"], "arch", registry=sample_registry).any
