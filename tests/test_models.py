"""
Tests for domain models — catalog entries, profiles, generated scripts.
"""

import pytest
from pydantic import ValidationError

from tuxmate.core.models import AppData, Distro, GeneratedScript, IconDef, Profile
from tuxmate.core.models.template import mime_type_for, suggested_filename


class TestDistro:
    def test_camel_case_aliases(self):
        d = Distro.model_validate(
            {"id": "snap", "name": "Snap", "iconUrl": "x.svg", "installPrefix": "sudo snap install"}
        )
        assert d.install_prefix == "sudo snap install"
        assert d.icon_url == "x.svg"

    def test_unknown_id_rejected(self):
        with pytest.raises(ValidationError):
            Distro(id="gentoo", name="Gentoo", install_prefix="emerge")

    def test_frozen(self):
        d = Distro(id="nix", name="Nix", install_prefix="nix-env -iA nixpkgs.")
        with pytest.raises(ValidationError):
            d.name = "Other"


class TestAppData:
    def _app(self, **targets):
        return AppData(id="demo", name="Demo", category="Office", targets=targets)

    def test_package_for(self):
        app = self._app(ubuntu="demo", fedora=None)
        assert app.package_for("ubuntu") == "demo"
        assert app.package_for("fedora") is None
        assert app.package_for("arch") is None

    def test_empty_string_means_unavailable(self):
        assert not self._app(arch="").is_available("arch")

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            AppData(id="x", name="X", category="Toys")

    def test_unavailable_reason_alias(self):
        app = AppData.model_validate(
            {"id": "x", "name": "X", "category": "Gaming", "unavailableReason": "Use Steam"}
        )
        assert app.unavailable_reason == "Use Steam"


class TestIconDef:
    def test_iconify_href(self):
        icon = IconDef(set="logos", name="firefox")
        assert icon.href == "https://api.iconify.design/logos/firefox.svg"

    def test_iconify_colour_is_quoted(self):
        icon = IconDef(set="simple-icons", name="zed", color="#084CCF")
        assert icon.href.endswith("zed.svg?color=%23084CCF")

    def test_url_icon(self):
        assert IconDef(type="url", url="https://example.com/a.png").href == "https://example.com/a.png"


class TestProfile:
    def test_defaults(self):
        p = Profile(distro="ubuntu")
        assert p.apps == []
        assert p.helper == "yay"

    def test_apps_deduplicated_and_stripped(self):
        p = Profile(distro="arch", apps=[" firefox", "vlc", "firefox", ""])
        assert p.apps == ["firefox", "vlc"]


class TestGeneratedScript:
    def test_defaults(self):
        s = GeneratedScript(filename="tuxmate-arch.sh", content="#!/bin/bash")
        assert s.mime_type == "text/x-shellscript"

    @pytest.mark.parametrize(
        ("distro_id", "filename", "mime"),
        [
            ("arch", "tuxmate-arch.sh", "text/x-shellscript"),
            ("homebrew", "tuxmate-homebrew.sh", "text/x-shellscript"),
            ("nix", "configuration.nix", "text/plain"),
        ],
    )
    def test_download_metadata(self, distro_id, filename, mime):
        assert suggested_filename(distro_id) == filename
        assert mime_type_for(distro_id) == mime
