"""
Shared test fixtures and configuration.
"""

import copy
import itertools
import json
import shutil
from pathlib import Path

import pytest

from tuxmate.core.data import _APP_FILES, DataRegistry
from tuxmate.core.models.catalog import PackageInfo

_REAL_DATA = Path(__file__).parent.parent / "tuxmate" / "core" / "data"

# Small catalog with names that never collide with script boilerplate
SAMPLE_APPS = {
    "system.json": [
        {
            "id": "widget",
            "name": 'Widget "Pro" $HOME',
            "category": "System",
            "targets": {
                "ubuntu": "widget",
                "debian": "widget",
                "arch": "widget",
                "fedora": "widget",
                "opensuse": "widget",
                "nix": "widget",
                "flatpak": "org.example.Widget",
                "snap": "widget",
                "homebrew": "widget",
            },
        },
        {
            "id": "gadget",
            "name": "Gadget Toolkit",
            "category": "System",
            "targets": {
                "ubuntu": "gadget",
                "debian": "gadget",
                "arch": "gadget-bin",
                "fedora": "gadget",
                "opensuse": "gadget",
                "nix": "gadget",
                "flatpak": "org.example.Gadget",
                "snap": "gadget --classic",
                "homebrew": "--cask gadget",
            },
        },
        {
            "id": "foo-app",
            "name": "Foo Application",
            "category": "System",
            "targets": {"ubuntu": "foo"},
            "unavailableReason": "Only packaged for Ubuntu",
        },
    ],
    "media.json": [
        {
            "id": "curated",
            "name": "Curated Player",
            "category": "Media",
            "targets": {"arch": "curated-player", "nix": "closedsource", "fedora": None},
        },
    ],
}


def write_catalog(root: Path, apps: dict[str, list]) -> Path:
    """Lay out a catalog directory DataRegistry can read."""
    (root / "catalogs" / "apps").mkdir(parents=True)
    (root / "patterns").mkdir()
    shutil.copy(_REAL_DATA / "catalogs" / "distros.json", root / "catalogs" / "distros.json")
    for filename in _APP_FILES:
        (root / "catalogs" / "apps" / filename).write_text(json.dumps(apps.get(filename, [])))
    (root / "patterns" / "aur_packages.json").write_text(
        json.dumps({"packages": ["curated-player", "yay"]})
    )
    (root / "patterns" / "nix_unfree.json").write_text(json.dumps(["closedsource", "jetbrains"]))
    return root


@pytest.fixture
def sample_apps() -> dict[str, list]:
    """A fresh copy of the sample catalog entries, safe to mutate."""
    return copy.deepcopy(SAMPLE_APPS)


@pytest.fixture
def make_catalog(tmp_path: Path):
    """Write a catalog directory from app entries and return its path."""
    counter = itertools.count()

    def _make(apps: dict[str, list]) -> Path:
        return write_catalog(tmp_path / f"data-{next(counter)}", apps)

    return _make


@pytest.fixture
def sample_registry(make_catalog) -> DataRegistry:
    """A DataRegistry over the small sample catalog."""
    return DataRegistry(make_catalog(SAMPLE_APPS))


@pytest.fixture
def packages_for(sample_registry: DataRegistry):
    """Build PackageInfo lists from sample app ids for one distro."""

    def _build(distro_id: str, *app_ids: str) -> list[PackageInfo]:
        result = []
        for app_id in app_ids:
            app = sample_registry.get_app(app_id)
            assert app is not None, app_id
            pkg = app.package_for(distro_id)
            assert pkg is not None, (app_id, distro_id)
            result.append(PackageInfo(app=app, pkg=pkg))
        return result

    return _build
