"""
Tests for the catalog data registry.
"""

import json
import logging

import pytest

from tuxmate.core.data import CatalogError, DataRegistry, get_registry
from tuxmate.core.models.catalog import CATEGORY_ORDER, DISTRO_IDS


class TestShippedCatalog:
    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_distros(self):
        registry = get_registry()
        assert [d.id for d in registry.distros] == list(DISTRO_IDS)
        assert registry.get_distro("arch").install_prefix == "sudo pacman -S --needed --noconfirm"

    def test_app_ids_unique(self):
        ids = [a.id for a in get_registry().apps]
        assert len(ids) == len(set(ids))

    def test_every_category_populated(self):
        registry = get_registry()
        for category in registry.categories:
            assert registry.apps_by_category(category), category

    def test_unavailable_reason_only_on_gaps(self):
        for app in get_registry().apps:
            if app.unavailable_reason:
                assert not all(app.is_available(d) for d in DISTRO_IDS), app.id

    def test_classification_lists(self):
        registry = get_registry()
        assert "google-chrome" in registry.aur_packages
        assert "spotify" in registry.nix_unfree_packages


class TestDataRegistry:
    def test_lookup(self, sample_registry):
        assert sample_registry.get_app("widget").name == 'Widget "Pro" $HOME'
        assert sample_registry.get_app("ghost") is None
        assert sample_registry.get_distro("gentoo") is None

    def test_categories_in_display_order(self, sample_registry):
        assert sample_registry.categories == list(CATEGORY_ORDER)

    def test_apps_by_category(self, sample_registry):
        assert [a.id for a in sample_registry.apps_by_category("Media")] == ["curated"]
        assert sample_registry.apps_by_category("Gaming") == []

    def test_duplicate_ids_keep_first(self, make_catalog, sample_apps, caplog):
        dup = dict(sample_apps["system.json"][0], name="Second Widget")
        sample_apps["system.json"].append(dup)
        caplog.set_level(logging.WARNING, logger="tuxmate.core.data")
        registry = DataRegistry(make_catalog(sample_apps))
        assert registry.get_app("widget").name == 'Widget "Pro" $HOME'
        assert "Duplicate app id" in caplog.text

    def test_missing_file(self, make_catalog, sample_apps):
        root = make_catalog(sample_apps)
        (root / "catalogs" / "distros.json").unlink()
        with pytest.raises(CatalogError, match="not found"):
            DataRegistry(root).distros

    def test_malformed_json(self, make_catalog, sample_apps):
        root = make_catalog(sample_apps)
        (root / "catalogs" / "apps" / "office.json").write_text("{nope")
        with pytest.raises(CatalogError, match="Cannot read"):
            DataRegistry(root).apps

    def test_invalid_entry(self, make_catalog, sample_apps):
        root = make_catalog(sample_apps)
        bad = [{"id": "x", "name": "X", "category": "Not A Category"}]
        (root / "catalogs" / "apps" / "office.json").write_text(json.dumps(bad))
        with pytest.raises(CatalogError, match="office.json"):
            DataRegistry(root).apps
