"""
Central data registry for the static app/distro catalog.

Loads catalogs from ``tuxmate/core/data/`` once at first access and
caches them for the process lifetime.  Package-name resolution, AUR
classification and the CLI listings all read from this single source
of truth.

Usage::

    from tuxmate.core.data import get_registry

    registry = get_registry()
    registry.distros        # list[Distro]
    registry.apps           # list[AppData]
    registry.aur_packages   # frozenset[str]
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path

from pydantic import ValidationError

from tuxmate.core.models.catalog import CATEGORY_ORDER, AppData, Distro

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent

# One file per category, concatenated in this order
_APP_FILES = (
    "web-browsers.json",
    "communication.json",
    "dev-languages.json",
    "dev-editors.json",
    "dev-tools.json",
    "terminal.json",
    "cli-tools.json",
    "media.json",
    "creative.json",
    "gaming.json",
    "office.json",
    "vpn-network.json",
    "security.json",
    "file-sharing.json",
    "system.json",
)


class CatalogError(Exception):
    """Raised when a catalog file is missing or malformed."""


def _load_json(relative_path: str, data_dir: Path = _DATA_DIR) -> list | dict:
    """Load a JSON file relative to the data directory."""
    path = data_dir / relative_path
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e


class DataRegistry:
    """Registry for the distro table, app table and classification lists.

    Each property lazily loads its JSON file on first access and caches
    the result for the lifetime of the instance.  Pass ``data_dir`` to
    point the registry at an alternate catalog (tests do this).
    """

    def __init__(self, data_dir: Path | None = None):
        self._data_dir = data_dir or _DATA_DIR

    # ── Distros ──────────────────────────────────────────────────

    @cached_property
    def distros(self) -> list[Distro]:
        """The nine supported package ecosystems, in display order."""
        raw = _load_json("catalogs/distros.json", self._data_dir)
        try:
            data = [Distro.model_validate(d) for d in raw]
        except ValidationError as e:
            raise CatalogError(f"Invalid distro catalog: {e}") from e
        logger.debug("Loaded %d distros", len(data))
        return data

    @cached_property
    def _distro_index(self) -> dict[str, Distro]:
        return {d.id: d for d in self.distros}

    def get_distro(self, distro_id: str) -> Distro | None:
        return self._distro_index.get(distro_id)

    # ── Apps ─────────────────────────────────────────────────────

    @cached_property
    def apps(self) -> list[AppData]:
        """Every catalog app, category files concatenated in order."""
        apps: list[AppData] = []
        for filename in _APP_FILES:
            raw = _load_json(f"catalogs/apps/{filename}", self._data_dir)
            try:
                apps.extend(AppData.model_validate(a) for a in raw)
            except ValidationError as e:
                raise CatalogError(f"Invalid app entry in {filename}: {e}") from e
        logger.debug("Loaded %d apps from %d category files", len(apps), len(_APP_FILES))
        return apps

    @cached_property
    def _app_index(self) -> dict[str, AppData]:
        index: dict[str, AppData] = {}
        for app in self.apps:
            if app.id in index:
                logger.warning("Duplicate app id in catalog: %s (keeping first)", app.id)
                continue
            index[app.id] = app
        return index

    def get_app(self, app_id: str) -> AppData | None:
        return self._app_index.get(app_id)

    def apps_by_category(self, category: str) -> list[AppData]:
        return [a for a in self.apps if a.category == category]

    @property
    def categories(self) -> list[str]:
        """Categories in display order."""
        return list(CATEGORY_ORDER)

    # ── Classification lists ─────────────────────────────────────

    @cached_property
    def aur_packages(self) -> frozenset[str]:
        """Curated Arch package names known to live in the AUR."""
        data = _load_json("patterns/aur_packages.json", self._data_dir)
        result = frozenset(data.get("packages", []))
        logger.debug("Loaded %d known AUR packages", len(result))
        return result

    @cached_property
    def nix_unfree_packages(self) -> frozenset[str]:
        """Nix attribute names that need ``allowUnfree``."""
        data = _load_json("patterns/nix_unfree.json", self._data_dir)
        result = frozenset(data)
        logger.debug("Loaded %d unfree Nix packages", len(result))
        return result


# ── Module-level singleton ───────────────────────────────────────

_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Return the process-level DataRegistry singleton.

    Creates the instance on first call; subsequent calls return the
    same object.
    """
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry
