"""
Catalog models — distros, apps, and resolved packages.

The catalog is static data loaded once per process.  ``PackageInfo`` is
the only transient type: it is built fresh for each generation call and
pairs an app with the package name it resolves to on one distro.
"""

from __future__ import annotations

from typing import Literal, get_args
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

DistroId = Literal[
    "ubuntu",
    "debian",
    "arch",
    "fedora",
    "opensuse",
    "nix",
    "flatpak",
    "snap",
    "homebrew",
]

Category = Literal[
    "Web Browsers",
    "Communication",
    "Dev: Languages",
    "Dev: Editors",
    "Dev: Tools",
    "Terminal",
    "CLI Tools",
    "Media",
    "Creative",
    "Gaming",
    "Office",
    "VPN & Network",
    "Security",
    "File Sharing",
    "System",
]

DISTRO_IDS: tuple[str, ...] = get_args(DistroId)
CATEGORIES: tuple[str, ...] = get_args(Category)

# Display order used by listings (differs from declaration order)
CATEGORY_ORDER: tuple[str, ...] = (
    "Web Browsers",
    "Communication",
    "Media",
    "Gaming",
    "Office",
    "Creative",
    "System",
    "File Sharing",
    "Security",
    "VPN & Network",
    "Dev: Editors",
    "Dev: Languages",
    "Dev: Tools",
    "Terminal",
    "CLI Tools",
)

_ICONIFY_BASE = "https://api.iconify.design"


class Distro(BaseModel):
    """A target package ecosystem."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: DistroId
    name: str
    icon_url: str = Field(default="", alias="iconUrl")
    color: str = ""
    install_prefix: str = Field(alias="installPrefix")


class IconDef(BaseModel):
    """Icon descriptor — either an iconify reference or a plain URL."""

    model_config = ConfigDict(frozen=True)

    type: Literal["iconify", "url"] = "iconify"
    set: str = ""
    name: str = ""
    color: str | None = None
    url: str = ""

    @property
    def href(self) -> str:
        """Resolve the descriptor to a fetchable URL."""
        if self.type == "url":
            return self.url
        href = f"{_ICONIFY_BASE}/{self.set}/{self.name}.svg"
        if self.color:
            href += f"?color={quote(self.color, safe='')}"
        return href


class AppData(BaseModel):
    """One installable application and its per-distro package names.

    ``targets`` only lists distros the app is packaged for; a missing key
    or a null value both mean "not available there".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str = ""
    category: Category
    icon: IconDef = Field(default_factory=IconDef)
    targets: dict[DistroId, str | None] = Field(default_factory=dict)
    unavailable_reason: str | None = Field(default=None, alias="unavailableReason")

    def package_for(self, distro_id: str) -> str | None:
        """Package name on ``distro_id``, or None if not packaged there."""
        pkg = self.targets.get(distro_id)
        return pkg or None

    def is_available(self, distro_id: str) -> bool:
        return self.package_for(distro_id) is not None


class PackageInfo(BaseModel):
    """An app paired with its resolved package name for one distro."""

    model_config = ConfigDict(frozen=True)

    app: AppData
    pkg: str
