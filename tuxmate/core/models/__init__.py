"""
Domain models — Pydantic types for tuxmate.

All models are re-exported here for convenient access:

    from tuxmate.core.models import AppData, Distro, PackageInfo, Profile
"""

from tuxmate.core.models.catalog import (
    CATEGORIES,
    CATEGORY_ORDER,
    DISTRO_IDS,
    AppData,
    Category,
    Distro,
    DistroId,
    IconDef,
    PackageInfo,
)
from tuxmate.core.models.profile import AurHelper, Profile
from tuxmate.core.models.template import GeneratedScript

__all__ = [
    # catalog.py
    "AppData",
    "CATEGORIES",
    "CATEGORY_ORDER",
    "Category",
    "DISTRO_IDS",
    "Distro",
    "DistroId",
    "IconDef",
    "PackageInfo",
    # profile.py
    "AurHelper",
    "Profile",
    # template.py
    "GeneratedScript",
]
