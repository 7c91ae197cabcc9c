"""Adapters — one per package manager.

Public re-exports for convenient access.
"""

from tuxmate.adapters.base import PackageManagerAdapter, ScriptAdapter
from tuxmate.adapters.registry import AdapterRegistry, build_registry

__all__ = [
    "AdapterRegistry",
    "PackageManagerAdapter",
    "ScriptAdapter",
    "build_registry",
]
