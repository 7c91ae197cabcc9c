"""
Profile check use case — validate tuxmate.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tuxmate.core.config.loader import ProfileError, find_profile_file, load_profile
from tuxmate.core.data import DataRegistry, get_registry
from tuxmate.core.models.profile import Profile


@dataclass
class ProfileCheckResult:
    """Result of profile validation."""

    valid: bool = False
    profile: Profile | None = None
    profile_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "profile_path": str(self.profile_path) if self.profile_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "distro": self.profile.distro if self.profile else None,
            "app_count": len(self.profile.apps) if self.profile else 0,
        }


def check_profile(
    profile_path: Path | None = None,
    *,
    registry: DataRegistry | None = None,
) -> ProfileCheckResult:
    """Validate a selection profile against the catalog.

    Schema problems are errors.  Apps that do not exist, or exist but
    have no package for the profile's distro, are warnings: generation
    skips them silently.
    """
    result = ProfileCheckResult()

    if profile_path is None:
        profile_path = find_profile_file()
    if profile_path is None:
        result.errors.append("No tuxmate.yml found.")
        return result
    result.profile_path = profile_path

    try:
        profile = load_profile(profile_path)
    except ProfileError as e:
        result.errors.append(str(e))
        return result
    result.profile = profile

    if not profile.apps:
        result.warnings.append("No apps listed. The generated script will do nothing.")

    registry = registry or get_registry()
    for app_id in profile.apps:
        app = registry.get_app(app_id)
        if app is None:
            result.warnings.append(f"Unknown app '{app_id}'")
        elif not app.is_available(profile.distro):
            reason = f": {app.unavailable_reason}" if app.unavailable_reason else ""
            result.warnings.append(f"'{app_id}' is not packaged for {profile.distro}{reason}")

    result.valid = not result.errors
    return result
