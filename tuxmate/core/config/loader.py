"""
Profile loader — tuxmate.yml in and out.

A profile is a flat YAML mapping (``distro``, ``apps``, optional
``helper`` and ``name``) validated by the pydantic ``Profile`` model.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tuxmate.core.models.profile import Profile

logger = logging.getLogger(__name__)

PROFILE_CONFIG_FILE = "tuxmate.yml"


class ProfileError(Exception):
    """Raised when a selection profile is missing, unreadable or invalid."""


def find_profile_file(start_dir: Path | None = None) -> Path | None:
    """Nearest tuxmate.yml in ``start_dir`` (default: cwd) or any parent."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / PROFILE_CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_profile(path: Path | None = None) -> Profile:
    """Read and validate a profile, searching upward when ``path`` is None.

    Raises:
        ProfileError: If no file is found or its content is not a valid profile.
    """
    path = path or find_profile_file()
    if path is None:
        raise ProfileError(
            f"No {PROFILE_CONFIG_FILE} found. Pass --distro and --app, or specify --profile."
        )
    if not path.is_file():
        raise ProfileError(f"Profile not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ProfileError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        profile = Profile.model_validate(data)
    except ValidationError as e:
        raise ProfileError(f"Invalid profile {path}: {e}") from e

    logger.debug("Loaded profile %s: %s, %d apps", path, profile.distro, len(profile.apps))
    return profile


def save_profile(profile: Profile, path: Path) -> Path:
    """Write a profile as YAML, returning the path written."""
    payload = profile.model_dump(exclude=None if profile.name else {"name"})
    try:
        path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    except OSError as e:
        raise ProfileError(f"Cannot write {path}: {e}") from e
    logger.info("Saved profile to %s", path)
    return path
