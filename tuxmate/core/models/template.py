"""
Generated script model — returned by the script builders.
"""

from __future__ import annotations

from pydantic import BaseModel

SHELL_MIME_TYPE = "text/x-shellscript"
NIX_MIME_TYPE = "text/plain"
NIX_FILENAME = "configuration.nix"


class GeneratedScript(BaseModel):
    """An install script (or Nix fragment) ready to be copied or saved.

    Attributes:
        filename:  Suggested download name.
        content:   Full script text.
        mime_type: ``text/x-shellscript`` or ``text/plain`` for Nix.
        reason:    Why this script was generated.
    """

    filename: str
    content: str
    mime_type: str = SHELL_MIME_TYPE
    reason: str = ""


def suggested_filename(distro_id: str) -> str:
    """Download name for a distro's generated artifact."""
    if distro_id == "nix":
        return NIX_FILENAME
    return f"tuxmate-{distro_id}.sh"


def mime_type_for(distro_id: str) -> str:
    return NIX_MIME_TYPE if distro_id == "nix" else SHELL_MIME_TYPE
