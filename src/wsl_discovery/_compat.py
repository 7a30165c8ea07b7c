"""Platform compatibility utilities for WSL environment discovery."""

from __future__ import annotations

import ntpath
import posixpath
import sys
from typing import Final

IS_WIN: Final[bool] = sys.platform == "win32"


def normalize_path(path: str, *, windows: bool = IS_WIN) -> str:
    """
    Normalize a workspace path the same way the producer keys ``workspaceMapping``.

    Redundant separators and ``.``/``..`` segments are collapsed, a trailing separator is kept, and on Windows the
    result is lowercased since paths there are case-insensitive. A leading ``//`` on POSIX collapses to ``/`` and a
    bare UNC share root ends with a separator, like the producer's normalization.
    """
    flavour = ntpath if windows else posixpath
    normalized = flavour.normpath(path)
    seps = ("\\", "/") if windows else ("/",)
    if path.endswith(seps) and not normalized.endswith(seps):
        normalized += flavour.sep
    if not windows:
        return normalized[1:] if normalized.startswith("//") else normalized
    drive, rest = ntpath.splitdrive(normalized)
    if drive.startswith("\\\\") and not rest:  # UNC share root
        normalized += "\\"
    return normalized.lower()


__all__ = [
    "IS_WIN",
    "normalize_path",
]
