"""Build-time metadata.

Release builds stamp ``VERSION``, ``COMMIT`` and ``DATE`` in this module; local
checkouts keep the defaults below.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

VERSION = "dev"
COMMIT = "none"
DATE = "unknown"

COMMAND_NAME = "fizztool"


@dataclass(frozen=True)
class BuildInfo:
    version: str = VERSION
    commit: str = COMMIT
    date: str = DATE

    @classmethod
    def current(cls) -> BuildInfo:
        return cls(version=VERSION, commit=COMMIT, date=DATE)


def platform_suffix(platform: str | None = None) -> str:
    """Executable suffix for the host platform (``.exe`` on Windows)."""
    plat = sys.platform if platform is None else platform
    return ".exe" if plat == "win32" else ""


def command_name(suffix: str = "") -> str:
    return f"{COMMAND_NAME}{suffix}"
