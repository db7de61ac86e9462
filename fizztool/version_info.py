"""Derives displayable version metadata from the stamped build constants."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from .build import BuildInfo, command_name
from .cli_shared import COPYRIGHT

RELEASES_BASE_URL = "https://github.com/michaeltlombardi/fizztool"
SHORT_SHA_LENGTH = 7

_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(-[\w.]+)?$", re.ASCII)
_FRACTION_RE = re.compile(r"\.\d+(?=([Zz]|[+-]\d{2}:\d{2})$)")
_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class VersionInfo:
    name: str
    version: str
    commit: str
    date: str
    release_notes_url: str

    def to_json(self) -> dict[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "commit_sha": self.commit,
            "build_date": self.date,
            "release_notes_url": self.release_notes_url,
        }

    def one_line(self) -> str:
        return f"{self.name} - v{self.version}"


def clean_version(raw: str) -> str:
    value = raw or ""
    if value.startswith("v"):
        value = value[1:]
    return value.strip()


def format_build_date(raw: str) -> str:
    value = (raw or "").strip()
    if not _RFC3339_RE.match(value):
        return ""
    # fromisoformat on 3.10 takes only 3- or 6-digit fractions and no Z suffix.
    value = _FRACTION_RE.sub("", value)
    if value[-1] in "Zz":
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value.replace("t", "T"))
    except ValueError:
        return ""
    return parsed.strftime("%Y-%m-%d")


def short_commit(raw: str) -> str:
    value = raw or ""
    if len(value) > SHORT_SHA_LENGTH:
        value = value[:SHORT_SHA_LENGTH].strip()
    return value


def release_notes_url(version: str, *, base_url: str = RELEASES_BASE_URL) -> str:
    if not _SEMVER_RE.match(version):
        return f"{base_url}/releases/latest"
    return f"{base_url}/releases/tag/v{version}"


def get_version_info(build: BuildInfo, *, suffix: str = "") -> VersionInfo:
    version = clean_version(build.version)
    return VersionInfo(
        name=command_name(suffix),
        version=version,
        commit=short_commit(build.commit),
        date=format_build_date(build.date),
        release_notes_url=release_notes_url(version),
    )


def formatted_notice(version: str, *, suffix: str = "") -> str:
    """Banner like ``fizztool v1.0.0 (c) 2023 Tailspin Toys, Ltd.``."""
    return f"{command_name(suffix)} v{clean_version(version)} {COPYRIGHT}"
