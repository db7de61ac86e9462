"""Best-effort configuration for fizztool.

Values come from, in order of precedence: command-line flags, environment
variables whose names match an option name (case-insensitively), and an
optional YAML file (``--config`` or ``$HOME/.fizztool.yaml``). A config file
that is missing or cannot be parsed is ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

CONFIG_FILE_NAME = ".fizztool.yaml"

# Option names that may be supplied through the environment.
BOUND_OPTIONS = ("key",)


@dataclass(frozen=True)
class Settings:
    key: str = ""
    config_file_used: str = ""


def _bootstrap_env() -> None:
    # Use python-dotenv package defaults: discover and load .env without
    # overriding already-exported process environment values.
    load_dotenv()


def default_config_path(home: str | Path | None = None) -> Path:
    base = Path(home) if home is not None else Path.home()
    return base / CONFIG_FILE_NAME


def read_config_file(path: str | Path) -> dict[str, Any] | None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return None
    if not isinstance(doc, dict):
        return None
    return doc


def env_lookup(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    upper = name.upper()
    if upper in env:
        return env[upper]
    for env_name, value in env.items():
        if env_name.upper() == upper:
            return value
    return None


def _config_value(doc: Mapping[str, Any], name: str) -> str | None:
    for doc_key, value in doc.items():
        if str(doc_key).lower() == name.lower() and value is not None:
            return str(value)
    return None


def load_settings(
    config_file: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    home: str | Path | None = None,
) -> Settings:
    if config_file:
        path = Path(config_file)
    else:
        try:
            path = default_config_path(home)
        except RuntimeError:
            # Path.home() raises when no home directory can be resolved.
            path = None

    doc = read_config_file(path) if path is not None else None
    values: dict[str, str] = {}
    for name in BOUND_OPTIONS:
        raw = env_lookup(name, environ)
        if raw is None and doc is not None:
            raw = _config_value(doc, name)
        if raw is not None:
            values[name] = raw

    return Settings(
        key=values.get("key", ""),
        config_file_used=str(path) if doc is not None else "",
    )


def resolve_key(flag_value: str | None, settings: Settings) -> str:
    if flag_value:
        return flag_value
    return settings.key
