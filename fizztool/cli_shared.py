from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape

from .build import BuildInfo
from .config import Settings


class FizzToolError(Exception):
    pass


class OpError(FizzToolError):
    pass


class KeyNotFound(OpError):
    """Raised when a lookup key is not in the table."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key not found: {key}")
        self.key = key


COPYRIGHT = "(c) 2023 Tailspin Toys, Ltd."


@dataclass(frozen=True)
class GlobalOpts:
    settings: Settings = field(default_factory=Settings)
    build: BuildInfo = field(default_factory=BuildInfo.current)
    platform_suffix: str = ""
    quiet: bool = False


_OUTPUT_CONSOLE = Console()
_ERROR_CONSOLE = Console(stderr=True, emoji=False)


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", soft_wrap=True)


def _print_json(obj: Any, *, color: bool | None = None) -> None:
    if color is None:
        color = _OUTPUT_CONSOLE.is_terminal
    if color:
        _OUTPUT_CONSOLE.print_json(data=obj, indent=2)
    else:
        sys.stdout.write(json.dumps(obj, indent=2) + "\n")
