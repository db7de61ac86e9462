from __future__ import annotations

from dataclasses import dataclass

from .cli_shared import KeyNotFound

VALID_KEY = "fizz"
VALID_VALUE = "buzz"


@dataclass(frozen=True)
class LookupRequest:
    key: str


def lookup(request: LookupRequest) -> dict[str, str]:
    """Return the canned payload for ``fizz``; any other key is an error."""
    if request.key == VALID_KEY:
        return {VALID_KEY: VALID_VALUE}
    raise KeyNotFound(request.key)
