"""Mock key-value lookup CLI for test scenarios.

Banners and errors go to stderr; lookup results and version metadata go to
stdout as JSON so scripted callers can parse them directly.
"""

from .build import VERSION

__all__ = ["__version__"]

__version__ = VERSION
