"""textscan – predicate-driven text scanning and numeric literal parsing."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "parsers",
    "scanning",
    "utils",
]
