"""Versions, version files and release asset names for infrastructure-as-code tools."""

__version__ = "0.1.0"

__all__ = [
    "assets",
    "display",
    "lastuse",
    "parsers",
    "proxy",
    "tofu_assets",
    "version",
]