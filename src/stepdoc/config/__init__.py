"""Configuration package.

Usage:
    from stepdoc.config import get_settings

    settings = get_settings()
    if settings.recover_markup:
        ...
"""

from .settings import StepdocSettings, get_settings, reset_settings

__all__ = ["StepdocSettings", "get_settings", "reset_settings"]
