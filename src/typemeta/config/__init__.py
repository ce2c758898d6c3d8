"""Configuration module using Pydantic Settings.

Usage:
    from typemeta.config import TypeMetaSettings, get_default_storage

    settings = TypeMetaSettings(storage_backend="attribute")
    storage = get_default_storage()
"""

from typemeta.config.runtime import (
    get_default_resolver,
    get_default_storage,
    get_settings,
    reset_defaults,
)
from typemeta.config.settings import TypeMetaSettings

__all__ = [
    "TypeMetaSettings",
    "get_settings",
    "get_default_storage",
    "get_default_resolver",
    "reset_defaults",
]
