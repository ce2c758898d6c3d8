"""Process-wide defaults derived from settings.

Defaults are built lazily on first use and shared by every metadata slot
created without an explicit storage or resolver.
"""

from __future__ import annotations

import logging

from typemeta.config.settings import TypeMetaSettings
from typemeta.core.resolver import BaseChainResolver, MroResolver, TypeResolver
from typemeta.storage import AttributeStorage, MetadataStorage, SideTableStorage

logger = logging.getLogger(__name__)

_settings: TypeMetaSettings | None = None
_storage: MetadataStorage | None = None
_resolver: TypeResolver | None = None


def get_settings() -> TypeMetaSettings:
    """Load settings once and cache them.

    Returns:
        The cached TypeMetaSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = TypeMetaSettings()
    return _settings


def get_default_storage() -> MetadataStorage:
    """Access the process-wide storage backend selected by settings.

    Returns:
        Shared MetadataStorage instance.
    """
    global _storage
    if _storage is None:
        settings = get_settings()
        if settings.storage_backend == "attribute":
            _storage = AttributeStorage(attribute_name=settings.attribute_name)
        else:
            _storage = SideTableStorage()
        logger.debug("Using %s for default metadata storage", type(_storage).__name__)
    return _storage


def get_default_resolver() -> TypeResolver:
    """Access the process-wide type resolver selected by settings.

    Returns:
        Shared TypeResolver instance.
    """
    global _resolver
    if _resolver is None:
        _resolver = BaseChainResolver() if get_settings().lineage == "base" else MroResolver()
    return _resolver


def reset_defaults() -> None:
    """Drop cached settings, storage and resolver.

    Slots created afterwards re-read the environment. Slots created before
    keep the storage they were bound to.
    """
    global _settings, _storage, _resolver
    _settings = None
    _storage = None
    _resolver = None
