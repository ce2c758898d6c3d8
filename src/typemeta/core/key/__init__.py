"""Metadata key functionality: unique tokens and their registry."""

from typemeta.core.key.core import KeyRegistry, get_key_registry, make_key
from typemeta.core.key.models import MetadataKey

__all__ = [
    "MetadataKey",
    "KeyRegistry",
    "get_key_registry",
    "make_key",
]
