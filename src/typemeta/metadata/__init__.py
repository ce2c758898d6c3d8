"""Metadata slots: scalar values and inheritable collections on types."""

from typemeta.metadata.base import MetadataSlot
from typemeta.metadata.collection import CollectionMetadata
from typemeta.metadata.facades import ListMetadata, MapMetadata, SetMetadata
from typemeta.metadata.scalar import Metadata

__all__ = [
    "MetadataSlot",
    "Metadata",
    "CollectionMetadata",
    "ListMetadata",
    "SetMetadata",
    "MapMetadata",
]
