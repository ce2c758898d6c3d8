"""Storage backends for own metadata entries."""

from typemeta.storage.attribute import AttributeStorage
from typemeta.storage.protocol import MetadataStorage
from typemeta.storage.side_table import SideTableStorage

__all__ = [
    "MetadataStorage",
    "SideTableStorage",
    "AttributeStorage",
]
