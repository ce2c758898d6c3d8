"""Metadata key model."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class MetadataKey:
    """Opaque token identifying one logical kind of metadata.

    Keys compare and hash by identity. Two keys created from the same label
    are different keys and never share storage.
    """

    label: str
    serial: int

    def __repr__(self) -> str:
        return f"MetadataKey({self.label!r}, #{self.serial})"
