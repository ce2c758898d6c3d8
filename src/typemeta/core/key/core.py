"""Key registry: turns labels into collision-free metadata keys.

Usage:
    ROUTES = make_key("web:routes")
    OTHER = make_key("web:routes")
    assert ROUTES != OTHER
    assert make_key(ROUTES) is ROUTES
"""

from __future__ import annotations

import itertools
import logging

from typemeta.core.key.models import MetadataKey

logger = logging.getLogger(__name__)


class KeyRegistry:
    """Process-local registry allocating unique metadata keys.

    Every string label produces a fresh key, even when the same label was used
    before. The registry only remembers keys for debugging lookups; it never
    deduplicates them.
    """

    def __init__(self) -> None:
        """Initialize empty key registry."""
        self._serials = itertools.count(1)
        self._by_serial: dict[int, MetadataKey] = {}
        self._by_label: dict[str, list[MetadataKey]] = {}

    def make_key(self, key: str | MetadataKey) -> MetadataKey:
        """Allocate a key for a label, or pass an existing key through.

        Args:
            key: Human-readable label, or an already allocated MetadataKey.

        Returns:
            A new MetadataKey for a label; the same object for a MetadataKey.

        Raises:
            TypeError: If key is neither a string nor a MetadataKey.
        """
        if isinstance(key, MetadataKey):
            return key
        if not isinstance(key, str):
            raise TypeError(f"Metadata key must be a str or MetadataKey, got {type(key).__name__}")

        created = MetadataKey(label=key, serial=next(self._serials))
        self._by_serial[created.serial] = created
        self._by_label.setdefault(key, []).append(created)
        logger.debug("Allocated %r", created)
        return created

    def get(self, serial: int) -> MetadataKey | None:
        """Get a key by its serial number.

        Args:
            serial: Serial assigned at allocation.

        Returns:
            The key if allocated by this registry, None otherwise.
        """
        return self._by_serial.get(serial)

    def find(self, label: str) -> list[MetadataKey]:
        """List all keys allocated for a label, oldest first.

        Args:
            label: Label passed to make_key.

        Returns:
            Copy of the allocated keys; empty if the label was never used.
        """
        return list(self._by_label.get(label, ()))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, MetadataKey) and self._by_serial.get(key.serial) is key

    def __len__(self) -> int:
        return len(self._by_serial)


# Module-level registry instance
_registry = KeyRegistry()


def get_key_registry() -> KeyRegistry:
    """Access the global key registry.

    Returns:
        The process-local KeyRegistry instance.
    """
    return _registry


def make_key(key: str | MetadataKey) -> MetadataKey:
    """Allocate a key from the global registry. See KeyRegistry.make_key."""
    return _registry.make_key(key)
