"""Storage protocol for own metadata entries.

A storage backend holds at most one entry per (type, key) pair and knows
nothing about inheritance; ancestor walks happen in the metadata layer.

Usage:
    storage = SideTableStorage()
    routes = ListMetadata("web:routes", storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol

from typemeta.core.key import MetadataKey


class MetadataStorage(Protocol):
    """Abstract own-entry storage. Implementations decide where entries live."""

    def has_own(self, node: type, key: MetadataKey) -> bool:
        """Check if node itself holds an entry under key."""
        ...

    def get_own(self, node: type, key: MetadataKey, default: Any = None) -> Any:
        """Get node's own entry under key, or default."""
        ...

    def set_own(self, node: type, key: MetadataKey, value: Any) -> None:
        """Install value as node's own entry, replacing any previous one."""
        ...

    def delete_own(self, node: type, key: MetadataKey) -> bool:
        """Remove node's own entry. Returns True if one existed."""
        ...

    def keys_of(self, node: type) -> Iterator[MetadataKey]:
        """Iterate keys with an own entry on node."""
        ...
