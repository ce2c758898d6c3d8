"""Side-table storage keyed by type identity.

Entries are held in a weak-keyed table, so a type's metadata is dropped when
the type is garbage collected. Any type can be a target, including built-ins.

Gotcha: a stored value that references its own type (the class itself, an
instance, a bound method) keeps the type alive through the table, so neither
is ever collected. Call delete_own to release such entries.

Usage:
    storage = SideTableStorage()
    storage.set_own(MyClass, key, "value")
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import Any

from typemeta.core.key import MetadataKey


class SideTableStorage:
    """In-memory storage using a weak dict of per-type buckets.

    Structure:
        _buckets[node][key] = value
    """

    def __init__(self) -> None:
        """Initialize empty side table."""
        self._buckets: weakref.WeakKeyDictionary[type, dict[MetadataKey, Any]] = (
            weakref.WeakKeyDictionary()
        )

    def has_own(self, node: type, key: MetadataKey) -> bool:
        bucket = self._buckets.get(node)
        return bucket is not None and key in bucket

    def get_own(self, node: type, key: MetadataKey, default: Any = None) -> Any:
        bucket = self._buckets.get(node)
        if bucket is None:
            return default
        return bucket.get(key, default)

    def set_own(self, node: type, key: MetadataKey, value: Any) -> None:
        bucket = self._buckets.get(node)
        if bucket is None:
            bucket = self._buckets[node] = {}
        bucket[key] = value

    def delete_own(self, node: type, key: MetadataKey) -> bool:
        bucket = self._buckets.get(node)
        if bucket is None or key not in bucket:
            return False
        del bucket[key]
        if not bucket:
            del self._buckets[node]
        return True

    def keys_of(self, node: type) -> Iterator[MetadataKey]:
        yield from list(self._buckets.get(node, ()))

    def __len__(self) -> int:
        """Number of types holding at least one entry."""
        return len(self._buckets)
