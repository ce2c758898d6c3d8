"""Attribute storage: entries attached to the class object itself.

Each class that receives metadata gets a bucket dict in its own ``__dict__``
under a fixed attribute name. Buckets are looked up in the class's own
namespace only, never through inheritance, so a subclass never sees its
parent's bucket as its own.

Gotcha: built-in and extension types reject attribute assignment and raise
UnsupportedTargetError. Use SideTableStorage for those.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from typemeta.core.key import MetadataKey
from typemeta.errors import UnsupportedTargetError

DEFAULT_ATTRIBUTE_NAME = "__typemeta__"


class AttributeStorage:
    """Stores own entries in a dict attribute on each target class.

    Args:
        attribute_name: Name of the bucket attribute set on classes.
    """

    def __init__(self, attribute_name: str = DEFAULT_ATTRIBUTE_NAME):
        self._attribute_name = attribute_name

    @property
    def attribute_name(self) -> str:
        return self._attribute_name

    def _bucket(self, node: type) -> dict[MetadataKey, Any] | None:
        """Return node's own bucket without consulting base classes."""
        bucket = vars(node).get(self._attribute_name)
        if bucket is None:
            return None
        if not isinstance(bucket, dict):
            raise UnsupportedTargetError(
                node, f"attribute {self._attribute_name!r} is already used for something else"
            )
        return bucket

    def has_own(self, node: type, key: MetadataKey) -> bool:
        bucket = self._bucket(node)
        return bucket is not None and key in bucket

    def get_own(self, node: type, key: MetadataKey, default: Any = None) -> Any:
        bucket = self._bucket(node)
        if bucket is None:
            return default
        return bucket.get(key, default)

    def set_own(self, node: type, key: MetadataKey, value: Any) -> None:
        bucket = self._bucket(node)
        if bucket is None:
            bucket = {}
            try:
                type.__setattr__(node, self._attribute_name, bucket)
            except TypeError as e:
                raise UnsupportedTargetError(node, str(e)) from e
        bucket[key] = value

    def delete_own(self, node: type, key: MetadataKey) -> bool:
        bucket = self._bucket(node)
        if bucket is None or key not in bucket:
            return False
        del bucket[key]
        return True

    def keys_of(self, node: type) -> Iterator[MetadataKey]:
        yield from list(self._bucket(node) or ())
