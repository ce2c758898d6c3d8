"""Shared plumbing for metadata slots: key binding and type resolution."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from typemeta.config import get_default_resolver, get_default_storage
from typemeta.core.key import MetadataKey, make_key
from typemeta.core.resolver import TypeResolver
from typemeta.storage import MetadataStorage


class MetadataSlot:
    """Base class binding one metadata key to a storage backend and resolver.

    Args:
        key: Label for a fresh key, or an existing MetadataKey to share storage
            with another slot.
        storage: Own-entry storage. Defaults to the process-wide backend.
        resolver: Type resolver. Defaults to the process-wide resolver.
    """

    def __init__(
        self,
        key: str | MetadataKey,
        *,
        storage: MetadataStorage | None = None,
        resolver: TypeResolver | None = None,
    ) -> None:
        self._key = make_key(key)
        self._storage = storage if storage is not None else get_default_storage()
        self._resolver = resolver if resolver is not None else get_default_resolver()

    @property
    def metadata_key(self) -> MetadataKey:
        """The key this slot reads and writes."""
        return self._key

    @property
    def storage(self) -> MetadataStorage:
        return self._storage

    def _node(self, arg: Any) -> type:
        return self._resolver.resolve(arg)

    def _ancestors(self, node: type) -> Iterator[type]:
        """Iterate node's ancestors nearest-first, excluding node itself."""
        lineage = self._resolver.lineage(node)
        next(lineage, None)
        return lineage

    def _find_owner(self, nodes: Iterator[type]) -> type | None:
        """Return the first node holding an own entry, if any."""
        for candidate in nodes:
            if self._storage.has_own(candidate, self._key):
                return candidate
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r})"
