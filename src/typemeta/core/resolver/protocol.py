"""Type resolution protocol.

Metadata is recorded against types, never instances. A resolver maps any value
to the type that owns its metadata and walks that type's ancestors.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol


class TypeResolver(Protocol):
    """Maps values to type nodes and enumerates their ancestry."""

    def resolve(self, value: Any) -> type:
        """Return value itself if it is a type, else its runtime type."""
        ...

    def parent_of(self, node: type) -> type | None:
        """Return the next type to consult after node, or None at the root."""
        ...

    def lineage(self, node: type) -> Iterator[type]:
        """Iterate node first, then its ancestors nearest-first."""
        ...
