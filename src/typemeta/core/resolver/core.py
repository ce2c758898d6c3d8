"""Type resolvers.

Usage:
    resolver = MroResolver()
    resolver.resolve(Child())           # Child
    list(resolver.lineage(Child))       # [Child, Parent, object]
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def resolve_type(value: Any) -> type:
    """Resolve a value to the type that owns its metadata.

    Args:
        value: A class, or an instance of one.

    Returns:
        value itself if it is a type, otherwise type(value).
    """
    if isinstance(value, type):
        return value
    return type(value)


class BaseChainResolver:
    """Follows the strict single-parent chain given by ``cls.__base__``.

    Under multiple inheritance only the solid base is followed, so metadata
    declared on mixins is invisible.
    """

    def resolve(self, value: Any) -> type:
        return resolve_type(value)

    def parent_of(self, node: type) -> type | None:
        return node.__base__

    def lineage(self, node: type) -> Iterator[type]:
        current: type | None = node
        while current is not None:
            yield current
            current = self.parent_of(current)


class MroResolver:
    """Follows the method resolution order of the starting type.

    Identical to BaseChainResolver under single inheritance. With multiple
    inheritance the walk follows ``node.__mro__`` of the type being queried,
    so lineage() is authoritative and parent_of() only reports the immediate
    MRO successor of a type considered on its own.
    """

    def resolve(self, value: Any) -> type:
        return resolve_type(value)

    def parent_of(self, node: type) -> type | None:
        mro = node.__mro__
        return mro[1] if len(mro) > 1 else None

    def lineage(self, node: type) -> Iterator[type]:
        return iter(node.__mro__)
