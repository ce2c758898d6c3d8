"""Container kinds: how collection metadata is created and snapshotted.

A kind pairs an ``empty`` factory with a ``clone`` function. ``clone`` must
return a container that can be mutated without touching its source; the
predefined kinds copy the container shallowly, sharing element objects.

Usage:
    DEEP_LIST = ContainerKind(name="deep-list", empty=list, clone=copy.deepcopy)

    class HandlerMetadata(CollectionMetadata[list[Handler]]):
        def __init__(self, key):
            super().__init__(key, DEEP_LIST)

        def handlers(self, arg):
            return self._get_or_init(arg)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ContainerKind[C]:
    """Factory and snapshot strategy for one container shape."""

    name: str
    empty: Callable[[], C]
    """Build a new, empty container."""

    clone: Callable[[C], C]
    """Copy a container so that mutating the copy never affects the source."""


LIST_KIND: ContainerKind[list[Any]] = ContainerKind(name="list", empty=list, clone=list)
SET_KIND: ContainerKind[set[Any]] = ContainerKind(name="set", empty=set, clone=set)
MAP_KIND: ContainerKind[dict[Any, Any]] = ContainerKind(name="map", empty=dict, clone=dict)
