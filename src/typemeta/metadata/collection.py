"""Collection metadata engine: copy-on-first-own-access containers.

A collection slot gives every type its own mutable container. The first time a
type is touched, it receives a copy of its nearest ancestor's container (or an
empty one) and is pinned: from then on the type and its ancestors evolve
independently.

Timeline for Parent and Child(Parent):
    add(Parent, "a")      Parent = ["a"]
    get(Child)            Child pinned to ["a"] (copy)
    add(Parent, "b")      Parent = ["a", "b"], Child still ["a"]
    add(Child, "c")       Child = ["a", "c"], Parent still ["a", "b"]

Reads pin exactly like writes because the container handed back is live and
mutable; it must never alias an ancestor's container.
"""

from __future__ import annotations

import logging
from typing import Any

from typemeta.core.container import ContainerKind
from typemeta.core.key import MetadataKey
from typemeta.core.resolver import TypeResolver
from typemeta.metadata.base import MetadataSlot
from typemeta.storage import MetadataStorage

logger = logging.getLogger(__name__)


class CollectionMetadata[C](MetadataSlot):
    """Per-type mutable container with snapshot inheritance.

    Public surface is init and clear. Subclasses build their shape's operations
    on the protected _get_or_init and _replace primitives.

    Args:
        key: Label for a fresh key, or an existing MetadataKey.
        kind: How to build empty containers and snapshot ancestors.
        storage: Own-entry storage. Defaults to the process-wide backend.
        resolver: Type resolver. Defaults to the process-wide resolver.
    """

    def __init__(
        self,
        key: str | MetadataKey,
        kind: ContainerKind[C],
        *,
        storage: MetadataStorage | None = None,
        resolver: TypeResolver | None = None,
    ) -> None:
        super().__init__(key, storage=storage, resolver=resolver)
        self._kind = kind

    @property
    def kind(self) -> ContainerKind[C]:
        return self._kind

    def _snapshot(self, node: type) -> C:
        """Build the container node would own if pinned now.

        Copies the nearest ancestor's current container when node has no own
        entry yet; otherwise, or when no ancestor has one, returns empty.
        """
        if self._storage.has_own(node, self._key):
            return self._kind.empty()
        source = self._find_owner(self._ancestors(node))
        if source is None:
            logger.debug("%r: pinning %s to empty %s", self._key, node.__qualname__, self._kind.name)
            return self._kind.empty()
        logger.debug(
            "%r: pinning %s to snapshot of %s", self._key, node.__qualname__, source.__qualname__
        )
        return self._kind.clone(self._storage.get_own(source, self._key))

    def init(self, arg: Any) -> C:
        """Install a fresh own container on the resolved type.

        An unpinned type receives a copy of its nearest ancestor's container.
        A type that already owns a container has it replaced by an empty one.

        Args:
            arg: Class, or an instance of one.

        Returns:
            The installed container. Mutating it in place updates the type's
            metadata.
        """
        node = self._node(arg)
        if self._storage.has_own(node, self._key):
            logger.debug("%r: re-initializing %s", self._key, node.__qualname__)
        container = self._snapshot(node)
        self._storage.set_own(node, self._key, container)
        return container

    def _get_or_init(self, arg: Any) -> C:
        """Return the resolved type's own container, pinning it on first touch.

        Args:
            arg: Class, or an instance of one.

        Returns:
            The type's own live container.
        """
        node = self._node(arg)
        if self._storage.has_own(node, self._key):
            return self._storage.get_own(node, self._key)
        container = self._snapshot(node)
        self._storage.set_own(node, self._key, container)
        return container

    def _replace(self, arg: Any, contents: C) -> None:
        """Install contents as the resolved type's own container.

        Ancestors are not consulted and the container is stored as given,
        without copying.

        Args:
            arg: Class, or an instance of one.
            contents: Container to own from now on.
        """
        self._storage.set_own(self._node(arg), self._key, contents)

    def clear(self, arg: Any) -> None:
        """Give the resolved type an empty own container.

        Ancestors keep their contents; the type stops inheriting them.

        Args:
            arg: Class, or an instance of one.
        """
        self._replace(arg, self._kind.empty())

    def _is_pinned(self, arg: Any) -> bool:
        """Check if the resolved type already owns a container."""
        return self._storage.has_own(self._node(arg), self._key)
