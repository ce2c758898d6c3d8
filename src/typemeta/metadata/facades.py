"""Typed collection metadata: list, set and map shapes.

Every operation goes through CollectionMetadata._get_or_init, so the first
touch on a type pins a private copy of the inherited container and nothing
done through a subclass can leak into its ancestors. The engine primitives
stay protected; each class exposes only its own shape's operations.

Usage:
    validators = ListMetadata[Callable]("forms:validators")
    tags = SetMetadata[str]("api:tags")
    columns = MapMetadata[str, Column]("orm:columns")

    tags.add(Resource, "public")
    columns.set(User, "email", Column(str))
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from typemeta.core.container import LIST_KIND, MAP_KIND, SET_KIND
from typemeta.core.key import MetadataKey
from typemeta.core.resolver import TypeResolver
from typemeta.metadata.collection import CollectionMetadata
from typemeta.storage import MetadataStorage

_MISSING: Any = object()


class ListMetadata[V](CollectionMetadata[list[V]]):
    """Ordered per-type values. Duplicates are kept."""

    def __init__(
        self,
        key: str | MetadataKey,
        *,
        storage: MetadataStorage | None = None,
        resolver: TypeResolver | None = None,
    ) -> None:
        super().__init__(key, LIST_KIND, storage=storage, resolver=resolver)

    def get(self, arg: Any) -> list[V]:
        """Get the type's own list, pinning a copy of the inherited one first.

        Returns:
            Live list; appending to it updates the type's metadata.
        """
        return self._get_or_init(arg)

    def set(self, arg: Any, values: list[V]) -> None:
        """Replace the type's own list with values (stored without copying)."""
        self._replace(arg, values)

    def add(self, arg: Any, *values: V) -> None:
        """Append values in order to the type's own list."""
        self._get_or_init(arg).extend(values)

    def get_size(self, arg: Any) -> int:
        return len(self._get_or_init(arg))

    def mark[T: type](self, *values: V) -> Callable[[T], T]:
        """Build a class decorator appending values to the decorated class."""

        def decorator(cls: T) -> T:
            self.add(cls, *values)
            return cls

        return decorator


class SetMetadata[V](CollectionMetadata[set[V]]):
    """Unique per-type values, compared by equality."""

    def __init__(
        self,
        key: str | MetadataKey,
        *,
        storage: MetadataStorage | None = None,
        resolver: TypeResolver | None = None,
    ) -> None:
        super().__init__(key, SET_KIND, storage=storage, resolver=resolver)

    def get_set(self, arg: Any) -> set[V]:
        """Get the type's own set, pinning a copy of the inherited one first."""
        return self._get_or_init(arg)

    def add(self, arg: Any, value: V) -> None:
        self._get_or_init(arg).add(value)

    def has(self, arg: Any, value: V) -> bool:
        return value in self._get_or_init(arg)

    def delete(self, arg: Any, value: V) -> bool:
        """Remove value from the type's own set.

        Returns:
            True if value was present, False otherwise.
        """
        values = self._get_or_init(arg)
        if value not in values:
            return False
        values.remove(value)
        return True

    def keys(self, arg: Any) -> Iterator[V]:
        return self.values(arg)

    def values(self, arg: Any) -> Iterator[V]:
        """Iterate the values held at call time.

        The set itself may be modified while iterating.
        """
        return iter(tuple(self._get_or_init(arg)))

    def entries(self, arg: Any) -> Iterator[tuple[V, V]]:
        """Iterate (value, value) pairs, mirroring the map entries shape."""
        return ((value, value) for value in self.values(arg))

    def get_size(self, arg: Any) -> int:
        return len(self._get_or_init(arg))

    def mark[T: type](self, *values: V) -> Callable[[T], T]:
        """Build a class decorator adding values to the decorated class."""

        def decorator(cls: T) -> T:
            self._get_or_init(cls).update(values)
            return cls

        return decorator


class MapMetadata[K, V](CollectionMetadata[dict[K, V]]):
    """Per-type key/value pairs. Iteration follows insertion order."""

    def __init__(
        self,
        key: str | MetadataKey,
        *,
        storage: MetadataStorage | None = None,
        resolver: TypeResolver | None = None,
    ) -> None:
        super().__init__(key, MAP_KIND, storage=storage, resolver=resolver)

    def get_map(self, arg: Any) -> dict[K, V]:
        """Get the type's own dict, pinning a copy of the inherited one first."""
        return self._get_or_init(arg)

    def get(self, arg: Any, key: K, default: V | None = None) -> V | None:
        """Get one entry from the type's own dict.

        Args:
            arg: Class, or an instance of one.
            key: Entry key.
            default: Returned when key is absent.

        Returns:
            The stored value, or default.
        """
        return self._get_or_init(arg).get(key, default)

    def set(self, arg: Any, key: K, value: V) -> None:
        self._get_or_init(arg)[key] = value

    def has(self, arg: Any, key: K) -> bool:
        return key in self._get_or_init(arg)

    def delete(self, arg: Any, key: K) -> bool:
        """Remove one entry from the type's own dict.

        Returns:
            True if key was present, False otherwise.
        """
        return self._get_or_init(arg).pop(key, _MISSING) is not _MISSING

    # Iterators walk a copy taken at call time, so callers may set or delete
    # entries while looping.

    def keys(self, arg: Any) -> Iterator[K]:
        return iter(list(self._get_or_init(arg)))

    def values(self, arg: Any) -> Iterator[V]:
        return iter(list(self._get_or_init(arg).values()))

    def entries(self, arg: Any) -> Iterator[tuple[K, V]]:
        return iter(list(self._get_or_init(arg).items()))

    def get_size(self, arg: Any) -> int:
        return len(self._get_or_init(arg))

    def mark[T: type](self, key: K, value: V) -> Callable[[T], T]:
        """Build a class decorator storing one entry on the decorated class."""

        def decorator(cls: T) -> T:
            self.set(cls, key, value)
            return cls

        return decorator
