"""Scalar metadata: one value per type, inherited by subclasses.

Usage:
    table_name = Metadata[str]("orm:table")

    @table_name.mark("users")
    class User: ...

    class Admin(User): ...

    table_name.get(Admin)           # "users" (inherited)
    table_name.set(Admin, "admins")
    table_name.get(User)            # "users" (unaffected)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from typemeta.metadata.base import MetadataSlot


class Metadata[V](MetadataSlot):
    """Single value per type with shadowing inheritance.

    Reads fall through to the nearest ancestor holding a value. Writes always
    land on the resolved type itself and shadow, never modify, ancestors.

    Gotcha: inherited values are returned as-is, not copied. If V is mutable,
    mutating a value read from a subclass mutates the ancestor's entry. Use
    the collection metadata classes for mutable containers.
    """

    def get(self, arg: Any) -> V | None:
        """Get the value for a type or instance.

        Args:
            arg: Class, or an instance of one.

        Returns:
            The nearest value in the type's lineage, or None if there is none.
        """
        owner = self._find_owner(self._resolver.lineage(self._node(arg)))
        if owner is None:
            return None
        return self._storage.get_own(owner, self._key)

    def set(self, arg: Any, value: V) -> None:
        """Store value on the resolved type, replacing its own value.

        Args:
            arg: Class, or an instance of one.
            value: Value to store.
        """
        self._storage.set_own(self._node(arg), self._key, value)

    def has(self, arg: Any) -> bool:
        """Check if the type or any ancestor holds a value.

        Args:
            arg: Class, or an instance of one.

        Returns:
            True if get() would find a value.
        """
        return self._find_owner(self._resolver.lineage(self._node(arg))) is not None

    def delete(self, arg: Any) -> bool:
        """Remove the resolved type's own value. Ancestors are left untouched.

        Args:
            arg: Class, or an instance of one.

        Returns:
            True if the type held its own value, False otherwise.
        """
        return self._storage.delete_own(self._node(arg), self._key)

    def mark[T: type](self, value: V) -> Callable[[T], T]:
        """Build a class decorator that stores value on the decorated class.

        >>> @table_name.mark("users")
        ... class User: ...
        """

        def decorator(cls: T) -> T:
            self.set(cls, value)
            return cls

        return decorator
