"""Exceptions raised by typemeta.

Metadata operations are total over resolvable inputs: missing metadata is
reported as ``None``, an empty container or ``False``, never as an exception.
Errors here cover misuse and storage backends that cannot attach to a type.
"""


class TypeMetaError(Exception):
    """Base class for typemeta errors."""

    pass


class UnsupportedTargetError(TypeMetaError, TypeError):
    """Raised when a storage backend cannot record metadata on a type."""

    def __init__(self, node: type, reason: str) -> None:
        super().__init__(f"Cannot attach metadata to {node.__qualname__}: {reason}")
        self.node = node
