"""typemeta: inheritable metadata attached to Python classes.

Usage:
    from typemeta import ListMetadata, Metadata

    table = Metadata[str]("orm:table")
    columns = ListMetadata[str]("orm:columns")

    @table.mark("people")
    class Person:
        pass

    class Employee(Person):
        pass

    columns.add(Person, "name")
    columns.add(Employee, "salary")

    table.get(Employee)     # "people"
    columns.get(Employee)   # ["name", "salary"]
    columns.get(Person)     # ["name"]
"""

__version__ = "0.1.0"

# Core primitives
from typemeta.core import (
    LIST_KIND,
    MAP_KIND,
    SET_KIND,
    BaseChainResolver,
    ContainerKind,
    KeyRegistry,
    MetadataKey,
    MroResolver,
    TypeResolver,
    get_key_registry,
    make_key,
    resolve_type,
)

# Member decorators
from typemeta.decorators import member_annotation

# Errors
from typemeta.errors import TypeMetaError, UnsupportedTargetError

# Metadata slots
from typemeta.metadata import (
    CollectionMetadata,
    ListMetadata,
    MapMetadata,
    Metadata,
    MetadataSlot,
    SetMetadata,
)

# Storage
from typemeta.storage import (
    AttributeStorage,
    MetadataStorage,
    SideTableStorage,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "MetadataKey",
    "KeyRegistry",
    "get_key_registry",
    "make_key",
    "TypeResolver",
    "BaseChainResolver",
    "MroResolver",
    "resolve_type",
    "ContainerKind",
    "LIST_KIND",
    "SET_KIND",
    "MAP_KIND",
    # Metadata
    "MetadataSlot",
    "Metadata",
    "CollectionMetadata",
    "ListMetadata",
    "SetMetadata",
    "MapMetadata",
    "member_annotation",
    # Storage
    "MetadataStorage",
    "SideTableStorage",
    "AttributeStorage",
    # Errors
    "TypeMetaError",
    "UnsupportedTargetError",
]
