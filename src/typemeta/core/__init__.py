"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains keys, type resolution and container kinds. Nothing here
    holds metadata. For the stateful parts, see storage/ and metadata/.
"""

from typemeta.core.container import LIST_KIND, MAP_KIND, SET_KIND, ContainerKind
from typemeta.core.key import KeyRegistry, MetadataKey, get_key_registry, make_key
from typemeta.core.resolver import BaseChainResolver, MroResolver, TypeResolver, resolve_type

__all__ = [
    # Key
    "MetadataKey",
    "KeyRegistry",
    "get_key_registry",
    "make_key",
    # Resolver
    "TypeResolver",
    "BaseChainResolver",
    "MroResolver",
    "resolve_type",
    # Container
    "ContainerKind",
    "LIST_KIND",
    "SET_KIND",
    "MAP_KIND",
]
