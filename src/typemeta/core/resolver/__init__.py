"""Type resolution: instance-or-class arguments to type nodes and ancestry."""

from typemeta.core.resolver.core import BaseChainResolver, MroResolver, resolve_type
from typemeta.core.resolver.protocol import TypeResolver

__all__ = [
    "TypeResolver",
    "BaseChainResolver",
    "MroResolver",
    "resolve_type",
]
