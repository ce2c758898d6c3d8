"""Container kinds for collection metadata."""

from typemeta.core.container.models import LIST_KIND, MAP_KIND, SET_KIND, ContainerKind

__all__ = [
    "ContainerKind",
    "LIST_KIND",
    "SET_KIND",
    "MAP_KIND",
]
