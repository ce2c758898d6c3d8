"""Decorators for annotating class members.

Class-level metadata can be attached with the ``mark`` methods on each slot.
Members (methods, properties, classmethods) do not know their class while the
class body runs, so member_annotation defers recording until ``__set_name__``,
then puts the original member back on the class.

Usage:
    routes = MapMetadata[str, str]("web:routes")

    def route(path: str):
        return member_annotation(lambda owner, name, member: routes.set(owner, name, path))

    class Views:
        @route("/")
        def index(self): ...

    routes.get_map(Views)   # {"index": "/"}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

type MemberRecorder = Callable[[type, str, Any], None]
"""Callback receiving (owner class, attribute name, undecorated member)."""


class _MemberAnnotation:
    """Placeholder living in a class body until the class is created."""

    __slots__ = ("_member", "_recorders")

    def __init__(self, member: Any, recorder: MemberRecorder) -> None:
        # Stacked annotations collapse into one placeholder, innermost first
        if isinstance(member, _MemberAnnotation):
            self._member = member._member
            self._recorders = (*member._recorders, recorder)
        else:
            self._member = member
            self._recorders = (recorder,)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise TypeError(
            f"{self._member!r} is still wrapped by member_annotation; the annotation must be "
            "the outermost decorator in a class body"
        )

    def __set_name__(self, owner: type, name: str) -> None:
        setattr(owner, name, self._member)
        set_name = getattr(type(self._member), "__set_name__", None)
        if set_name is not None:
            set_name(self._member, owner, name)
        for recorder in self._recorders:
            recorder(owner, name, self._member)


def member_annotation[M](recorder: MemberRecorder) -> Callable[[M], M]:
    """Build a member decorator that records metadata on the owning class.

    Args:
        recorder: Called once the class exists, with the owner class, the
            member name and the undecorated member.

    Returns:
        Decorator to apply inside a class body. The member ends up on the
        class unchanged.

    Note:
        Only works inside a class body, as the outermost decorator. Wrapped
        by another decorator (e.g. staticmethod placed above it) or applied
        to a plain function, the result is a placeholder that records
        nothing and raises TypeError when called.

        >>> class Service:
        ...     @route("/health")
        ...     @staticmethod
        ...     def health(): ...
    """

    def decorator(member: M) -> M:
        return _MemberAnnotation(member, recorder)  # type: ignore[return-value]

    return decorator
