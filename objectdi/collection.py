"""Read-only collection of resolved objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ObjectsCollection:
    """Objects resolved for one type, in resolution order.

    A collection built without objects is *invalid*, which is how a failed
    lookup is reported.  An empty but valid collection is still valid.
    """

    __slots__ = ("_objects",)

    def __init__(self, objects: Iterable[Any] | None = None) -> None:
        self._objects: tuple[Any, ...] | None = (
            None if objects is None else tuple(objects)
        )

    def is_valid(self) -> bool:
        """Return True if the collection holds a result, even an empty one."""
        return self._objects is not None

    def __len__(self) -> int:
        return 0 if self._objects is None else len(self._objects)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._objects or ())

    def to_list(self) -> list[Any]:
        """Return the objects as a new list."""
        return list(self)

    def __repr__(self) -> str:
        if self._objects is None:
            return "ObjectsCollection(None)"
        return f"ObjectsCollection({list(self._objects)!r})"