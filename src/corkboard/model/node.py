"""Observable model entities with change notification and bubbling."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable

from corkboard.ids import new_id, parse_id

Callback = Callable[["Node", str, Any, Any], None]


class Node:
    """Base for Board, BoardList and Card.

    Watchers are called as ``callback(source, key, old, new)`` where
    ``source`` is the entity the change originated on. A parent adopts
    each child with a relay watch, so watching the root sees every
    change below it. The unwatch handle for each relay is kept by child
    id and released when the child leaves the parent.
    """

    def __init__(self, id: str | None = None) -> None:
        self._id = parse_id(id) if id is not None else new_id()
        self._watchers: list[Callback] = []
        self._relays: dict[str, Callable[[], None]] = {}
        self._suppressed = 0
        self._version = 0

    @property
    def id(self) -> str:
        return self._id

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Watch this entity and its descendants. Returns an unwatch callable."""
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def _notify(self, source: Node, key: str, old: Any, new: Any) -> None:
        for cb in list(self._watchers):
            cb(source, key, old, new)

    def _emit(self, key: str, old: Any, new: Any) -> None:
        """Fire watchers for a change made on this entity."""
        self._version += 1
        self._notify(self, key, old, new)

    def _relay(self, source: Node, key: str, old: Any, new: Any) -> None:
        if not self._suppressed:
            self._notify(source, key, old, new)

    def _adopt(self, child: Node) -> None:
        """Re-emit the child's changes on this entity."""
        self._release(child)
        self._relays[child.id] = child.watch(self._relay)

    def _release(self, child: Node) -> None:
        """Stop re-emitting the child's changes."""
        unwatch = self._relays.pop(child.id, None)
        if unwatch is not None:
            unwatch()

    @contextmanager
    def _suppressing(self):
        """Block relayed child changes during a compound mutation."""
        self._suppressed += 1
        try:
            yield
        finally:
            self._suppressed -= 1

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None

    def _fields(self) -> tuple:
        return (self._id,)
