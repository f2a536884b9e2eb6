"""Card: the leaf entity of a board."""

from __future__ import annotations

from corkboard.ids import parse_id
from corkboard.model.node import Node


class Card(Node):
    """A card with free-text content.

    ``list_id`` names the BoardList holding the card. It is a lookup
    key, not ownership, and only ``Board.move_card`` changes it.
    """

    def __init__(self, content: str, list_id: str, id: str | None = None) -> None:
        super().__init__(id)
        self._content = content
        self._list_id = parse_id(list_id)

    @property
    def content(self) -> str:
        return self._content

    @property
    def list_id(self) -> str:
        return self._list_id

    def set_content(self, text: str) -> None:
        """Replace the card's content."""
        old = self._content
        if old == text:
            return
        self._content = text
        self._emit("content", old, text)

    def _fields(self) -> tuple:
        return (self._id, self._content, self._list_id)

    def __repr__(self) -> str:
        return f"<Card {self._id[:8]} {self._content!r}>"
