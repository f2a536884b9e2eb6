"""BoardList: an ordered column of cards."""

from __future__ import annotations

from typing import Iterable

from corkboard.ids import parse_id
from corkboard.model.card import Card
from corkboard.model.node import Node


class BoardList(Node):
    """Ordered, id-keyed sequence of cards with change notification.

    The list owns its cards. Card changes are re-emitted here, and from
    here on to the owning board.
    """

    def __init__(
        self,
        name: str,
        board_id: str,
        cards: Iterable[Card] = (),
        id: str | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._board_id = parse_id(board_id)
        self._cards: list[Card] = []
        for card in cards:
            if card.list_id != self._id:
                raise ValueError(f"card {card.id} belongs to list {card.list_id}, not {self._id}")
            if self.find_card_index(card.id) is not None:
                raise ValueError(f"duplicate card {card.id}")
            self._cards.append(card)
            self._adopt(card)

    @property
    def name(self) -> str:
        return self._name

    @property
    def board_id(self) -> str:
        return self._board_id

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def card_ids(self) -> list[str]:
        return [c.id for c in self._cards]

    def find_card_index(self, id: str) -> int | None:
        """Position of the card with this id, or None."""
        for i, card in enumerate(self._cards):
            if card.id == id:
                return i
        return None

    def rename(self, text: str) -> None:
        old = self._name
        if old == text:
            return
        self._name = text
        self._emit("name", old, text)

    def add_card(self, content: str) -> Card:
        """Create a card with this content at the end of the list."""
        card = Card(content, list_id=self._id)
        old = self.card_ids()
        self._cards.append(card)
        self._adopt(card)
        self._emit("cards", old, self.card_ids())
        return card

    def remove_card(self, card: Card) -> None:
        """Remove the card if it is in this list."""
        index = self.find_card_index(card.id)
        if index is None:
            return
        old = self.card_ids()
        removed = self._cards.pop(index)
        self._release(removed)
        self._emit("cards", old, self.card_ids())

    def reorder_cards(self, from_indices: Iterable[int], to_index: int) -> None:
        """Move the cards at from_indices as one block to to_index.

        The block keeps its relative order. to_index counts positions in
        the list after the block has been taken out, so anything past
        the end appends.
        """
        positions = sorted({i for i in from_indices if 0 <= i < len(self._cards)})
        if not positions:
            return
        old = self.card_ids()
        taken = set(positions)
        moving = [self._cards[i] for i in positions]
        remaining = [c for i, c in enumerate(self._cards) if i not in taken]
        to_index = max(0, min(to_index, len(remaining)))
        reordered = remaining[:to_index] + moving + remaining[to_index:]
        if [c.id for c in reordered] == old:
            return
        self._cards = reordered
        self._emit("cards", old, self.card_ids())

    # --- Used by Board.move_card; these do not notify ---

    def _insert_card(self, card: Card, index: int) -> None:
        index = max(0, min(index, len(self._cards)))
        self._cards.insert(index, card)
        self._adopt(card)

    def _detach_card(self, card: Card) -> None:
        index = self.find_card_index(card.id)
        if index is not None:
            del self._cards[index]
        self._release(card)

    def _fields(self) -> tuple:
        return (self._id, self._board_id, self._name, tuple(self._cards))

    def __repr__(self) -> str:
        return f"<BoardList {self._id[:8]} {self._name!r} [{len(self._cards)} cards]>"
