"""Board: the root of the model tree."""

from __future__ import annotations

import logging
from typing import Iterable

from corkboard.model.board_list import BoardList
from corkboard.model.card import Card
from corkboard.model.node import Node

logger = logging.getLogger(__name__)


class Board(Node):
    """Ordered collection of lists.

    Watching a board sees every change to its lists and their cards.
    Moving a card between lists goes through the board, which is the
    only place a card's ``list_id`` is rewritten.
    """

    def __init__(
        self,
        name: str,
        lists: Iterable[BoardList] = (),
        id: str | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._lists: list[BoardList] = []
        card_ids: set[str] = set()
        for board_list in lists:
            if board_list.board_id != self._id:
                raise ValueError(f"list {board_list.id} belongs to board {board_list.board_id}, not {self._id}")
            if self.find_list_index(board_list.id) is not None:
                raise ValueError(f"duplicate list {board_list.id}")
            shared = card_ids.intersection(board_list.card_ids())
            if shared:
                raise ValueError(f"card {min(shared)} appears in more than one list")
            card_ids.update(board_list.card_ids())
            self._lists.append(board_list)
            self._adopt(board_list)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lists(self) -> tuple[BoardList, ...]:
        return tuple(self._lists)

    def _list_ids(self) -> list[str]:
        return [lst.id for lst in self._lists]

    def find_list_index(self, id: str) -> int | None:
        """Position of the list with this id, or None."""
        for i, board_list in enumerate(self._lists):
            if board_list.id == id:
                return i
        return None

    def find_list(self, id: str) -> BoardList | None:
        index = self.find_list_index(id)
        return self._lists[index] if index is not None else None

    def find_card(self, id: str) -> Card | None:
        """Find a card anywhere on the board."""
        for board_list in self._lists:
            index = board_list.find_card_index(id)
            if index is not None:
                return board_list.cards[index]
        return None

    def rename(self, text: str) -> None:
        old = self._name
        if old == text:
            return
        self._name = text
        self._emit("name", old, text)

    def add_list(self, name: str) -> BoardList:
        """Create an empty list at the end of the board."""
        board_list = BoardList(name, board_id=self._id)
        old = self._list_ids()
        self._lists.append(board_list)
        self._adopt(board_list)
        self._emit("lists", old, self._list_ids())
        return board_list

    def remove_list(self, board_list: BoardList) -> None:
        """Remove the list and its cards if it is on this board."""
        index = self.find_list_index(board_list.id)
        if index is None:
            return
        old = self._list_ids()
        removed = self._lists.pop(index)
        self._release(removed)
        self._emit("lists", old, self._list_ids())

    def move_list(self, board_list: BoardList, to_index: int) -> None:
        """Move a list to to_index among the board's lists."""
        index = self.find_list_index(board_list.id)
        if index is None:
            return
        old = self._list_ids()
        moving = self._lists.pop(index)
        to_index = max(0, min(to_index, len(self._lists)))
        self._lists.insert(to_index, moving)
        if self._list_ids() == old:
            return
        self._emit("lists", old, self._list_ids())

    def move_card(self, card: Card, to_list: BoardList, at_index: int) -> None:
        """Move a card from its current list into to_list at at_index.

        Does nothing if either list is not on this board, if the card is
        already in to_list (use ``BoardList.reorder_cards``), or if the
        card isn't actually in the list its ``list_id`` names.
        """
        source_index = self.find_list_index(card.list_id)
        if source_index is None:
            logger.debug("move_card: source list %s not on board", card.list_id)
            return
        dest_index = self.find_list_index(to_list.id)
        if dest_index is None:
            logger.debug("move_card: destination list %s not on board", to_list.id)
            return
        if source_index == dest_index:
            logger.debug("move_card: card %s already in list %s", card.id, to_list.id)
            return
        source = self._lists[source_index]
        dest = self._lists[dest_index]
        card_index = source.find_card_index(card.id)
        if card_index is None:
            logger.debug("move_card: card %s not in list %s", card.id, source.id)
            return

        # The instance held by the source list is the one that moves.
        moving = source.cards[card_index]
        source_old = source.card_ids()
        dest_old = dest.card_ids()

        dest._insert_card(moving, at_index)
        moving._list_id = dest.id
        source._detach_card(moving)

        with self._suppressing():
            source._emit("cards", source_old, source.card_ids())
            dest._emit("cards", dest_old, dest.card_ids())
            moving._emit("list_id", source.id, dest.id)
        self._version += 1
        self._notify(moving, "list_id", source.id, dest.id)

    def _fields(self) -> tuple:
        return (self._id, self._name, tuple(self._lists))

    def __repr__(self) -> str:
        return f"<Board {self._id[:8]} {self._name!r} [{len(self._lists)} lists]>"
