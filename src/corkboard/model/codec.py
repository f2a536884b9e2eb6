"""Convert the model tree to and from plain dicts.

Field names are part of the wire format shared with drag payloads and
saved boards:

    Card       {"id", "content", "listId"}
    BoardList  {"id", "boardId", "name", "cards"}
    Board      {"id", "name", "lists"}

Decoding builds fully wired objects, so watchers on a decoded board see
changes to its lists and cards. Subscriptions are never encoded.
"""

from __future__ import annotations

from typing import Any

from corkboard.ids import parse_id
from corkboard.model.board import Board
from corkboard.model.board_list import BoardList
from corkboard.model.card import Card


class DecodeError(ValueError):
    """Raised when a dict can't be decoded into a model object.

    ``field`` is the path to the offending value, e.g.
    ``lists[1].cards[0].listId``, or None when the whole input is bad.
    """

    def __init__(self, field: str | None, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


# --- Encoding ---


def card_to_dict(card: Card) -> dict:
    return {"id": card.id, "content": card.content, "listId": card.list_id}


def list_to_dict(board_list: BoardList) -> dict:
    return {
        "id": board_list.id,
        "boardId": board_list.board_id,
        "name": board_list.name,
        "cards": [card_to_dict(c) for c in board_list.cards],
    }


def board_to_dict(board: Board) -> dict:
    return {
        "id": board.id,
        "name": board.name,
        "lists": [list_to_dict(lst) for lst in board.lists],
    }


# --- Decoding helpers ---


def _path(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _require_mapping(data: Any, path: str) -> dict:
    if not isinstance(data, dict):
        raise DecodeError(path or None, f"expected an object, got {type(data).__name__}")
    return data


def _field(data: dict, name: str, prefix: str) -> Any:
    if name not in data:
        raise DecodeError(_path(prefix, name), "missing required field")
    return data[name]


def _str_field(data: dict, name: str, prefix: str) -> str:
    value = _field(data, name, prefix)
    if not isinstance(value, str):
        raise DecodeError(_path(prefix, name), f"expected a string, got {type(value).__name__}")
    return value


def _id_field(data: dict, name: str, prefix: str) -> str:
    value = _field(data, name, prefix)
    try:
        return parse_id(value)
    except ValueError:
        raise DecodeError(_path(prefix, name), f"invalid UUID {value!r}") from None


def _list_field(data: dict, name: str, prefix: str) -> list:
    value = _field(data, name, prefix)
    if not isinstance(value, list):
        raise DecodeError(_path(prefix, name), f"expected an array, got {type(value).__name__}")
    return value


# --- Decoding ---


def card_from_dict(data: Any, _prefix: str = "") -> Card:
    """Decode a card. Raises DecodeError naming the bad field."""
    data = _require_mapping(data, _prefix)
    return Card(
        content=_str_field(data, "content", _prefix),
        list_id=_id_field(data, "listId", _prefix),
        id=_id_field(data, "id", _prefix),
    )


def list_from_dict(data: Any, _prefix: str = "") -> BoardList:
    """Decode a list and its cards. Raises DecodeError naming the bad field."""
    data = _require_mapping(data, _prefix)
    list_id = _id_field(data, "id", _prefix)
    board_id = _id_field(data, "boardId", _prefix)
    name = _str_field(data, "name", _prefix)

    cards = []
    seen: set[str] = set()
    cards_path = _path(_prefix, "cards")
    for i, item in enumerate(_list_field(data, "cards", _prefix)):
        item_path = f"{cards_path}[{i}]"
        card = card_from_dict(item, item_path)
        if card.list_id != list_id:
            raise DecodeError(f"{item_path}.listId", f"card belongs to {card.list_id}, not {list_id}")
        if card.id in seen:
            raise DecodeError(f"{item_path}.id", f"duplicate card {card.id}")
        seen.add(card.id)
        cards.append(card)

    return BoardList(name, board_id=board_id, cards=cards, id=list_id)


def board_from_dict(data: Any) -> Board:
    """Decode a whole board. Raises DecodeError naming the bad field."""
    data = _require_mapping(data, "")
    board_id = _id_field(data, "id", "")
    name = _str_field(data, "name", "")

    lists = []
    seen_lists: set[str] = set()
    seen_cards: set[str] = set()
    for i, item in enumerate(_list_field(data, "lists", "")):
        item_path = f"lists[{i}]"
        board_list = list_from_dict(item, item_path)
        if board_list.board_id != board_id:
            raise DecodeError(f"{item_path}.boardId", f"list belongs to {board_list.board_id}, not {board_id}")
        if board_list.id in seen_lists:
            raise DecodeError(f"{item_path}.id", f"duplicate list {board_list.id}")
        seen_lists.add(board_list.id)
        for j, card in enumerate(board_list.cards):
            if card.id in seen_cards:
                raise DecodeError(f"{item_path}.cards[{j}].id", f"card {card.id} appears in more than one list")
            seen_cards.add(card.id)
        lists.append(board_list)

    return Board(name, lists=lists, id=board_id)
