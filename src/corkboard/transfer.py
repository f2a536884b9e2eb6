"""Drag-and-drop payloads and whole-board text encoding."""

from __future__ import annotations

import json

import yaml

from corkboard.model.board import Board
from corkboard.model.board_list import BoardList
from corkboard.model.card import Card
from corkboard.model.codec import (
    DecodeError,
    board_from_dict,
    board_to_dict,
    card_from_dict,
    card_to_dict,
    list_from_dict,
    list_to_dict,
)

LIST_TYPE = "corkboard.board-list"
CARD_TYPE = "corkboard.card"

FORMATS = ("json", "yaml")


def _pack(data: dict) -> bytes:
    return json.dumps(data, indent=2).encode("utf-8")


def _unpack(data: bytes) -> object:
    try:
        return json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeError(None, f"payload is not UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DecodeError(None, f"payload is not JSON: {e}") from e


def pack_list(board_list: BoardList) -> bytes:
    """Encode a list and all its cards as a drag payload."""
    return _pack(list_to_dict(board_list))


def unpack_list(data: bytes) -> BoardList:
    """Decode a drag payload into a new, live BoardList."""
    return list_from_dict(_unpack(data))


def pack_card(card: Card) -> bytes:
    """Encode a single card as a drag payload."""
    return _pack(card_to_dict(card))


def unpack_card(data: bytes) -> Card:
    """Decode a drag payload into a new Card."""
    return card_from_dict(_unpack(data))


_UNPACKERS = {
    LIST_TYPE: unpack_list,
    CARD_TYPE: unpack_card,
}

READABLE_TYPES = tuple(_UNPACKERS)


def pack(item: BoardList | Card) -> tuple[str, bytes]:
    """Encode a list or card as a (type identifier, payload) pair."""
    if isinstance(item, BoardList):
        return LIST_TYPE, pack_list(item)
    if isinstance(item, Card):
        return CARD_TYPE, pack_card(item)
    raise TypeError(f"can't pack {type(item).__name__}")


def unpack(type_id: str, data: bytes) -> BoardList | Card:
    """Decode a payload according to its type identifier."""
    unpacker = _UNPACKERS.get(type_id)
    if unpacker is None:
        raise DecodeError(None, f"unknown payload type {type_id!r}, expected one of {', '.join(READABLE_TYPES)}")
    return unpacker(data)


def dumps(board: Board, fmt: str = "json") -> str:
    """Encode a board as JSON or YAML text."""
    data = board_to_dict(board)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    raise ValueError(f"unknown format {fmt!r}, expected one of {', '.join(FORMATS)}")


def loads(text: str, fmt: str = "json") -> Board:
    """Decode a board from JSON or YAML text."""
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(None, f"not valid JSON: {e}") from e
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(None, f"not valid YAML: {e}") from e
    else:
        raise ValueError(f"unknown format {fmt!r}, expected one of {', '.join(FORMATS)}")
    return board_from_dict(data)
