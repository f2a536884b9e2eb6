"""Observable board model."""

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
from corkboard.model.node import Callback, Node

__all__ = [
    "Board",
    "BoardList",
    "Callback",
    "Card",
    "DecodeError",
    "Node",
    "board_from_dict",
    "board_to_dict",
    "card_from_dict",
    "card_to_dict",
    "list_from_dict",
    "list_to_dict",
]
