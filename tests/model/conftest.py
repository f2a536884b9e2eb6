"""Shared test helpers for model tests."""

from corkboard.model import Board


def _make_board(lists=None, name="Test Board"):
    """Helper to build a board from {list_name: [card contents]}."""
    board = Board(name)
    for list_name, contents in (lists or {}).items():
        board_list = board.add_list(list_name)
        for content in contents:
            board_list.add_card(content)
    return board


def _contents(board_list):
    """Card contents of a list, in order."""
    return [c.content for c in board_list.cards]


def _recorder(node):
    """Watch node and return the list its events are appended to."""
    events = []
    node.watch(lambda src, key, old, new: events.append((src, key, old, new)))
    return events


def _assert_consistent(board):
    """Every card's list_id names the one list holding it."""
    seen = set()
    for board_list in board.lists:
        assert board_list.board_id == board.id
        for card in board_list.cards:
            assert card.list_id == board_list.id
            assert card.id not in seen
            seen.add(card.id)
