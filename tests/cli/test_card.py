"""Tests for 'corkboard card' commands."""

import json
from argparse import Namespace

import pytest

from corkboard.cli._common import load_board_or_die
from corkboard.cli.card import card_add, card_export, card_ls, card_move, card_remove, card_set
from corkboard.transfer import CARD_TYPE, unpack_card


def _board(path):
    return load_board_or_die(str(path), False)


def _contents(board_list):
    return [c.content for c in board_list.cards]


def test_card_ls(board_file, capsys):
    args = Namespace(file=str(board_file), json=False, list=None)
    assert card_ls(args) == 0

    out = capsys.readouterr().out
    assert "Backlog" in out
    assert "First card" in out
    assert "Second card" in out


def test_card_ls_filter_list(board_file, capsys):
    doing = _board(board_file).lists[1]
    args = Namespace(file=str(board_file), json=False, list=doing.id)
    assert card_ls(args) == 0

    out = capsys.readouterr().out
    assert "Doing" in out
    assert "First card" not in out


def test_card_ls_json(board_file, capsys):
    args = Namespace(file=str(board_file), json=True, list=None)
    assert card_ls(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert len(data) == 2
    assert data[0]["content"] == "First card"
    assert data[0]["list"]["name"] == "Backlog"


def test_card_add(board_file, capsys):
    done = _board(board_file).lists[2]
    args = Namespace(file=str(board_file), json=True, list=done.id[:6], content="Celebrate")
    assert card_add(args) == 0

    data = json.loads(capsys.readouterr().out)
    board = _board(board_file)
    card = board.lists[2].cards[0]
    assert card.content == "Celebrate"
    assert card.id == data["id"]
    assert card.list_id == board.lists[2].id


def test_card_set(board_file, capsys):
    card = _board(board_file).lists[0].cards[0]
    args = Namespace(file=str(board_file), json=False, id=card.id, content="Edited")
    assert card_set(args) == 0

    assert _board(board_file).lists[0].cards[0].content == "Edited"


def test_card_not_found(board_file, capsys):
    args = Namespace(file=str(board_file), json=True, id="zzzz", content="x")
    with pytest.raises(SystemExit) as exc_info:
        card_set(args)
    assert exc_info.value.code == 1
    assert json.loads(capsys.readouterr().err) == {"error": "Card 'zzzz' not found."}


def test_card_remove(board_file, capsys):
    card = _board(board_file).lists[0].cards[0]
    args = Namespace(file=str(board_file), json=False, id=card.id)
    assert card_remove(args) == 0

    assert _contents(_board(board_file).lists[0]) == ["Second card"]


def test_card_move_across_lists(board_file, capsys):
    board = _board(board_file)
    card = board.lists[0].cards[0]
    doing = board.lists[1]
    args = Namespace(file=str(board_file), json=True, id=card.id, list=doing.id, position=None)
    assert card_move(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["list"]["name"] == "Doing"
    assert data["position"] == 1
    board = _board(board_file)
    assert _contents(board.lists[0]) == ["Second card"]
    assert _contents(board.lists[1]) == ["First card"]
    assert board.lists[1].cards[0].list_id == doing.id


def test_card_move_within_list(board_file, capsys):
    board = _board(board_file)
    backlog = board.lists[0]
    card = backlog.cards[0]
    args = Namespace(file=str(board_file), json=False, id=card.id, list=backlog.id, position=2)
    assert card_move(args) == 0

    assert _contents(_board(board_file).lists[0]) == ["Second card", "First card"]
    assert "position 2" in capsys.readouterr().out


def test_card_move_within_list_default_end(board_file, capsys):
    board = _board(board_file)
    backlog = board.lists[0]
    args = Namespace(file=str(board_file), json=False, id=backlog.cards[0].id, list=backlog.id, position=None)
    assert card_move(args) == 0

    assert _contents(_board(board_file).lists[0]) == ["Second card", "First card"]


def test_card_export(board_file, capsys):
    card = _board(board_file).lists[0].cards[1]
    args = Namespace(file=str(board_file), json=False, id=card.id)
    assert card_export(args) == 0

    assert unpack_card(capsys.readouterr().out.encode("utf-8")) == card


def test_card_export_json_has_type(board_file, capsys):
    card = _board(board_file).lists[0].cards[0]
    args = Namespace(file=str(board_file), json=True, id=card.id)
    assert card_export(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["type"] == CARD_TYPE
    assert data["payload"] == {"id": card.id, "content": "First card", "listId": card.list_id}
