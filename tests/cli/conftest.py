"""Shared fixtures for CLI tests."""

import pytest

from corkboard.cli._common import save
from corkboard.model import Board


@pytest.fixture
def board_file(tmp_path):
    """Board file with 3 lists and 2 cards in the first."""
    board = Board("Test Board")
    backlog = board.add_list("Backlog")
    board.add_list("Doing")
    board.add_list("Done")
    backlog.add_card("First card")
    backlog.add_card("Second card")
    path = tmp_path / "board.json"
    save(board, str(path))
    return path
