"""Handler for 'corkboard init'."""

from pathlib import Path

from corkboard.cli._common import error, output_result, save
from corkboard.model import Board


def init_board(args) -> int:
    """Create a new, empty board file."""
    path = Path(args.file)
    if path.exists():
        error(f"Board file {path} already exists.", args.json)

    board = Board(args.name)
    for name in args.lists or []:
        board.add_list(name)
    save(board, args.file)

    output_result(
        {"id": board.id, "name": board.name, "file": str(path), "lists": [lst.name for lst in board.lists]},
        f"Created board {board.name} in {path}",
        args.json,
    )
    return 0
