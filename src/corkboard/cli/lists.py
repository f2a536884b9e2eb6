"""Handlers for 'corkboard list' commands."""

from corkboard.cli._common import (
    build_list_summaries,
    find_list,
    format_list_line,
    load_board_or_die,
    output_json,
    output_result,
    save,
    short_id,
    write_payload,
)
from corkboard.transfer import pack


def list_ls(args) -> int:
    """List the board's lists."""
    board = load_board_or_die(args.file, args.json)
    lists = build_list_summaries(board)

    if args.json:
        output_json(lists)
    else:
        for summary in lists:
            print(format_list_line(summary))

    return 0


def list_add(args) -> int:
    """Append a new list to the board."""
    board = load_board_or_die(args.file, args.json)
    board_list = board.add_list(args.name)
    save(board, args.file)

    output_result(
        {"id": board_list.id, "name": board_list.name},
        f"Created list {short_id(board_list.id)} {board_list.name}",
        args.json,
    )
    return 0


def list_rename(args) -> int:
    """Rename a list."""
    board = load_board_or_die(args.file, args.json)
    board_list = find_list(board, args.id, args.json)
    board_list.rename(args.name)
    save(board, args.file)

    output_result(
        {"id": board_list.id, "name": board_list.name},
        f"Renamed list {short_id(board_list.id)} to {board_list.name}",
        args.json,
    )
    return 0


def list_remove(args) -> int:
    """Remove a list and its cards."""
    board = load_board_or_die(args.file, args.json)
    board_list = find_list(board, args.id, args.json)
    board.remove_list(board_list)
    save(board, args.file)

    output_result(
        {"id": board_list.id, "cards": len(board_list.cards)},
        f"Removed list {board_list.name} ({len(board_list.cards)} cards)",
        args.json,
    )
    return 0


def list_move(args) -> int:
    """Move a list to a new position (1-indexed)."""
    board = load_board_or_die(args.file, args.json)
    board_list = find_list(board, args.id, args.json)
    board.move_list(board_list, args.position - 1)
    save(board, args.file)

    position = board.find_list_index(board_list.id) + 1
    output_result(
        {"id": board_list.id, "position": position},
        f"Moved list {board_list.name} to position {position}",
        args.json,
    )
    return 0


def list_export(args) -> int:
    """Write a list's drag payload to stdout."""
    board = load_board_or_die(args.file, args.json)
    board_list = find_list(board, args.id, args.json)
    write_payload(*pack(board_list), args.json)
    return 0
