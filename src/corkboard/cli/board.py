"""Handlers for 'corkboard board' commands."""

from corkboard.cli._common import (
    build_list_summaries,
    format_list_line,
    load_board_or_die,
    output_json,
    output_result,
    save,
)


def board_show(args) -> int:
    """Show board name and list summary."""
    board = load_board_or_die(args.file, args.json)
    lists = build_list_summaries(board)

    if args.json:
        output_json({"id": board.id, "name": board.name, "lists": lists})
    else:
        print(board.name)
        print()
        for summary in lists:
            print(format_list_line(summary, indent="  "))

    return 0


def board_rename(args) -> int:
    """Rename the board."""
    board = load_board_or_die(args.file, args.json)
    board.rename(args.name)
    save(board, args.file)

    output_result({"id": board.id, "name": board.name}, f"Renamed board to {board.name}", args.json)
    return 0
