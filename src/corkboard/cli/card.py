"""Handlers for 'corkboard card' commands."""

from corkboard.cli._common import (
    find_card,
    find_list,
    load_board_or_die,
    output_json,
    output_result,
    save,
    short_id,
    write_payload,
)
from corkboard.transfer import pack


def card_ls(args) -> int:
    """List cards grouped by list."""
    board = load_board_or_die(args.file, args.json)
    lists = [find_list(board, args.list, args.json)] if args.list else board.lists

    if args.json:
        output_json(
            [
                {"id": card.id, "content": card.content, "list": {"id": lst.id, "name": lst.name}}
                for lst in lists
                for card in lst.cards
            ]
        )
    else:
        for lst in lists:
            print(f"{short_id(lst.id)}  {lst.name}")
            for card in lst.cards:
                print(f"  {short_id(card.id)}  {card.content}")

    return 0


def card_add(args) -> int:
    """Add a card to the end of a list."""
    board = load_board_or_die(args.file, args.json)
    board_list = find_list(board, args.list, args.json)
    card = board_list.add_card(args.content)
    save(board, args.file)

    output_result(
        {"id": card.id, "content": card.content, "list": {"id": board_list.id, "name": board_list.name}},
        f"Created card {short_id(card.id)} in {board_list.name}",
        args.json,
    )
    return 0


def card_set(args) -> int:
    """Replace a card's content."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)
    card.set_content(args.content)
    save(board, args.file)

    output_result(
        {"id": card.id, "content": card.content},
        f"Updated card {short_id(card.id)}",
        args.json,
    )
    return 0


def card_remove(args) -> int:
    """Remove a card from its list."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)
    board_list = board.find_list(card.list_id)
    board_list.remove_card(card)
    save(board, args.file)

    output_result({"id": card.id}, f"Removed card {short_id(card.id)}", args.json)
    return 0


def card_move(args) -> int:
    """Move a card to a list, optionally at a position (1-indexed)."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)
    target = find_list(board, args.list, args.json)

    if target.id == card.list_id:
        index = target.find_card_index(card.id)
        position = args.position - 1 if args.position is not None else len(target.cards) - 1
        target.reorder_cards({index}, position)
    else:
        position = args.position - 1 if args.position is not None else len(target.cards)
        board.move_card(card, target, position)
    save(board, args.file)

    position = target.find_card_index(card.id) + 1
    output_result(
        {"id": card.id, "list": {"id": target.id, "name": target.name}, "position": position},
        f"Moved card {short_id(card.id)} to {target.name} position {position}",
        args.json,
    )
    return 0


def card_export(args) -> int:
    """Write a card's drag payload to stdout."""
    board = load_board_or_die(args.file, args.json)
    card = find_card(board, args.id, args.json)
    write_payload(*pack(card), args.json)
    return 0
