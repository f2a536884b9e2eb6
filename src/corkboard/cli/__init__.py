"""CLI argument parser and dispatch for corkboard."""

import argparse
import os

from corkboard.cli.board import board_rename, board_show
from corkboard.cli.card import card_add, card_export, card_ls, card_move, card_remove, card_set
from corkboard.cli.init import init_board
from corkboard.cli.lists import list_add, list_export, list_ls, list_move, list_remove, list_rename

DEFAULT_FILE = "board.json"


def _global_options(suppress: bool = False) -> argparse.ArgumentParser:
    """Options accepted before the noun and after any verb.

    Subcommand copies use SUPPRESS so they only set a value when the flag
    is actually given there, leaving anything parsed earlier alone.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "--file",
        default=default(os.environ.get("CORKBOARD_FILE", DEFAULT_FILE)),
        help=f"Board file, .json or .yaml (default: $CORKBOARD_FILE or {DEFAULT_FILE})",
    )
    options.add_argument("--json", action="store_true", default=default(False), help="Machine-readable JSON output")
    options.add_argument("-v", "--verbose", action="store_true", default=default(False), help="Debug logging to stderr")
    return options


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = _global_options(suppress=True)

    parser = argparse.ArgumentParser(
        prog="corkboard",
        description="Kanban board editor",
        parents=[_global_options()],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Create a new board file", parents=[common])
    init_p.add_argument("name", help="Board name")
    init_p.add_argument("--list", dest="lists", action="append", help="Initial list name (repeatable)")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_show_p = board_verbs.add_parser("show", help="Show board summary", parents=[common])
    board_show_p.set_defaults(func=board_show)

    board_rename_p = board_verbs.add_parser("rename", help="Rename the board", parents=[common])
    board_rename_p.add_argument("name", help="New board name")
    board_rename_p.set_defaults(func=board_rename)

    # board with no verb = show
    board_p.set_defaults(func=board_show)

    # --- list ---
    list_p = nouns.add_parser("list", help="List operations", parents=[common])
    list_verbs = list_p.add_subparsers(dest="verb")

    list_ls_p = list_verbs.add_parser("ls", help="Show lists", parents=[common])
    list_ls_p.set_defaults(func=list_ls)

    list_add_p = list_verbs.add_parser("add", help="Add a list", parents=[common])
    list_add_p.add_argument("name", help="List name")
    list_add_p.set_defaults(func=list_add)

    list_rename_p = list_verbs.add_parser("rename", help="Rename a list", parents=[common])
    list_rename_p.add_argument("id", help="List ID or unique prefix")
    list_rename_p.add_argument("name", help="New list name")
    list_rename_p.set_defaults(func=list_rename)

    list_remove_p = list_verbs.add_parser("remove", help="Remove a list and its cards", parents=[common])
    list_remove_p.add_argument("id", help="List ID or unique prefix")
    list_remove_p.set_defaults(func=list_remove)

    list_move_p = list_verbs.add_parser("move", help="Move a list", parents=[common])
    list_move_p.add_argument("id", help="List ID or unique prefix")
    list_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    list_move_p.set_defaults(func=list_move)

    list_export_p = list_verbs.add_parser("export", help="Print a list's drag payload", parents=[common])
    list_export_p.add_argument("id", help="List ID or unique prefix")
    list_export_p.set_defaults(func=list_export)

    # list with no verb = ls
    list_p.set_defaults(func=list_ls)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_ls_p = card_verbs.add_parser("ls", help="Show cards", parents=[common])
    card_ls_p.add_argument("--list", dest="list", help="Filter by list ID")
    card_ls_p.set_defaults(func=card_ls)

    card_add_p = card_verbs.add_parser("add", help="Add a card", parents=[common])
    card_add_p.add_argument("list", help="List ID or unique prefix")
    card_add_p.add_argument("content", help="Card text")
    card_add_p.set_defaults(func=card_add)

    card_set_p = card_verbs.add_parser("set", help="Replace a card's text", parents=[common])
    card_set_p.add_argument("id", help="Card ID or unique prefix")
    card_set_p.add_argument("content", help="New card text")
    card_set_p.set_defaults(func=card_set)

    card_remove_p = card_verbs.add_parser("remove", help="Remove a card", parents=[common])
    card_remove_p.add_argument("id", help="Card ID or unique prefix")
    card_remove_p.set_defaults(func=card_remove)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID or unique prefix")
    card_move_p.add_argument("--list", dest="list", required=True, help="Target list ID")
    card_move_p.add_argument("--position", type=int, help="Position in list (1-indexed, default: end)")
    card_move_p.set_defaults(func=card_move)

    card_export_p = card_verbs.add_parser("export", help="Print a card's drag payload", parents=[common])
    card_export_p.add_argument("id", help="Card ID or unique prefix")
    card_export_p.set_defaults(func=card_export)

    # card with no verb = ls
    card_p.set_defaults(func=card_ls, list=None)

    return parser
