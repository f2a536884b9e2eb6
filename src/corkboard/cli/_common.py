"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from corkboard.ids import match_id
from corkboard.model import Board, BoardList, Card, DecodeError
from corkboard.transfer import dumps, loads

logger = logging.getLogger(__name__)


def board_format(path: Path) -> str:
    """Pick the text format for a board file from its suffix."""
    return "yaml" if path.suffix.lower() in (".yaml", ".yml") else "json"


def load_board_or_die(file: str, json_mode: bool) -> Board:
    """Load board from file. Exit 1 with message if missing or malformed."""
    path = Path(file)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        error(f"Can't read board file {path}: {e.strerror or e}", json_mode)
    try:
        board = loads(text, board_format(path))
    except DecodeError as e:
        error(f"Invalid board file {path}: {e}", json_mode)
    logger.debug("loaded board %s from %s", board.id, path)
    return board


def save(board: Board, file: str) -> None:
    """Write board to file in the format its suffix selects."""
    path = Path(file)
    path.write_text(dumps(board, board_format(path)), encoding="utf-8")
    logger.debug("saved board %s to %s", board.id, path)


def find_list(board: Board, list_id: str, json_mode: bool) -> BoardList:
    """Lookup list by ID or unique prefix. Exit 1 listing available lists if not found."""
    resolved = match_id(list_id, [lst.id for lst in board.lists])
    if resolved is not None:
        return board.find_list(resolved)
    available = [f"  {lst.id}  {lst.name}" for lst in board.lists]
    msg = f"List '{list_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card(board: Board, card_id: str, json_mode: bool) -> Card:
    """Lookup card by ID or unique prefix. Exit 1 if not found."""
    all_ids = [c.id for lst in board.lists for c in lst.cards]
    resolved = match_id(card_id, all_ids)
    if resolved is not None:
        return board.find_card(resolved)
    error(f"Card '{card_id}' not found.", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def write_payload(type_id: str, data: bytes, json_mode: bool) -> None:
    """Write a drag payload to stdout, tagged with its type in JSON mode."""
    if json_mode:
        output_json({"type": type_id, "payload": json.loads(data)})
    else:
        sys.stdout.write(data.decode("utf-8") + "\n")


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def short_id(id: str) -> str:
    return id[:8]


def build_list_summaries(board: Board) -> list[dict]:
    """Build list summary dicts from board."""
    return [{"id": lst.id, "name": lst.name, "cards": len(lst.cards)} for lst in board.lists]


def format_list_line(summary: dict, indent: str = "") -> str:
    """Format a list summary dict as a text line."""
    cards = "card" if summary["cards"] == 1 else "cards"
    return f"{indent}{short_id(summary['id'])}  {summary['name']:<16} {summary['cards']} {cards}"
