"""Entity ID generation and parsing."""

import uuid


def new_id() -> str:
    """Generate a fresh random ID in canonical UUID form."""
    return str(uuid.uuid4())


def parse_id(value) -> str:
    """Parse a UUID string into canonical lowercase hyphenated form.

    "{6F1C...}" → "6f1c...", raises ValueError for anything that isn't a UUID.
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a UUID string, got {type(value).__name__}")
    return str(uuid.UUID(value))


def match_id(prefix: str, ids) -> str | None:
    """Resolve an ID prefix against known IDs.

    An exact match wins. Returns None if nothing or more than one ID matches.
    """
    prefix = prefix.strip().lower()
    if not prefix:
        return None
    ids = list(ids)
    if prefix in ids:
        return prefix
    found = [i for i in ids if i.startswith(prefix)]
    return found[0] if len(found) == 1 else None
