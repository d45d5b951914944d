"""Keymeow format: keys grouped by the finger that types them."""

import json
import logging

from pydantic import ValidationError

from ..errors import LayoutDecodeError
from ..models import Finger, KeymeowComponent, KeymeowLayout, Key, Layout

logger = logging.getLogger(__name__)


def _column_order(key: Key) -> tuple[int, int]:
    return key.col, key.row


def to_keymeow(layout: Layout) -> KeymeowLayout:
    """Group a layout's keys by finger.

    Every finger gets a component, in ordinal order, even when no key is
    assigned to it. Within a component, characters are ordered by column
    and then by row. Sorting happens on a copy; the layout is untouched.

    Args:
        layout: Layout of any shape

    Returns:
        KeymeowLayout with exactly one component per finger
    """
    keys_by_finger: dict[Finger, list[str]] = {finger: [] for finger in Finger}
    for key in sorted(layout.keys, key=_column_order):
        keys_by_finger[key.finger].append(key.char)

    components = [
        KeymeowComponent(finger=[finger], keys=chars)
        for finger, chars in keys_by_finger.items()
    ]
    authors = [layout.author] if layout.author else []

    logger.debug("Converted %r to keymeow (%d keys)", layout.name, len(layout.keys))
    return KeymeowLayout(name=layout.name, authors=authors, components=components)


def dump_keymeow(keymeow: KeymeowLayout, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize a keymeow layout to JSON, fingers written by name.

    Args:
        keymeow: Layout to serialize
        indent: JSON indent width (0 for a single line)
        ensure_ascii: Escape non-ASCII characters

    Returns:
        JSON document text
    """
    return json.dumps(
        keymeow.model_dump(mode="json"),
        indent=indent or None,
        ensure_ascii=ensure_ascii,
    )


def load_keymeow(data: bytes | str) -> KeymeowLayout:
    """Parse a keymeow JSON document.

    Raises:
        LayoutDecodeError: If the document is malformed or names an unknown finger
    """
    try:
        return KeymeowLayout.model_validate_json(data)
    except ValidationError as exc:
        raise LayoutDecodeError(f"invalid keymeow layout: {exc}") from exc
