"""Genkey text format: a character grid followed by a finger-index grid."""

import logging

from ..errors import ConversionError
from ..matrix import build_matrix
from ..models import Finger, Layout
from .utils import format_row

logger = logging.getLogger(__name__)

GENKEY_ROWS = 3


def genkey_finger_index(finger: Finger) -> int:
    """Map a finger to genkey's 8-finger index space.

    Genkey has no thumb slots, so RI..RP shift down by two to follow LI.

    Raises:
        ConversionError: If the finger is a thumb
    """
    if finger.is_thumb:
        raise ConversionError("genkey", "genkey does not support thumbkeys")
    if finger >= Finger.RI:
        return int(finger) - 2
    return int(finger)


def to_genkey(layout: Layout) -> str:
    """Render a layout in genkey format.

    Output is the layout name on the first line, then the three character
    rows, then the three finger-index rows.

    Args:
        layout: Layout with exactly three rows and no thumbkeys

    Returns:
        Genkey document text

    Raises:
        ConversionError: If the row count is not 3 or a key uses a thumb
    """
    matrix = build_matrix(layout)
    if len(matrix) != GENKEY_ROWS:
        raise ConversionError("genkey", "genkey only supports layouts with 3 rows")

    lines = [f"{layout.name}\n"]
    for row in matrix:
        lines.append(format_row(key.char for key in row))
    for row in matrix:
        lines.append(format_row(str(genkey_finger_index(key.finger)) for key in row))

    logger.debug("Converted %r to genkey (%d keys)", layout.name, len(layout.keys))
    return "".join(lines)
