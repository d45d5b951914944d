"""Oxeylyzer text format: a bare 3x10 character grid."""

import logging

from ..errors import ConversionError
from ..matrix import build_matrix
from ..models import Layout
from .utils import format_row

logger = logging.getLogger(__name__)

OXEYLYZER_ROWS = 3
OXEYLYZER_COLS = 10


def to_oxeylyzer(layout: Layout) -> str:
    """Render a layout as an oxeylyzer character grid.

    Raises:
        ConversionError: Unless the layout is exactly 3 rows of 10 keys
    """
    matrix = build_matrix(layout)
    if len(matrix) != OXEYLYZER_ROWS:
        raise ConversionError("oxeylyzer", "oxeylyzer only supports 3x10 layouts")

    lines = []
    for row in matrix:
        if len(row) != OXEYLYZER_COLS:
            raise ConversionError("oxeylyzer", "oxeylyzer only supports 3x10 layouts")
        lines.append(format_row(key.char for key in row))

    logger.debug("Converted %r to oxeylyzer", layout.name)
    return "".join(lines)
