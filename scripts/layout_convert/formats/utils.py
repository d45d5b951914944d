"""Text grid helpers shared by the matrix-based formats."""

from collections.abc import Iterable


def format_row(cells: Iterable[str]) -> str:
    """Format one grid row: every cell followed by a space, then a newline.

    Args:
        cells: Cell values in column order

    Returns:
        Row string ending in ``\\n``
    """
    return "".join(f"{cell} " for cell in cells) + "\n"
