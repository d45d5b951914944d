"""Row-major matrix construction for grid-based layout formats."""

from .models import PLACEHOLDER, Layout, MatrixKey

Matrix = list[list[MatrixKey]]


def build_matrix(layout: Layout) -> Matrix:
    """Place every key of a layout into a dense ``[row][col]`` grid.

    Keys may arrive in any order and positions may be sparse. Slots that no
    key occupies hold ``PLACEHOLDER``; shape checks are left to the
    formats that need them.

    Args:
        layout: Layout to project

    Returns:
        List of rows, each a list of MatrixKey
    """
    rows: Matrix = []
    for key in layout.keys:
        # Add missing rows
        while len(rows) <= key.row:
            rows.append([])

        # Expand row to fit key
        row = rows[key.row]
        if len(row) <= key.col:
            row.extend([PLACEHOLDER] * (key.col + 1 - len(row)))

        row[key.col] = MatrixKey(char=key.char, finger=key.finger)
    return rows


def matrix_shape(matrix: Matrix) -> list[int]:
    """Return the number of slots in each row."""
    return [len(row) for row in matrix]
