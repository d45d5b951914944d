"""Layout builders shared by the test modules."""

from layout_convert.models import Finger, Key, Layout

STANDARD_FINGERS = [
    Finger.LP, Finger.LR, Finger.LM, Finger.LI, Finger.LI,
    Finger.RI, Finger.RI, Finger.RM, Finger.RR, Finger.RP,
]


def make_layout(*keys: tuple[str, int, int, Finger], name: str = "test", author: str = "") -> Layout:
    """Build a layout from (char, row, col, finger) tuples."""
    return Layout(
        name=name,
        author=author,
        keys=tuple(Key(char=c, row=r, col=col, finger=f) for c, r, col, f in keys),
    )


def grid_layout(rows: list[str], fingers: list[Finger] = STANDARD_FINGERS, name: str = "grid") -> Layout:
    """Build a layout from row strings, assigning fingers by column."""
    return make_layout(
        *(
            (char, r, c, fingers[c])
            for r, row in enumerate(rows)
            for c, char in enumerate(row)
        ),
        name=name,
    )
