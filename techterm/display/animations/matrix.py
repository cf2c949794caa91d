# display/animations/matrix.py

import random
from typing import List

ROWS = 20
COLUMNS = 80


class MatrixBackdrop:
    """
    Random binary rain drawn behind the scrollback while matrix mode is on.

    A fresh frame is generated on every redraw, each cell being '1' or '0'
    with equal probability.
    """
    def __init__(self, rng=None, rows: int = ROWS, columns: int = COLUMNS):
        self.rng = rng or random.Random()
        self.rows = rows
        self.columns = columns

    def generate(self) -> List[str]:
        """Return one frame as a list of row strings."""
        return [
            ''.join('1' if self.rng.random() > 0.5 else '0' for _ in range(self.columns))
            for _ in range(self.rows)
        ]
