"""Piece model, shapes, clockwise rotation and wall kicks"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

Shape = List[List[int]]

KINDS = ["I", "O", "T", "S", "Z", "J", "L"]

# Minimal bounding boxes, 1s are blocks
SHAPES: Dict[str, Shape] = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "O": (255,224,102),
    "T": (200,119,255),
    "S": (94,224,142),
    "Z": (255,102,119),
    "J": (106,119,255),
    "L": (255,158,94),
}

# Horizontal offsets tried in order when a rotation does not fit in place.
# Shared by every kind.
KICKS = [0, -1, 1, -2, 2]


def rotate_cw(m: Shape) -> Shape:
    """rotated[c][rows-1-r] = m[r][c]"""
    return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    t: str
    shape: Shape
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int) -> "Piece":
        if t not in SHAPES:
            raise ValueError(f"unknown piece kind {t!r}")
        s = [r[:] for r in SHAPES[t]]
        return Piece(t, s, (cols - len(s[0])) // 2, 0)

    def cells(self) -> List[Tuple[int,int]]:
        """Absolute (x, y) of every block, rows above the board included."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.x + dx, self.y + dy)
