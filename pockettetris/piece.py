"""The falling piece: spawning, collision checks and locking into the grid."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

from .grid import Grid
from .shapes import NUM_TETROMINO, Shape, get_shape

SPAWN_X = 3
SPAWN_Y = 0


@dataclass
class Piece:
    """A tetromino with its rotation and top-left position on the grid."""

    kind: int
    rotation: int = 0
    x: int = SPAWN_X
    y: int = SPAWN_Y

    def shape(self) -> Shape:
        return get_shape(self.kind, self.rotation)


def _filled(shape: Shape) -> Iterator[tuple[int, int]]:
    for row, line in enumerate(shape):
        for col, cell in enumerate(line):
            if cell:
                yield row, col


def spawn_piece(rng: random.Random | None = None) -> Piece:
    """Create a random piece at the spawn position."""
    chooser = rng if rng is not None else random
    return Piece(kind=chooser.randrange(NUM_TETROMINO))


def can_move(grid: Grid, piece: Piece, x: int, y: int, rotation: int) -> bool:
    """Whether the piece fits at (x, y) in the given rotation."""
    for row, col in _filled(get_shape(piece.kind, rotation)):
        gx, gy = x + col, y + row
        if not grid.in_bounds(gy, gx) or grid.get_cell(gy, gx):
            return False
    return True


def lock_piece(grid: Grid, piece: Piece) -> None:
    """Write the piece's blocks into the grid; blocks off the board are dropped."""
    for row, col in _filled(piece.shape()):
        grid.set_cell(piece.y + row, piece.x + col, 1)