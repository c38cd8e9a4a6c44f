import random

import pytest

from pockettetris.grid import GRID_COLS, GRID_ROWS, Grid
from pockettetris.piece import Piece, can_move, lock_piece, spawn_piece
from pockettetris.shapes import NUM_TETROMINO, get_shape


def filled_count(grid):
    return sum(cell for row in grid.cells for cell in row)


def test_spawn_position_and_kind():
    rng = random.Random(1234)
    for _ in range(50):
        piece = spawn_piece(rng)
        assert 0 <= piece.kind < NUM_TETROMINO
        assert (piece.rotation, piece.x, piece.y) == (0, 3, 0)


def test_spawn_is_reproducible_with_seed():
    a = [spawn_piece(random.Random(7)).kind for _ in range(3)]
    b = [spawn_piece(random.Random(7)).kind for _ in range(3)]
    assert a == b


def test_piece_shape_matches_table():
    piece = Piece(kind=4, rotation=2)
    assert piece.shape() == get_shape(4, 2)


@pytest.mark.parametrize("kind", range(NUM_TETROMINO))
def test_spawned_piece_fits_empty_grid(kind):
    piece = Piece(kind=kind)
    assert can_move(Grid(), piece, piece.x, piece.y, piece.rotation) is True


def test_cannot_move_past_left_wall():
    piece = Piece(kind=3, x=0)
    assert can_move(Grid(), piece, -1, 0, 0) is False


def test_cannot_move_past_right_wall_or_floor():
    piece = Piece(kind=0)
    grid = Grid()
    assert can_move(grid, piece, GRID_COLS - 3, 0, 0) is False
    assert can_move(grid, piece, 0, GRID_ROWS - 1, 0) is False


def test_collision_with_filled_cell():
    grid = Grid()
    piece = Piece(kind=1)
    grid.set_cell(1, 4, 1)
    assert can_move(grid, piece, 3, 0, 0) is False
    assert can_move(grid, piece, 5, 0, 0) is True


def test_lock_piece_writes_four_blocks():
    grid = Grid()
    piece = Piece(kind=4, rotation=1, x=2, y=5)
    lock_piece(grid, piece)
    assert filled_count(grid) == 4
    for row, line in enumerate(piece.shape()):
        for col, cell in enumerate(line):
            if cell:
                assert grid.get_cell(piece.y + row, piece.x + col) == 1


def test_locked_piece_blocks_same_position():
    grid = Grid()
    piece = Piece(kind=6)
    lock_piece(grid, piece)
    assert can_move(grid, piece, piece.x, piece.y, piece.rotation) is False


def test_lock_piece_drops_blocks_off_board():
    grid = Grid()
    piece = Piece(kind=0, rotation=1, x=0, y=GRID_ROWS - 2)
    lock_piece(grid, piece)
    assert filled_count(grid) == 2