import pytest

from pockettetris.shapes import (
    NUM_TETROMINO,
    ROTATION_STATES,
    SHAPE_SIZE,
    get_shape,
)

ALL = [(k, r) for k in range(NUM_TETROMINO) for r in range(ROTATION_STATES)]


@pytest.mark.parametrize("kind,rotation", ALL)
def test_every_shape_has_four_blocks(kind, rotation):
    shape = get_shape(kind, rotation)
    assert sum(sum(row) for row in shape) == 4


@pytest.mark.parametrize("kind,rotation", ALL)
def test_every_shape_is_square_binary(kind, rotation):
    shape = get_shape(kind, rotation)
    assert len(shape) == SHAPE_SIZE
    assert all(len(row) == SHAPE_SIZE for row in shape)
    assert all(cell in (0, 1) for row in shape for cell in row)


def test_i_piece_horizontal():
    assert get_shape(0, 0)[1] == (1, 1, 1, 1)
    assert get_shape(0, 0) == get_shape(0, 2)


def test_o_piece_same_in_all_rotations():
    shapes = {get_shape(1, r) for r in range(ROTATION_STATES)}
    assert len(shapes) == 1


def test_t_piece_rotations_differ():
    shapes = {get_shape(4, r) for r in range(ROTATION_STATES)}
    assert len(shapes) == ROTATION_STATES


@pytest.mark.parametrize("kind,rotation", [(-1, 0), (NUM_TETROMINO, 0), (0, -1), (0, ROTATION_STATES)])
def test_invalid_arguments(kind, rotation):
    with pytest.raises(ValueError):
        get_shape(kind, rotation)