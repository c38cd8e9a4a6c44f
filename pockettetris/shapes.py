"""Tetromino shapes and their rotation states."""

from __future__ import annotations

NUM_TETROMINO = 7
ROTATION_STATES = 4
SHAPE_SIZE = 4

KIND_NAMES = ("I", "O", "L", "J", "T", "S", "Z")

Shape = tuple[tuple[int, ...], ...]

_SHAPE_ART: tuple[tuple[tuple[str, ...], ...], ...] = (
    # I
    (
        ("....", "####", "....", "...."),
        ("..#.", "..#.", "..#.", "..#."),
        ("....", "####", "....", "...."),
        (".#..", ".#..", ".#..", ".#.."),
    ),
    # O
    ((".##.", ".##.", "....", "...."),) * 4,
    # L
    (
        ("..#.", "###.", "....", "...."),
        (".#..", ".#..", ".##.", "...."),
        ("....", "###.", "#...", "...."),
        ("##..", ".#..", ".#..", "...."),
    ),
    # J
    (
        ("#...", "###.", "....", "...."),
        (".##.", ".#..", ".#..", "...."),
        ("....", "###.", "..#.", "...."),
        (".#..", ".#..", "##..", "...."),
    ),
    # T
    (
        (".#..", "###.", "....", "...."),
        (".#..", ".##.", ".#..", "...."),
        ("....", "###.", ".#..", "...."),
        (".#..", "##..", ".#..", "...."),
    ),
    # S
    (
        (".##.", "##..", "....", "...."),
        (".#..", ".##.", "..#.", "...."),
    )
    * 2,
    # Z
    (
        ("##..", ".##.", "....", "...."),
        ("..#.", ".##.", ".#..", "...."),
    )
    * 2,
)


def _parse(art: tuple[str, ...]) -> Shape:
    return tuple(tuple(1 if ch == "#" else 0 for ch in line) for line in art)


TETROMINO_SHAPES: tuple[tuple[Shape, ...], ...] = tuple(
    tuple(_parse(rotation) for rotation in rotations) for rotations in _SHAPE_ART
)


def get_shape(kind: int, rotation: int) -> Shape:
    """Return the 4x4 matrix of a tetromino kind in a given rotation state."""
    if not 0 <= kind < NUM_TETROMINO:
        raise ValueError(f"unknown tetromino kind: {kind}")
    if not 0 <= rotation < ROTATION_STATES:
        raise ValueError(f"invalid rotation state: {rotation}")
    return TETROMINO_SHAPES[kind][rotation]