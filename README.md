# pockettetris

A compact falling-block puzzle game. Pieces drop onto a board 10 cells wide
and 18 cells tall. Each full row that is cleared scores 100 points. The game
ends when a newly spawned piece has no room. The best score of the session is
kept and can be viewed from the menu.

## Installing

```
pip install .
```

## Playing in the terminal

```
pockettetris
pockettetris --seed 42
```

`--seed` fixes the sequence of pieces, so a game can be repeated.

The terminal game is turn-based. It reads one line at a time from standard
input. Each character on the line is a key press. When the line ends, the
piece falls one row and the screen is printed again. An empty line (Enter on
its own) only advances the fall.

| Key               | Button |
|-------------------|--------|
| `a`, `h`          | left   |
| `d`, `l`          | right  |
| `w`, `k`, `r`     | rotate |
| `s`, `j`, space   | drop   |
| `q`               | quit   |

Keys are not case sensitive. Characters that have no binding are ignored.

The game opens at a menu with two entries, START GAME and HIGH SCORE:

- **left** / **right** move through the menu entries, or move the piece
  sideways.
- **rotate** chooses a menu entry or turns the piece a quarter turn. On the
  high-score screen it returns to the menu. On the game-over screen it
  clears the board and returns to the menu.
- **drop** sends the piece straight to the lowest place it fits and fixes it
  there.

When a piece can fall no further, it is fixed to the board, full rows are
cleared and the next piece appears at the top. On the board, `.` is an empty
cell, `#` is a fixed block and `@` is the falling piece.

## Using it as a library

```python
from pockettetris.grid import Grid

grid = Grid()
grid.set_cell(1, 2, 1)
assert grid.get_cell(1, 2) == 1
```

- `pockettetris.shapes.get_shape(kind, rotation)` returns the 4x4 mask of one
  of the seven tetrominoes (I, O, L, J, T, S, Z) in one of its four
  rotations. Any other kind or rotation raises `ValueError`.
- `pockettetris.grid.Grid` holds the board and has these methods:
  - `set_cell` ignores positions off the board and values other than 0 and 1.
  - `get_cell` raises `IndexError` for positions off the board.
  - `is_row_full` reports whether a row is full.
  - `shift_rows_down` removes a row and moves every row above it down one.
  - `clear_full_rows(on_clear)` removes every full row and returns how many
    it removed. If `on_clear(row, col)` is given, it is called as each cell is
    emptied.
- `pockettetris.piece` provides the falling piece:
  - `Piece` is the piece itself.
  - `spawn_piece(rng)` makes a random piece at the spawn position.
  - `can_move(grid, piece, x, y, rotation)` reports whether the piece fits
    there.
  - `lock_piece(grid, piece)` fixes the piece into the grid.
- `pockettetris.game.Game` runs the menu, play, game-over and high-score
  screens:
  - `press(button, now)` takes `Button` presses. `now` is a time in
    milliseconds.
  - `tick(now)` lets the piece fall one row once more than 500 ms have passed
    since the last fall.
  - `render()` returns the current screen as text.
  - `state` holds the current screen as a `GameState`.
  - Left, right and rotate presses within 100 ms of the last accepted move
    are ignored.

## What it does not do

The terminal game has no clock of its own. Pieces fall only when a line of
input ends. It draws plain text and does not read single key presses or
refresh the screen in place. The high score lasts only while the program
runs and is not saved.

## Running the tests

```
pip install ".[test]"
pytest
```