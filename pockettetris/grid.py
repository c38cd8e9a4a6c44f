"""The playing field: a fixed grid of empty (0) and filled (1) cells."""

from __future__ import annotations

from collections.abc import Callable

GRID_ROWS = 18
GRID_COLS = 10


class Grid:
    """A rectangular board of cells, row 0 at the top."""

    def __init__(self, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> None:
        self.rows = rows
        self.cols = cols
        self._cells = [[0] * cols for _ in range(rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def cells(self) -> tuple[tuple[int, ...], ...]:
        """A read-only snapshot of the board."""
        return tuple(tuple(row) for row in self._cells)

    def clear(self) -> None:
        """Empty every cell."""
        self._cells = [[0] * self.cols for _ in range(self.rows)]

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Set a cell to 0 or 1; positions off the board and other values are ignored."""
        if self.in_bounds(row, col) and value in (0, 1):
            self._cells[row][col] = int(value)

    def get_cell(self, row: int, col: int) -> int:
        """Return the value of a cell; raise IndexError if it is off the board."""
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return self._cells[row][col]

    def is_row_full(self, row: int) -> bool:
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} is outside the grid")
        return all(self._cells[row])

    def shift_rows_down(self, from_row: int) -> None:
        """Drop every row above ``from_row`` by one, discarding ``from_row`` and emptying the top."""
        if not 0 <= from_row < self.rows:
            raise IndexError(f"row {from_row} is outside the grid")
        del self._cells[from_row]
        self._cells.insert(0, [0] * self.cols)

    def clear_full_rows(self, on_clear: Callable[[int, int], None] | None = None) -> int:
        """Remove all full rows and return how many were removed.

        ``on_clear(row, col)`` is called after each cell of a full row is emptied,
        before the rows above it drop down.
        """
        cleared = 0
        row = self.rows - 1
        while row >= 0:
            if self.is_row_full(row):
                for col in range(self.cols):
                    self._cells[row][col] = 0
                    if on_clear is not None:
                        on_clear(row, col)
                self.shift_rows_down(row)
                cleared += 1
            else:
                row -= 1
        return cleared