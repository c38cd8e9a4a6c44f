"""Game flow: menu, play, high score and game-over screens driven by buttons and time."""

from __future__ import annotations

import random
from collections.abc import Callable
from enum import Enum, auto

from .grid import Grid
from .piece import Piece, can_move, lock_piece, spawn_piece

FALL_INTERVAL = 500
BUTTON_DELAY = 100
SCORE_FACTOR = 100

MENU_ITEMS: tuple[tuple[str, str], ...] = (("START", "GAME"), ("HIGH", "SCORE"))

EMPTY_CHAR = "."
LOCKED_CHAR = "#"
PIECE_CHAR = "@"


class GameState(Enum):
    MENU = auto()
    GAME = auto()
    GAME_OVER = auto()
    HIGH_SCORE = auto()


class Button(Enum):
    LEFT = auto()
    RIGHT = auto()
    ROTATE = auto()
    DROP = auto()


class Game:
    """One session of the game, advanced by button presses and clock ticks in milliseconds."""

    def __init__(
        self,
        rng: random.Random | None = None,
        on_clear: Callable[[int, int], None] | None = None,
    ) -> None:
        self.rng = rng
        self.on_clear = on_clear
        self.grid = Grid()
        self.piece: Piece = spawn_piece(rng)
        self.state = GameState.MENU
        self.score = 0
        self.high_score = 0
        self.menu_index = 0
        self.last_fall_time = 0
        self.last_button_press = 0

    def start(self) -> None:
        """Begin a new round on an empty grid."""
        self.grid.clear()
        self.score = 0
        self.piece = spawn_piece(self.rng)
        self.state = GameState.GAME

    def press(self, button: Button, now: int) -> None:
        """Handle a button press at time ``now``."""
        if self.state is GameState.MENU:
            self._press_menu(button)
        elif self.state is GameState.GAME:
            self._press_game(button, now)
        elif button is Button.ROTATE:
            if self.state is GameState.HIGH_SCORE:
                self.state = GameState.MENU
            else:
                self.grid.clear()
                self.score = 0
                self.piece = spawn_piece(self.rng)
                self.state = GameState.MENU

    def tick(self, now: int) -> None:
        """Let the piece fall one row if the fall interval has passed."""
        if self.state is not GameState.GAME:
            return
        if now - self.last_fall_time > FALL_INTERVAL:
            if not self._try_move(0, 1, self.piece.rotation):
                self._settle()
            self.last_fall_time = now

    def render(self) -> str:
        """Return the current screen as text."""
        if self.state is GameState.MENU:
            return self._render_menu()
        if self.state is GameState.HIGH_SCORE:
            return "\n".join(
                ["HIGH SCORE", str(self.high_score), "", "PRESS ROTATE TO EXIT"]
            )
        if self.state is GameState.GAME_OVER:
            return "\n".join(
                ["GAME OVER", f"SCORE: {self.score}", "", "PRESS ROTATE TO RESET"]
            )
        return self._render_board()

    def _press_menu(self, button: Button) -> None:
        count = len(MENU_ITEMS)
        if button is Button.LEFT:
            self.menu_index = (self.menu_index - 1) % count
        elif button is Button.RIGHT:
            self.menu_index = (self.menu_index + 1) % count
        elif button is Button.ROTATE:
            if self.menu_index == 0:
                self.start()
            else:
                self.state = GameState.HIGH_SCORE

    def _press_game(self, button: Button, now: int) -> None:
        if button is Button.DROP:
            while self._try_move(0, 1, self.piece.rotation):
                pass
            self._settle()
            return
        if now - self.last_button_press <= BUTTON_DELAY:
            return
        moved = False
        if button is Button.LEFT:
            moved = self._try_move(-1, 0, self.piece.rotation)
        elif button is Button.RIGHT:
            moved = self._try_move(1, 0, self.piece.rotation)
        elif button is Button.ROTATE:
            moved = self._try_move(0, 0, (self.piece.rotation + 1) % 4)
        if moved:
            self.last_button_press = now

    def _try_move(self, dx: int, dy: int, rotation: int) -> bool:
        piece = self.piece
        x, y = piece.x + dx, piece.y + dy
        if not can_move(self.grid, piece, x, y, rotation):
            return False
        piece.x, piece.y, piece.rotation = x, y, rotation
        return True

    def _settle(self) -> None:
        lock_piece(self.grid, self.piece)
        self.score += self.grid.clear_full_rows(self.on_clear) * SCORE_FACTOR
        self.piece = spawn_piece(self.rng)
        piece = self.piece
        if not can_move(self.grid, piece, piece.x, piece.y, piece.rotation):
            self.state = GameState.GAME_OVER
            self.high_score = max(self.high_score, self.score)

    def _render_menu(self) -> str:
        lines = ["TETRIS"]
        for index, words in enumerate(MENU_ITEMS):
            for position, word in enumerate(words):
                marker = ">" if index == self.menu_index and position == 0 else " "
                lines.append(f"{marker} {word}")
        return "\n".join(lines)

    def _render_board(self) -> str:
        rows = [
            [LOCKED_CHAR if cell else EMPTY_CHAR for cell in line]
            for line in self.grid.cells
        ]
        for r, line in enumerate(self.piece.shape()):
            for c, cell in enumerate(line):
                gy, gx = self.piece.y + r, self.piece.x + c
                if cell and self.grid.in_bounds(gy, gx):
                    rows[gy][gx] = PIECE_CHAR
        return "\n".join([f"SCORE: {self.score}", *("".join(row) for row in rows)])