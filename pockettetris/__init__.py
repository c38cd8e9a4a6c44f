"""A small falling-block puzzle game: shapes, board, pieces, game flow and a terminal front end."""

__version__ = "0.1.0"