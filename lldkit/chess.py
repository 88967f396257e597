"""A chess board with pieces that validate their own moves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


@dataclass(frozen=True, order=True)
class Position:
    """A square, ordered by row and then by column."""

    row: int = 0
    col: int = 0


class Piece(ABC):
    """A piece of one colour standing on one square."""

    def __init__(self, position: Position, color: Color) -> None:
        self.position = position
        self.color = color

    @abstractmethod
    def is_valid_move(self, destination: Position, board: Board) -> bool:
        """Whether this piece may move to ``destination`` on ``board``."""

    def move(self, destination: Position, board: Board) -> bool:
        """Move to ``destination`` if allowed; return whether it moved."""
        if not self.is_valid_move(destination, board):
            return False
        board.make_move(self, destination)
        return True

    @property
    @abstractmethod
    def symbol(self) -> str:
        """One letter, upper case for white and lower case for black."""


class Board:
    """Pieces keyed by the square they stand on."""

    def __init__(self) -> None:
        self.pieces: dict[Position, Piece] = {}

    def make_move(self, piece: Piece, destination: Position) -> None:
        """Move ``piece`` to ``destination``, replacing whatever stood there."""
        self.pieces.pop(piece.position, None)
        piece.position = destination
        self.pieces[destination] = piece

    def get(self, position: Position) -> Piece | None:
        return self.pieces.get(position)

    def is_king_in_check(self, color: Color) -> bool:
        """Whether any opposing piece could move onto the king of ``color``."""
        king_squares = [
            position
            for position, piece in self.pieces.items()
            if isinstance(piece, King) and piece.color == color
        ]
        attackers = [piece for piece in list(self.pieces.values()) if piece.color != color]
        return any(
            attacker.is_valid_move(square, self)
            for square in king_squares
            for attacker in attackers
        )


class King(Piece):
    """Moves one square in any direction."""

    def is_valid_move(self, destination: Position, board: Board) -> bool:
        row_step = abs(destination.row - self.position.row)
        col_step = abs(destination.col - self.position.col)
        occupant = board.get(destination)
        if occupant is not None and occupant.color == self.color:
            return False
        return row_step <= 1 and col_step <= 1

    @property
    def symbol(self) -> str:
        return "K" if self.color is Color.WHITE else "k"


class Chess:
    """A game holding one board."""

    def __init__(self) -> None:
        self.board = Board()

    def setup(self) -> None:
        """Place the starting pieces."""
        for position, color in ((Position(0, 4), Color.WHITE), (Position(7, 4), Color.BLACK)):
            self.board.pieces[position] = King(position, color)