"""An n-by-n noughts and crosses board."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A player and the symbol it places: 1 or 2."""

    id: int
    symbol: int


class TicTacToe:
    """A square board that records the winner once a line is filled."""

    def __init__(self, n: int) -> None:
        self.board: list[list[int]] = [[0] * n for _ in range(n)]
        self.winner = 0

    def move(self, player: Player, row: int, col: int) -> int:
        """Place ``player``'s symbol; return the winner's id, or 0 if none yet."""
        n = len(self.board)
        if not (0 <= row < n and 0 <= col < n) or self.board[row][col] != 0:
            raise ValueError("Invalid Move")
        if player.symbol not in (1, 2):
            raise ValueError("Invalid Player")

        symbol = player.symbol
        self.board[row][col] = symbol
        lines = (
            self.board[row],
            [line[col] for line in self.board],
            [self.board[i][i] for i in range(n)],
            [self.board[i][n - i - 1] for i in range(n)],
        )
        if any(all(cell == symbol for cell in line) for line in lines):
            self.winner = player.id
        return self.winner


def main(argv: list[str] | None = None) -> int:
    """Play a short scripted game on a 3-by-3 board."""
    argparse.ArgumentParser(description="Tic-tac-toe demonstration.").parse_args(argv)
    game = TicTacToe(3)
    first = Player(1, 1)
    second = Player(2, -1)
    moves = [(first, 0, 0), (second, 1, 0), (first, 0, 1), (second, 1, 1), (first, 0, 2)]
    try:
        for player, row, col in moves:
            print(game.move(player, row, col))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0