"""Snakes and ladders played by turns until someone lands on the last square."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Player:
    id: int
    name: str


class _Roller(Protocol):
    def roll(self) -> int: ...


class Dice:
    """``count`` dice whose roll is uniform between ``count`` and ``6 * count``."""

    def __init__(self, count: int, rng: random.Random | None = None) -> None:
        if count < 1:
            raise ValueError("at least one die is needed")
        self.count = count
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        return self._rng.randint(self.count, self.count * 6)


@dataclass(frozen=True)
class Jumper:
    """A snake or a ladder: landing on ``start`` moves the player to ``end``."""

    start: int
    end: int


class GameBoard:
    """The board, the players' turn order and where each player stands."""

    def __init__(
        self,
        dice: _Roller,
        players: Iterable[Player],
        snakes: Iterable[Jumper],
        ladders: Iterable[Jumper],
        positions: Mapping[str, int],
        board_size: int,
    ) -> None:
        self.dice = dice
        self.turns: deque[Player] = deque(players)
        self.snakes = list(snakes)
        self.ladders = list(ladders)
        self.positions = dict(positions)
        self.board_size = board_size

    def _apply_jumpers(self, position: int) -> int:
        for jumper in (*self.ladders, *self.snakes):
            if jumper.start == position:
                position = jumper.end
        return position

    def start_game(self) -> Player | None:
        """Play turns until a player wins; return the winner, or None if all drop out.

        A player whose roll would overshoot the last square leaves the game.
        """
        while self.turns:
            player = self.turns.popleft()
            position = self.positions.get(player.name, 0) + self.dice.roll()

            if position > self.board_size:
                print("Move out of bounds. Next player ", end="")
                continue

            position = self._apply_jumpers(position)
            if position == self.board_size:
                self.positions[player.name] = position
                print(f"{player.name} has won the game", end="")
                return player

            self.positions[player.name] = position
            self.turns.append(player)
            print(f"{player.name} is at position {position}")
        return None


def main(argv: list[str] | None = None) -> int:
    """Play one game between two players on a 100-square board."""
    parser = argparse.ArgumentParser(description="Snakes and ladders demonstration.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    dice = Dice(1, random.Random(args.seed))
    players = [Player(1, "Alice"), Player(2, "Bob")]
    snakes = [Jumper(14, 7), Jumper(31, 4), Jumper(38, 20), Jumper(84, 28), Jumper(97, 78)]
    ladders = [Jumper(3, 22), Jumper(5, 8), Jumper(11, 26), Jumper(20, 29), Jumper(27, 56)]
    positions = {player.name: 0 for player in players}

    GameBoard(dice, players, snakes, ladders, positions, 100).start_game()
    print()
    return 0