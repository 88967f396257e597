import pytest

from lldkit.tictactoe import Player, TicTacToe, main

P1 = Player(1, 1)
P2 = Player(2, 2)


def test_scripted_game_row_win():
    game = TicTacToe(3)
    assert game.move(P1, 0, 0) == 0
    assert game.move(P2, 1, 0) == 0
    assert game.move(P1, 0, 1) == 0
    assert game.move(P2, 1, 1) == 0
    assert game.move(P1, 0, 2) == P1.id
    assert game.winner == P1.id


def test_column_win():
    game = TicTacToe(3)
    for row in range(3):
        game.move(P2, row, 2)
    assert game.winner == P2.id


def test_diagonal_and_anti_diagonal():
    game = TicTacToe(3)
    for i in range(3):
        game.move(P1, i, i)
    assert game.winner == P1.id

    other = TicTacToe(3)
    for i in range(3):
        other.move(P2, i, 2 - i)
    assert other.winner == P2.id


def test_move_records_symbol():
    game = TicTacToe(4)
    game.move(P2, 3, 1)
    assert game.board[3][1] == P2.symbol
    assert sum(cell != 0 for line in game.board for cell in line) == 1


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_bounds(row, col):
    with pytest.raises(ValueError, match="Invalid Move"):
        TicTacToe(3).move(P1, row, col)


def test_occupied_cell():
    game = TicTacToe(3)
    game.move(P1, 1, 1)
    with pytest.raises(ValueError, match="Invalid Move"):
        game.move(P2, 1, 1)


def test_invalid_symbol():
    game = TicTacToe(3)
    with pytest.raises(ValueError, match="Invalid Player"):
        game.move(Player(2, -1), 0, 0)
    assert game.board[0][0] == 0


def test_occupied_reported_before_bad_symbol():
    game = TicTacToe(3)
    game.move(P1, 0, 0)
    with pytest.raises(ValueError, match="Invalid Move"):
        game.move(Player(2, -1), 0, 0)


def test_main_stops_on_invalid_player(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "0\n"
    assert "Invalid Player" in captured.err