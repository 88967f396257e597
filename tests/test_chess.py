import pytest

from lldkit.chess import Board, Chess, Color, King, Piece, Position


def _board_with(*pieces):
    board = Board()
    for piece in pieces:
        board.pieces[piece.position] = piece
    return board


def test_position_ordering():
    squares = [Position(1, 0), Position(0, 5), Position(0, 2)]
    assert sorted(squares) == [Position(0, 2), Position(0, 5), Position(1, 0)]
    assert Position() == Position(0, 0)


@pytest.mark.parametrize("dr, dc", [(1, 0), (0, 1), (-1, -1), (1, -1), (-1, 0)])
def test_king_moves_one_square(dr, dc):
    king = King(Position(3, 3), Color.WHITE)
    board = _board_with(king)
    assert king.is_valid_move(Position(3 + dr, 3 + dc), board) is True


@pytest.mark.parametrize("dest", [Position(5, 3), Position(3, 1), Position(1, 5)])
def test_king_rejects_far_squares(dest):
    king = King(Position(3, 3), Color.WHITE)
    assert king.is_valid_move(dest, _board_with(king)) is False


def test_king_cannot_take_own_colour():
    king = King(Position(3, 3), Color.WHITE)
    friend = King(Position(3, 4), Color.WHITE)
    assert king.is_valid_move(Position(3, 4), _board_with(king, friend)) is False


def test_king_captures_other_colour():
    king = King(Position(3, 3), Color.WHITE)
    enemy = King(Position(4, 4), Color.BLACK)
    board = _board_with(king, enemy)
    assert king.move(Position(4, 4), board) is True
    assert board.get(Position(4, 4)) is king
    assert list(board.pieces) == [Position(4, 4)]


def test_move_updates_board():
    king = King(Position(0, 4), Color.WHITE)
    board = _board_with(king)
    assert king.move(Position(1, 4), board) is True
    assert board.get(Position(0, 4)) is None
    assert board.get(Position(1, 4)) is king
    assert king.position == Position(1, 4)


def test_invalid_move_leaves_board_unchanged():
    king = King(Position(0, 4), Color.WHITE)
    board = _board_with(king)
    assert king.move(Position(5, 4), board) is False
    assert board.pieces == {Position(0, 4): king}


def test_setup_places_kings():
    game = Chess()
    game.setup()
    white = game.board.get(Position(0, 4))
    black = game.board.get(Position(7, 4))
    assert (white.symbol, white.color) == ("K", Color.WHITE)
    assert (black.symbol, black.color) == ("k", Color.BLACK)
    assert game.board.is_king_in_check(Color.WHITE) is False


def test_piece_is_abstract():
    with pytest.raises(TypeError):
        Piece(Position(), Color.WHITE)