"""Unit tests for /src/chess/board.py"""

from typing import Callable

import pytest

from src.chess.board import EMPTY_FEN, STARTING_POSITION_FEN, Board
from src.chess.pieces import EMPTY_SQUARE, Color, Piece, PieceType
from src.chess.square import Square

BACK_RANK_ORDER = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Black on rows 0/1, white on rows 6/7, nothing in between"""
    board = Board.starting_position()

    for col, piece_type in enumerate(BACK_RANK_ORDER):
        assert board.piece(Square(0, col)) == Piece(piece_type, Color.BLACK)
        assert board.piece(Square(1, col)) == Piece(PieceType.PAWN, Color.BLACK)
        assert board.piece(Square(6, col)) == Piece(PieceType.PAWN, Color.WHITE)
        assert board.piece(Square(7, col)) == Piece(piece_type, Color.WHITE)

    for row in range(2, 6):
        for col in range(8):
            assert board.piece(Square(row, col)) == EMPTY_SQUARE


def test_kings_and_queens_on_the_expected_files() -> None:
    """Queen on the d-file, king on the e-file, for both colors"""
    board = Board.starting_position()
    assert board.piece(Square.from_algebraic("d1")) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.piece(Square.from_algebraic("e1")) == Piece(PieceType.KING, Color.WHITE)
    assert board.piece(Square.from_algebraic("d8")) == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.piece(Square.from_algebraic("e8")) == Piece(PieceType.KING, Color.BLACK)


def test_creating_board_after_e4() -> None:
    """Say, white moved the pawn from e2 to e4, and I want to load up the board in this position"""
    e4_fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
    board = Board.from_fen(e4_fen)
    assert board.piece(Square(4, 4)) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.piece(Square(6, 4)) == EMPTY_SQUARE
    assert len(board.locate_color(Color.WHITE)) == 16
    assert len(board.locate_color(Color.BLACK)) == 16


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION_FEN,
        EMPTY_FEN,
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        "2kr1b1r/p1p1pppp/2p2n2/3q2B1/6Q1/2NP4/PPP2PPP/R4RK1",
    ],
)
def test_to_fen(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


def test_board_has_64_squares() -> None:
    assert len(Board.from_fen(EMPTY_FEN).position) == 64
    assert len(Board.starting_position().position) == 64


# -- MUTATION ---
def test_move_piece_overwrites_destination() -> None:
    """Capturing is nothing more than overwriting the destination"""
    board = Board.from_fen("8/8/8/3p4/8/8/8/3R4")
    board.move_piece(Square(7, 3), Square(3, 3))
    assert board.piece(Square(3, 3)) == Piece(PieceType.ROOK, Color.WHITE)
    assert board.is_empty(Square(7, 3))
    assert board.locate_color(Color.BLACK) == []


def test_place_and_clear() -> None:
    board = Board.from_fen(EMPTY_FEN)
    knight = Piece(PieceType.KNIGHT, Color.BLACK)
    board.place(Square(2, 2), knight)
    assert board.piece(Square(2, 2)) == knight
    board.clear(Square(2, 2))
    assert board.is_empty(Square(2, 2))


# -- PATH CLEARANCE ---
@pytest.mark.parametrize(
    "from_sq, to_sq",
    [
        ("a1", "h1"),  # along a rank
        ("h1", "a1"),
        ("a1", "a8"),  # along a file
        ("a8", "a1"),
        ("a1", "h8"),  # diagonals
        ("h8", "a1"),
        ("h1", "a8"),
        ("a8", "h1"),
        ("d4", "d5"),  # neighbours: nothing in between
    ],
)
def test_path_clear_on_empty_board(from_sq: str, to_sq: str) -> None:
    board = Board.from_fen(EMPTY_FEN)
    assert board.is_path_clear(
        Square.from_algebraic(from_sq), Square.from_algebraic(to_sq)
    )


@pytest.mark.parametrize(
    "from_sq, to_sq, blocker",
    [
        ("a1", "h1", "d1"),
        ("a8", "a1", "a4"),
        ("a1", "h8", "e5"),
        ("h1", "a8", "b7"),
    ],
)
def test_path_blocked(
    from_sq: str,
    to_sq: str,
    blocker: str,
    fen_with_pieces: Callable[[dict[tuple[int, int], str]], str],
) -> None:
    blocking_square = Square.from_algebraic(blocker)
    board = Board.from_fen(
        fen_with_pieces({(blocking_square.row, blocking_square.col): "p"})
    )
    assert not board.is_path_clear(
        Square.from_algebraic(from_sq), Square.from_algebraic(to_sq)
    )


def test_end_points_are_not_part_of_the_path() -> None:
    """Pieces on the start and destination squares do not block"""
    board = Board.from_fen("8/8/8/8/8/8/8/R6r")
    assert board.is_path_clear(Square(7, 0), Square(7, 7))
