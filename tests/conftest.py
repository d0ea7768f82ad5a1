"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import BOARD_DIMENSIONS

PieceLayout = dict[tuple[int, int], str]


def layout_to_fen(layout: PieceLayout) -> str:
    """{(row, col): FEN character} -> piece placement part of a FEN string (row 0 first)"""
    fen_rows: list[str] = []
    for row in range(BOARD_DIMENSIONS[0]):
        fen_row = ""
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            if (row, col) in layout:
                if empty_count:
                    fen_row += str(empty_count)
                    empty_count = 0
                fen_row += layout[(row, col)]
            else:
                empty_count += 1
        if empty_count:
            fen_row += str(empty_count)
        fen_rows.append(fen_row)
    return "/".join(fen_rows)


@pytest.fixture
def fen_with_pieces() -> Callable[[PieceLayout], str]:
    """Call the inner function with a {(row, col): 'P'} layout to get a placement with only those pieces on it"""
    return layout_to_fen
