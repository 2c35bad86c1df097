"""
Move geometry validation for Kyoto Ginkaku.

This module provides:
- Displacement checks against each piece kind's movement table
- Derivation of the squares a sliding move passes over
- Path clearance checks against a board

The validator is pure geometry; it never looks at occupancy. Callers check
the returned squares against the board.
"""

from typing import List, Optional

from .piece import MOVE_OFFSETS
from .board import Board, get_piece
from .utils import SENTE, Coord, all_coords, coord_to_index


def _forward_delta(side: int, y1: int, y2: int) -> int:
    """手番の向きに揃えた段方向の差 (負が前進)"""
    return y2 - y1 if side == SENTE else y1 - y2


def intervening_squares(src: Coord, dst: Coord) -> List[Coord]:
    """src と dst の間にある (両端を含まない) 同一直線上のマス"""
    x1, y1 = coord_to_index(src)
    x2, y2 = coord_to_index(dst)
    vx, vy = x2 - x1, y2 - y1

    squares = []
    for coord in all_coords():
        x3, y3 = coord_to_index(coord)
        wx, wy = x3 - x1, y3 - y1
        if (vx * wx + vy * wy > 0
                and vx * wy - vy * wx == 0
                and vx * vx + vy * vy > wx * wx + wy * wy):
            squares.append(coord)
    return squares


def validate_move(side: int, src: Coord, dst: Coord, kind: str) -> Optional[List[Coord]]:
    """移動の形を検証。不可なら None、可なら空いている必要のあるマスのリスト"""
    x1, y1 = coord_to_index(src)
    x2, y2 = coord_to_index(dst)
    delta = (abs(x2 - x1), _forward_delta(side, y1, y2))
    if delta not in MOVE_OFFSETS[kind]:
        return None
    return intervening_squares(src, dst)


def is_path_clear(board: Board, squares: List[Coord]) -> bool:
    """指定マスがすべて空いているか"""
    return all(get_piece(board, sq) is None for sq in squares)
