"""
Board representation, setup, and text rendering for Kyoto Ginkaku.

This module provides:
- Board type definitions and accessors addressed by (column, row)
- The fixed initial layout
- Board and hand rendering to a bordered text grid
"""

from typing import List, Optional

from .piece import Piece, JAPANESE_PIECE_NAMES, CATEGORY_NAMES
from .utils import (
    BOARD_SIZE, SENTE, GOTE, SIDE_ARROW, Coord, coord_to_index
)

# 型エイリアス
Board = List[List[Optional[Piece]]]

EMPTY_CELL = '　　'
BORDER_LINE = '-－－' * BOARD_SIZE + '-'


def empty_board() -> Board:
    """空の盤面を作成"""
    return [[None for _ in range(BOARD_SIZE)] for __ in range(BOARD_SIZE)]


def clone_board(board: Board) -> Board:
    """Board の軽量クローン (Piece を新規生成)"""
    return [[(Piece(p.kind, p.owner) if p else None) for p in col] for col in board]


def get_piece(board: Board, coord: Coord) -> Optional[Piece]:
    """指定マスの駒のコピーを返す"""
    x, y = coord_to_index(coord)
    p = board[x][y]
    return p.clone() if p else None


def set_piece(board: Board, coord: Coord, piece: Optional[Piece]) -> None:
    """指定マスに駒を置く (None で空にする)"""
    x, y = coord_to_index(coord)
    board[x][y] = piece


def standard_setup() -> Board:
    """初期配置を作成"""
    board = empty_board()
    # 5筋から1筋の順
    gote_back = ['P', 'G', 'K', 'S', 'L+']
    sente_back = ['L+', 'S', 'K', 'G', 'P']

    for x, k in enumerate(gote_back):
        board[x][0] = Piece(k, GOTE)
    for x, k in enumerate(sente_back):
        board[x][BOARD_SIZE - 1] = Piece(k, SENTE)

    return board


def _render_cell(p: Optional[Piece]) -> str:
    if p is None:
        return EMPTY_CELL
    return f"{JAPANESE_PIECE_NAMES[p.kind]}{SIDE_ARROW[p.owner]}"


def render_board(board: Board) -> str:
    """盤面を枠付きの文字列に変換"""
    lines = [BORDER_LINE]
    for y in range(BOARD_SIZE):
        cells = [_render_cell(board[x][y]) for x in range(BOARD_SIZE)]
        lines.append('|' + '|'.join(cells) + '|')
        lines.append(BORDER_LINE)
    return '\n'.join(lines) + '\n'


def render_hand(hand: List[str]) -> str:
    """持ち駒を区分名の列に変換"""
    return ' '.join(CATEGORY_NAMES[c] for c in hand)


def render_state(state) -> str:
    """後手の持ち駒、盤面、先手の持ち駒の順で描画"""
    return (render_hand(state.hands[GOTE]) + '\n' +
            render_board(state.board) +
            render_hand(state.hands[SENTE]) + '\n')
