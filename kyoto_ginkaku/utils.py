"""
Constants, coordinate conversion, and common helpers for Kyoto Ginkaku.

This module provides:
- Board size and the (column, row) coordinate model
- Symbol tables for columns, rows and sides used by the notation
- Coordinate <-> board index conversion
- Display constants and color definitions for the viewer
"""

import os
from typing import Dict, Iterator, Tuple

# 座標 (筋, 段)。どちらも 1..5
Coord = Tuple[int, int]

# --- パス設定 ---
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
assets_path = os.path.join(base_path, "assets")
font_path = os.path.join(assets_path, "YujiSyuku-Regular.ttf")

# 盤面の基本設定
BOARD_SIZE = 5
COLUMNS = (1, 2, 3, 4, 5)
ROWS = (1, 2, 3, 4, 5)

# 手番 (駒の持ち主)
SENTE = 0
GOTE = 1

# 座標系と表示関連
JAPANESE_Y_COORDS = ['一', '二', '三', '四', '五']
COLUMN_FROM_SYMBOL: Dict[str, int] = {str(c): c for c in COLUMNS}
ROW_FROM_SYMBOL: Dict[str, int] = {v: i + 1 for i, v in enumerate(JAPANESE_Y_COORDS)}
ROW_FROM_SYMBOL.update({str(r): r for r in ROWS})

# ☗☖ は表示用、▲△ は棋譜用。どちらも受け付ける
SIDE_FROM_SYMBOL: Dict[str, int] = {'☗': SENTE, '▲': SENTE, '☖': GOTE, '△': GOTE}
JAPANESE_TURN_SYMBOL = {SENTE: '☗', GOTE: '☖'}
JAPANESE_TURN_NAME = {SENTE: '先手', GOTE: '後手'}
SIDE_ARROW = {SENTE: '↑', GOTE: '↓'}
DROP_SYMBOL = '打'

# ビューアのウィンドウ設定
SQUARE = 72
BOARD_PIXEL_WIDTH = SQUARE * BOARD_SIZE
BOARD_PIXEL_HEIGHT = SQUARE * BOARD_SIZE
COORD_MARGIN = 30
WINDOW_PADDING_X = 40
WINDOW_PADDING_Y = 30
HAND_AREA_HEIGHT = 60
KIFU_WINDOW_WIDTH = 240
INPUT_AREA_HEIGHT = 40
KIFU_ITEM_HEIGHT = 20

WIDTH = (BOARD_PIXEL_WIDTH + WINDOW_PADDING_X * 3 + KIFU_WINDOW_WIDTH +
         COORD_MARGIN * 2)
HEIGHT = (WINDOW_PADDING_Y * 2 + HAND_AREA_HEIGHT * 2 + BOARD_PIXEL_HEIGHT +
          COORD_MARGIN * 2 + INPUT_AREA_HEIGHT)

BOARD_START_X = WINDOW_PADDING_X + COORD_MARGIN
BOARD_START_Y = WINDOW_PADDING_Y + HAND_AREA_HEIGHT + COORD_MARGIN
FPS = 30

# 色の定義
WHITE = (223, 235, 234)
BLACK = (20, 20, 20)
GRAY = (171, 214, 211)
RED = (255, 80, 80)
BLUE = (120, 160, 255)
TATAMI_GREEN = (140, 164, 138)
DARK_BROWN = (50, 44, 40)
BOARD_COLOR = (187, 155, 82)
TITLE_COLOR = (230, 190, 130)


def opponent(side: int) -> int:
    """相手の手番を返す"""
    return 1 - side


def in_bounds(x: int, y: int) -> bool:
    """座標が盤面内かチェック"""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def coord_to_index(coord: Coord) -> Tuple[int, int]:
    """(筋, 段) を盤面インデックス (x, y) に変換。1筋が右端 (x=4)"""
    col, row = coord
    return BOARD_SIZE - col, row - 1


def index_to_coord(x: int, y: int) -> Coord:
    """盤面インデックスを (筋, 段) に変換"""
    return BOARD_SIZE - x, y + 1


def all_coords() -> Iterator[Coord]:
    """盤上の全25マスを列挙"""
    for col in COLUMNS:
        for row in ROWS:
            yield col, row


def coords_to_kifu(coord: Coord) -> str:
    """座標を棋譜記法 (例: 4四) に変換"""
    col, row = coord
    return f"{col}{JAPANESE_Y_COORDS[row - 1]}"
