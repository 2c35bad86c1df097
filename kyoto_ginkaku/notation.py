"""
Move notation parsing and formatting.

A move is written without whitespace as:

    side  dst-column  dst-row  piece  ( '打' | '(' src-column src-row ')' )

e.g. ``☗4四玉(35)`` or ``▲53飛打``. Rows may be kanji or digits.
"""

from typing import Iterator, NamedTuple, Optional

from .piece import JAPANESE_PIECE_NAMES, KIND_FROM_JP
from .utils import (
    COLUMN_FROM_SYMBOL, ROW_FROM_SYMBOL, SIDE_FROM_SYMBOL, JAPANESE_TURN_SYMBOL,
    DROP_SYMBOL, Coord, coords_to_kifu
)


class NotationError(ValueError):
    """棋譜文字列を解釈できない"""


class Move(NamedTuple):
    """指し手。src が None なら持ち駒を打つ手"""
    side: int
    dst: Coord
    kind: str
    src: Optional[Coord] = None

    @property
    def is_drop(self) -> bool:
        return self.src is None


def _parse_coord(it: Iterator[str]) -> Optional[Coord]:
    col = COLUMN_FROM_SYMBOL.get(next(it, ''))
    row = ROW_FROM_SYMBOL.get(next(it, ''))
    if col is None or row is None:
        return None
    return col, row


def parse_move(text: str, strict: bool = False) -> Optional[Move]:
    """棋譜文字列を指し手に変換。解釈できなければ None

    strict=False のときは完結した指し手の後ろの文字を無視する。
    """
    it = iter(text)

    side = SIDE_FROM_SYMBOL.get(next(it, ''))
    if side is None:
        return None

    dst = _parse_coord(it)
    if dst is None:
        return None

    kind = KIND_FROM_JP.get(next(it, ''))
    if kind is None:
        return None

    c = next(it, '')
    if c == DROP_SYMBOL:
        src = None
    elif c == '(':
        src = _parse_coord(it)
        if src is None or next(it, '') != ')':
            return None
    else:
        return None

    if strict and next(it, None) is not None:
        return None
    return Move(side, dst, kind, src)


def must_parse(text: str) -> Move:
    """parse_move の例外版"""
    move = parse_move(text)
    if move is None:
        raise NotationError(f"invalid move notation: {text!r}")
    return move


def format_move(move: Move) -> str:
    """指し手を棋譜文字列に変換"""
    text = (f"{JAPANESE_TURN_SYMBOL[move.side]}{coords_to_kifu(move.dst)}"
            f"{JAPANESE_PIECE_NAMES[move.kind]}")
    if move.src is None:
        return text + DROP_SYMBOL
    return text + f"({move.src[0]}{move.src[1]})"
