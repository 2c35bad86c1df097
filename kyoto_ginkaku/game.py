"""
Game state and move application for Kyoto Ginkaku.

This module provides:
- GameState, an immutable-by-convention snapshot of board, turn and hands
- Victory, the terminal outcome of a king capture
- apply_move, the pure state transition function
- replay, applying a recorded sequence of moves
"""

from typing import Dict, Iterable, List, NamedTuple, Optional, Union

from .piece import Piece, MOVE_OFFSETS, category_of
from .board import Board, standard_setup, clone_board, get_piece, set_piece, render_state
from .rules import validate_move, is_path_clear
from .notation import Move, parse_move, format_move
from .utils import SENTE, GOTE, Coord, opponent, in_bounds, coord_to_index


class Victory(NamedTuple):
    """王を取った側の勝ち。これ以降の局面はない"""
    winner: int


class KifuError(ValueError):
    """棋譜の再生中に不正な手があった"""

    def __init__(self, number: int, text: str, reason: str):
        super().__init__(f"move {number} {text!r}: {reason}")
        self.number = number
        self.text = text
        self.reason = reason


class GameState:
    """局面 (盤面・手番・持ち駒)。apply_move は元の局面を変更しない"""

    def __init__(self, board: Optional[Board] = None, turn: int = SENTE,
                 hands: Optional[Dict[int, List[str]]] = None):
        self.board = board if board is not None else standard_setup()
        self.turn = turn
        # hands: 各手番の持ち駒区分の文字列 (順序は意味を持たない)
        self.hands = hands if hands is not None else {SENTE: [], GOTE: []}

    def clone(self) -> 'GameState':
        return GameState(clone_board(self.board), self.turn,
                         {SENTE: self.hands[SENTE][:], GOTE: self.hands[GOTE][:]})

    def is_legal(self, move: Move) -> bool:
        return apply_move(move, self) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (self.turn == other.turn and self.board == other.board and
                all(sorted(self.hands[o]) == sorted(other.hands[o]) for o in (SENTE, GOTE)))

    def __str__(self) -> str:
        return render_state(self)


Outcome = Union[GameState, Victory]


def initial_state() -> GameState:
    """初期局面 (先手番、持ち駒なし)"""
    return GameState()


def _apply_drop(move: Move, state: GameState) -> Optional[GameState]:
    """持ち駒を打つ"""
    if get_piece(state.board, move.dst) is not None:
        return None

    category = category_of(move.kind)
    hand = state.hands[move.side]
    if category is None or category not in hand:
        return None

    new_state = state.clone()
    # 同じ区分の駒は区別しないので最初に見つかったものを使う
    new_state.hands[move.side].remove(category)
    set_piece(new_state.board, move.dst, Piece(move.kind, move.side))
    new_state.turn = opponent(state.turn)
    return new_state


def _apply_board_move(move: Move, state: GameState) -> Optional[Outcome]:
    """盤上の駒を動かす"""
    squares = validate_move(move.side, move.src, move.dst, move.kind)
    if squares is None or not is_path_clear(state.board, squares):
        return None

    piece = get_piece(state.board, move.src)
    if piece is None or piece != Piece(move.kind, move.side):
        return None

    target = get_piece(state.board, move.dst)
    captured = None
    if target is not None:
        if target.owner == move.side:
            return None
        captured = category_of(target.kind)
        if captured is None:
            return Victory(move.side)

    new_state = state.clone()
    set_piece(new_state.board, move.dst, piece.conjugated())
    set_piece(new_state.board, move.src, None)
    if captured is not None:
        new_state.hands[move.side].append(captured)
    new_state.turn = opponent(state.turn)
    return new_state


def _on_board(coord: Optional[Coord]) -> bool:
    return coord is not None and in_bounds(*coord_to_index(coord))


def _is_well_formed(move: Move) -> bool:
    """駒種が既知で、座標がすべて盤内にあるか"""
    return (move.kind in MOVE_OFFSETS and _on_board(move.dst) and
            (move.src is None or _on_board(move.src)))


def apply_move(move: Move, state: GameState) -> Optional[Outcome]:
    """手を適用する。反則なら None、王を取れば Victory、それ以外は新しい局面"""
    if move.side != state.turn or not _is_well_formed(move):
        return None
    if move.src is None:
        return _apply_drop(move, state)
    return _apply_board_move(move, state)


def replay(moves: Iterable[Union[str, Move]], state: Optional[GameState] = None) -> Outcome:
    """棋譜を順に適用する。不正な手があれば KifuError"""
    result: Outcome = state if state is not None else initial_state()
    for number, entry in enumerate(moves, 1):
        move = entry if isinstance(entry, Move) else parse_move(entry)
        if isinstance(entry, Move):
            text = format_move(move) if _is_well_formed(move) else repr(move)
        else:
            text = entry
        if isinstance(result, Victory):
            raise KifuError(number, text, "game is already over")
        if move is None:
            raise KifuError(number, text, "invalid notation")
        outcome = apply_move(move, result)
        if outcome is None:
            raise KifuError(number, text, "illegal move")
        result = outcome
    return result
