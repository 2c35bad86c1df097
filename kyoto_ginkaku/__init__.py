"""
Kyoto Ginkaku Package

A rules engine for Kyoto Ginkaku, a 5x5 shogi variant where every moved piece
turns into its conjugate and captured pieces join grouped reserve categories.

Modules:
- utils: Constants and the (column, row) coordinate model
- piece: Piece kinds, conjugate pairs, reserve categories, movement tables
- board: Board representation, initial layout and text rendering
- notation: Move notation parsing and formatting
- rules: Move geometry validation
- game: Game state and move application
- main: pygame viewer entry point
"""

from .piece import Piece, conjugate, category_of
from .board import Board, standard_setup, render_board, render_state
from .notation import Move, NotationError, parse_move, must_parse, format_move
from .rules import validate_move
from .game import GameState, Victory, KifuError, apply_move, initial_state, replay
from .utils import SENTE, GOTE

__version__ = "1.0.0"
__all__ = [
    'Piece', 'conjugate', 'category_of', 'Board', 'standard_setup',
    'render_board', 'render_state', 'Move', 'NotationError', 'parse_move',
    'must_parse', 'format_move', 'validate_move', 'GameState', 'Victory',
    'KifuError', 'apply_move', 'initial_state', 'replay', 'SENTE', 'GOTE',
]
