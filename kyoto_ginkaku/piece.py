"""
Piece kinds, conjugate pairs, reserve categories and movement tables.

This module defines:
- The nine piece kinds and their display glyphs
- The conjugate pairing every moved piece flips through
- The four reserve categories a captured piece collapses into
- Movement offsets for all piece kinds
"""

from typing import Dict, List, Optional, Tuple


class Piece:
    """軽量な駒表現 (__slots__ でオブジェクト生成・GC負荷を削減)。"""
    __slots__ = ("kind", "owner")

    def __init__(self, kind: str, owner: int):
        self.kind = kind
        self.owner = owner

    def clone(self) -> 'Piece':
        return Piece(self.kind, self.owner)

    def conjugated(self) -> 'Piece':
        """共役の駒を新しく作る"""
        return Piece(conjugate(self.kind), self.owner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.kind == other.kind and self.owner == other.owner

    def __hash__(self) -> int:
        return hash((self.kind, self.owner))

    def __repr__(self) -> str:
        return f"{self.kind}{'S' if self.owner==0 else 'G'}"

# 駒種コード。'L+' は香の対 (と)
ALL_KINDS = ['L', 'L+', 'S', 'B', 'G', 'N', 'R', 'P', 'K']

# 共役の対。動いた駒は必ず対の駒に変わる。王は不変
CONJUGATE_MAP: Dict[str, str] = {
    'L': 'L+', 'L+': 'L',
    'S': 'B', 'B': 'S',
    'G': 'N', 'N': 'G',
    'R': 'P', 'P': 'R',
    'K': 'K',
}

# 持ち駒の区分。取られた駒は区別を失い、対ごとにまとめられる
CATEGORIES = ['L/L+', 'S/B', 'G/N', 'R/P']
CATEGORY_OF: Dict[str, str] = {
    'L': 'L/L+', 'L+': 'L/L+',
    'S': 'S/B', 'B': 'S/B',
    'G': 'G/N', 'N': 'G/N',
    'R': 'R/P', 'P': 'R/P',
}

# 移動パターン: (筋方向の差の絶対値, 段方向の差)。負が前進方向
MOVE_OFFSETS: Dict[str, List[Tuple[int, int]]] = {
    'L': [(0, -1), (0, -2), (0, -3), (0, -4)],
    'L+': [(0, -1), (0, 1), (1, 0), (1, -1)],
    'S': [(0, -1), (1, 1), (1, -1)],
    'B': [(n, s * n) for n in range(1, 5) for s in (-1, 1)],
    'G': [(0, -1), (0, 1), (1, 0), (1, -1)],
    'N': [(1, -2)],
    'R': ([(0, s * n) for n in range(1, 5) for s in (-1, 1)] +
          [(n, 0) for n in range(1, 5)]),
    'P': [(0, -1)],
    'K': [(0, -1), (0, 1), (1, 0), (1, 1), (1, -1)],
}

# 駒の日本語名
JAPANESE_PIECE_NAMES = {
    'L': '香', 'L+': 'と', 'S': '銀', 'B': '角', 'G': '金',
    'N': '桂', 'R': '飛', 'P': '歩', 'K': '王',
}

# 日本語名から駒種への逆マップ (玉も王として扱う)
KIND_FROM_JP = {v: k for k, v in JAPANESE_PIECE_NAMES.items()}
KIND_FROM_JP['玉'] = 'K'

CATEGORY_NAMES = {'L/L+': '香と', 'S/B': '銀角', 'G/N': '金桂', 'R/P': '飛歩'}


def conjugate(kind: str) -> str:
    """駒種を共役の駒種に変換"""
    return CONJUGATE_MAP[kind]


def category_of(kind: str) -> Optional[str]:
    """取られたときの持ち駒区分。王は None"""
    return CATEGORY_OF.get(kind)
