"""
Viewer entry point and game loop for Kyoto Ginkaku.

This module provides:
- A pygame window drawing the board, both hands and the move list
- A notation input line: typed moves are applied with apply_move
- A text-only mode printing the initial layout
"""

import sys
from typing import List, Optional, Tuple

import pygame

from .board import render_state
from .game import GameState, Victory, apply_move, initial_state
from .notation import parse_move, format_move
from .piece import JAPANESE_PIECE_NAMES, CATEGORY_NAMES
from .utils import (
    WIDTH, HEIGHT, FPS, SQUARE, BOARD_SIZE, BOARD_START_X, BOARD_START_Y,
    BOARD_PIXEL_WIDTH, BOARD_PIXEL_HEIGHT, COORD_MARGIN, HAND_AREA_HEIGHT,
    WINDOW_PADDING_X, WINDOW_PADDING_Y, KIFU_WINDOW_WIDTH, KIFU_ITEM_HEIGHT,
    INPUT_AREA_HEIGHT, SENTE, GOTE, SIDE_FROM_SYMBOL, JAPANESE_TURN_SYMBOL,
    JAPANESE_TURN_NAME, JAPANESE_Y_COORDS, WHITE, BLACK, GRAY, RED, BLUE,
    TATAMI_GREEN, DARK_BROWN, BOARD_COLOR, TITLE_COLOR, font_path
)

Fonts = Tuple[pygame.font.Font, pygame.font.Font, pygame.font.Font]


class ViewState:
    """ビューアの状態 (現在の局面、棋譜、入力欄、メッセージ)"""

    def __init__(self, state: Optional[GameState] = None):
        self.state = state if state is not None else initial_state()
        self.kifu: List[str] = []
        self.input_text = ''
        self.message = ''
        self.winner: Optional[int] = None

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    def submit(self) -> bool:
        """入力欄の手を適用する。適用できたら True"""
        text = self.input_text.strip()
        self.input_text = ''
        if self.game_over or not text:
            return False
        # 手番記号は省略可
        if text[0] not in SIDE_FROM_SYMBOL:
            text = JAPANESE_TURN_SYMBOL[self.state.turn] + text

        move = parse_move(text)
        if move is None:
            self.message = f"読めない手です: {text}"
            return False
        outcome = apply_move(move, self.state)
        if outcome is None:
            self.message = f"指せない手です: {text}"
            return False

        self.kifu.append(format_move(move))
        if isinstance(outcome, Victory):
            self.winner = outcome.winner
            self.message = f"{JAPANESE_TURN_NAME[outcome.winner]}の勝ち"
        else:
            self.state = outcome
            self.message = ''
        return True


def load_fonts() -> Fonts:
    """フォントを読み込む。失敗時はシステムフォントにフォールバック"""
    try:
        return (pygame.font.Font(font_path, 18), pygame.font.Font(font_path, 32),
                pygame.font.Font(font_path, 14))
    except (OSError, pygame.error):
        return (pygame.font.SysFont("MS Mincho", 18), pygame.font.SysFont("MS Mincho", 32),
                pygame.font.SysFont("MS Mincho", 14))


def draw_board(screen: pygame.Surface, state: GameState, fonts: Fonts) -> None:
    """盤面と駒を描画"""
    font, large, _ = fonts
    pygame.draw.rect(screen, BOARD_COLOR, (BOARD_START_X - COORD_MARGIN, BOARD_START_Y - COORD_MARGIN,
                                           BOARD_PIXEL_WIDTH + COORD_MARGIN * 2,
                                           BOARD_PIXEL_HEIGHT + COORD_MARGIN * 2))

    for i in range(BOARD_SIZE + 1):
        line_width = 2 if i in [0, BOARD_SIZE] else 1
        pygame.draw.line(screen, BLACK, (BOARD_START_X + i * SQUARE, BOARD_START_Y),
                         (BOARD_START_X + i * SQUARE, BOARD_START_Y + BOARD_PIXEL_HEIGHT), line_width)
        pygame.draw.line(screen, BLACK, (BOARD_START_X, BOARD_START_Y + i * SQUARE),
                         (BOARD_START_X + BOARD_PIXEL_WIDTH, BOARD_START_Y + i * SQUARE), line_width)

    # 座標表示 (上に筋、右に段)
    for i in range(BOARD_SIZE):
        num = font.render(str(BOARD_SIZE - i), True, BLACK)
        screen.blit(num, (BOARD_START_X + i * SQUARE + (SQUARE - num.get_width()) // 2,
                          BOARD_START_Y - COORD_MARGIN + 5))
        kanji = font.render(JAPANESE_Y_COORDS[i], True, BLACK)
        screen.blit(kanji, (BOARD_START_X + BOARD_PIXEL_WIDTH + 8,
                            BOARD_START_Y + i * SQUARE + (SQUARE - kanji.get_height()) // 2))

    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            p = state.board[x][y]
            if not p:
                continue
            surf = large.render(JAPANESE_PIECE_NAMES[p.kind], True, BLACK if p.owner == SENTE else RED)
            if p.owner == GOTE:
                surf = pygame.transform.rotate(surf, 180)
            center = (BOARD_START_X + x * SQUARE + SQUARE // 2, BOARD_START_Y + y * SQUARE + SQUARE // 2)
            screen.blit(surf, surf.get_rect(center=center))


def draw_hands(screen: pygame.Surface, state: GameState, fonts: Fonts) -> None:
    """持ち駒を描画 (後手は盤の上、先手は盤の下)"""
    font = fonts[0]
    hand_y = {GOTE: BOARD_START_Y - COORD_MARGIN - HAND_AREA_HEIGHT,
              SENTE: BOARD_START_Y + BOARD_PIXEL_HEIGHT + COORD_MARGIN}
    for owner in (SENTE, GOTE):
        rect = pygame.Rect(BOARD_START_X - COORD_MARGIN, hand_y[owner],
                           BOARD_PIXEL_WIDTH + COORD_MARGIN * 2, HAND_AREA_HEIGHT)
        pygame.draw.rect(screen, DARK_BROWN, rect)
        names = ' '.join(CATEGORY_NAMES[c] for c in state.hands[owner])
        label = f"{JAPANESE_TURN_SYMBOL[owner]} {names}"
        screen.blit(font.render(label, True, TITLE_COLOR), (rect.x + 10, rect.y + 10))


def draw_kifu(screen: pygame.Surface, view: ViewState, fonts: Fonts) -> None:
    """手番と棋譜リストを描画"""
    font, _, mono = fonts
    kifu_x = BOARD_START_X + BOARD_PIXEL_WIDTH + COORD_MARGIN + WINDOW_PADDING_X
    kifu_rect = pygame.Rect(kifu_x, WINDOW_PADDING_Y, KIFU_WINDOW_WIDTH, HEIGHT - WINDOW_PADDING_Y * 2)
    pygame.draw.rect(screen, WHITE, kifu_rect)
    pygame.draw.rect(screen, BLACK, kifu_rect, 2)

    turn_text = f"手番: {JAPANESE_TURN_NAME[view.state.turn]}" if not view.game_over else "終局"
    screen.blit(font.render(turn_text, True, BLACK), (kifu_x + 10, WINDOW_PADDING_Y + 8))

    max_lines = (kifu_rect.height - 40) // KIFU_ITEM_HEIGHT
    start = max(0, len(view.kifu) - max_lines)
    for i, move in enumerate(view.kifu[start:]):
        screen.blit(mono.render(f"{start + i + 1}. {move}", True, BLACK),
                    (kifu_x + 15, WINDOW_PADDING_Y + 36 + i * KIFU_ITEM_HEIGHT))


def draw_input(screen: pygame.Surface, view: ViewState, fonts: Fonts) -> None:
    """入力欄とメッセージを描画"""
    font = fonts[0]
    rect = pygame.Rect(WINDOW_PADDING_X, HEIGHT - WINDOW_PADDING_Y - INPUT_AREA_HEIGHT + 10,
                       BOARD_PIXEL_WIDTH + COORD_MARGIN * 2, INPUT_AREA_HEIGHT - 10)
    pygame.draw.rect(screen, GRAY, rect)
    pygame.draw.rect(screen, BLUE, rect, 2)
    screen.blit(font.render(f"> {view.input_text}", True, BLACK), (rect.x + 8, rect.y + 6))
    if view.message:
        screen.blit(font.render(view.message, True, RED if not view.game_over else BLUE),
                    (rect.x + 8, rect.y - 24))


def draw_game_elements(screen: pygame.Surface, view: ViewState, fonts: Fonts) -> None:
    """ゲーム要素を描画"""
    screen.fill(TATAMI_GREEN)
    draw_hands(screen, view.state, fonts)
    draw_board(screen, view.state, fonts)
    draw_kifu(screen, view, fonts)
    draw_input(screen, view, fonts)


def handle_event(view: ViewState, event: pygame.event.Event) -> bool:
    """イベントを処理。終了なら False"""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.TEXTINPUT:
        view.input_text += event.text
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_RETURN:
            view.submit()
        elif event.key == pygame.K_BACKSPACE:
            view.input_text = view.input_text[:-1]
    return True


def main(text_only: bool = False) -> None:
    """メイン関数"""
    if text_only:
        print(render_state(initial_state()), end='')
        return

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("京都銀角")
    fonts = load_fonts()
    pygame.key.start_text_input()
    clock = pygame.time.Clock()

    view = ViewState()
    running = True
    while running:
        for event in pygame.event.get():
            running = handle_event(view, event)
            if not running:
                break
        draw_game_elements(screen, view, fonts)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()


def run() -> None:
    """コンソールスクリプト用の入口"""
    main(text_only='--text' in sys.argv[1:])


if __name__ == "__main__":
    run()
