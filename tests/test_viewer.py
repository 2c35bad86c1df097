"""
Tests for the pygame viewer.

Runs headless with the SDL dummy video driver:
- Notation input handling and move submission
- Drawing onto an off-screen surface
- Text-only entry point
"""

import unittest
import io
import sys
import os
from contextlib import redirect_stdout

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pygame

from kyoto_ginkaku.main import ViewState, draw_game_elements, handle_event, load_fonts, main
from kyoto_ginkaku.board import render_state, get_piece
from kyoto_ginkaku.game import initial_state
from kyoto_ginkaku.piece import Piece
from kyoto_ginkaku.utils import WIDTH, HEIGHT, SENTE, GOTE


class TestViewState(unittest.TestCase):
    """Test move input handling"""

    def test_submit_without_side_symbol(self):
        view = ViewState()
        view.input_text = "4四玉(35)"
        self.assertTrue(view.submit())
        self.assertEqual(view.kifu, ["☗4四王(35)"])
        self.assertEqual(view.state.turn, GOTE)
        self.assertEqual(view.input_text, '')
        self.assertEqual(view.message, '')

    def test_submit_rejects_bad_input(self):
        view = ViewState()
        view.input_text = "4四玉"
        self.assertFalse(view.submit())
        self.assertIn("読めない手", view.message)

        view.input_text = "☖4二玉(31)"
        self.assertFalse(view.submit())
        self.assertIn("指せない手", view.message)
        self.assertEqual(view.state, initial_state())
        self.assertEqual(view.kifu, [])

    def test_submit_records_victory(self):
        view = ViewState()
        moves = ["4四玉(35)", "4二玉(31)", "4三玉(44)", "4三玉(42)"]
        for text in moves:
            view.input_text = text
            view.submit()
        self.assertTrue(view.game_over)
        self.assertEqual(view.winner, GOTE)
        self.assertEqual(len(view.kifu), 4)
        # 終局後の入力は無視する
        view.input_text = "3四金(25)"
        self.assertFalse(view.submit())

    def test_handle_event(self):
        view = ViewState()
        for ch in "4四玉(35)":
            self.assertTrue(handle_event(view, pygame.event.Event(pygame.TEXTINPUT, text=ch)))
        handle_event(view, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE))
        self.assertEqual(view.input_text, "4四玉(35")
        handle_event(view, pygame.event.Event(pygame.TEXTINPUT, text=")"))
        handle_event(view, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
        self.assertEqual(get_piece(view.state.board, (4, 4)), Piece('K', SENTE))
        self.assertFalse(handle_event(view, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)))
        self.assertFalse(handle_event(view, pygame.event.Event(pygame.QUIT)))


class TestDrawing(unittest.TestCase):
    """Test drawing onto an off-screen surface"""

    @classmethod
    def setUpClass(cls):
        pygame.font.init()
        cls.fonts = load_fonts()

    @classmethod
    def tearDownClass(cls):
        pygame.font.quit()

    def test_draw_does_not_change_state(self):
        view = ViewState()
        view.input_text = "5三飛打"
        view.message = "test"
        before = view.state.clone()
        screen = pygame.Surface((WIDTH, HEIGHT))
        draw_game_elements(screen, view, self.fonts)
        self.assertEqual(view.state, before)
        self.assertEqual(view.input_text, "5三飛打")


class TestMain(unittest.TestCase):
    """Test the text-only entry point"""

    def test_text_only_prints_initial_layout(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(text_only=True)
        self.assertEqual(out.getvalue(), render_state(initial_state()))


if __name__ == '__main__':
    unittest.main(verbosity=2)
