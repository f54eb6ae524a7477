import unittest

from term_ui.card_face import BACK_BLOCK, EMPTY_BLOCK, FACE_RENDERER, GlyphBlock
from term_ui.frame import strip_sgr
from term_ui.ui_config import GRAY, RED, RESET


class CardFaceTestCase(unittest.TestCase):
    def test_face_layout_for_ace_of_hearts(self):
        face = FACE_RENDERER.face(0, 0)
        plain = [strip_sgr(line) for line in face.lines]
        self.assertEqual(
            [
                "┌───────────┐",
                "│ A       ♥ │",
                "│           │",
                "│           │",
                "│     ♥     │",
                "│           │",
                "│           │",
                "│ ♥       A │",
                "└───────────┘",
            ],
            plain,
        )

    def test_ten_is_not_padded(self):
        plain = [strip_sgr(line) for line in FACE_RENDERER.face(9, 3).lines]
        self.assertEqual("│ 10      ♣ │", plain[1])
        self.assertEqual("│ ♣      10 │", plain[7])

    def test_every_face_is_13_by_9(self):
        for suit in range(4):
            for rank in range(13):
                face = FACE_RENDERER.face(rank, suit)
                self.assertEqual(13, face.width)
                self.assertEqual(9, face.height)
                for line in face.lines:
                    self.assertEqual(13, len(strip_sgr(line)))

    def test_suit_colours(self):
        self.assertIn(RED, FACE_RENDERER.face(4, 0).lines[1])
        self.assertIn(RED, FACE_RENDERER.face(4, 1).lines[1])
        self.assertIn(GRAY, FACE_RENDERER.face(4, 2).lines[1])
        self.assertIn(GRAY, FACE_RENDERER.face(4, 3).lines[1])
        for line in FACE_RENDERER.face(4, 2).lines[1:-1]:
            self.assertTrue(line.endswith(RESET + " │"))

    def test_back_and_empty_blocks(self):
        self.assertEqual(13, BACK_BLOCK.width)
        self.assertEqual(9, BACK_BLOCK.height)
        self.assertEqual("│ ░░░░░░░░░ │", BACK_BLOCK.lines[4])
        self.assertEqual("┌─         ─┐", EMPTY_BLOCK.lines[0])
        self.assertEqual(" " * 13, EMPTY_BLOCK.lines[3])
        self.assertEqual("└─         ─┘", EMPTY_BLOCK.lines[-1])
        self.assertEqual(FACE_RENDERER.back(), BACK_BLOCK)

    def test_glyph_block_is_immutable(self):
        block = GlyphBlock(("ab", "cd"))
        with self.assertRaises(Exception):
            block.lines = ("x",)
        self.assertEqual(2, block.width)
        self.assertEqual(0, GlyphBlock(()).width)


if __name__ == "__main__":
    unittest.main()
