import unittest

from term_ui.card_face import GlyphBlock
from term_ui.frame import Frame, visible_width


class FrameTestCase(unittest.TestCase):
    def test_text_advances_by_visible_width(self):
        frame = Frame()
        frame.text("\x1b[1;31mA♥\x1b[0m")
        self.assertEqual((0, 2), (frame.row, frame.col))
        self.assertEqual(2, visible_width("\x1b[1;90m10\x1b[0m"))

    def test_motions_flatten_to_csi_codes(self):
        frame = Frame(row=5, col=5)
        frame.up(2)
        frame.down(1)
        frame.right(3)
        frame.left(4)
        frame.next_line(2)
        frame.prev_line(1)
        frame.save()
        frame.restore()
        frame.clear_line()
        frame.clear_below()
        frame.newline()
        self.assertEqual(
            "\x1b[2A\x1b[1B\x1b[3C\x1b[4D\x1b[2E\x1b[1F\x1b[s\x1b[u\x1b[2K\x1b[0J\r\n",
            frame.to_ansi(),
        )
        self.assertEqual((6, 0), (frame.row, frame.col))

    def test_zero_motions_emit_nothing(self):
        frame = Frame()
        frame.up(0)
        frame.down(0)
        frame.right(0)
        frame.left(3)
        frame.text("")
        self.assertEqual("", frame.to_ansi())

    def test_left_stops_at_column_zero(self):
        frame = Frame(col=2)
        frame.left(10)
        self.assertEqual(0, frame.col)
        self.assertEqual("\x1b[2D", frame.to_ansi())

    def test_restore_returns_to_saved_position(self):
        frame = Frame()
        frame.text("abc")
        frame.save()
        frame.next_line(4)
        frame.restore()
        self.assertEqual((0, 3), (frame.row, frame.col))

    def test_move_to_uses_relative_motion(self):
        frame = Frame(row=3, col=8)
        frame.move_to(1, 10)
        self.assertEqual("\x1b[2A\x1b[2C", frame.to_ansi())
        frame.move_to(4, 0)
        self.assertEqual((4, 0), (frame.row, frame.col))

    def test_block_draws_lines_under_each_other(self):
        block = GlyphBlock(("+--+", "|\x1b[1;31mab\x1b[0m|", "+--+"))
        frame = Frame(row=2, col=3)
        frame.block(block)
        self.assertEqual((4, 7), (frame.row, frame.col))
        self.assertEqual(1, len(frame.blocks))
        self.assertEqual((2, 3), (frame.blocks[0].row, frame.blocks[0].col))
        self.assertEqual(list(block.lines), frame.tokens())
        self.assertEqual(["   +--+", "   |ab|", "   +--+"], frame.to_grid(first_row=2))

    def test_grid_overwrites_and_pads(self):
        frame = Frame()
        frame.text("hello")
        frame.left(4)
        frame.text("EY")
        frame.next_line(2)
        frame.text("x")
        self.assertEqual(["hEYlo", "", "x"], frame.to_grid())
        self.assertEqual([], Frame().to_grid())


if __name__ == "__main__":
    unittest.main()
