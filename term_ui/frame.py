"""
Symbolic cursor model for relative-motion terminal drawing.

A :class:`Frame` records drawing operations together with the cursor position
each one leaves behind. Nothing touches a terminal until :meth:`Frame.to_ansi`
flattens the operations into escape sequences, so layouts can be checked on a
plain character grid with :meth:`Frame.to_grid`.
"""
import re
from dataclasses import dataclass

from term_ui.ui_config import CSI

SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

TEXT = "text"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
NEXT_LINE = "next_line"
PREV_LINE = "prev_line"
NEWLINE = "newline"
SAVE = "save"
RESTORE = "restore"
CLEAR_LINE = "clear_line"
CLEAR_BELOW = "clear_below"

_MOTION_CODES = {
    UP: "A",
    DOWN: "B",
    RIGHT: "C",
    LEFT: "D",
    NEXT_LINE: "E",
    PREV_LINE: "F",
}

_FIXED_CODES = {
    NEWLINE: "\r\n",
    SAVE: CSI + "s",
    RESTORE: CSI + "u",
    CLEAR_LINE: CSI + "2K",
    CLEAR_BELOW: CSI + "0J",
}


def strip_sgr(text: str) -> str:
    return SGR_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    return len(strip_sgr(text))


@dataclass(frozen=True)
class Op:
    kind: str
    arg: object = None
    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class PlacedBlock:
    row: int
    col: int
    block: object


class Frame:

    def __init__(self, row=0, col=0):
        self.row = row
        self.col = col
        self.saved = None
        self.ops: list[Op] = []
        self.blocks: list[PlacedBlock] = []

    def _record(self, kind, arg=None):
        # row/col on an op are where the cursor was before it ran
        self.ops.append(Op(kind, arg, self.row, self.col))

    def text(self, s: str):
        if not s:
            return
        self._record(TEXT, s)
        self.col += visible_width(s)

    def up(self, n=1):
        if n > 0:
            self._record(UP, n)
            self.row -= n

    def down(self, n=1):
        if n > 0:
            self._record(DOWN, n)
            self.row += n

    def right(self, n=1):
        if n > 0:
            self._record(RIGHT, n)
            self.col += n

    def left(self, n=1):
        n = min(n, self.col)
        if n > 0:
            self._record(LEFT, n)
            self.col -= n

    def next_line(self, n=1):
        if n > 0:
            self._record(NEXT_LINE, n)
            self.row += n
            self.col = 0

    def prev_line(self, n=1):
        if n > 0:
            self._record(PREV_LINE, n)
            self.row -= n
            self.col = 0

    def newline(self):
        self._record(NEWLINE)
        self.row += 1
        self.col = 0

    def save(self):
        self._record(SAVE)
        self.saved = (self.row, self.col)

    def restore(self):
        if self.saved is None:
            return
        self._record(RESTORE)
        self.row, self.col = self.saved

    def clear_line(self):
        self._record(CLEAR_LINE)

    def clear_below(self):
        self._record(CLEAR_BELOW)

    def move_to(self, row, col):
        """Reach an absolute frame position using relative motions only."""
        if row < self.row:
            self.up(self.row - row)
        else:
            self.down(row - self.row)
        if col < self.col:
            self.left(self.col - col)
        else:
            self.right(col - self.col)

    def block(self, block):
        """
        Draw a glyph block with its top-left corner at the cursor.
        The cursor is left just past the end of the block's last line.
        """
        self.blocks.append(PlacedBlock(self.row, self.col, block))
        previous = None
        for line in block.lines:
            if previous is not None:
                self.down(1)
                self.left(visible_width(previous))
            self.text(line)
            previous = line

    def tokens(self) -> list[str]:
        return [op.arg for op in self.ops if op.kind == TEXT]

    def motions(self) -> list[Op]:
        return [op for op in self.ops if op.kind in _MOTION_CODES]

    def to_ansi(self) -> str:
        out = []
        for op in self.ops:
            if op.kind == TEXT:
                out.append(op.arg)
            elif op.kind in _MOTION_CODES:
                out.append(f"{CSI}{op.arg}{_MOTION_CODES[op.kind]}")
            else:
                out.append(_FIXED_CODES[op.kind])
        return "".join(out)

    def to_grid(self, first_row=None) -> list[str]:
        """
        Paint every text op onto a character grid, colour codes removed.
        Row 0 of the result is ``first_row`` (default: the topmost painted row).
        """
        cells = {}
        for op in self.ops:
            if op.kind != TEXT:
                continue
            for i, ch in enumerate(strip_sgr(op.arg)):
                cells[(op.row, op.col + i)] = ch
        if not cells:
            return []
        top = min(r for r, _ in cells) if first_row is None else first_row
        bottom = max(r for r, _ in cells)
        grid = []
        for r in range(top, bottom + 1):
            cols = [c for rr, c in cells if rr == r]
            width = max(cols) + 1 if cols else 0
            grid.append("".join(cells.get((r, c), " ") for c in range(width)))
        return grid
