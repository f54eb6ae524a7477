"""
Draws a Klondike table in place with relative cursor motion only.

Region rows, counted from the top border of the prompt bar::

    0-2    prompt bar (the input point is row 1, just after the prompt)
    4-14   stock, waste, foundations (label, count, card)
    16-    tableau columns, each card 2 rows below the one under it

Every frame starts and ends at the input point, so consecutive redraws land
on the same rows.
"""
import logging
import sys

from term_ui.frame import Frame
from term_ui.ui_config import (
    CARD_HEIGHT,
    CARD_WIDTH,
    CASCADE_STEP,
    COLUMN_GAP,
    EMPTY_TABLE_PADDING,
    FAN_DEPTH,
    FAN_OFFSET,
    PROMPT_INPUT_ROW,
    PROMPT_INTERIOR,
    TABLE_BASE_LINES,
    WASTE_SLOT_WIDTH,
)

logger = logging.getLogger(__name__)

PILE_ROW = 4
TABLEAU_ROW = PILE_ROW + CARD_HEIGHT + 3
SCORE_LABEL = "Score: "


def get_max_lines(table) -> int:
    tallest = max((len(column) for column in table.tableau), default=0)
    lines = tallest * CASCADE_STEP + TABLE_BASE_LINES
    if lines == TABLE_BASE_LINES:
        lines += EMPTY_TABLE_PADDING
    return lines


def fit_prompt(score: str, prompt: str) -> str:
    return prompt[:max(0, PROMPT_INTERIOR - len(score))]


def fanned_cards(table):
    """Waste cards shown partially under the top card in draw-3 mode."""
    cards = table.waste.cards
    if table.drawCount != 3 or len(cards) <= 1:
        return []
    return cards[max(0, len(cards) - 1 - FAN_DEPTH):len(cards) - 1]


class TableRenderer:

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def draw(self, table, prompt):
        self._emit(self.render(table, prompt))

    def leave(self, table):
        """Move from the input point to a fresh line below the table."""
        frame = Frame(row=PROMPT_INPUT_ROW)
        frame.next_line(get_max_lines(table) - 1 - frame.row)
        frame.newline()
        self._emit(frame)

    def _emit(self, frame: Frame):
        # one write and one flush per frame, never a partial frame on screen
        self.stream.write(frame.to_ansi())
        self.stream.flush()

    def render(self, table, prompt) -> Frame:
        max_lines = get_max_lines(table)
        logger.debug("render: max_lines=%d score=%d", max_lines, table.score)

        frame = Frame(row=PROMPT_INPUT_ROW)
        self.render_clear(frame, max_lines)
        self.render_prompt(frame, table, prompt)

        frame.next_line(PILE_ROW - frame.row)
        self.render_stock(frame, table)
        waste_col = CARD_WIDTH + COLUMN_GAP
        frame.move_to(PILE_ROW, waste_col)
        self.render_waste(frame, table)
        frame.move_to(PILE_ROW, waste_col + WASTE_SLOT_WIDTH)
        self.render_foundations(frame, table)

        frame.next_line(TABLEAU_ROW - frame.row)
        self.render_tableau(frame, table, max_lines)

        frame.restore()
        return frame

    def render_clear(self, frame: Frame, max_lines: int):
        frame.prev_line(frame.row)
        for _ in range(max_lines):
            frame.clear_line()
            frame.newline()
        frame.clear_below()
        frame.up(max_lines)

    def render_prompt(self, frame: Frame, table, prompt: str):
        score = str(table.score)
        prompt = fit_prompt(score, prompt)
        score_dashes = "─" * len(score)
        prompt_dashes = "─" * len(prompt)
        remaining = PROMPT_INTERIOR - len(score) - len(prompt)
        label_dashes = "─" * len(SCORE_LABEL)

        left = f"│ {SCORE_LABEL}{score} │ "
        frame.text(f"┌─{label_dashes}{score_dashes}─┬─{prompt_dashes}{'─' * remaining}─┐")
        frame.next_line()
        frame.text(f"{left}{prompt}{' ' * remaining} │")
        frame.next_line()
        frame.text(f"└─{label_dashes}{score_dashes}─┴─{prompt_dashes}{'─' * remaining}─┘")

        frame.prev_line()
        frame.right(len(left) + len(prompt))
        frame.save()

    def _draw_header(self, frame: Frame, label: str, count: int):
        row, col = frame.row, frame.col
        frame.text(label)
        frame.move_to(row + 1, col)
        frame.text(f"({count} Cards)")
        frame.move_to(row + 2, col)

    def render_stock(self, frame: Frame, table):
        stock = table.stock
        self._draw_header(frame, "Stock", len(stock))
        if stock.cards:
            frame.block(stock.top().back)
        else:
            frame.block(stock.empty)

    def render_waste(self, frame: Frame, table):
        waste = table.waste
        self._draw_header(frame, "Waste", len(waste))
        if not waste.cards:
            frame.block(waste.empty)
            return
        for card in fanned_cards(table):
            self._draw_fanned(frame, card.face)
        frame.block(waste.top().face)

    def _draw_fanned(self, frame: Frame, block):
        frame.block(block)
        # blank the column after the visible strip, bottom row to top row
        frame.left(block.width - FAN_OFFSET + 1)
        frame.text(" ")
        for _ in range(block.height - 1):
            frame.up(1)
            frame.left(1)
            frame.text(" ")

    def render_foundations(self, frame: Frame, table):
        top = frame.row
        last = len(table.foundations) - 1
        for i, foundation in enumerate(table.foundations):
            start = frame.col
            self._draw_header(frame, f"Foundation {i + 1}", len(foundation))
            if foundation.cards:
                frame.block(foundation.top().face)
            else:
                frame.block(foundation.empty)
            if i < last:
                frame.move_to(top, start + CARD_WIDTH + COLUMN_GAP)

    def render_tableau(self, frame: Frame, table, max_lines: int):
        label_row = frame.row
        last = len(table.tableau) - 1
        for i, column in enumerate(table.tableau):
            start = frame.col
            self._draw_header(frame, f"Column {i + 1}", len(column))
            if column.cards:
                for card in column:
                    card_row = frame.row
                    frame.block(card.back if card.hidden else card.face)
                    frame.move_to(card_row + CASCADE_STEP, start)
            else:
                frame.block(column.empty)
            if i < last:
                frame.move_to(label_row, start + CARD_WIDTH + COLUMN_GAP)
        frame.move_to(max_lines - 1, frame.col)
