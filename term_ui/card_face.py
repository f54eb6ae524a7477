from dataclasses import dataclass

from term_ui.frame import visible_width
from term_ui.ui_config import BACK_FILL, CARD_HEIGHT, CARD_WIDTH, GRAY, RANKS, RED, RED_SUITS, RESET, SUIT_SYMBOLS


@dataclass(frozen=True)
class GlyphBlock:
    """A rectangular multi-line picture drawn at the cursor, top line first."""

    lines: tuple[str, ...]

    @property
    def width(self) -> int:
        return max((visible_width(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)


def _inner(count):
    return "─" * (count - 2)


class CardFaceRenderer:
    def suit_symbol(self, suit):
        return SUIT_SYMBOLS[suit]

    def suit_color(self, suit):
        return RED if suit in RED_SUITS else GRAY

    def rank_labels(self, rank):
        label = RANKS[rank]
        if len(label) == 2:
            return label, label
        return label + " ", " " + label

    def face(self, rank, suit) -> GlyphBlock:
        color = self.suit_color(suit)
        symbol = self.suit_symbol(suit)
        top_rank, bottom_rank = self.rank_labels(rank)
        pad = " " * (CARD_WIDTH - 4)
        half = " " * ((CARD_WIDTH - 5) // 2)
        gap = " " * (CARD_WIDTH - 7)

        blank = f"│ {color}{pad}{RESET} │"
        lines = (
            "┌" + _inner(CARD_WIDTH) + "┐",
            f"│ {color}{top_rank}{gap}{symbol}{RESET} │",
            blank,
            blank,
            f"│ {color}{half}{symbol}{half}{RESET} │",
            blank,
            blank,
            f"│ {color}{symbol}{gap}{bottom_rank}{RESET} │",
            "└" + _inner(CARD_WIDTH) + "┘",
        )
        return GlyphBlock(lines)

    def back(self) -> GlyphBlock:
        fill = f"│ {BACK_FILL * (CARD_WIDTH - 4)} │"
        rows = [fill] * (CARD_HEIGHT - 2)
        return GlyphBlock(("┌" + _inner(CARD_WIDTH) + "┐", *rows, "└" + _inner(CARD_WIDTH) + "┘"))

    def empty_slot(self) -> GlyphBlock:
        gap = " " * (CARD_WIDTH - 4)
        rows = [" " * CARD_WIDTH] * (CARD_HEIGHT - 2)
        return GlyphBlock((f"┌─{gap}─┐", *rows, f"└─{gap}─┘"))


FACE_RENDERER = CardFaceRenderer()
# Built once and shared by every card and pile.
BACK_BLOCK = FACE_RENDERER.back()
EMPTY_BLOCK = FACE_RENDERER.empty_slot()
