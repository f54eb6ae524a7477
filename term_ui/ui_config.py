CSI = "\x1b["

RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
SUIT_SYMBOLS = ("♥", "♦", "♠", "♣")
RED_SUITS = (0, 1)

RED = CSI + "1;31m"
GRAY = CSI + "1;90m"
RESET = CSI + "0m"

CARD_WIDTH = 13
CARD_HEIGHT = 9
BACK_FILL = "░"

PROMPT_INTERIOR = 83
PROMPT_INPUT_ROW = 1
TABLE_BASE_LINES = 25
EMPTY_TABLE_PADDING = 2

COLUMN_GAP = 1
CASCADE_STEP = 2
FAN_OFFSET = 6
FAN_DEPTH = 2
WASTE_SLOT_WIDTH = 28

FOUNDATION_COUNT = 4
TABLEAU_COUNT = 7

DRAW_COUNT_ORDER = (1, 3)
DEFAULT_PROMPT = "> "
DEFAULT_QUIT_KEY = "q"
DEFAULT_REDRAW_KEY = "r"
