import logging
import random

from term_ui.card_face import BACK_BLOCK, EMPTY_BLOCK, FACE_RENDERER
from term_ui.ui_config import DRAW_COUNT_ORDER, FOUNDATION_COUNT, RANKS, SUIT_SYMBOLS, TABLEAU_COUNT

logger = logging.getLogger(__name__)

STOCK = "stock"
WASTE = "waste"


def foundationName(i):
    return f"foundation{i + 1}"


def tableauName(i):
    return f"tableau{i + 1}"


def lastOf(lst):
    return lst[len(lst) - 1]


class MoveError(Exception):
    """Raised when an event names a pile that does not exist."""


class Card:
    NUM_PER_SUIT = 13
    SUIT_COUNT = 4

    def __init__(self, rank, suit):
        self.rank = rank
        self.suit = suit
        self.id = suit * Card.NUM_PER_SUIT + rank
        self.hidden = True
        self.face = FACE_RENDERER.face(rank, suit)
        self.back = BACK_BLOCK

    def __str__(self):
        if self.hidden:
            return self.gameStr() + "H"
        return self.gameStr()

    def __repr__(self):
        return self.__str__()

    def gameStr(self):
        return RANKS[self.rank] + SUIT_SYMBOLS[self.suit]

    def isRed(self):
        return self.suit < 2

    def flip(self):
        self.hidden = not self.hidden


class Pile:

    def __init__(self, name):
        self.name = name
        self.cards: list[Card] = []
        self.empty = EMPTY_BLOCK

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def top(self):
        if not self.cards:
            return None
        return lastOf(self.cards)

    def moveCards(self, dest, num):
        """
        Move the top ``num`` cards onto ``dest`` keeping their order.
        Asking for more cards than the pile holds does nothing.
        """
        if num > len(self.cards):
            return
        index = len(self.cards) - num
        moved = self.cards[index:]
        del self.cards[index:]
        dest.cards.extend(moved)

    def moveCardsReverse(self, dest, num):
        """Like moveCards, one card at a time, so the run lands reversed."""
        if num > len(self.cards):
            return
        for _ in range(num):
            self.moveCards(dest, 1)


class Table:

    def __init__(self, drawCount=1):
        self.drawCount = drawCount
        self.score = 0
        self.stock = Pile(STOCK)
        self.waste = Pile(WASTE)
        self.foundations = [Pile(foundationName(i)) for i in range(FOUNDATION_COUNT)]
        self.tableau = [Pile(tableauName(i)) for i in range(TABLEAU_COUNT)]

    def piles(self):
        return [self.stock, self.waste, *self.foundations, *self.tableau]

    def pileNames(self):
        return [p.name for p in self.piles()]

    def pile(self, name) -> Pile:
        for p in self.piles():
            if p.name == name:
                return p
        raise MoveError(f"unknown pile: {name!r}")

    def cardCount(self):
        return sum(len(p) for p in self.piles())


class GameConfig:
    def __init__(self, drawCount=1, seed=None):
        self.drawCount = drawCount
        self.seed = seed

    def makeRandom(self):
        return random.Random(self.seed)


def initCards(rng=None):
    rng = rng or random.Random()
    lst = []
    for suit in range(Card.SUIT_COUNT):
        for rank in range(Card.NUM_PER_SUIT):
            lst.append(Card(rank, suit))
    rng.shuffle(lst)
    return lst


def dealTable(cards, drawCount=1):
    if drawCount not in DRAW_COUNT_ORDER:
        drawCount = DRAW_COUNT_ORDER[0]
    table = Table(drawCount)
    table.stock.cards.extend(cards)
    for i, column in enumerate(table.tableau):
        table.stock.moveCardsReverse(column, i + 1)
        lastOf(column.cards).hidden = False
    return table


class GameEvent:
    def perform(self, core) -> bool:
        return False

    def undo(self, core):
        pass


class PileMove(GameEvent):
    def __init__(self, src: str, dest: str, count: int = 1):
        self.src = src
        self.dest = dest
        self.count = count

    def __repr__(self):
        return f"PileMove({self.src} -> {self.dest}, {self.count})"

    def perform(self, core):
        return core.doMove(self.src, self.dest, self.count)

    def undo(self, core):
        core.undoMove(self)


class FlipTop(GameEvent):
    def __init__(self, pile: str):
        self.pile = pile

    def __repr__(self):
        return f"FlipTop({self.pile})"

    def perform(self, core):
        return core.doFlip(self.pile)

    def undo(self, core):
        core.doFlip(self.pile)
        core.interface.onUndoEvent(self)


class Core:
    """
    ask*** : convenience entry points returning whether anything happened
    do*** : actual pile operations, no logging, no notification
    apply : the single seam every state change goes through
    """
    DEFAULT_CONFIG = GameConfig()

    def __init__(self):
        self.interface = None
        self.table: Table = None
        self.history: HistoryRecorder = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def startGame(self, gameConfig: GameConfig = DEFAULT_CONFIG):
        if self.interface is None:
            raise Exception("interface is null")
        cards = initCards(gameConfig.makeRandom())
        self.table = dealTable(cards, gameConfig.drawCount)
        self.history = HistoryRecorder(self)
        logger.debug(
            "dealt table: draw=%d stock=%d tableau=%s",
            self.table.drawCount,
            len(self.table.stock),
            [len(c) for c in self.table.tableau],
        )
        self.interface.onStart()

    def apply(self, event: GameEvent) -> bool:
        if not event.perform(self):
            logger.debug("no-op event %r", event)
            return False
        self.history.log(event)
        logger.debug("applied %r", event)
        self.interface.onEvent(event)
        return True

    def askMove(self, src: str, dest: str, count: int = 1) -> bool:
        return self.apply(PileMove(src, dest, count))

    def askFlip(self, pile: str) -> bool:
        return self.apply(FlipTop(pile))

    def askUndo(self):
        return self.history.undo()

    def askRedo(self):
        return self.history.redo()

    def doMove(self, src: str, dest: str, count: int) -> bool:
        srcPile = self.table.pile(src)
        destPile = self.table.pile(dest)
        if count < 1 or count > len(srcPile) or srcPile is destPile:
            return False
        srcPile.moveCards(destPile, count)
        return True

    def doFlip(self, pile: str) -> bool:
        card = self.table.pile(pile).top()
        if card is None:
            return False
        card.flip()
        return True

    def undoMove(self, event: PileMove):
        self.table.pile(event.dest).moveCards(self.table.pile(event.src), event.count)
        self.interface.onUndoEvent(event)


class HistoryRecorder:
    def __init__(self, core):
        self.core = core
        self.lst = []
        self.idx = 0  # idx - 1 is the index of the next event to undo

    def log(self, event):
        if self.idx != len(self.lst):
            self.lst = self.lst[:self.idx]
        self.lst.append(event)
        self.idx += 1

    def undo(self):
        idx = self.idx - 1
        if idx < 0 or idx >= len(self.lst):
            return False
        self.lst[idx].undo(self.core)
        self.idx = idx
        return True

    def redo(self):
        idx = self.idx
        if idx < 0 or idx >= len(self.lst):
            return False
        event = self.lst[idx]
        event.perform(self.core)
        self.idx = idx + 1
        self.core.interface.onEvent(event)
        return True
