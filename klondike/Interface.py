from klondike.Core import Core, GameEvent


class Interface:
    """
    Observer of a Core. The Core calls these hooks; a front end redraws the
    table from ``self.core.table`` whenever it is told to.
    """

    def __init__(self):
        self.core: Core = None

    def onStart(self):
        """Invoked once the table has been dealt."""

    def onEvent(self, event: GameEvent):
        """
        Invoked after an event changed the table (applied or redone).
        :param event: the PileMove or FlipTop that ran
        """
        self.notifyRedraw()

    def onUndoEvent(self, event: GameEvent):
        """
        Invoked after an event was reverted.
        :param event: the event that was undone
        """
        self.notifyRedraw()

    def notifyRedraw(self):
        """Draw the whole table again from the current state."""

    def onQuit(self):
        """Invoked once when the key loop ends, before the process exits."""
