import argparse
import logging
import sys

from klondike.Core import Core, GameConfig
from klondike.Interface import Interface
from term_ui import settings_store
from term_ui.raw_mode import raw_terminal, read_key
from term_ui.renderer import TableRenderer
from term_ui.ui_config import DRAW_COUNT_ORDER

logger = logging.getLogger(__name__)

CTRL_C = "\x03"
CTRL_D = "\x04"


class TerminalInterface(Interface):

    def __init__(self, stream=None, prompt="> "):
        super().__init__()
        self.renderer = TableRenderer(stream)
        self.prompt = prompt

    def onStart(self):
        # the first frame starts one row below the line the cursor is on
        self.renderer.stream.write("\n")
        self.notifyRedraw()

    def notifyRedraw(self):
        self.renderer.draw(self.core.table, self.prompt)

    def onQuit(self):
        self.renderer.leave(self.core.table)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Klondike solitaire table drawn in the terminal.")
    parser.add_argument("--draw", type=int, choices=DRAW_COUNT_ORDER, default=None,
                        help="Cards turned from stock to waste per draw (overrides settings).")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed for a repeatable deal.")
    parser.add_argument("--settings", type=str, default="", help="Path of the settings ini file.")
    parser.add_argument("--save-settings", action="store_true",
                        help="Write the effective settings (including --draw) back to the settings file.")
    parser.add_argument("--log-file", type=str, default="", help="Write debug logs to this file.")
    parser.add_argument("--log-level", type=str, default="DEBUG", help="Log level for --log-file.")
    return parser.parse_args(argv)


def setup_logging(log_file: str, level_name: str = "DEBUG"):
    """
    stdout carries the table, so logs only ever go to a file. Without a file
    the root logger gets a NullHandler to keep warnings off the screen.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    if not log_file:
        root_logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)-8s - %(name)-22s - %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name.upper(), logging.DEBUG))


def run(interface: TerminalInterface, keys, quit_key="q", redraw_key="r"):
    """Redraw-on-demand loop. Returns when the quit key (or end of input) is read."""
    with raw_terminal(keys):
        try:
            while True:
                key = read_key(keys)
                if key in ("", quit_key, CTRL_C, CTRL_D):
                    logger.info("quit requested (%r)", key)
                    break
                if key == redraw_key:
                    logger.debug("redraw requested")
                    interface.notifyRedraw()
                else:
                    logger.debug("ignored key %r", key)
        except KeyboardInterrupt:
            logger.info("interrupted")
        interface.onQuit()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.log_level)
    settings = settings_store.load_settings(args.settings or None)

    if args.draw is not None:
        settings["draw_count"] = str(args.draw)
    if args.save_settings:
        settings_store.save_settings(settings, args.settings or None)
        logger.info("settings saved")

    draw_count = int(settings["draw_count"])
    config = GameConfig(drawCount=draw_count, seed=args.seed)

    interface = TerminalInterface(sys.stdout, settings["prompt"])
    core = Core()
    core.registerInterface(interface)
    core.startGame(config)
    run(interface, sys.stdin, settings["quit_key"], settings["redraw_key"])
    return 0


if __name__ == '__main__':
    sys.exit(main())
