import logging
import os
import termios
import tty
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def raw_terminal(stream):
    """
    Put ``stream`` into cbreak mode (no line buffering, no echo) for the
    duration of the block. The saved attributes are restored on every exit
    path, including exceptions. Streams that are not terminals are left alone.
    """
    if not _is_tty(stream):
        yield stream
        return
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    logger.debug("entering cbreak mode on fd %d", fd)
    try:
        tty.setcbreak(fd)
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
        logger.debug("restored terminal mode on fd %d", fd)


def read_key(stream) -> str:
    """Read one key. Returns an empty string at end of input."""
    if _is_tty(stream):
        data = os.read(stream.fileno(), 1)
        return data.decode("utf-8", errors="replace")
    return stream.read(1)
