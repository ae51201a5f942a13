"""
Shutdown hook owning terminal restoration.

Signals, interactive cancellation and unexpected errors all leave through
``shutdown()`` so the cursor is restored in exactly one place.
"""
import logging
import signal
import sys
from typing import NoReturn, Optional, TextIO

logger = logging.getLogger(__name__)

SHOW_CURSOR = "\x1b[?25h"


def restore_terminal(stream: Optional[TextIO] = None) -> None:
    """Re-show the cursor and end the current line if ``stream`` is a TTY."""
    stream = stream or sys.stdout
    try:
        if stream.isatty():
            stream.write(SHOW_CURSOR)
            stream.write("\n")
        stream.flush()
    except (OSError, ValueError):
        # stream already closed
        pass


def shutdown(code: int = 0, stream: Optional[TextIO] = None) -> NoReturn:
    """Restore the terminal and exit with ``code``."""
    restore_terminal(stream)
    sys.exit(code)


def _handle_signal(signum, frame) -> None:
    logger.debug("Signal %s received, shutting down", signum)
    shutdown(0)


def install_shutdown_hook() -> None:
    """
    Register the shutdown handler for SIGINT and SIGTERM.

    Call once at process start.
    """
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)
