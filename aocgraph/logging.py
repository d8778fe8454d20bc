"""Logging helpers for aocgraph.

Every module logs through a child of the ``aocgraph`` logger obtained with
`get_logger(__name__)`. Importing the package only attaches a
`logging.NullHandler`, so records reach whatever handlers the host program
configured and nothing is printed otherwise. Hosts that want the library to
print on its own opt in with `setup_root_logger()`.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "aocgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger(); None while the host owns output
_console_handler: Optional[logging.Handler] = None


def _root() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def _install_null_handler() -> None:
    root = _root()
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Opt in to aocgraph writing its own log output.

    Attaches one handler to the ``aocgraph`` logger and stops propagation so
    a host that also configured the root logger does not see records twice.
    Repeated calls are ignored until `reset_logging()` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).
    """
    global _console_handler

    if _console_handler is not None:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root = _root()
    root.setLevel(level)
    root.addHandler(handler)
    root.propagate = False
    _console_handler = handler


def get_logger(name: str) -> logging.Logger:
    """Return the logger for an aocgraph module (typically ``__name__``).

    Child loggers carry no handlers or level of their own; both come from the
    ``aocgraph`` logger.
    """
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``aocgraph`` logger and of its opt-in handler."""
    _root().setLevel(level)
    if _console_handler is not None:
        _console_handler.setLevel(level)


def enable_debug_logging() -> None:
    """Emit the algorithms' DEBUG timing records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Return to the import-time state (mainly for testing)."""
    global _console_handler
    _console_handler = None

    root = _root()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    _install_null_handler()


_install_null_handler()
