# actor_core/logger.py
"""
Actor Scene Engine logging.

Two channels:
- actor.user: one-line progress for whoever runs the pipeline (stdout)
- actor.debug: classifier scores and stage timings (file, debug mode only)

Both are configured once on import from ACTOR_DEBUG; ActorConfig can
reinstall them through reset_logging() + setup_logging().
"""

import os
import sys
import time
import logging
from typing import Any, Mapping, Optional

USER_LOGGER_NAME = "actor.user"
DEBUG_LOGGER_NAME = "actor.debug"
DEFAULT_DEBUG_LOG = "actor_debug.log"

# Prefix shown in front of each user-channel message
USER_SYMBOLS = {
    "info": "✅",
    "step": "🔄",
    "warn": "⚠️",
    "error": "❌",
}

_user_logger = logging.getLogger(USER_LOGGER_NAME)
_debug_logger = logging.getLogger(DEBUG_LOGGER_NAME)

_setup_done = False


def setup_logging(
    debug_mode: bool = False,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> None:
    """
    Install handlers on both channels. No-op if already set up.

    Args:
        debug_mode: Send debug-channel records to log_file
        log_file: Debug log path (default: actor_debug.log)
        console_output: Echo user-channel messages to stdout
    """
    global _setup_done
    if _setup_done:
        return

    _user_logger.setLevel(logging.INFO)
    _user_logger.propagate = False
    if console_output:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter("%(message)s"))
        _user_logger.addHandler(console)

    _debug_logger.setLevel(logging.DEBUG if debug_mode else logging.WARNING)
    _debug_logger.propagate = False
    if debug_mode:
        _attach_debug_file(log_file or DEFAULT_DEBUG_LOG)

    _setup_done = True


def _attach_debug_file(log_path: str) -> None:
    try:
        handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    except OSError as e:
        _user_logger.warning(f"{USER_SYMBOLS['warn']} Could not open debug log {log_path}: {e}")
        return
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    ))
    _debug_logger.addHandler(handler)


def reset_logging() -> None:
    """Close and drop all installed handlers so setup_logging can run again."""
    global _setup_done
    for channel in (_user_logger, _debug_logger):
        for handler in list(channel.handlers):
            channel.removeHandler(handler)
            handler.close()
    _setup_done = False


def _ensure_setup() -> None:
    if not _setup_done:
        setup_logging()


def debug_enabled() -> bool:
    """True when the debug channel records DEBUG messages."""
    _ensure_setup()
    return _debug_logger.isEnabledFor(logging.DEBUG)


# =============================================================================
# USER CHANNEL
# =============================================================================

def _user(level: int, kind: str, msg: str) -> None:
    _ensure_setup()
    _user_logger.log(level, f"{USER_SYMBOLS[kind]} {msg}")


def log_info(msg: str) -> None:
    _user(logging.INFO, "info", msg)


def log_step(msg: str) -> None:
    _user(logging.INFO, "step", msg)


def log_warn(msg: str) -> None:
    _user(logging.WARNING, "warn", msg)


def log_error(msg: str) -> None:
    _user(logging.ERROR, "error", msg)


# =============================================================================
# DEBUG CHANNEL
# =============================================================================

def log_debug(msg: str) -> None:
    """Debug-channel message (dropped unless debug mode is on)."""
    _ensure_setup()
    _debug_logger.debug(msg)


def log_debug_data(label: str, data: Mapping[str, Any]) -> None:
    """
    Write a labelled block of values, one per line, floats to 4 places.

    Callers that build `data` on a hot path should check debug_enabled()
    first; this function only skips the formatting.
    """
    if not debug_enabled():
        return
    rows = [f"[{label}]"]
    rows.extend(
        f"  {key}: {value:.4f}" if isinstance(value, float) else f"  {key}: {value}"
        for key, value in data.items()
    )
    _debug_logger.debug("\n".join(rows))


def log_timing(operation: str, duration_sec: float) -> None:
    _ensure_setup()
    _debug_logger.debug(f"TIMING: {operation} took {duration_sec:.4f}s")


class LogContext:
    """
    Time a pipeline stage.

    Always records the elapsed time on the debug channel and in `.duration`.
    With log_user=True the stage start and completion (or failure) also go
    to the user channel. Exceptions propagate.
    """

    def __init__(self, operation: str, log_user: bool = False):
        self.operation = operation
        self.log_user = log_user
        self.start_time: Optional[float] = None
        self.duration: float = 0.0

    def __enter__(self):
        if self.log_user:
            log_step(f"{self.operation}...")
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        log_timing(self.operation, self.duration)
        if self.log_user:
            if exc_type is None:
                log_info(f"{self.operation} complete ({self.duration:.2f}s)")
            else:
                log_error(f"{self.operation} failed: {exc_val}")
        return False


def _configure_from_env() -> None:
    debug = os.environ.get("ACTOR_DEBUG", "").lower() in ("1", "true", "yes")
    setup_logging(debug_mode=debug)


_configure_from_env()
