# logger.py

import os, sys, logging, threading
from datetime import datetime
from typing import Dict, List, Optional, Sequence
from functools import partial

DEBUG_ENV_KEY = 'KOLOR_DEBUG'
INFO_ENV_KEY = 'KOLOR_VERBOSE'

SUCCESS = 25
logging.addLevelName(SUCCESS, 'SUCCESS')

LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'success': SUCCESS,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}

DEFAULT_STYLES: Dict[str, List[str]] = {
    'info': ['cyan'],
    'warning': ['yellow', 'bold'],
    'error': ['red', 'bold'],
    'success': ['green'],
    'debug': ['magenta'],
}

LEVEL_TAGS = {
    'info': 'INFO',
    'warning': 'WARN',
    'error': 'ERROR',
    'success': 'OK',
    'debug': 'DEBUG',
}


def apply_styles(message: str, styles: Optional[Sequence[str]]) -> str:
    """Apply named styles in order, skipping names that are not styles."""
    if not styles:
        return message
    from .style.engine import paint, has_style
    styled = paint(message)
    for name in styles:
        if has_style(name):
            styled = styled.apply_named(name)
    return str(styled)


class StderrHandler(logging.Handler):
    """Writes pre-styled records to whatever ``sys.stderr`` is at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            sys.stderr.write(self.format(record) + '\n')
            sys.stderr.flush()
        except Exception:
            self.handleError(record)


class Logger:
    """
    Leveled, styled logger writing ``[timestamp] TAG: message`` to stderr.

    Debug output needs ``KOLOR_DEBUG`` and info output needs ``KOLOR_VERBOSE``
    in the environment; warnings, errors and successes always print unless
    suppressed. Suppression is shared by every instance.
    """
    _suppressed = False
    _lock = threading.Lock()

    def __init__(self, name: str = 'kolor'):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        if not any(isinstance(h, StderrHandler) for h in self._logger.handlers):
            handler = StderrHandler()
            handler.setFormatter(logging.Formatter('%(message)s'))
            self._logger.addHandler(handler)

        # Dynamically create logging methods
        for level in LEVELS:
            setattr(self, level, partial(self._log, level))
        self.warn = self.warning

    @staticmethod
    def show_debug() -> bool:
        return os.environ.get(DEBUG_ENV_KEY) is not None

    @staticmethod
    def show_info() -> bool:
        return os.environ.get(INFO_ENV_KEY) is not None

    def suppress(self) -> None:
        """Silence every level until ``unsuppress`` is called."""
        with Logger._lock:
            Logger._suppressed = True

    def unsuppress(self) -> None:
        with Logger._lock:
            Logger._suppressed = False

    @property
    def suppressed(self) -> bool:
        return Logger._suppressed

    def _enabled_for(self, level: str) -> bool:
        if Logger._suppressed:
            return False
        if level == 'debug':
            return self.show_debug()
        if level == 'info':
            return self.show_info()
        return True

    def format_line(self, level: str, msg: str, styles: Optional[Sequence[str]] = None) -> str:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        tag = LEVEL_TAGS.get(level, level.upper())
        line = f"[{timestamp}] {tag}: {msg}"
        return apply_styles(line, DEFAULT_STYLES.get(level) if styles is None else styles)

    def _log(self, level: str, msg, styles: Optional[Sequence[str]] = None) -> None:
        if not self._enabled_for(level):
            return
        self._logger.log(LEVELS[level], self.format_line(level, str(msg), styles))


logger = Logger()
