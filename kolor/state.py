# state.py

import os
import threading

NO_COLOR_ENV_KEYS = ("NO_COLOR", "NO_COLORS")


class ColorState:
    """
    Process-wide switch deciding whether styling produces escape codes.

    Reads are lock-free (a single attribute load); toggles are serialized.
    """
    def __init__(self, enabled: bool = True):
        self._enabled = enabled
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls, environ=None) -> "ColorState":
        """Build state from the environment; any no-color variable disables."""
        environ = os.environ if environ is None else environ
        return cls(enabled=not any(key in environ for key in NO_COLOR_ENV_KEYS))

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> bool:
        with self._lock:
            self._enabled = True
        return True

    def disable(self) -> bool:
        with self._lock:
            self._enabled = False
        return False


state = ColorState.from_env()


def enable() -> bool:
    """Turn styling on (the default)."""
    return state.enable()


def disable() -> bool:
    """Turn styling off; every operation then returns plain text."""
    return state.disable()


def is_enabled() -> bool:
    return state.enabled
