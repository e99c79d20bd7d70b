# conftest.py

import os
import sys
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kolor import state
from kolor.logger import logger
from kolor.style.definitions import BUILTIN_THEMES, Theme
from kolor.style.themes import remove_theme

ESC = '\x1b'


@pytest.fixture(autouse=True)
def color_state(monkeypatch):
    """Start every test enabled, quiet, and with only built-in themes."""
    for key in ('KOLOR_DEBUG', 'KOLOR_VERBOSE', 'NO_COLOR', 'NO_COLORS'):
        monkeypatch.delenv(key, raising=False)
    state.enable()
    logger.unsuppress()
    yield state
    state.enable()
    logger.unsuppress()
    for name in Theme.keys():
        if name not in BUILTIN_THEMES:
            remove_theme(name)


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME at an empty temporary directory."""
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.delenv('USERPROFILE', raising=False)
    return tmp_path
