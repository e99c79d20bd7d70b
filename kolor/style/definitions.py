# style/definitions.py

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .registry import NamedRegistry

# ANSI format utility
FMT = lambda x: f'\033[{x}m'

RESET = FMT('0')
CLEAR_EOL = '\033[0K'

COLOR_NAMES = ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white')
RAINBOW = ('red', 'yellow', 'green', 'cyan', 'blue', 'magenta')
BUILTIN_THEMES = ('success', 'error', 'warning', 'info', 'debug')
BACKGROUND_PREFIX = 'on_'


@dataclass(frozen=True)
class ThemeSpec:
    """
    Normalized theme record.

    Frozen so identical records hash equal and collide in the Theme registry.
    """
    foreground: Optional[str] = None
    background: Optional[str] = None
    styles: Tuple[str, ...] = field(default_factory=tuple)

    def tokens(self) -> List[str]:
        """Flatten back into the token list form: fg, on_bg, styles..."""
        out = []
        if self.foreground:
            out.append(self.foreground)
        if self.background:
            out.append(f"{BACKGROUND_PREFIX}{self.background}")
        out.extend(self.styles)
        return out


Foreground = NamedRegistry('Foreground', int)
Background = NamedRegistry('Background', int)
Style = NamedRegistry('Style', int)
Theme = NamedRegistry('Theme', ThemeSpec)

for offset, color in enumerate(COLOR_NAMES):
    Foreground.register(color, 30 + offset)
    Background.register(color, 40 + offset)

Style.register('clear', 0)
Style.register('bold', 1)
Style.register('underline', 4)
Style.register('reversed', 7)

Theme.register('success', ThemeSpec('green', None, ('bold',)))
Theme.register('error', ThemeSpec('white', 'red', ('bold',)))
Theme.register('warning', ThemeSpec('yellow', None, ('bold',)))
Theme.register('info', ThemeSpec('cyan', None, ()))
Theme.register('debug', ThemeSpec('magenta', None, ()))


def colors() -> List[str]:
    """Return the available foreground color names, sorted."""
    return sorted(Foreground.keys())


def styles() -> List[str]:
    """Return style names usable as accessors (``clear`` excluded)."""
    return [name for name in Style.keys() if name != 'clear']
