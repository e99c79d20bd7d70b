# style/engine.py

import re
import threading
from typing import Callable, Dict, Optional, Tuple, Union

from .. import state
from .definitions import (
    FMT, RESET, CLEAR_EOL, RAINBOW, BACKGROUND_PREFIX,
    Foreground, Background, Style,
)

# Regex to match ANSI SGR escape codes
ANSI_REGEX = re.compile(r'\x1B\[[\d;]*m')
LEADING_CODE = re.compile(r'^(\x1B\[[\d;]*m)')
HEX_REGEX = re.compile(r'[0-9A-Fa-f]{6}')

TextLike = Union[str, "StyledText"]

# Theme bundles keyed by theme name; populated by the theme engine.
_bundles: Dict[str, Callable[["StyledText"], "StyledText"]] = {}
_bundles_lock = threading.Lock()


def bind_bundle(name: str, bundle: Callable[["StyledText"], "StyledText"]) -> None:
    with _bundles_lock:
        _bundles[name] = bundle


def unbind_bundle(name: str) -> None:
    with _bundles_lock:
        _bundles.pop(name, None)


def bundle_for(name: str) -> Optional[Callable[["StyledText"], "StyledText"]]:
    with _bundles_lock:
        return _bundles.get(name)


def lookup_code(name: str) -> Optional[str]:
    """
    Resolve a basic accessor name (``red``, ``on_red``, ``bold``) to its
    escape code, ignoring the enablement switch. None when unknown.
    """
    entry = Foreground.get(name)
    if entry is not None:
        return FMT(entry.value)
    if name.startswith(BACKGROUND_PREFIX):
        entry = Background.get(name[len(BACKGROUND_PREFIX):])
        if entry is not None:
            return FMT(entry.value)
    if name != 'clear':
        entry = Style.get(name)
        if entry is not None:
            return FMT(entry.value)
    return None


def has_style(name: str) -> bool:
    """True when ``name`` is a basic accessor or a bound theme bundle."""
    return lookup_code(name) is not None or bundle_for(name) is not None


def reserved_name(name: str) -> bool:
    """
    True when a bundle bound under ``name`` could never be reached by
    attribute: catalog accessors, ``clear`` and StyledText's own members.
    """
    return (
        not name.isidentifier()
        or name.startswith('_')
        or name == 'clear'
        or lookup_code(name) is not None
        or hasattr(StyledText, name)
    )


class StyledText:
    """
    Immutable pairing of base text with an ordered tuple of escape codes.

    Every styling operation returns a new StyledText; rendering happens on
    ``str()``, formatting, comparison and concatenation. Read-only ``str``
    methods are delegated to the base text and text results keep the codes.
    """
    __slots__ = ('_text', '_codes')

    def __init__(self, text: TextLike = "", codes: Tuple[str, ...] = ()):
        if isinstance(text, StyledText):
            codes = text._codes + tuple(codes)
            text = text._text
        object.__setattr__(self, '_text', str(text))
        object.__setattr__(self, '_codes', tuple(codes))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (StyledText, (self._text, self._codes))

    @property
    def text(self) -> str:
        return self._text

    @property
    def codes(self) -> Tuple[str, ...]:
        return self._codes

    # Rendering

    def render(self) -> str:
        """Return codes + text + reset, or the bare text when disabled."""
        if not state.is_enabled() or not self._codes:
            return self._text
        return f"{''.join(self._codes)}{self._text}{RESET}"

    def __str__(self) -> str:
        return self.render()

    def __format__(self, spec: str) -> str:
        return format(self.render(), spec)

    def __repr__(self) -> str:
        return f"StyledText({self._text!r}, codes={self._codes!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, (str, StyledText)):
            return self.render() == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Tracks the rendered value, so it changes when colors are toggled.
        # Do not keep styled values in sets or dict keys across enable/disable.
        return hash(self.render())

    def __add__(self, other):
        if isinstance(other, (str, StyledText)):
            return self.render() + str(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return other + self.render()
        return NotImplemented

    def __len__(self) -> int:
        return len(self._text)

    def __contains__(self, item) -> bool:
        item = item.text if isinstance(item, StyledText) else item
        return item in self._text

    def __getitem__(self, key) -> "StyledText":
        return StyledText(self._text[key], self._codes)

    # Chaining

    def _plain(self) -> "StyledText":
        return StyledText(self._text)

    def add_code(self, code: str) -> "StyledText":
        """Append one escape code; disabled state drops all codes."""
        if not state.is_enabled():
            return self._plain()
        if not code:
            return self
        return StyledText(self._text, self._codes + (code,))

    def apply_named(self, name: str) -> "StyledText":
        """Apply a color, ``on_`` background, style or theme by name."""
        code = lookup_code(name)
        if code is not None:
            return self.add_code(code)
        bundle = bundle_for(name)
        if bundle is not None:
            return bundle(self)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        if has_style(name):
            return self.apply_named(name)

        attr = getattr(self._text, name)
        if not callable(attr):
            return attr

        codes = self._codes

        def delegated(*args, **kwargs):
            result = attr(*args, **kwargs)
            return StyledText(result, codes) if isinstance(result, str) else result

        delegated.__name__ = name
        return delegated

    def __dir__(self):
        names = set(super().__dir__()) | set(dir(str))
        names.update(Foreground.keys())
        names.update(f"{BACKGROUND_PREFIX}{c}" for c in Background.keys())
        names.update(s for s in Style.keys() if s != 'clear')
        with _bundles_lock:
            names.update(_bundles)
        return sorted(names)

    def clear(self) -> str:
        """Drop all formatting and return the base text."""
        return self._text

    # 256 colors

    def color(self, code: int) -> "StyledText":
        """256-color foreground. The code is not range checked."""
        return self.add_code(f"\033[38;5;{code}m")

    def on_color(self, code: int) -> "StyledText":
        """256-color background. The code is not range checked."""
        return self.add_code(f"\033[48;5;{code}m")

    # True color

    def rgb(self, red: int, green: int, blue: int) -> "StyledText":
        """
        24-bit foreground color.

        Components outside 0..255 are silently rejected and the value is
        returned without a new code.
        """
        if not state.is_enabled():
            return self._plain()
        if not _valid_rgb(red, green, blue):
            return self
        return self.add_code(f"\033[38;2;{red};{green};{blue}m")

    def on_rgb(self, red: int, green: int, blue: int) -> "StyledText":
        """24-bit background color, validated like ``rgb``."""
        if not state.is_enabled():
            return self._plain()
        if not _valid_rgb(red, green, blue):
            return self
        return self.add_code(f"\033[48;2;{red};{green};{blue}m")

    def with_hex(self, hex_color: str) -> "StyledText":
        """Foreground from ``RRGGBB`` or ``#RRGGBB``; anything else is ignored."""
        if not state.is_enabled():
            return self._plain()
        channels = _parse_hex(hex_color)
        return self.rgb(*channels) if channels else self

    def on_hex(self, hex_color: str) -> "StyledText":
        """Background from ``RRGGBB`` or ``#RRGGBB``; anything else is ignored."""
        if not state.is_enabled():
            return self._plain()
        channels = _parse_hex(hex_color)
        return self.on_rgb(*channels) if channels else self

    # Effects

    def gradient(self, start_color: str, end_color: str) -> "StyledText":
        """
        Interpolate per character between two foreground colors.

        Each character gets its own code, rounded from the linear blend of
        the two catalog values; one reset closes the sequence. Unknown
        color names leave the text untouched.
        """
        if not state.is_enabled():
            return self._plain()

        start = Foreground.get(start_color)
        end = Foreground.get(end_color)
        if start is None or end is None:
            return self

        chars = list(self._text)
        last = len(chars) - 1
        out = []
        for i, char in enumerate(chars):
            progress = i / last if last > 0 else 0
            code = start.value + _round_half_up((end.value - start.value) * progress)
            out.append(f"{FMT(code)}{char}")
        return StyledText(''.join(self._codes) + ''.join(out) + RESET)

    def rainbow(self) -> "StyledText":
        """Cycle red, yellow, green, cyan, blue, magenta across characters."""
        if not state.is_enabled():
            return self._plain()

        codes = [FMT(Foreground.get(name).value) for name in RAINBOW]
        out = [
            f"{codes[i % len(codes)]}{char}"
            for i, char in enumerate(self._text)
        ]
        return StyledText(''.join(self._codes) + ''.join(out) + RESET)

    # Terminal helpers

    def to_eol(self) -> str:
        """Render with a clear-to-end-of-line code after the leading escape."""
        rendered = self.render()
        if not state.is_enabled():
            return rendered
        modified = LEADING_CODE.sub(lambda m: m.group(1) + CLEAR_EOL, rendered, count=1)
        return modified if modified != rendered else f"{CLEAR_EOL}{rendered}"

    def uncolorize(self) -> str:
        """Rendered text with every escape code stripped."""
        return strip(self.render())

    decolorize = uncolorize


def _valid_rgb(*channels) -> bool:
    return all(0 <= value <= 255 for value in channels)


def _parse_hex(hex_color) -> Optional[Tuple[int, int, int]]:
    hex_color = str(hex_color)
    if hex_color.startswith('#'):
        hex_color = hex_color[1:]
    if not HEX_REGEX.fullmatch(hex_color):
        return None
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def _round_half_up(value: float) -> int:
    # .5 rounds away from zero
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def paint(text: TextLike = "") -> StyledText:
    """Wrap text so it can be styled: ``paint("Hello").red.bold``."""
    return text if isinstance(text, StyledText) else StyledText(text)


def apply_named(text: TextLike, name: str) -> StyledText:
    """Functional form of ``paint(text).<name>``."""
    return paint(text).apply_named(name)


def strip(text: TextLike) -> str:
    """Remove every ANSI SGR escape code from text."""
    return ANSI_REGEX.sub('', str(text))


def style_code(name: str) -> str:
    """Escape code for a style name, or '' when disabled or unknown."""
    if not state.is_enabled():
        return ''
    entry = Style.get(name)
    return FMT(entry.value) if entry else ''


def foreground_code(name: str) -> str:
    """Escape code for a foreground color, or '' when disabled or unknown."""
    if not state.is_enabled():
        return ''
    entry = Foreground.get(name)
    return FMT(entry.value) if entry else ''


def background_code(name: str) -> str:
    """Escape code for a background color, or '' when disabled or unknown."""
    if not state.is_enabled():
        return ''
    entry = Background.get(name)
    return FMT(entry.value) if entry else ''


def clear_code() -> str:
    return RESET if state.is_enabled() else ''
