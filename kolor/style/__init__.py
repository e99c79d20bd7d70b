# style/__init__.py

from .registry import NamedRegistry, RegistryEntry
from .definitions import (
    Foreground, Background, Style, Theme, ThemeSpec,
    BUILTIN_THEMES, colors, styles,
)
from .engine import (
    StyledText, paint, apply_named, strip,
    style_code, foreground_code, background_code, clear_code,
)
from .themes import (
    define_theme, theme, remove_theme, get_theme, describe_theme,
    list_themes, theme_defined, apply_theme, normalize_styles,
)

__all__ = [
    'NamedRegistry', 'RegistryEntry',
    'Foreground', 'Background', 'Style', 'Theme', 'ThemeSpec',
    'BUILTIN_THEMES', 'colors', 'styles',
    'StyledText', 'paint', 'apply_named', 'strip',
    'style_code', 'foreground_code', 'background_code', 'clear_code',
    'define_theme', 'theme', 'remove_theme', 'get_theme', 'describe_theme',
    'list_themes', 'theme_defined', 'apply_theme', 'normalize_styles',
]
