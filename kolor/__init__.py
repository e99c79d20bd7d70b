# __init__.py

__version__ = "1.0.0"

from .state import enable, disable, is_enabled
from .logger import Logger
from .errors import (
    KolorError, DuplicateNameError, DuplicateValueError, RegistryTypeError,
    ThemeNotFoundError, ProtectedThemeError, ReservedNameError, ConfigError,
)
from .style import *
from .style import __all__ as _style_all
# kolor.style.themes is a submodule, so the listing function is only exported here
from .style.themes import themes

__all__ = [
    "__version__", "enable", "disable", "is_enabled", "Logger",
    "KolorError", "DuplicateNameError", "DuplicateValueError", "RegistryTypeError",
    "ThemeNotFoundError", "ProtectedThemeError", "ReservedNameError", "ConfigError",
    "themes",
] + _style_all
