# style/themes.py

import threading
from typing import Callable, Iterable, List, Optional

from .. import state
from ..errors import (
    DuplicateValueError, KolorError, ProtectedThemeError, ReservedNameError,
    ThemeNotFoundError,
)
from ..logger import logger
from .definitions import (
    BACKGROUND_PREFIX, BUILTIN_THEMES, Foreground, Theme, ThemeSpec,
)
from .engine import (
    StyledText, TextLike, bind_bundle, bundle_for, has_style, paint, reserved_name,
    unbind_bundle,
)

_lock = threading.RLock()


def normalize_styles(tokens: Iterable[str]) -> ThemeSpec:
    """
    Fold a flat token list into a ThemeSpec.

    The first foreground color becomes ``foreground``, the first ``on_``
    token becomes ``background`` (prefix stripped) and everything else is
    kept, in order, as style modifiers.
    """
    tokens = [str(token) for token in tokens]
    fg = next((t for t in tokens if t in Foreground), None)
    bg = next((t for t in tokens if t.startswith(BACKGROUND_PREFIX)), None)
    rest = tuple(t for t in tokens if t not in (fg, bg))
    return ThemeSpec(
        foreground=fg,
        background=bg[len(BACKGROUND_PREFIX):] if bg else None,
        styles=rest,
    )


def build_bundle(name: str, spec: ThemeSpec) -> Callable[[TextLike], StyledText]:
    """Create the callable that applies ``spec`` component by component."""
    components = spec.tokens()

    def bundle(text: TextLike) -> StyledText:
        result = paint(text)
        if not state.is_enabled():
            return StyledText(result.text)
        for component in components:
            if has_style(component):
                result = result.apply_named(component)
            else:
                logger.debug(f"Style '{component}' not found for theme '{name}'")
        return result

    bundle.__name__ = name
    bundle.__doc__ = f"Apply the '{name}' theme ({', '.join(components) or 'no styles'})."
    return bundle


def _define_bundle(name: str, spec: ThemeSpec) -> None:
    bind_bundle(name, build_bundle(name, spec))
    logger.debug(f"Defined theme method '{name}' with styles {spec.tokens()}")


def define_theme(name: str, *tokens: str) -> bool:
    """
    Register a custom theme from color/background/style tokens.

        define_theme('alert', 'yellow', 'on_red', 'bold', 'underline')
        paint('Careful').alert

    Returns True when the theme was registered. A record identical to an
    existing theme is skipped with a warning; any other registration
    failure, including a name that would shadow a color, style or
    StyledText method, is logged as an error. Neither case raises.
    """
    name = str(name)
    spec = normalize_styles(tokens)
    with _lock:
        try:
            if reserved_name(name):
                raise ReservedNameError(name)
            Theme.register(name, spec)
        except DuplicateValueError as e:
            logger.warning(f"Theme value already registered as :{e.existing}. Skipping :{name}.")
            return False
        except KolorError as e:
            logger.error(f"Theme registration failed for {name}: {e}")
            return False
        _define_bundle(name, spec)
    return True


theme = define_theme


def remove_theme(name: str) -> ThemeSpec:
    """
    Remove a custom theme and its bundle.

    Raises:
        ThemeNotFoundError: no theme is registered under ``name``
        ProtectedThemeError: ``name`` is a built-in theme
    """
    name = str(name)
    with _lock:
        if name not in Theme:
            raise ThemeNotFoundError(name)
        if name in BUILTIN_THEMES:
            raise ProtectedThemeError(name)

        logger.info(f"Removing theme {name}")
        entry = Theme.remove(name)
        unbind_bundle(name)
    return entry.value


def get_theme(name: str) -> Optional[ThemeSpec]:
    """Return the record for ``name`` or None."""
    entry = Theme.get(name)
    return entry.value if entry is not None else None


def describe_theme(name: str) -> Optional[List[str]]:
    """Token form of a theme, e.g. ``['white', 'on_red', 'bold']``."""
    spec = get_theme(name)
    return spec.tokens() if spec is not None else None


def list_themes() -> List[str]:
    """All registered theme names in registration order."""
    return Theme.keys()


themes = list_themes


def theme_defined(name: str) -> bool:
    """True when a bundle is bound for ``name``."""
    return bundle_for(str(name)) is not None


def apply_theme(text: TextLike, name: str) -> StyledText:
    """Apply a registered theme by name; unknown names raise ThemeNotFoundError."""
    bundle = bundle_for(str(name))
    if bundle is None:
        raise ThemeNotFoundError(str(name))
    return bundle(text)


def define_all_themes() -> None:
    """Bind bundles for every registered theme that has none yet."""
    with _lock:
        for entry in Theme.all():
            if bundle_for(entry.name) is None:
                _define_bundle(entry.name, entry.value)


define_all_themes()
