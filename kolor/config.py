# config.py

import os
import runpy
import shutil
from pathlib import Path
from typing import Dict, List, Optional

from . import state
from .errors import ConfigError
from .logger import logger
from .style import themes as theme_engine

CONFIG_FILE_NAME = '.kolorrc.py'
CONFIG_ALIAS_NAME = '.kolorrc'
DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default_config' / 'kolorrc.py'


def home_path() -> Optional[Path]:
    """The user's home directory from HOME or USERPROFILE, if either is set."""
    home = os.environ.get('HOME') or os.environ.get('USERPROFILE')
    return Path(home) if home else None


def config_paths() -> List[Path]:
    """Candidate config files, preferred first."""
    home = home_path()
    if home is None:
        return []
    return [home / CONFIG_FILE_NAME, home / CONFIG_ALIAS_NAME]


def config_file_path() -> Optional[Path]:
    """Path of the first existing config file, or None."""
    return next((path for path in config_paths() if path.exists()), None)


def config_exists() -> bool:
    return config_file_path() is not None


def create_default_config() -> Optional[Path]:
    """
    Copy the packaged default config into the home directory.

    Never overwrites an existing config (either name). Failures are
    reported as warnings, not raised.
    """
    home = home_path()
    if home is None:
        logger.warning('No home directory found')
        return None
    if config_exists():
        return None

    target = home / CONFIG_FILE_NAME
    try:
        shutil.copyfile(DEFAULT_CONFIG_PATH, target)
    except OSError as e:
        logger.warning(f"Failed to create default config file: {e}")
        return None

    logger.warning(f"Created default configuration file at {target}")
    return target


def config_globals() -> Dict[str, object]:
    """Names available to a config script."""
    import kolor
    return {
        'kolor': kolor,
        'theme': theme_engine.define_theme,
        'define_theme': theme_engine.define_theme,
        'remove_theme': theme_engine.remove_theme,
        'themes': theme_engine.themes,
        'enable': state.enable,
        'disable': state.disable,
        'logger': logger,
    }


def load_python_config(path: Path) -> Dict[str, object]:
    """Execute ``path`` as Python; syntax errors surface as ConfigError."""
    try:
        return runpy.run_path(str(path), init_globals=config_globals(), run_name='__kolorrc__')
    except SyntaxError as e:
        raise ConfigError(f"Syntax error in {path}: {e}") from e


def load_config() -> bool:
    """
    Execute the user's config file, if any.

    Returns True when a config file ran to completion. Any error raised
    while loading is logged as a warning.
    """
    path = config_file_path()
    logger.info(f"load_config called, config_path: {path}")
    if path is None:
        return False

    logger.info(f"Loading config from: {path}")
    try:
        load_python_config(path)
    except Exception as e:
        logger.warning(f"Error loading config file {path}: {e}")
        return False
    return True


def reload() -> bool:
    return load_config()


def init() -> bool:
    """Create the default config when missing, then load it."""
    if not config_exists():
        create_default_config()
    return load_config()


def describe_theme(name: str) -> Optional[List[str]]:
    return theme_engine.describe_theme(str(name))


def themes_from_config() -> List[str]:
    return theme_engine.list_themes()
