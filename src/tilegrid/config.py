"""Configuration management for tilegrid.

Settings are loaded with Dynaconf from multiple locations in order of
increasing priority:

1. Global settings (/etc/tilegrid/)
2. User settings (~/.config/tilegrid/)
3. Current directory settings (./)
4. Environment variable specified file (TILEGRID_SETTINGS_FILE_FOR_DYNACONF)

Variables prefixed with ``TILEGRID_`` override all files.

Attributes
----------
USER_DIR : pathlib.Path
    Path to user configuration directory.
GLOB_DIR : pathlib.Path
    Path to global configuration directory.
CURR_DIR : pathlib.Path
    Path to current working directory.
DEFAULTS : dict
    Fallback values for keys missing from every settings source.
settings : Dynaconf
    The Dynaconf settings object with loaded configuration.
"""
import os
import pathlib

from dynaconf import Dynaconf

USER_DIR = pathlib.Path("~/.config/tilegrid").expanduser()
GLOB_DIR = pathlib.Path("/etc/tilegrid/")
CURR_DIR = pathlib.Path("./").absolute()
settings_files = [
    GLOB_DIR / "settings.toml",
    USER_DIR / "settings.toml",
    CURR_DIR / "settings.toml",
    ]
extra_file = os.getenv("TILEGRID_SETTINGS_FILE_FOR_DYNACONF")
if extra_file:
    settings_files.append(pathlib.Path(extra_file).absolute())

DEFAULTS = {
    "default_zoom": 14,
    "log_level": "WARNING",
}

settings = Dynaconf(
    merge_enabled = True,
    envvar_prefix="TILEGRID",
    settings_files=settings_files,
    environments=True,
    load_dotenv=True,
)


def get(key):
    """Return a setting, falling back to the package defaults.

    Parameters
    ----------
    key : str
        Setting name, e.g. ``"default_zoom"``.
    """
    return settings.get(key, DEFAULTS.get(key))


def change_env(new_env):
    """Change the active Dynaconf environment.

    Parameters
    ----------
    new_env : str
        The environment name to switch to (e.g., 'development', 'production').
    """
    settings.setenv(new_env)
    settings.reload()
