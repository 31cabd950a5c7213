"""
Load package configuration from the bundled yaml file, with optional
overrides from the user config folder.
"""

# std
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
CACHE = {}
FILENAME = 'config.yaml'
DEFAULTS = Path(__file__).parent / FILENAME


# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Dictionary with (nested) item read access through attribute lookup.

    >>> node = ConfigNode({'url': {'strict': False}})
    >>> node.url.strict
    False
    """

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, val in self.items():
            if isinstance(val, dict) and not isinstance(val, ConfigNode):
                super().__setitem__(key, type(self)(val))

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)

    def merge(self, other):
        """Recursively update with the items from mapping `other`."""
        for key, val in dict(other).items():
            if isinstance(val, dict) and isinstance(self.get(key), ConfigNode):
                self[key].merge(val)
            else:
                self[key] = type(self)(val) if isinstance(val, dict) else val
        return self


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if (path := Path(filename)).exists():
        logger.debug("Loading config file: '{!s}'.", path)
        return load_yaml(path)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def user_config_file(pkg='stringops'):
    return user_config_path(pkg) / FILENAME


def load_config(defaults=DEFAULTS, user=True):
    """
    Load the default config, updated by the user config file if one exists.

    Parameters
    ----------
    defaults : str or Path
        Path to the yaml file holding default values.
    user : bool or str or Path
        Whether to look for a user config file in the platform specific user
        config folder. A path may also be given explicitly.

    Returns
    -------
    ConfigNode
    """
    node = ConfigNode(load(defaults))

    if user is True:
        user = user_config_file()

    if user and Path(user).exists():
        logger.info("Found user config file at: '{!s}'.", user)
        node.merge(load(user))

    return node


# ---------------------------------------------------------------------------- #
CONFIG = load_config()
