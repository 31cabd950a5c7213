"""
Emit messages or warnings, or raise exceptions, depending on a requested
action.
"""

# std
import warnings
from enum import IntEnum

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #

def noop(*_, **__):
    """Do nothing."""


def raises(kind):
    """raises an exception of type `kind`."""
    def _raises(message, *args, **kws):
        raise kind(message.format(*args, **kws) if (args or kws) else message)
    return _raises


def _warn(message, *args, **kws):
    warnings.warn(message.format(*args, **kws) if (args or kws) else message,
                  stacklevel=3)


def is_exception(obj):
    return isinstance(obj, Exception) \
        or (isinstance(obj, type) and issubclass(obj, Exception))


# ---------------------------------------------------------------------------- #

class Action(IntEnum):

    NONE = IGNORE = SILENT = 0   # silently ignore
    INFO = NOTE = 1
    DEBUG = 2
    WARN = WARNING = 3
    ERROR = RAISE = 4
    CUSTOM = 5

    @classmethod
    def _missing_(cls, action):

        if action is None:
            return cls.NONE

        if isinstance(action, str):
            action = action.upper().rstrip('S')
            return getattr(cls, action, None)


class Emit:
    """
    Emit messages or warnings, or raise exceptions depending on requested action.
    Custom actions are also supported.

    Examples
    --------
    >>> Emit('warn')('Could not parse {!r}.', 'x')
    >>> Emit(ValueError)('Bad dog!')
    Traceback (most recent call last):
        ...
    ValueError: Bad dog!
    """

    __slots__ = ('_action', 'emit', 'exception')

    def __init__(self, action='ignore', exception=Exception):
        self.exception = exception
        # resolve action
        self.action = action or 'ignore'

    def __call__(self, message, *args, **kws):
        self.emit(message, *args, **kws)

    def __repr__(self):
        return f'{type(self).__name__}({self._action.name.lower()})'

    @property
    def action(self):
        """set message action"""
        return self._action

    @action.setter
    def action(self, obj):
        self._action, self.emit = self._resolve_action_emitter(obj)

    def _resolve_action_emitter(self, action):
        if is_exception(action):
            # handle case: >>> ValueError('Bad dog!') and ValueError
            kind = action if isinstance(action, type) else type(action)
            return Action.ERROR, raises(kind)

        if callable(action):
            # custom action (emit function)
            return Action.CUSTOM, action

        # unknown names raise ValueError here
        resolved = Action(action)
        emitters = {
            Action.NONE:  noop,
            Action.INFO:  logger.opt(depth=1).info,
            Action.DEBUG: logger.opt(depth=1).debug,
            Action.WARN:  _warn,
            Action.ERROR: raises(self.exception)
        }
        return resolved, emitters[resolved]
