"""
Type checked printf-style string formatting.

The functions in this module accept a C-style template with the conversions
`%d`, `%c`, `%p`, `%f`, `%g` and `%s`, and the `%%` escape. Before rendering,
each format specifier is checked against the kind of the corresponding
argument, so that a mismatch raises an informative `FormatError` instead of
producing garbled output.

Examples
--------
>>> format('%s is %d years old', 'Ada', 36)
'Ada is 36 years old'
>>> format('%d', 'not a number')
Traceback (most recent call last):
    ...
stringops.formatting.ArgumentKindError: wrong argument kind for specifier '%d' ...
"""

# std
import io
import re
import sys
import enum
import ctypes
import numbers
from typing import Any, NamedTuple

# third-party
import numpy as np
from loguru import logger

# relative
from . import config
from .wide import to_type_of


# ---------------------------------------------------------------------------- #
REGEX_SPECIFIER = re.compile(r'%(.?)', re.DOTALL)
REGEX_SPECIFIER_BYTES = re.compile(rb'%(.?)', re.DOTALL)

ESCAPE = '%'

# glibc renders null pointers like this
NULL_POINTER = '(nil)'
NULL_STRING = '(null)'

# ctypes simple type codes
CTYPES_INTEGER = frozenset('bBhHiIlLqQ?')
CTYPES_CHAR = frozenset('cu')
CTYPES_FLOAT = frozenset('fdg')
CTYPES_STRING = (ctypes.c_char, ctypes.c_wchar)

# metaclass shared by all types made with `ctypes.POINTER`
PointerType = type(ctypes.POINTER(ctypes.c_char))


# ---------------------------------------------------------------------------- #
class Kind(enum.Enum):
    """The kinds of argument that can be passed to the formatter."""

    INTEGER = 'integer'
    FLOAT = 'float'
    POINTER = 'pointer'
    STRING = 'string'

    def __str__(self):
        return self.value


# Argument kind required by each conversion character
SPECIFIERS = {
    'd': Kind.INTEGER,
    'c': Kind.INTEGER,
    'p': Kind.POINTER,
    'f': Kind.FLOAT,
    'g': Kind.FLOAT,
    's': Kind.STRING
}


# exceptions
# ---------------------------------------------------------------------------- #
class FormatError(ValueError):
    """
    Raised when a format template does not agree with the arguments passed to
    the formatter.
    """


class ArgumentKindError(FormatError, TypeError):
    """
    Raised when an argument is of a type that cannot be formatted, or its kind
    does not match the format specifier.
    """


# ---------------------------------------------------------------------------- #
class Argument(NamedTuple):
    """A normalised formatting argument."""

    kind: Kind
    value: Any


def normalize_arg(arg):
    """
    Project a formatting argument onto one of the kinds that the formatter
    understands.

    Parameters
    ----------
    arg : object
        Integers (including bool, numpy integers, ctypes integer and character
        scalars, and members of enums with integral values) become
        `Kind.INTEGER`, floating point numbers (also `ctypes.c_double` etc.)
        `Kind.FLOAT`, `str`, `bytes`, `bytearray`, `ctypes.c_char_p` and
        ctypes character arrays `Kind.STRING`, and None, `ctypes.c_void_p` and
        ctypes pointer objects `Kind.POINTER`.

    Examples
    --------
    >>> normalize_arg(True)
    Argument(kind=<Kind.INTEGER: 'integer'>, value=1)

    Returns
    -------
    Argument

    Raises
    ------
    ArgumentKindError
        If the type of `arg` cannot be formatted.
    """
    if isinstance(arg, enum.Enum):
        if isinstance(arg.value, numbers.Integral):
            return Argument(Kind.INTEGER, int(arg.value))

        raise ArgumentKindError(
            f'Cannot format enum member {arg!r} with non-integral value.'
        )

    if isinstance(arg, (numbers.Integral, np.integer, np.bool_)):
        return Argument(Kind.INTEGER, int(arg))

    if isinstance(arg, (float, np.floating)):
        return Argument(Kind.FLOAT, float(arg))

    if isinstance(arg, (str, bytes, bytearray)):
        return Argument(Kind.STRING, arg)

    if isinstance(arg, (ctypes.c_char_p, ctypes.c_wchar_p)):
        return Argument(Kind.STRING, arg.value)

    if arg is None:
        return Argument(Kind.POINTER, None)

    if isinstance(arg, ctypes.c_void_p):
        return Argument(Kind.POINTER, arg.value)

    if isinstance(type(arg), PointerType):
        return Argument(Kind.POINTER, ctypes.cast(arg, ctypes.c_void_p).value)

    if isinstance(arg, ctypes.Array) and type(arg)._type_ in CTYPES_STRING:
        return Argument(Kind.STRING, arg.value)

    if (kind := _ctype_kind(arg)):
        return Argument(*kind)

    raise ArgumentKindError(
        f'Cannot format object of type {type(arg).__name__!r}: {arg!r}.'
    )


def _ctype_kind(arg):
    # ctypes scalars like c_int, c_char, c_double
    code = getattr(type(arg), '_type_', None)
    if not isinstance(code, str):
        return

    if code in CTYPES_INTEGER:
        return Kind.INTEGER, int(arg.value)

    if code in CTYPES_CHAR:
        return Kind.INTEGER, ord(arg.value)

    if code in CTYPES_FLOAT:
        return Kind.FLOAT, float(arg.value)


# ---------------------------------------------------------------------------- #

def _regex(template):
    return REGEX_SPECIFIER if isinstance(template, str) else REGEX_SPECIFIER_BYTES


def _decode(char):
    # conversion character from a str or bytes match
    return char if isinstance(char, str) else char.decode('latin-1')


def iter_specifiers(template):
    """
    Iterate over the conversion characters in the template, skipping escaped
    "%%" sequences.

    Examples
    --------
    >>> list(iter_specifiers('100%% of %s is %d'))
    [(9, 's'), (15, 'd')]

    Yields
    ------
    position: int
        Index position of the "%" marker.
    char: str
        The conversion character. This is an empty string for a lone "%" at
        the end of the template.
    """
    for match in _regex(template).finditer(template):
        if (char := _decode(match[1])) != ESCAPE:
            yield match.start(), char


def check_format(template, args):
    """
    Check that the format specifiers in `template` agree with the sequence of
    normalised arguments `args`.

    Parameters
    ----------
    template : str or bytes
        The printf-style format template.
    args : sequence of Argument
        Normalised arguments.

    Raises
    ------
    FormatError
        If there are fewer arguments than specifiers, more arguments than
        specifiers, or an unknown conversion character.
    ArgumentKindError
        If an argument's kind does not match its specifier.
    """
    args = list(args)
    count = 0
    for count, (position, char) in enumerate(iter_specifiers(template), 1):
        if char not in SPECIFIERS:
            raise FormatError(
                f'invalid format char {char!r} at position {position} in '
                f'template {template!r}. Supported conversions are: '
                f'{", ".join(SPECIFIERS)}.'
            )

        if count > len(args):
            raise FormatError(
                f'too few format specifiers: no argument left for \'%{char}\' '
                f'at position {position} in template {template!r}. Received '
                f'{len(args)} argument(s).'
            )

        arg = args[count - 1]
        if arg.kind is not SPECIFIERS[char]:
            raise ArgumentKindError(
                f'wrong argument kind for specifier \'%{char}\' at position '
                f'{position} in template {template!r}: expected '
                f'{SPECIFIERS[char]}, received {arg.kind} {arg.value!r}.'
            )

    if len(args) > count:
        raise FormatError(
            f'too many format specifiers: template {template!r} has {count} '
            f'conversion(s), but received {len(args)} arguments.'
        )


def _should_validate(validate):
    if validate is None:
        validate = config.CONFIG.format.validate

    if validate == 'debug':
        return __debug__

    if isinstance(validate, (bool, np.bool_)):
        return bool(validate)

    raise ValueError(f'Invalid value for `validate`: {validate!r}. Expected '
                     f'one of True, False, or "debug".')


def _render_value(arg, char, template):
    if char == 'c' and arg.kind is Kind.INTEGER:
        # C converts %c arguments to unsigned char
        return arg.value & 0xFF

    if arg.kind is Kind.POINTER:
        text = NULL_POINTER if arg.value is None else f'0x{arg.value:x}'
    elif arg.kind is Kind.STRING:
        text = NULL_STRING if arg.value is None else arg.value
    else:
        return arg.value

    return to_type_of(text, template)


def _render_specifier(match):
    # pointers are rendered to text beforehand, so "%p" becomes "%s"
    if _decode(match[1]) != 'p':
        return match[0]

    return '%s' if isinstance(match[0], str) else b'%s'


def _render(template, args):
    chars = dict(enumerate(char for _, char in iter_specifiers(template)))
    values = tuple(_render_value(arg, chars.get(i), template)
                   for i, arg in enumerate(args))
    return _regex(template).sub(_render_specifier, template) % values


# ---------------------------------------------------------------------------- #

def format(template, *args, validate=None):
    """
    Render a printf-style template with arguments.

    Parameters
    ----------
    template : str or bytes
        Format template using the conversions d, c, p, f, g, s, and the "%%"
        escape.
    *args
        Arguments matching the conversions in `template`.
    validate : bool or 'debug', optional
        Whether to check the specifiers against the arguments before
        rendering. For 'debug', checks are done unless python is running with
        optimizations (-O). The default is taken from the `format.validate`
        config value. Any other value raises `ValueError`.

    Examples
    --------
    >>> format('%s: %g%%', 'progress', 99.5)
    'progress: 99.5%'

    Returns
    -------
    str or bytes
        The rendered text, of the same type as `template`.

    Raises
    ------
    FormatError
        If the template and arguments do not agree, and validation is on.
    """
    if not isinstance(template, (str, bytes)):
        raise TypeError(f'Expected str or bytes for `template`, received '
                        f'{type(template).__name__!r}.')

    normalized = [normalize_arg(arg) for arg in args]
    if _should_validate(validate):
        try:
            check_format(template, normalized)
        except FormatError as err:
            logger.debug('Format check failed: {}', err)
            raise

    return _render(template, normalized)


def print(template, *args, file=None, validate=None):
    """
    Render a printf-style template with arguments and write the result to
    `file` (by default the standard output). No newline is added and the
    stream is not flushed. See `format` for details.
    """
    _write(format(template, *args, validate=validate), file)


def print_line(template, *args, file=None, validate=None):
    """
    Render a printf-style template with arguments and write the result
    followed by a newline to `file` (by default the standard output).
    """
    text = format(template, *args, validate=validate)
    _write(text + (b'\n' if isinstance(text, bytes) else '\n'), file)


def _write(text, file):
    file = sys.stdout if file is None else file
    if isinstance(text, bytes):
        if hasattr(file, 'buffer'):
            # pending text must reach the binary buffer ahead of these bytes
            file.flush()
            file = file.buffer
        elif isinstance(file, io.TextIOBase):
            raise TypeError(f'Cannot write bytes to text stream {file!r} '
                            f'without a binary `buffer`. Use a str template.')

    file.write(text)


# alias
sprintf = format
