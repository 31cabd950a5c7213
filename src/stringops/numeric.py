"""
Conversion between numbers and their textual representation, in the manner of
C++ iostreams.
"""

# std
import re
import numbers

# third-party
import numpy as np

# relative
from . import config
from .emit import Emit


# ---------------------------------------------------------------------------- #
# Stream extraction skips leading whitespace and then reads the longest prefix
# that looks like a number of the requested kind
REGEX_BOOL = re.compile(r'[ \t\n\v\f\r]*([01])', re.ASCII)
REGEX_INTEGER = re.compile(r'[ \t\n\v\f\r]*([+-]?\d+)', re.ASCII)
REGEX_FLOAT = re.compile(
    r'''[ \t\n\v\f\r]*
        ([+-]?(?:\d+\.?\d*|\.\d+)   # mantissa
        (?:[eE][+-]?\d+)?)          # exponent
    ''',
    re.ASCII | re.VERBOSE
)

# default stream precision
PRECISION = 6


# ---------------------------------------------------------------------------- #
class NumericParseError(ValueError):
    """Raised when a string does not hold a valid number of the requested kind."""


# ---------------------------------------------------------------------------- #

def to_string(number, narrow=False):
    """
    Convert a number to text the way an output stream with default settings
    would: integers in decimal, booleans as 1 or 0, and floating point numbers
    in the shortest of fixed or scientific notation with 6 significant digits.

    Parameters
    ----------
    number : numbers.Real or np.number
        The number to convert.
    narrow : bool
        Return `bytes` instead of `str`.

    Examples
    --------
    >>> to_string(42)
    '42'
    >>> to_string(3.14159265)
    '3.14159'
    >>> to_string(1234567.0)
    '1.23457e+06'

    Returns
    -------
    str or bytes
    """
    if isinstance(number, (bool, np.bool_, numbers.Integral, np.integer)):
        text = str(int(number))
    elif isinstance(number, (numbers.Real, np.floating)):
        text = f'{float(number):.{PRECISION}g}'
    else:
        raise TypeError(f'Cannot convert object of type '
                        f'{type(number).__name__!r} to string: {number!r}.')

    return text.encode('ascii') if narrow else text


def to_wstring(number):
    """Convert a number to a wide string. See `to_string`."""
    return to_string(number)


# ---------------------------------------------------------------------------- #

def _resolve_kind(kind):
    if not isinstance(kind, type):
        raise TypeError(f'Expected a numeric type for `kind`, received {kind!r}.')

    if issubclass(kind, (bool, np.bool_)):
        return REGEX_BOOL

    if issubclass(kind, (numbers.Integral, np.integer)):
        return REGEX_INTEGER

    if issubclass(kind, (float, np.floating)):
        return REGEX_FLOAT

    raise TypeError(f'Unsupported numeric type: {kind.__name__!r}.')


def _saturate(value, kind):
    # fixed-width integers clip at their limits
    if issubclass(kind, np.integer):
        info = np.iinfo(kind)
        clipped = min(max(value, int(info.min)), int(info.max))
        return clipped, clipped != value
    return value, False


def to_numeric(string, kind=int, on_error=None):
    """
    Parse a number of type `kind` from the start of a string, the way an input
    stream would.

    Leading whitespace is skipped and the longest numeric prefix is read. When
    nothing can be read, the result is zero. Any characters that are not
    consumed, or an integer that does not fit into a fixed-width `kind`, are
    reported according to `on_error`.

    Parameters
    ----------
    string : str or bytes
        Text to parse.
    kind : type
        The numeric type: int, float, bool, or any numpy integer or floating
        point scalar type.
    on_error : {'ignore', 'info', 'debug', 'warn', 'raise'} or callable, optional
        Action to take if the string is not a valid number in its entirety.
        For 'raise', a `NumericParseError` is raised. The default is taken from
        the `numeric.on_error` config value.

    Examples
    --------
    >>> to_numeric('  42 apples')
    42
    >>> to_numeric('2.5e3', float)
    2500.0
    >>> to_numeric('apples')
    0

    Returns
    -------
    kind
        The parsed value.
    """
    if isinstance(string, (bytes, bytearray)):
        string = bytes(string).decode('latin-1')

    if not isinstance(string, str):
        raise TypeError(f'Expected str or bytes, received {type(string).__name__!r}.')

    regex = _resolve_kind(kind)
    if on_error is None:
        on_error = config.CONFIG.numeric.on_error

    if (match := regex.match(string)) is None:
        Emit(on_error, NumericParseError)(
            'Could not parse {} from string {!r}.', kind.__name__, string
        )
        return kind(0)

    value = (float if regex is REGEX_FLOAT else int)(match[1])
    value, clipped = _saturate(value, kind)
    if clipped:
        Emit(on_error, NumericParseError)(
            'Value {!r} out of range for {}. Clipped to {}.',
            match[1], kind.__name__, value
        )
    elif (rest := string[match.end():].strip()):
        Emit(on_error, NumericParseError)(
            'Ignoring trailing characters {!r} after parsing {} from string {!r}.',
            rest, kind.__name__, string
        )

    return kind(value)
