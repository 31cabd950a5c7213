"""
Utilities for operations on strings.

All functions accept `str`, `bytes` or `bytearray` and return an object of the
same type. Functions with an `inplace` parameter can modify a `bytearray`
buffer directly.
"""


# ---------------------------------------------------------------------------- #
WHITESPACE = ' \t\r\n'


# ---------------------------------------------------------------------------- #
# Helpers / Convenience

def literal(text, like):
    """
    Coerce an ASCII `text` literal to the string type of `like`.

    >>> literal('\\r\\n', b'')
    b'\\r\\n'
    """
    return text if isinstance(like, str) else text.encode('ascii')


def check_string(string, name='string'):
    if not isinstance(string, (str, bytes, bytearray)):
        raise TypeError(f'Expected str, bytes or bytearray for `{name}`, '
                        f'received {type(string).__name__!r}.')
    return string


def _update(string, new, inplace):
    # return new value, or write it into the buffer for inplace operations
    if not inplace:
        return new

    if not isinstance(string, bytearray):
        raise TypeError(f'Cannot modify immutable {type(string).__name__!r} '
                        'inplace. Only bytearray buffers support `inplace=True`.')

    string[:] = new
    return string


def _check_needle(needle, name):
    check_string(needle, name)
    if not needle:
        raise ValueError(f'Empty `{name}` is not allowed.')


# ---------------------------------------------------------------------------- #
# Transformations

def trim(string, inplace=False):
    """
    Remove leading and trailing whitespace characters (space, tab, carriage
    return and newline). Interior whitespace is kept.

    Parameters
    ----------
    string : str or bytes or bytearray
        String to trim.
    inplace : bool
        Whether to modify the `bytearray` passed as `string` directly.

    Examples
    --------
    >>> trim(' \\t hello world\\r\\n')
    'hello world'

    Returns
    -------
    str or bytes or bytearray
    """
    check_string(string)
    return _update(string, string.strip(literal(WHITESPACE, string)), inplace)


def replace(string, needle, replacement, inplace=False):
    """
    Replace all occurrences of `needle` in `string` by `replacement`.

    The string is scanned from left to right and scanning resumes right after
    each substitution, so that the replacement text is never searched.

    Parameters
    ----------
    string : str or bytes or bytearray
        String to operate on.
    needle : str or bytes
        Non-empty substring to search for.
    replacement : str or bytes
        Substitute.
    inplace : bool
        Whether to modify the `bytearray` passed as `string` directly.

    Examples
    --------
    >>> replace('aaaa', 'aa', 'b')
    'bb'

    Returns
    -------
    str or bytes or bytearray

    Raises
    ------
    ValueError
        If `needle` is empty.
    """
    check_string(string)
    _check_needle(needle, 'needle')
    check_string(replacement, 'replacement')
    return _update(string, string.replace(needle, replacement), inplace)


def dos2unix(string, inplace=False):
    """
    Convert DOS line endings (CR+LF) to unix ones (LF). Lone CR characters are
    left alone.

    >>> dos2unix('a\\r\\nb\\rc\\r\\n')
    'a\\nb\\rc\\n'
    """
    check_string(string)
    return replace(string, literal('\r\n', string), literal('\n', string),
                   inplace)


# ---------------------------------------------------------------------------- #
# Splitting

def tokenize(string, delimiter):
    """
    Split `string` at each occurrence of `delimiter`.

    Empty fields between adjacent delimiters are kept, but a trailing
    delimiter does not produce an empty last field. An empty string has no
    tokens.

    Parameters
    ----------
    string : str or bytes or bytearray
        String to split.
    delimiter : str or bytes
        Non-empty literal separator.

    Examples
    --------
    >>> tokenize('a,,b,', ',')
    ['a', '', 'b']
    >>> tokenize('', ',')
    []

    Returns
    -------
    list

    Raises
    ------
    ValueError
        If `delimiter` is empty.
    """
    check_string(string)
    _check_needle(delimiter, 'delimiter')

    tokens = string.split(delimiter)
    if not tokens[-1]:
        # trailing delimiter, or empty input
        tokens.pop()
    return tokens
