"""
ASCII case conversion for strings.
"""

# relative
from .utils import _update, check_string


# ---------------------------------------------------------------------------- #
ASCII_LOWER = 'abcdefghijklmnopqrstuvwxyz'
ASCII_UPPER = ASCII_LOWER.upper()

# translation tables for `str`. Non-ASCII characters pass through unchanged
TO_LOWER = str.maketrans(ASCII_UPPER, ASCII_LOWER)
TO_UPPER = str.maketrans(ASCII_LOWER, ASCII_UPPER)


# ---------------------------------------------------------------------------- #

def lowercase(string, inplace=False):
    """
    Convert ASCII letters A-Z to lower case. All other characters are left
    unchanged, and no locale is consulted.

    Parameters
    ----------
    string : str or bytes or bytearray
        String to convert.
    inplace : bool
        Whether to modify the `bytearray` passed as `string` directly.

    Examples
    --------
    >>> lowercase('HeLLo WÖRLD')
    'hello wÖrld'

    Returns
    -------
    str or bytes or bytearray
    """
    check_string(string)
    # `bytes.lower` only maps ASCII
    new = string.translate(TO_LOWER) if isinstance(string, str) else string.lower()
    return _update(string, new, inplace)


def uppercase(string, inplace=False):
    """
    Convert ASCII letters a-z to upper case. All other characters are left
    unchanged, and no locale is consulted.

    >>> uppercase(b'hello\\xe9')
    b'HELLO\\xe9'
    """
    check_string(string)
    new = string.translate(TO_UPPER) if isinstance(string, str) else string.upper()
    return _update(string, new, inplace)
