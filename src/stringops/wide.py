"""
Conversion between wide (`str`) and narrow (`bytes`) strings using the
multibyte encoding of the process locale.
"""

# std
import locale

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
class ConversionError(ValueError):
    """
    Raised when a string cannot be represented in (or decoded from) the narrow
    encoding.
    """


# ---------------------------------------------------------------------------- #

def ambient_encoding():
    """The multibyte encoding of the current locale, eg: 'UTF-8'."""
    return locale.getpreferredencoding(False)


def wide_to_narrow(text, encoding=None):
    """
    Convert a wide string to a narrow byte string in the locale's multibyte
    encoding.

    Parameters
    ----------
    text : str
        The wide string.
    encoding : str, optional
        Use this encoding instead of the one from the ambient locale.

    Examples
    --------
    >>> wide_to_narrow('naïve', 'utf-8')
    b'na\\xc3\\xafve'

    Returns
    -------
    bytes

    Raises
    ------
    ConversionError
        If any character cannot be represented in the narrow encoding.
    """
    if not isinstance(text, str):
        raise TypeError(f'Expected str, received {type(text).__name__!r}.')

    encoding = encoding or ambient_encoding()
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as err:
        logger.debug('Encoding {!r} with {} failed: {}', text, encoding, err)
        raise ConversionError(
            f'Failed to convert wide string to {encoding}: {err.reason} at '
            f'position {err.start}.'
        ) from err


def narrow_to_wide(data, encoding=None):
    """
    Convert a narrow byte string in the locale's multibyte encoding to a wide
    string.

    Parameters
    ----------
    data : bytes or bytearray
        The narrow string.
    encoding : str, optional
        Use this encoding instead of the one from the ambient locale.

    Examples
    --------
    >>> narrow_to_wide(b'na\\xc3\\xafve', 'utf-8')
    'naïve'

    Returns
    -------
    str

    Raises
    ------
    ConversionError
        If `data` holds an invalid byte sequence for the narrow encoding.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f'Expected bytes, received {type(data).__name__!r}.')

    encoding = encoding or ambient_encoding()
    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as err:
        logger.debug('Decoding {!r} with {} failed: {}', data, encoding, err)
        raise ConversionError(
            f'Failed to convert narrow string from {encoding}: {err.reason} at '
            f'position {err.start}.'
        ) from err


def to_type_of(string, like, encoding=None):
    """
    Convert `string` to wide or narrow to match the type of `like`. Strings
    that are already of matching width are returned unchanged.
    """
    if isinstance(like, str):
        return string if isinstance(string, str) else narrow_to_wide(string, encoding)

    return bytes(string) if isinstance(string, (bytes, bytearray)) \
        else wide_to_narrow(string, encoding)


# aliases
wide_char_to_utf8 = wide_to_narrow
utf8_to_wide_char = narrow_to_wide
