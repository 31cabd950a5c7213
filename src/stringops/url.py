"""
Percent-encoding of strings for use in URLs and form data.
"""

# std
import string as _string

# relative
from . import config
from .utils import check_string
from .wide import wide_to_narrow


# ---------------------------------------------------------------------------- #
SAFE = frozenset((_string.ascii_letters + _string.digits + "-_.!~*'()").encode())
SPACE = ord(' ')

# escape templates: compact form without leading zero, and RFC 3986 form
ESCAPE = {False: '%{:x}',
          True:  '%{:02X}'}


# ---------------------------------------------------------------------------- #

def url_encode(string, strict=None, encoding=None):
    """
    Percent-encode a string.

    Letters, digits and the characters ``-_.!~*'()`` are kept, space becomes
    "+" and every other byte is replaced by "%" followed by its hexadecimal
    value.

    Parameters
    ----------
    string : str or bytes or bytearray
        The string to encode. A `str` is first converted to bytes in the
        locale's multibyte encoding (or `encoding`).
    strict : bool, optional
        If True, escape with exactly two uppercase hex digits as RFC 3986
        recommends. If False, use lowercase hex without a leading zero,
        eg: "%5" for byte 0x05. The default is taken from the `url.strict`
        config value.
    encoding : str, optional
        Encoding used for `str` input instead of the ambient one.

    Examples
    --------
    >>> url_encode('a b/c')
    'a+b%2fc'
    >>> url_encode('a b/c', strict=True)
    'a+b%2Fc'
    >>> url_encode(b'\\x05')
    b'%5'

    Returns
    -------
    str or bytes
        The encoded string, `str` if `string` was a `str`, `bytes` otherwise.
    """
    if strict is None:
        strict = config.CONFIG.url.strict

    wide = isinstance(check_string(string), str)
    data = wide_to_narrow(string, encoding) if wide else bytes(string)
    encoded = ''.join(_encode(data, ESCAPE[bool(strict)]))
    return encoded if wide else encoded.encode('ascii')


def _encode(data, escape):
    for byte in data:
        if byte in SAFE:
            yield chr(byte)
        elif byte == SPACE:
            yield '+'
        else:
            yield escape.format(byte)
