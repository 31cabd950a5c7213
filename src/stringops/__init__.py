"""
Small, stateless string utilities: type checked printf-style formatting, ASCII
case conversion, trimming, replacement, line ending normalisation, URL
encoding, tokenization, wide/narrow conversion and numeric conversion.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('stringops')

# relative
from .config import CONFIG
from .url import url_encode
from .casing import lowercase, uppercase
from .utils import dos2unix, replace, tokenize, trim
from .numeric import NumericParseError, to_numeric, to_string, to_wstring
from .formatting import (ArgumentKindError, FormatError, Kind, format,
                         print, print_line, sprintf)
from .wide import (ConversionError, narrow_to_wide, utf8_to_wide_char,
                   wide_char_to_utf8, wide_to_narrow)


# ---------------------------------------------------------------------------- #

# version
try:
    __version__ = version('stringops')
except PackageNotFoundError:
    # running from source tree
    __version__ = '0.0.0'
