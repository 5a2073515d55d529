from .errors import ControlCharacterError, FixLatinError, InvalidConfigurationError
from .fixer import fix_latin, fix_latin_bytes, fix_stream, transcode
from .models import AssumedEncoding, FixOptions, make_options, parse_encoding
from .rules import CP1252_EXCEPTIONS, ISO_8859_15_EXCEPTIONS

__all__ = [
    "AssumedEncoding",
    "CP1252_EXCEPTIONS",
    "ControlCharacterError",
    "FixLatinError",
    "FixOptions",
    "ISO_8859_15_EXCEPTIONS",
    "InvalidConfigurationError",
    "fix_latin",
    "fix_latin_bytes",
    "fix_stream",
    "make_options",
    "parse_encoding",
    "transcode",
]
