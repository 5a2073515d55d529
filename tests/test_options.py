import pydantic
import pytest

from fixlatin import AssumedEncoding, FixOptions, InvalidConfigurationError, make_options, parse_encoding
from fixlatin.rules import CP1252_EXCEPTIONS, ISO_8859_15_EXCEPTIONS


def test_defaults():
    options = make_options()
    assert options.allow_control is False
    assert options.assume is AssumedEncoding.NONE
    assert len(options.exception_table) == 0


@pytest.mark.parametrize("name, expected", [
    ("cp1252", AssumedEncoding.CP1252),
    ("CP-1252", AssumedEncoding.CP1252),
    ("windows-1252", AssumedEncoding.CP1252),
    ("ISO_8859-15", AssumedEncoding.ISO_8859_15),
    ("iso-8859-15", AssumedEncoding.ISO_8859_15),
    ("latin-9", AssumedEncoding.ISO_8859_15),
    ("latin1", AssumedEncoding.NONE),
    ("ISO-8859-1", AssumedEncoding.NONE),
    ("none", AssumedEncoding.NONE),
    (None, AssumedEncoding.NONE),
])
def test_parse_encoding_aliases(name, expected):
    assert parse_encoding(name) is expected


def test_parse_encoding_unknown():
    with pytest.raises(InvalidConfigurationError):
        parse_encoding("shift_jis")


def test_exception_table_follows_assumed_encoding():
    assert make_options(assume="cp1252").exception_table is CP1252_EXCEPTIONS
    assert make_options(assume="latin-9").exception_table is ISO_8859_15_EXCEPTIONS


def test_last_assumed_encoding_wins():
    options = make_options(assume=["iso-8859-15", "cp1252"])
    assert options.assume is AssumedEncoding.CP1252

    options = make_options(assume=[AssumedEncoding.CP1252, AssumedEncoding.ISO_8859_15])
    assert options.assume is AssumedEncoding.ISO_8859_15


def test_empty_assume_sequence_means_none():
    assert make_options(assume=[]).assume is AssumedEncoding.NONE


def test_invalid_encoding_in_sequence_fails_whole_build():
    with pytest.raises(InvalidConfigurationError):
        make_options(assume=["cp1252", "ebcdic"])


def test_invalid_allow_control():
    with pytest.raises(InvalidConfigurationError):
        make_options(allow_control="sometimes")


def test_options_are_frozen():
    options = make_options(allow_control=True)
    with pytest.raises(pydantic.ValidationError):
        options.allow_control = False


def test_unknown_option_rejected():
    with pytest.raises(InvalidConfigurationError):
        FixOptions(strict=True)


def test_direct_construction_with_bad_encoding():
    with pytest.raises(InvalidConfigurationError, match="ebcdic"):
        FixOptions(assume="ebcdic")


def test_direct_construction_with_bad_allow_control():
    with pytest.raises(InvalidConfigurationError):
        FixOptions(allow_control="sometimes")


@pytest.mark.parametrize("assume", [5, 12.5, object()])
def test_non_iterable_assume_rejected(assume):
    with pytest.raises(InvalidConfigurationError):
        make_options(assume=assume)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CP1252_EXCEPTIONS[0x81] = b"?"


def test_table_domains():
    assert all(0x80 <= b <= 0x9F for b in CP1252_EXCEPTIONS)
    assert not {0x81, 0x8D, 0x8F, 0x90, 0x9D} & set(CP1252_EXCEPTIONS)
    assert all(0xA4 <= b <= 0xBE for b in ISO_8859_15_EXCEPTIONS)
    assert all(len(v) in (2, 3) for v in CP1252_EXCEPTIONS.values())
    assert all(len(v) in (2, 3) for v in ISO_8859_15_EXCEPTIONS.values())
