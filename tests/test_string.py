# third-party
import pytest

# local
from stringops import (dos2unix, lowercase, replace, tokenize, trim,
                       uppercase)


# ---------------------------------------------------------------------------- #
SAMPLES = ['', 'Hello World', ' \tMiXeD cAsE 123\r\n', 'ÀÉÎ àéî', 'snake_CASE']


# Casing
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'string, lower, upper',
    [('',                   '',                 ''),
     ('Hello World',        'hello world',      'HELLO WORLD'),
     ('123 _-!@[`{',        '123 _-!@[`{',      '123 _-!@[`{'),
     ('ÀÉÎ àéî Ab',         'ÀÉÎ àéî ab',       'ÀÉÎ àéî AB'),
     (b'Hello\xc0\xe0',     b'hello\xc0\xe0',   b'HELLO\xc0\xe0')]
)
def test_case(string, lower, upper):
    assert lowercase(string) == lower
    assert uppercase(string) == upper


@pytest.mark.parametrize('string', SAMPLES)
def test_case_idempotent(string):
    assert lowercase(lowercase(string)) == lowercase(string)
    assert uppercase(uppercase(string)) == uppercase(string)


@pytest.mark.parametrize('string', SAMPLES)
def test_case_involution(string):
    assert uppercase(lowercase(string)) == uppercase(string)
    assert lowercase(uppercase(string)) == lowercase(string)


def test_case_inplace():
    buffer = bytearray(b'MiXeD')
    assert lowercase(buffer, inplace=True) is buffer
    assert buffer == b'mixed'

    assert uppercase(buffer, inplace=True) is buffer
    assert buffer == b'MIXED'


def test_case_copy():
    buffer = bytearray(b'MiXeD')
    lower = lowercase(buffer)
    assert lower == b'mixed'
    assert lower is not buffer
    assert buffer == b'MiXeD'


@pytest.mark.parametrize('string', ['immutable', b'immutable'])
def test_inplace_immutable(string):
    with pytest.raises(TypeError):
        lowercase(string, inplace=True)

    with pytest.raises(TypeError):
        trim(string, inplace=True)


@pytest.mark.parametrize('string', [None, 42, ['a']])
def test_not_a_string(string):
    with pytest.raises(TypeError):
        uppercase(string)


# Trim
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'string, expected',
    [('',                       ''),
     (' \t\r\n ',               ''),
     ('hello',                  'hello'),
     ('  hello world  ',        'hello world'),
     ('\r\n\tline\r\n',         'line'),
     ('a \t b',                 'a \t b'),
     ('\vtab\f',                '\vtab\f'),
     (b' \tbytes\n',            b'bytes'),
     (b'\r\n',                  b'')]
)
def test_trim(string, expected):
    assert trim(string) == expected


@pytest.mark.parametrize('string', SAMPLES)
def test_trim_idempotent(string):
    assert trim(trim(string)) == trim(string)


def test_trim_inplace():
    buffer = bytearray(b'\t padded \r\n')
    assert trim(buffer, inplace=True) is buffer
    assert buffer == b'padded'


# Replace
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'string, needle, replacement, expected',
    [('aaaa',           'aa',       'b',        'bb'),
     ('aaa',            'aa',       'b',        'ba'),
     ('hello world',    'o',        '0',        'hell0 w0rld'),
     ('hello',          'l',        '',         'heo'),
     ('aXbXc',          'X',        'XX',       'aXXbXXc'),
     ('abab',           'ab',       'abab',     'abababab'),
     ('',               'x',        'y',        ''),
     (b'a-b-c',         b'-',       b'--',      b'a--b--c')]
)
def test_replace(string, needle, replacement, expected):
    assert replace(string, needle, replacement) == expected


@pytest.mark.parametrize('string', SAMPLES)
def test_replace_absent(string):
    assert replace(string, '#', 'anything') == string


@pytest.mark.parametrize('needle', ['', b''])
def test_replace_empty_needle(needle):
    with pytest.raises(ValueError):
        replace('text', needle, 'x')


def test_replace_inplace():
    buffer = bytearray(b'one two one')
    assert replace(buffer, b'one', b'1', inplace=True) is buffer
    assert buffer == b'1 two 1'


# dos2unix
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'string, expected',
    [('a\r\nb\rc\r\n',      'a\nb\rc\n'),
     ('',                   ''),
     ('\r\r\n\n',           '\r\n\n'),
     ('unix\n',             'unix\n'),
     (b'dos\r\n',           b'dos\n')]
)
def test_dos2unix(string, expected):
    assert dos2unix(string) == expected


@pytest.mark.parametrize('string', ['a\r\nb\rc\r\n', '\r\n\n', 'x\r\n\r\n'])
def test_dos2unix_idempotent(string):
    assert dos2unix(dos2unix(string)) == dos2unix(string)


def test_dos2unix_inplace():
    buffer = bytearray(b'line1\r\nline2\r\n')
    assert dos2unix(buffer, inplace=True) is buffer
    assert buffer == b'line1\nline2\n'


# Tokenize
# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'string, delimiter, expected',
    [('a,,b,',          ',',    ['a', '', 'b']),
     ('a,b,c',          ',',    ['a', 'b', 'c']),
     ('abc',            ',',    ['abc']),
     ('',               ',',    []),
     (',',              ',',    ['']),
     (',a',             ',',    ['', 'a']),
     ('a,',             ',',    ['a']),
     ('a::b::::c',      '::',   ['a', 'b', '', 'c']),
     ('aaa',            'aa',   ['', 'a']),
     (b'x y  z',        b' ',   [b'x', b'y', b'', b'z'])]
)
def test_tokenize(string, delimiter, expected):
    assert tokenize(string, delimiter) == expected


@pytest.mark.parametrize('string', ['a,b', 'a,,b', ',a', 'abc', ',,x'])
def test_tokenize_join(string):
    assert ','.join(tokenize(string, ',')) == string


@pytest.mark.parametrize(
    'tokens',
    [['a'], ['a', 'b'], ['', 'b'], ['a', '', 'c'], ['', '', 'z']]
)
def test_join_tokenize(tokens):
    assert tokenize(';'.join(tokens), ';') == tokens


@pytest.mark.parametrize('delimiter', ['', b''])
def test_tokenize_empty_delimiter(delimiter):
    with pytest.raises(ValueError):
        tokenize('a,b', delimiter)
