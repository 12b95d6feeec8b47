import pytest

from pyconftree.config.consts import ValueType
from pyconftree.config.values import (
    ConversionError, classify, convert, format_value, infer,
    strip_comment, strip_quotes, to_int, trim
)


@pytest.mark.parametrize('token, expected', [
    ('123', ValueType.INT),
    ('+7', ValueType.INT),
    ('-0', ValueType.INT),
    ('-4.5', ValueType.FLOAT),
    ('5.', ValueType.FLOAT),
    ('+.5', ValueType.FLOAT),
    ('true', ValueType.BOOL),
    ('True', ValueType.BOOL),
    ('False', ValueType.BOOL),
    ('TRUE', ValueType.STRING),
    ('hello', ValueType.STRING),
    ('', ValueType.UNKNOWN),
    ('12a', ValueType.STRING),
    ('1.2.3', ValueType.STRING),
    ('--1', ValueType.STRING),
    (' 1', ValueType.STRING),
])
def test_classify(token, expected):
    assert classify(token) is expected


@pytest.mark.parametrize('token', ['+', '-', '.', '-.', '+.'])
def test_classify_degenerate_numbers_are_strings(token):
    assert classify(token) is ValueType.STRING


def test_classify_does_not_check_magnitude():
    assert classify('9' * 40) is ValueType.INT


def test_convert_typed_values():
    assert convert('42', ValueType.INT) == (ValueType.INT, 42)
    assert convert('-4.5', ValueType.FLOAT) == (ValueType.FLOAT, -4.5)
    assert convert('True', ValueType.BOOL) == (ValueType.BOOL, True)
    assert convert('false', ValueType.BOOL) == (ValueType.BOOL, False)
    assert convert('abc', ValueType.STRING) == (ValueType.STRING, 'abc')
    assert convert('', ValueType.UNKNOWN) == (ValueType.UNKNOWN, '')


def test_oversized_int_falls_back_to_string():
    token = '9' * 40
    with pytest.warns(UserWarning):
        vtype, value = convert(token, ValueType.INT)
    assert vtype is ValueType.STRING
    assert value == token


def test_int_range_limits():
    assert to_int(str(2 ** 63 - 1)) == 2 ** 63 - 1
    assert to_int(str(-2 ** 63)) == -2 ** 63
    with pytest.raises(ConversionError):
        to_int(str(2 ** 63))


def test_overflowing_float_falls_back_to_string():
    token = '1' * 400 + '.0'
    with pytest.warns(UserWarning):
        vtype, value = convert(token, ValueType.FLOAT)
    assert vtype is ValueType.STRING
    assert value == token


def test_infer():
    assert infer(True) is ValueType.BOOL
    assert infer(3) is ValueType.INT
    assert infer(0.5) is ValueType.FLOAT
    assert infer('3') is ValueType.STRING
    assert infer(None) is ValueType.UNKNOWN
    with pytest.raises(TypeError):
        infer([1, 2])


def test_format_numbers():
    assert format_value(ValueType.INT, -7) == '-7'
    assert format_value(ValueType.FLOAT, 0.1) == '0.1'
    assert format_value(ValueType.FLOAT, 3.0) == '3.0'
    assert format_value(ValueType.FLOAT, 1e16) == '10000000000000000.0'
    assert format_value(ValueType.FLOAT, 1e-05) == '0.00001'
    assert format_value(ValueType.BOOL, True) == 'true'
    assert format_value(ValueType.BOOL, False) == 'false'


def test_format_strings_quoted_only_when_needed():
    assert format_value(ValueType.STRING, 'hello world') == 'hello world'
    assert format_value(ValueType.STRING, '123') == '"123"'
    assert format_value(ValueType.STRING, 'true') == '"true"'
    assert format_value(ValueType.STRING, '') == '""'
    assert format_value(ValueType.STRING, ' pad') == '" pad"'
    assert format_value(ValueType.STRING, "'q'") == '"\'q\'"'
    assert format_value(ValueType.UNKNOWN, '') == ''


def test_text_helpers():
    assert trim('\t a b \r\n\v\f') == 'a b'
    assert strip_comment('key = 5 // note // more') == 'key = 5 '
    assert strip_comment('no comment') == 'no comment'
    assert strip_quotes('"hello"') == 'hello'
    assert strip_quotes("'hello") == 'hello'
    assert strip_quotes('hello"') == 'hello'
    assert strip_quotes('"') == ''
    assert strip_quotes('') == ''
