# -*- encoding: utf-8 -*-
# @File   : values.py
# @Time   : 2024/10/12 21:26:45
# @Author : Kariko Lin

"""Untyped text <-> typed value helpers.

Everything on the wire is plain text; types are guessed from the look of
a token (see `classify()`), which is simple and by no means a TOML lexer.
"""

import warnings
from decimal import Decimal
from math import isfinite
from re import compile as regex

from .consts import (
    BOOL_LITERALS, COMMENT_MARK, INT_MAX, INT_MIN,
    QUOTES, TRUE_LITERALS, WHITESPACES, ValueType
)

Value = str | int | float | bool

_INT_PATTERN = regex(r'[+-]?[0-9]+')
# at least one digit, on either side of the (optional) dot.
_FLOAT_PATTERN = regex(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


class ConversionError(ValueError):
    """Token looks numeric but cannot be stored as such."""
    pass


def trim(text: str) -> str:
    return text.strip(WHITESPACES)


def strip_comment(text: str) -> str:
    """Cut `text` at the first `//`."""
    idx = text.find(COMMENT_MARK)
    return text if idx < 0 else text[:idx]


def strip_quotes(text: str) -> str:
    """Remove one leading and one trailing quote, independently."""
    if text and text[0] in QUOTES:
        text = text[1:]
    if text and text[-1] in QUOTES:
        text = text[:-1]
    return text


def classify(token: str) -> ValueType:
    if not token:
        return ValueType.UNKNOWN
    if token in BOOL_LITERALS:
        return ValueType.BOOL
    if _INT_PATTERN.fullmatch(token):
        return ValueType.INT
    if _FLOAT_PATTERN.fullmatch(token):
        return ValueType.FLOAT
    return ValueType.STRING


def to_int(token: str) -> int:
    try:
        value = int(token)
    except ValueError as e:
        raise ConversionError(f'"{token}" is not an integer') from e
    if not INT_MIN <= value <= INT_MAX:
        raise ConversionError(f'"{token}" is out of 64-bit integer range')
    return value


def to_float(token: str) -> float:
    try:
        value = float(token)
    except ValueError as e:
        raise ConversionError(f'"{token}" is not a float') from e
    if not isfinite(value):
        raise ConversionError(f'"{token}" overflows a float')
    return value


def convert(token: str, vtype: ValueType) -> tuple[ValueType, Value]:
    """Turn `token` into a value of `vtype`.

    A numeric token that fails to convert is kept as a STRING,
    with a warning rather than an exception.
    """
    try:
        match vtype:
            case ValueType.INT:
                return vtype, to_int(token)
            case ValueType.FLOAT:
                return vtype, to_float(token)
            case ValueType.BOOL:
                return vtype, token in TRUE_LITERALS
            case _:
                return vtype, token
    except ConversionError as e:
        warnings.warn(f'{e}, kept as plain text.')
        return ValueType.STRING, token


def infer(value: Value | None) -> ValueType:
    """Guess the value type from a python object."""
    # bool is a subclass of int, check it first.
    if value is None:
        return ValueType.UNKNOWN
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, int):
        return ValueType.INT
    if isinstance(value, float):
        return ValueType.FLOAT
    if isinstance(value, str):
        return ValueType.STRING
    raise TypeError(f'unsupported value type: {type(value).__name__}')


def check_range(vtype: ValueType, value: Value) -> None:
    """Raise `ConversionError` for numbers the text format cannot hold."""
    if vtype is ValueType.INT and not INT_MIN <= value <= INT_MAX:
        raise ConversionError(f'{value} is out of 64-bit integer range')
    if vtype is ValueType.FLOAT and not isfinite(value):
        raise ConversionError(f'{value} is not a finite float')


def _needs_quotes(text: str) -> bool:
    return (
        not text
        or classify(text) is not ValueType.STRING
        or trim(text) != text
        or text[0] in QUOTES
        or text[-1] in QUOTES
    )


def _format_float(value: float) -> str:
    if not isfinite(value):
        return repr(value)
    ret = repr(value)
    if 'e' in ret or 'E' in ret:
        ret = format(Decimal(ret), 'f')
    if '.' not in ret:
        ret += '.0'
    return ret


def format_value(vtype: ValueType, value: Value) -> str:
    """Render a value the way it should be written back to text."""
    match vtype:
        case ValueType.INT:
            return str(int(value))
        case ValueType.FLOAT:
            return _format_float(float(value))
        case ValueType.BOOL:
            return 'true' if value else 'false'
        case ValueType.STRING:
            text = str(value)
            return f'"{text}"' if _needs_quotes(text) else text
        case _:
            return str(value)
