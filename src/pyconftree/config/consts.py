# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:10:02
# @Author : Kariko Lin

from enum import Enum


class ValueType(int, Enum):
    UNKNOWN = 0
    STRING = 1
    FLOAT = 2
    BOOL = 3
    INT = 4


# `[SECTIONEND]` drops the parser back to the document root.
SECTION_END = 'SECTIONEND'

SECTION_DIVIDER = '.'
COMMENT_MARK = '//'
PAIRING = '='

# ASCII only, no unicode-aware trimming.
WHITESPACES = ' \t\n\r\f\v'
QUOTES = ('"', "'")

BOOL_LITERALS = ('True', 'true', 'False', 'false')
TRUE_LITERALS = ('True', 'true')

# stored ints are limited to a signed 64-bit range.
INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1

EXCHANGE_PROTOCOL = 1
