# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 15:52:03
# @Author : Kariko Lin

from .consts import SECTION_END, ValueType
from .document import Document
from .formats import (
    ConfigFileParser,
    ConfigJsonParser,
    ConfigYamlParser,
    InvalidConfigRecord
)
from .model import Property, Section
from .parser import ParseResult, SkippedLine, SkipReason, dump_lines, parse_lines
from .values import ConversionError, classify
