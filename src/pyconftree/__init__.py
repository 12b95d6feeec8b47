# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 15:55:31
# @Author : Kariko Lin

import logging

from .config import (
    SECTION_END, ValueType,
    Property, Section, Document,
    ConfigFileParser, ConfigJsonParser, ConfigYamlParser,
    ConversionError, InvalidConfigRecord,
    classify, parse_lines, dump_lines
)
from .lineio import LineFile

__all__ = [
    'SECTION_END', 'ValueType',
    'Property', 'Section', 'Document',
    'ConfigFileParser', 'ConfigJsonParser', 'ConfigYamlParser',
    'ConversionError', 'InvalidConfigRecord',
    'classify', 'parse_lines', 'dump_lines',
    'LineFile'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
