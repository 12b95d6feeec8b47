# -*- encoding: utf-8 -*-
# @File   : formats.py
# @Time   : 2024/10/13 15:37:12
# @Author : Kariko Lin

"""File handlers for `Document`.

Besides the config text itself, a document can be exchanged as JSON or
YAML, both sharing the same layout:

    ```json
    {
      "protocol": 1,
      "data": {
        "properties": {"Name": "pyconftree"},
        "sections": {"General": {"properties": {"Volume": 0.75}}}
      }
    }
    ```

Unlike the text format, these are strict: a broken layout raises
`InvalidConfigRecord`.
"""

import json
from typing import Any, TypedDict

import yaml

from ..abstract import FileHandler
from .consts import EXCHANGE_PROTOCOL
from .document import Document


class InvalidConfigRecord(Exception):
    """To record errors when reading exchange documents."""
    pass


class _ExchangeDoc(TypedDict):
    protocol: int
    data: dict[str, Any]


# should keep this base class for better type hinting.
class ConfigParser(FileHandler[Document]):
    ...


class ConfigFileParser(ConfigParser):
    """The config text format, through `Document.open()`/`save()`."""
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        blank_lines: int = 1
    ) -> None:
        super().__init__(filename, encoding)
        self._blank_lines = blank_lines

    def read(self) -> Document:
        ret = Document()
        ret.open(self._fn, self._codec)
        return ret

    def write(self, instance: Document) -> None:
        if not instance.save(
                self._fn, self._codec, blank_lines=self._blank_lines):
            raise OSError(f'unable to write "{self._fn}"')


class _ExchangeParser(ConfigParser):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def _to_document(src: Any) -> Document:
        if not isinstance(src, dict) or 'data' not in src:
            raise InvalidConfigRecord('missing "data" in document.')
        if src.get('protocol', EXCHANGE_PROTOCOL) != EXCHANGE_PROTOCOL:
            raise InvalidConfigRecord(
                f'unsupported protocol: {src["protocol"]}')
        try:
            return Document.from_dict(src['data'])
        except (TypeError, ValueError) as e:
            raise InvalidConfigRecord(str(e)) from e

    @staticmethod
    def _to_exchange(instance: Document) -> _ExchangeDoc:
        return _ExchangeDoc(protocol=EXCHANGE_PROTOCOL, data=instance.to_dict())


class ConfigJsonParser(_ExchangeParser):
    def read(self) -> Document:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self._to_document(json.load(fp))

    def write(self, instance: Document, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                self._to_exchange(instance), fp,
                ensure_ascii=False, indent=indent)


class ConfigYamlParser(_ExchangeParser):
    def read(self) -> Document:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self._to_document(yaml.safe_load(fp))

    def write(self, instance: Document, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                dict(self._to_exchange(instance)), fp,
                allow_unicode=True, sort_keys=False, indent=indent)
