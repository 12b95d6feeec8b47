# -*- encoding: utf-8 -*-
# @File   : lineio.py
# @Time   : 2024/10/13 01:22:08
# @Author : Kariko Lin

"""A plain text file, read or written one line at a time.

Reading decodes the whole file at once,
guessing the codec with `chardet` when the given one does not fit.
"""

import logging
from io import TextIOWrapper
from re import compile as regex
from types import TracebackType
from typing import Self

from chardet import detect as guess_codec

# only real line breaks, `str.splitlines()` also cuts at \f, \v, \u2028 etc.
_LINE_BREAK = regex(r'\r\n|\r|\n')


def split_lines(text: str) -> list[str]:
    """Split `text` into lines without terminators."""
    ret = _LINE_BREAK.split(text)
    if ret[-1] == '':
        ret.pop()
    return ret


def decode_bytes(raw: bytes, encoding: str | None = None) -> str:
    if encoding is not None:
        try:
            return raw.decode(encoding).removeprefix('\ufeff')
        except UnicodeDecodeError:
            logging.warning(f'failed to decode as {encoding}, guessing.')

    codec = guess_codec(raw)
    if codec['encoding'] is None or codec['confidence'] < 0.8:
        codec = {'encoding': 'utf-8'}

    # fallbacks
    try:
        buf = raw.decode(codec['encoding'])
    except (UnicodeDecodeError, LookupError):
        buf = raw.decode('gbk', errors='replace')
    return buf.removeprefix('\ufeff')


class LineFile:
    def __init__(
        self, path: str, for_writing: bool = False,
        encoding: str | None = None
    ) -> None:
        self._fn = path
        self._writing = for_writing
        self._lines: list[str] = []
        self._cursor = 0
        self._fp: TextIOWrapper | None = None
        self._ready = False
        try:
            if for_writing:
                self._fp = open(path, 'w', encoding=encoding or 'utf-8')
            else:
                with open(path, 'rb') as fp:
                    raw = fp.read()
                self._lines = split_lines(decode_bytes(raw, encoding))
            self._ready = True
        except OSError as e:
            logging.warning(f'unable to open "{path}": {e}')

    def ready(self) -> bool:
        return self._ready

    def end_of_stream(self) -> bool:
        return self._writing or self._cursor >= len(self._lines)

    def read_line(self) -> str:
        """Next line without its terminator, '' after end of stream."""
        if self.end_of_stream():
            return ''
        self._cursor += 1
        return self._lines[self._cursor - 1]

    def write_line(self, text: str = '') -> None:
        if self._fp is None:
            raise OSError(f'"{self._fn}" is not open for writing')
        self._fp.write(f'{text}\n')

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> str:
        if self.end_of_stream():
            raise StopIteration
        return self.read_line()

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None
        self._ready = False

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None
    ) -> None:
        self.close()

    def __str__(self) -> str:
        return self._fn
