# -*- encoding: utf-8 -*-
# @File   : document.py
# @Time   : 2024/10/13 01:58:40
# @Author : Kariko Lin

import logging
from typing import Any, Mapping

from ..lineio import LineFile, split_lines
from .model import Section
from .parser import SkippedLine, dump_lines, parse_lines


class Document(Section):
    """The root of a config tree, with no name and no header.

    `open()` always starts from an empty tree, so content is replaced,
    never merged. Loading is best effort: a missing file or broken lines
    end up as missing keys, so check the ones you need afterwards.

        ```python
        doc = Document()
        doc.open('settings.cfg')
        if (vol := doc.get('General.Volume')) is not None:
            ...
        ```
    """
    def __init__(self) -> None:
        super().__init__('')
        self.skipped: list[SkippedLine] = []

    def close(self) -> None:
        """Drop everything. This does NOT save the document."""
        self._clear()
        self.skipped = []

    def open(self, path: str, encoding: str | None = None) -> bool:
        """Load a config file, returns `False` if it cannot be read."""
        self.close()
        with LineFile(path, False, encoding) as fp:
            if not fp.ready():
                return False
            self.skipped = parse_lines(fp, self).skipped
        if self.skipped:
            logging.debug(f'{len(self.skipped)} line(s) skipped in "{path}"')
        return True

    def save(
        self, path: str, encoding: str | None = None, *,
        blank_lines: int = 1
    ) -> bool:
        """Write the tree to `path`, returns `False` if it cannot be written."""
        with LineFile(path, True, encoding) as fp:
            if not fp.ready():
                return False
            for i in dump_lines(self, blank_lines=blank_lines):
                fp.write_line(i)
        return True

    def dumps(self, *, blank_lines: int = 1) -> str:
        return ''.join(f'{i}\n' for i in dump_lines(self, blank_lines=blank_lines))

    @classmethod
    def loads(cls, text: str) -> 'Document':
        ret = cls()
        ret.skipped = parse_lines(split_lines(text), ret).skipped
        return ret

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], name: str = '') -> 'Document':
        # the root never has a name.
        ret = cls()
        ret.update_from(data)
        return ret

    # the root calls its children "sections".
    def has_section(self, path: str) -> bool:
        return self.has_subsection(path)

    def get_section(self, path: str) -> Section | None:
        return self.get_subsection(path)

    def add_section(self, path: str) -> Section | None:
        return self.add_subsection(path)

    def __str__(self) -> str:
        return f'<config root: {len(self.properties)} properties, '\
            f'{len(self.sections)} sections>'
