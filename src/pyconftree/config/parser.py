# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 00:41:26
# @Author : Kariko Lin

"""Line based reading and writing of the config text format:

    ```
    // whole line comment
    Name = "pyconftree"     // tail comments are cut, too.

    [General]
    Volume = 0.75
    [General.Editor]
    TabSize = 4
    [SECTIONEND]            // back to the root, see `SECTION_END`.
    Debug = false
    ```

Nothing here raises on bad input. Lines that cannot be used are
reported in `ParseResult.skipped` instead.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from .consts import COMMENT_MARK, PAIRING, SECTION_DIVIDER, SECTION_END
from .model import Property, Section
from .values import strip_comment, trim


class SkipReason(str, Enum):
    MALFORMED = 'no "=" in line'
    BAD_NAME = 'invalid property name'
    BAD_SECTION = 'invalid section name'
    DUPLICATE = 'property already defined'


@dataclass(frozen=True)
class SkippedLine:
    text: str
    reason: SkipReason


@dataclass
class ParseResult:
    root: Section
    skipped: list[SkippedLine] = field(default_factory=list)


def parse_lines(
    lines: Iterable[str],
    root: Section | None = None
) -> ParseResult:
    """Read config lines into `root` (a new `Section` if not given).

    Already existing properties are never overridden.
    """
    ret = ParseResult(Section() if root is None else root)
    current: Section | None = None

    def skip(line: str, reason: SkipReason) -> None:
        logging.debug(f'skipped line "{line}": {reason.value}')
        ret.skipped.append(SkippedLine(line, reason))

    for line in lines:
        if not line or line[:2] == COMMENT_MARK:
            continue
        clean = trim(strip_comment(line))
        if not clean:
            continue

        if clean[0] == '[' and clean[-1] == ']':
            name = clean[1:-1]
            if name == SECTION_END:
                current = None
                continue
            # reuses a section already declared, like `add_section()` does.
            current = ret.root.add_subsection(name)
            if current is None:
                skip(line, SkipReason.BAD_SECTION)
            continue

        key, sep, val = clean.rpartition(PAIRING)
        if not sep:
            skip(line, SkipReason.MALFORMED)
            continue
        key = trim(key)

        target = ret.root if current is None else current
        if target.has_property(key):
            skip(line, SkipReason.DUPLICATE)
        elif target.add_property(key, Property.parse(key, val)) is None:
            skip(line, SkipReason.BAD_NAME)
    return ret


def _dump_section(
    sect: Section, prefix: str, blank_lines: int
) -> Iterator[str]:
    qualified = f'{prefix}{SECTION_DIVIDER}{sect.name}' if prefix else sect.name
    yield f'[{qualified}]'
    for i in sect.properties:
        yield str(i)
    yield from [''] * blank_lines
    for i in sect.sections:
        yield from _dump_section(i, qualified, blank_lines)


def dump_lines(root: Section, *, blank_lines: int = 1) -> Iterator[str]:
    """Serialize `root` back to config lines (without terminators).

    Nested sections are written flat, with dotted headers like `[A.B]`.
    The root itself gets no header.
    """
    for i in root.properties:
        yield str(i)
    if root.properties:
        yield from [''] * blank_lines
    for i in root.sections:
        yield from _dump_section(i, '', blank_lines)
