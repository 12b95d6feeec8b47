# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:03:51
# @Author : Kariko Lin

"""
Config tree: sections holding typed properties and nested sections.

Every lookup accepts a dotted path, like `General.Editor.TabSize`,
which is always split on the FIRST dot and walked down child by child.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterator, Mapping, Self

from .consts import SECTION_DIVIDER, ValueType
from .values import (
    Value, check_range, classify, convert, format_value, infer,
    strip_quotes, trim
)


def _is_valid_path(path: str) -> bool:
    # '' and 'A..B' both have an empty segment.
    return all(path.split(SECTION_DIVIDER))


def _split_path(path: str) -> tuple[str, str | None]:
    head, sep, rest = path.partition(SECTION_DIVIDER)
    return head, (rest if sep else None)


@dataclass(eq=False)
class Property:
    name: str = ''
    type: ValueType = ValueType.UNKNOWN
    value: Value = ''

    @classmethod
    def of(cls, name: str, value: Value | None) -> Self:
        """Build a property from a python value, `None` as UNKNOWN.

        Numbers out of the range `parse()` accepts raise `ConversionError`.
        """
        vtype = infer(value)
        if value is not None:
            check_range(vtype, value)
        return cls(name, vtype, '' if value is None else value)

    @classmethod
    def parse(cls, name: str, text: str) -> Self:
        """Build a property from its textual value, as read from a file."""
        text = trim(text)
        vtype = classify(text)
        if vtype in (ValueType.STRING, ValueType.UNKNOWN) and text:
            text = strip_quotes(text)
        return cls(name, *convert(text, vtype))

    @property
    def text(self) -> str:
        return format_value(self.type, self.value)

    def __eq__(self, other: object) -> bool:
        # it is enough if the name and type are the same
        if not isinstance(other, Property):
            return NotImplemented
        return self.name == other.name and self.type == other.type

    def __str__(self) -> str:
        return f'{self.name} = {self.text}'


class Section:
    """A named node of the config tree.

    Property names are unique inside a section, so are child section names.
    The first one added wins; adding again is a no-op.

    Returned `Property` and `Section` objects are the ones stored in the tree,
    and stay valid as the tree grows.
    """
    def __init__(self, name: str = '') -> None:
        self.name = name
        self.__properties: list[Property] = []
        self.__sections: list[Section] = []

    @property
    def properties(self) -> tuple[Property, ...]:
        return tuple(self.__properties)

    @property
    def sections(self) -> tuple['Section', ...]:
        return tuple(self.__sections)

    def __find_property(self, name: str) -> Property | None:
        for i in self.__properties:
            if i.name == name:
                return i
        return None

    def __find_section(self, name: str) -> 'Section | None':
        for i in self.__sections:
            if i.name == name:
                return i
        return None

    def get(self, path: str) -> Property | None:
        """Get a property by its path, not including this section's name."""
        if not _is_valid_path(path):
            return None
        head, rest = _split_path(path)
        if rest is None:
            return self.__find_property(head)
        child = self.__find_section(head)
        return None if child is None else child.get(rest)

    def get_subsection(self, path: str) -> 'Section | None':
        """Get a nested section by its path, not including this section's name."""
        if not _is_valid_path(path):
            return None
        head, rest = _split_path(path)
        child = self.__find_section(head)
        if rest is None or child is None:
            return child
        return child.get_subsection(rest)

    def has_property(self, path: str) -> bool:
        return self.get(path) is not None

    def has_subsection(self, path: str) -> bool:
        return self.get_subsection(path) is not None

    def add_property(self, path: str, prop: Property) -> Property | None:
        """Add a copy of `prop` under `path`, creating sections on the way.

        The stored copy is renamed after the last path segment.
        Returns it, or `None` if the path is invalid or already taken.
        """
        if not _is_valid_path(path) or self.has_property(path):
            return None
        head, rest = _split_path(path)
        if rest is None:
            stored = replace(prop, name=head)
            self.__properties.append(stored)
            return stored
        child = self.add_subsection(head)
        return None if child is None else child.add_property(rest, prop)

    def add_subsection(self, path: str) -> 'Section | None':
        """Get the section under `path`, creating any missing one.

        Returns `None` only for an invalid path.
        """
        if not _is_valid_path(path):
            return None
        head, rest = _split_path(path)
        child = self.__find_section(head)
        if child is None:
            child = Section(head)
            self.__sections.append(child)
        return child if rest is None else child.add_subsection(rest)

    def walk(self, prefix: str = '') -> Iterator[tuple[str, 'Section']]:
        """DFS over nested sections, with their qualified names."""
        for i in self.__sections:
            qualified = f'{prefix}{SECTION_DIVIDER}{i.name}' if prefix else i.name
            yield qualified, i
            yield from i.walk(qualified)

    def _clear(self) -> None:
        self.__properties.clear()
        self.__sections.clear()

    def to_dict(self) -> dict[str, Any]:
        return {
            'properties': {
                i.name: None if i.type is ValueType.UNKNOWN else i.value
                for i in self.__properties
            },
            'sections': {i.name: i.to_dict() for i in self.__sections},
        }

    def update_from(self, data: Mapping[str, Any]) -> None:
        """Merge a `to_dict()` styled mapping in. Existing names are kept.

        Raises `TypeError` for anything that is not such a mapping,
        `ConversionError` for numbers out of range.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f'[{self.name}] expects a mapping')
        props = data.get('properties') or {}
        sects = data.get('sections') or {}
        if not isinstance(props, Mapping) or not isinstance(sects, Mapping):
            raise TypeError(f'[{self.name}] has malformed properties/sections')
        for k, v in props.items():
            self.add_property(str(k), Property.of(str(k), v))
        for k, v in sects.items():
            child = self.add_subsection(str(k))
            if child is not None:
                child.update_from(v)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], name: str = '') -> Self:
        ret = cls(name)
        ret.update_from(data)
        return ret

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and (
            self.has_property(path) or self.has_subsection(path))

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.__properties) + len(self.__sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return (
            self.name == other.name
            and len(self.__properties) == len(other.__properties)
            and len(self.__sections) == len(other.__sections)
        )

    def __str__(self) -> str:
        return f'[{self.name}]'

    def __repr__(self) -> str:
        return '[%s] { .props = %d, .sects = %d }' % (
            self.name, len(self.__properties), len(self.__sections))
