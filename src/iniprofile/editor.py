# -*- encoding: utf-8 -*-
# @File   : editor.py
# @Time   : 2026/10/19 12:04:17
# @Author : iniprofile contributors

"""What a settings editor needs from a store, minus any widgets.

A UI lists `iter_fields(store)`, shows one input per field (read-only when
`field.enabled` is false) and pushes changes back with `apply_edit`.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    'EditorField', 'EditableStore',
    'iter_fields', 'apply_edit', 'field_tag', 'parse_field_tag',
]


class EditableStore(Protocol):
    def enumerate_sections(self) -> list[str]: ...

    def enumerate_entries(self, section: str) -> list[str]: ...

    def set(self, section: str, key: str, value: str | None) -> None: ...


@dataclass(frozen=True)
class EditorField:
    section: str
    key: str
    value: str
    enabled: bool


def iter_fields(store: EditableStore) -> Iterator[EditorField]:
    """Every entry of every section, in file order.

    Entries without `=` or with a blank value come out disabled.
    """
    for section in store.enumerate_sections():
        for raw in store.enumerate_entries(section):
            key, sep, value = raw.partition('=')
            yield EditorField(
                section=section, key=key, value=value,
                enabled=bool(sep) and bool(value.strip()))


def apply_edit(store: EditableStore, field: EditorField, text: str) -> None:
    if not field.enabled:
        raise ValueError(f'[{field.section}] {field.key} is read-only')
    store.set(field.section, field.key, text)


def field_tag(field: EditorField) -> str:
    """The `section=key` tag a UI can stick on the input widget."""
    return f'{field.section}={field.key}'


def parse_field_tag(tag: str) -> tuple[str, str]:
    section, sep, key = tag.partition('=')
    if not sep:
        raise ValueError(f'not a field tag: {tag!r}')
    return section, key
