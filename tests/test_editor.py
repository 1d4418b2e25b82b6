"""Tests for the presentation-neutral editor interface."""

from pathlib import Path

import pytest

from iniprofile import ProfileStore
from iniprofile.editor import (
    EditorField, apply_edit, field_tag, iter_fields, parse_field_tag,
)


@pytest.fixture
def store(tmp_path: Path) -> ProfileStore:
    path = tmp_path / 'app.ini'
    path.write_text(
        '[UI]\nTheme=dark\nReadonly\nBlank=\n\n[Net]\nurl=a=b\n',
        encoding='utf-8')
    return ProfileStore(path)


def test_fields_in_file_order(store: ProfileStore) -> None:
    fields = list(iter_fields(store))
    assert fields == [
        EditorField('UI', 'Theme', 'dark', True),
        EditorField('UI', 'Readonly', '', False),
        EditorField('UI', 'Blank', '', False),
        EditorField('Net', 'url', 'a=b', True),
    ]


def test_apply_edit_writes_through_set(store: ProfileStore) -> None:
    theme = next(iter_fields(store))
    apply_edit(store, theme, 'light')
    assert store.get('UI', 'Theme') == 'light'


def test_disabled_fields_are_read_only(store: ProfileStore) -> None:
    readonly = list(iter_fields(store))[1]
    with pytest.raises(ValueError, match='read-only'):
        apply_edit(store, readonly, 'x')
    assert store.enumerate_entries('UI')[1] == 'Readonly'


def test_field_tags() -> None:
    field = EditorField('UI', 'Theme', 'dark', True)
    assert field_tag(field) == 'UI=Theme'
    assert parse_field_tag('UI=Theme') == ('UI', 'Theme')
    with pytest.raises(ValueError):
        parse_field_tag('no separator')


def test_empty_store(tmp_path: Path) -> None:
    assert list(iter_fields(ProfileStore(tmp_path / 'none.ini'))) == []
