"""Tests for JSON / YAML profile snapshots."""

import json
from pathlib import Path

import pytest
import yaml

from iniprofile.ini import ProfileDocument, ProfileJsonHandler, ProfileYamlHandler
from iniprofile.ini.interchange import InvalidProfileTree, from_tree


def _doc() -> ProfileDocument:
    doc = ProfileDocument()
    doc.setdefault('UI')['Theme'] = 'dark'
    doc['UI']['Readonly'] = None
    doc.setdefault('Empty')
    return doc


def test_json_round_trip(tmp_path: Path) -> None:
    handler = ProfileJsonHandler(tmp_path / 'p.json')
    handler.write(_doc())
    raw = json.loads((tmp_path / 'p.json').read_text(encoding='utf-8'))
    assert raw == {'UI': {'Theme': 'dark', 'Readonly': None}, 'Empty': {}}
    assert list(raw) == ['UI', 'Empty']
    assert handler.read().to_dict() == _doc().to_dict()


def test_yaml_round_trip(tmp_path: Path) -> None:
    handler = ProfileYamlHandler(tmp_path / 'p.yaml')
    handler.write(_doc())
    raw = yaml.safe_load((tmp_path / 'p.yaml').read_text(encoding='utf-8'))
    assert raw == {'UI': {'Theme': 'dark', 'Readonly': None}, 'Empty': {}}
    assert list(handler.read()) == ['UI', 'Empty']


def test_yaml_scalars_become_strings(tmp_path: Path) -> None:
    path = tmp_path / 'p.yaml'
    path.write_text('Window:\n  Width: 800\n  Maximized: true\nBare:\n',
                    encoding='utf-8')
    doc = ProfileYamlHandler(path).read()
    assert doc.to_dict() == {
        'Window': {'Width': '800', 'Maximized': 'True'},
        'Bare': {},
    }


@pytest.mark.parametrize('tree', [['a'], {'S': ['a']}, 'text'])
def test_bad_trees(tree: object) -> None:
    with pytest.raises(InvalidProfileTree):
        from_tree(tree)


def test_empty_yaml_is_empty_document(tmp_path: Path) -> None:
    path = tmp_path / 'p.yaml'
    path.write_text('', encoding='utf-8')
    assert len(ProfileYamlHandler(path).read()) == 0
