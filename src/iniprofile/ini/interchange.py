# -*- encoding: utf-8 -*-
# @File   : interchange.py
# @Time   : 2026/10/19 10:32:05
# @Author : iniprofile contributors

"""Profile snapshots in JSON or YAML.

Both keep section and entry order, and write valueless entries as `null`.
Handy for diffing a profile, or seeding one from a hand-written tree.
"""

import json
from collections.abc import Mapping
from os import PathLike
from typing import Any

import yaml

from ..abstract import FileHandler
from .model import ProfileDocument

__all__ = [
    'ProfileJsonHandler', 'ProfileYamlHandler',
    'InvalidProfileTree', 'to_tree', 'from_tree',
]


class InvalidProfileTree(ValueError):
    """The loaded tree is not a `{section: {key: value}}` mapping."""
    pass


def to_tree(instance: ProfileDocument) -> dict[str, dict[str, str | None]]:
    return instance.to_dict()


def from_tree(tree: Any) -> ProfileDocument:
    if tree is None:
        return ProfileDocument()
    if not isinstance(tree, Mapping):
        raise InvalidProfileTree('profile root is not a mapping')
    ret = ProfileDocument()
    for name, pairs in tree.items():
        if pairs is None:
            pairs = {}
        if not isinstance(pairs, Mapping):
            raise InvalidProfileTree(f'section {name!r} is not a mapping')
        section = ret.setdefault(str(name))
        for k, v in pairs.items():
            # may there be some pure digits considered as int
            section[str(k)] = None if v is None else str(v)
    return ret


class ProfileJsonHandler(FileHandler[ProfileDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8', *, indent: int = 2
    ) -> None:
        super().__init__(filename, encoding)
        self._indent = indent

    def read(self) -> ProfileDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return from_tree(json.load(fp))

    def dumps(self, instance: ProfileDocument) -> str:
        return json.dumps(
            to_tree(instance), ensure_ascii=False, indent=self._indent)

    def write(self, instance: ProfileDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(self.dumps(instance))
            fp.write('\n')


class ProfileYamlHandler(FileHandler[ProfileDocument]):
    def read(self) -> ProfileDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return from_tree(yaml.safe_load(fp))

    @staticmethod
    def dumps(instance: ProfileDocument) -> str:
        return yaml.safe_dump(
            to_tree(instance), allow_unicode=True, sort_keys=False)

    def write(self, instance: ProfileDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(self.dumps(instance))
