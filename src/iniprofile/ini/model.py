# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 09:20:11
# @Author : iniprofile contributors

"""
Plain INI structure: ordered sections holding ordered `key=value` pairs.

Names and keys are looked up case-insensitively but keep the spelling
they were first written with, like the legacy Windows profile API does.
A `None` value stands for a bare `key` line (an entry without `=`).
"""

from collections.abc import Iterator, Mapping, MutableMapping

__all__ = [
    'ProfileSection', 'ProfileDocument',
    'check_section_name', 'check_key', 'check_value',
]

_LINE_BREAKS = ('\r', '\n')


def _fold(name: object) -> str:
    if not isinstance(name, str):
        raise KeyError(name)
    return name.strip().casefold()


def check_section_name(name: str) -> str:
    """Return the stripped section name, or raise `ValueError`."""
    if not isinstance(name, str):
        raise TypeError(f'section name must be str, not {type(name).__name__}')
    name = name.strip()
    if not name:
        raise ValueError('section name must not be empty')
    if ']' in name or any(i in name for i in _LINE_BREAKS):
        raise ValueError(f'section name {name!r} is not representable')
    return name


def check_key(key: str) -> str:
    """Return the stripped entry key, or raise `ValueError`."""
    if not isinstance(key, str):
        raise TypeError(f'entry key must be str, not {type(key).__name__}')
    key = key.strip()
    if not key:
        raise ValueError('entry key must not be empty')
    # a key opening with `[` would be read back as a section header.
    if '=' in key or key.startswith('[') or '\0' in key \
            or any(i in key for i in _LINE_BREAKS):
        raise ValueError(f'entry key {key!r} is not representable')
    return key


def check_value(value: str | None) -> str | None:
    """Return the stripped value (`None` kept as is), or raise `ValueError`."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f'entry value must be str, not {type(value).__name__}')
    if '\0' in value or any(i in value for i in _LINE_BREAKS):
        raise ValueError(f'entry value {value!r} is not representable')
    return value.strip()


class ProfileSection(MutableMapping[str, str | None]):
    """An INI section: ordered entries with case-insensitive keys.

    Overwriting an entry keeps both its position and the spelling of its
    key; only the value changes.
    """

    def __init__(
        self, name: str, /,
        pairs: Mapping[str, str | None] | None = None
    ) -> None:
        self._name = check_section_name(name)
        # folded key -> (key as first written, value)
        self.__raw: dict[str, tuple[str, str | None]] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str | None:
        return self.__raw[_fold(key)][1]

    def __setitem__(self, key: str, value: str | None) -> None:
        key = check_key(key)
        value = check_value(value)
        folded = key.casefold()
        if folded in self.__raw:
            key = self.__raw[folded][0]
        self.__raw[folded] = (key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[_fold(key)]

    def __contains__(self, key: object) -> bool:
        try:
            return _fold(key) in self.__raw
        except KeyError:
            return False

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.__raw.values())

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def raw_entries(self) -> list[str]:
        """Entries as written on disk: `key=value`, or a bare `key`."""
        return [
            key if value is None else f'{key}={value}'
            for key, value in self.__raw.values()
        ]

    def to_dict(self) -> dict[str, str | None]:
        return {key: value for key, value in self.__raw.values()}


class ProfileDocument(MutableMapping[str, ProfileSection]):
    """One INI file in memory, owning all of its sections.

    Assigning a plain mapping copies it into a fresh `ProfileSection`,
    so no pointer to an external dict is kept.
    """

    def __init__(self) -> None:
        self.__raw: dict[str, ProfileSection] = {}

    def __getitem__(self, name: str) -> ProfileSection:
        return self.__raw[_fold(name)]

    def __setitem__(
        self, name: str,
        value: ProfileSection | Mapping[str, str | None]
    ) -> None:
        name = check_section_name(name)
        folded = name.casefold()
        if folded in self.__raw:
            name = self.__raw[folded].name
        pairs = value.to_dict() if isinstance(value, ProfileSection) else value
        self.__raw[folded] = ProfileSection(name, pairs)

    def __delitem__(self, name: str) -> None:
        del self.__raw[_fold(name)]

    def __contains__(self, name: object) -> bool:
        try:
            return _fold(name) in self.__raw
        except KeyError:
            return False

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return (section.name for section in self.__raw.values())

    def __repr__(self) -> str:
        return 'ProfileDocument(%s)' % ', '.join(
            repr(i) for i in self.__raw.values())

    def setdefault(  # type: ignore[override]
        self, name: str,
        default: Mapping[str, str | None] | None = None
    ) -> ProfileSection:
        """If section `name` is absent, add it (filled with `default`).

        Always returns the live section, never a copy.
        """
        if name not in self:
            self[name] = default or {}
        return self[name]

    def to_dict(self) -> dict[str, dict[str, str | None]]:
        return {i.name: i.to_dict() for i in self.__raw.values()}
