# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/19 11:32:58
# @Author : iniprofile contributors

"""Section/entry store over one INI profile file.

Two facades share the same operations:

- `StrictProfileStore` raises `ProfileIOError` when the file cannot be
  read or written.
- `ProfileStore` keeps the legacy contract: it never raises for I/O,
  logs the failure and hands back `None`, `False` or `[]` instead.
  Its `strict` attribute gives access to the error channel.

Every call re-reads the file, and every mutation is saved before the
call returns. Stores pointing at the same path share one re-entrant
lock, so load-mutate-save sequences of different threads never
interleave. Other processes are not coordinated with.
"""

import logging
import os
import sys
import threading
import weakref
from os import PathLike
from pathlib import Path

from .errors import ProfileIOError
from .ini.model import (
    ProfileDocument, check_key, check_section_name, check_value,
)
from .ini.parser import ProfileParser
from .typed import TypedValuesMixin

__all__ = ['ProfileStore', 'StrictProfileStore', 'default_profile_path']

logger = logging.getLogger(__name__)

# entries go away with the last store holding the lock.
_path_locks: weakref.WeakValueDictionary[str, threading.RLock] = \
    weakref.WeakValueDictionary()
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = os.path.normcase(str(path.resolve()))
    with _path_locks_guard:
        lock = _path_locks.get(key)
        if lock is None:
            lock = _path_locks[key] = threading.RLock()
        return lock


def default_profile_path() -> Path:
    """`<program dir>/<program name>.ini` for the running program."""
    program = sys.argv[0] if sys.argv else ''
    # `python -c ...` and the interactive shell carry no script path.
    if program in ('', '-c'):
        program = sys.executable
    program_path = Path(program).resolve()
    return program_path.with_name(program_path.stem + '.ini')


class StrictProfileStore(TypedValuesMixin):
    def __init__(
        self, path: str | PathLike[str] | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        self._path = Path(path) if path is not None else default_profile_path()
        self._parser = ProfileParser(self._path, encoding)
        self.lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f'{type(self).__name__}({str(self._path)!r})'

    def load(self) -> ProfileDocument:
        """Read a fresh snapshot of the whole file."""
        try:
            return self._parser.read()
        except (OSError, UnicodeError) as e:
            raise ProfileIOError('cannot read profile', self._path) from e

    def _save(self, doc: ProfileDocument) -> None:
        try:
            self._parser.write(doc)
        except (OSError, UnicodeError) as e:
            raise ProfileIOError('cannot write profile', self._path) from e

    def exists(self, section: str, key: str) -> bool:
        """True iff `get` finds a non-blank value."""
        return self.get(section, key) is not None

    def get(self, section: str, key: str) -> str | None:
        """The stored value, or `None` when it is missing or blank.

        Empty and whitespace-only values read as missing, so the store
        cannot tell those cases apart.
        """
        with self.lock:
            doc = self.load()
        if section not in doc:
            return None
        value = doc[section].get(key)
        if value is None or not value.strip():
            return None
        return value

    def get_or_default(self, section: str, key: str, default: str) -> str:
        """Return the stored value, initializing a missing one.

        Side effect: when `get` would return `None`, `default` is written
        to the file before it is returned.
        """
        with self.lock:
            value = self.get(section, key)
            if value is None:
                self.set(section, key, default)
                return default
            return value

    def set(self, section: str, key: str, value: str | None) -> None:
        """Add or overwrite an entry, creating its section if needed.

        `None` writes a bare `key` line (an entry without value).
        """
        section = check_section_name(section)
        key = check_key(key)
        value = check_value(value)
        with self.lock:
            doc = self.load()
            doc.setdefault(section)[key] = value
            self._save(doc)

    def remove(self, section: str, key: str | None = None) -> None:
        """Drop a whole section, or a single entry when `key` is given.

        Removing the last entry keeps the (now empty) section header.
        Nothing is written when there is nothing to remove.
        """
        with self.lock:
            doc = self.load()
            if section not in doc:
                return
            if key is None:
                del doc[section]
            elif key in doc[section]:
                del doc[section][key]
            else:
                return
            self._save(doc)

    def enumerate_sections(self) -> list[str]:
        with self.lock:
            return list(self.load())

    def enumerate_entries(self, section: str) -> list[str]:
        """Raw `key=value` strings, or a bare `key` for valueless entries."""
        with self.lock:
            doc = self.load()
        if section not in doc:
            return []
        return doc[section].raw_entries()


class ProfileStore(TypedValuesMixin):
    """Legacy-compatible store: I/O failures are logged, never raised.

    Use `self.strict` (or a `StrictProfileStore`) when a caller has to
    tell "no such key" from "disk failed".
    """

    def __init__(
        self, path: str | PathLike[str] | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        self.strict = StrictProfileStore(path, encoding)
        self.lock = self.strict.lock

    @property
    def path(self) -> Path:
        return self.strict.path

    def __repr__(self) -> str:
        return f'{type(self).__name__}({str(self.path)!r})'

    @staticmethod
    def _report(action: str, exc: ProfileIOError) -> None:
        logger.error('Error %s profile entry: %s', action, exc)
        logger.debug('Profile I/O failure details', exc_info=exc)

    def load(self) -> ProfileDocument:
        try:
            return self.strict.load()
        except ProfileIOError as e:
            self._report('reading', e)
            return ProfileDocument()

    def exists(self, section: str, key: str) -> bool:
        return self.get(section, key) is not None

    def get(self, section: str, key: str) -> str | None:
        try:
            return self.strict.get(section, key)
        except ProfileIOError as e:
            self._report('reading', e)
            return None

    def get_or_default(
        self, section: str, key: str, default: str
    ) -> str | None:
        """See `StrictProfileStore.get_or_default`.

        Returns `None` only when the file could not be read. A failed
        write-back is logged and `default` is still returned.
        """
        with self.lock:
            try:
                value = self.strict.get(section, key)
            except ProfileIOError as e:
                self._report('reading', e)
                return None
            if value is None:
                self.set(section, key, default)
                return default
            return value

    def set(self, section: str, key: str, value: str | None) -> None:
        try:
            self.strict.set(section, key, value)
        except ProfileIOError as e:
            self._report('writing', e)

    def remove(self, section: str, key: str | None = None) -> None:
        try:
            self.strict.remove(section, key)
        except ProfileIOError as e:
            self._report('writing', e)

    def enumerate_sections(self) -> list[str]:
        try:
            return self.strict.enumerate_sections()
        except ProfileIOError as e:
            self._report('reading', e)
            return []

    def enumerate_entries(self, section: str) -> list[str]:
        try:
            return self.strict.enumerate_entries(section)
        except ProfileIOError as e:
            self._report('reading', e)
            return []
