# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 09:41:27
# @Author : iniprofile contributors

"""Reading and writing plain INI profiles.

The format is deliberately small:

    [UI]
    MainFormLocation={X=120,Y=80}
    Readonly

    [Colors]
    Background={A255;R30;G30;B30}

No comments, no quoting, no continuation lines. A line without `=` is an
entry without a value.
"""

import logging
import os
import stat
from contextlib import suppress
from io import StringIO, TextIOBase
from os import PathLike
from pathlib import Path
from tempfile import mkstemp
from warnings import warn

import chardet

from ..abstract import FileHandler
from .model import ProfileDocument, ProfileSection

__all__ = ['ProfileParser']

logger = logging.getLogger(__name__)


def _target_mode(target: Path) -> int:
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        # mkstemp always creates 0600, a plain `open` would honour umask.
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class ProfileParser(FileHandler[ProfileDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def readstream(buf: TextIOBase) -> ProfileDocument:
        """Parse an already decoded text stream.

        Unless you have special needs, just call `self.read()`.
        """
        ret = ProfileDocument()
        this_sect: ProfileSection | None = None
        seen_header = False
        orphans = 0
        lineno = 0
        while i := buf.readline():
            lineno += 1
            line = i.strip()
            if lineno == 1:
                line = line.lstrip('\ufeff')
            if not line:
                continue
            if line[0] == '[':
                end = line.find(']')
                name = line[1:end] if end > 0 else line[1:]
                try:
                    # a repeated header reopens the earlier section.
                    this_sect = ret.setdefault(name)
                except ValueError:
                    warn(f'line {lineno}: invalid section header {line!r}, '
                         'its entries are skipped.')
                    this_sect = None
                seen_header = True
                continue
            if this_sect is None:
                if not seen_header:
                    orphans += 1
                continue
            key, sep, val = line.partition('=')
            value = val if sep else None
            try:
                # first occurrence wins, as the OS profile API reads it.
                if key.strip() not in this_sect:
                    this_sect[key] = value
            except ValueError:
                warn(f'line {lineno}: unreadable entry {line!r} skipped.')
        if orphans > 0:
            warn(f'{orphans} entries before the first section were ignored.')
        return ret

    @classmethod
    def parse(cls, text: str) -> ProfileDocument:
        # newline=None folds `\r\n` and `\r` into `\n`.
        return cls.readstream(StringIO(text, newline=None))

    @staticmethod
    def _decode_bytes(raw: bytes) -> StringIO:
        codec = chardet.detect(raw)
        encoding = codec.get('encoding') if codec else None
        if encoding is None or (codec.get('confidence') or 0) < 0.8:
            encoding = 'utf-8'

        # fallbacks
        try:
            buf = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            encoding = 'latin-1'
            buf = raw.decode(encoding)
        logger.info('Profile decoded as %s after a failed strict decode.',
                    encoding)
        return StringIO(buf, newline=None)

    def read(self) -> ProfileDocument:
        """Read the file this parser points to.

        A missing file reads as an empty document. Any other `OSError`
        propagates.
        """
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except FileNotFoundError:
            logger.debug('Profile %s does not exist yet.', self._fn)
            return ProfileDocument()
        except UnicodeDecodeError:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
            return self.readstream(self._decode_bytes(raw))

    @staticmethod
    def dumps(instance: ProfileDocument) -> str:
        """Serialize `instance`, one blank line between sections."""
        buffers = [
            '\n'.join([str(section), *section.raw_entries()]) + '\n'
            for section in instance.values()
        ]
        return '\n'.join(buffers)

    def write(self, instance: ProfileDocument) -> None:
        """Save to the file, replacing it atomically.

        The text goes to a temp file next to the target first, so a failed
        save leaves the previous file as it was.
        The saved file keeps the permissions of the one it replaces, or
        gets the usual umask-derived ones when it is new.
        """
        target = Path(self._fn)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = mkstemp(
            prefix=f'.{target.name}.', suffix='.tmp', dir=target.parent)
        try:
            with open(fd, 'w', encoding=self._codec) as fp:
                fp.write(self.dumps(instance))
                fp.flush()
                os.fsync(fp.fileno())
            os.chmod(tmp, _target_mode(target))
            os.replace(tmp, target)
        except BaseException:
            with suppress(FileNotFoundError):
                os.unlink(tmp)
            raise
        logger.debug('Profile %s saved (%d sections).',
                     self._fn, len(instance))

    def __str__(self) -> str:
        return 'INI profile: ' + super().__str__() + f' ({self._codec})'
