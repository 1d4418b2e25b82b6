# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/19 10:05:44
# @Author : iniprofile contributors

from os import PathLike
from pathlib import Path

__all__ = ['ProfileError', 'ProfileIOError']


class ProfileError(Exception):
    """Base class of the errors raised by this package."""
    pass


class ProfileIOError(ProfileError, OSError):
    """The profile file could not be read or written.

    Still an `OSError`, so callers used to catching those keep working.
    The underlying error is chained as `__cause__`.
    """

    def __init__(self, message: str, path: str | PathLike[str]) -> None:
        super().__init__(message)
        self.path = Path(path)

    def __str__(self) -> str:
        msg = f'{self.args[0]}: {self.path}'
        if self.__cause__ is not None:
            msg += f' ({self.__cause__})'
        return msg
