# -*- encoding: utf-8 -*-
# @File   : typed.py
# @Time   : 2026/10/19 11:10:36
# @Author : iniprofile contributors

"""Typed getters and setters shared by both store facades."""

from .codec import (
    Color, Point, Size,
    decode_color, decode_point, decode_size,
    encode_color, encode_point, encode_size,
)

__all__ = ['TypedValuesMixin', 'WINDOW_SECTION']

# where window geometry lives, as `<name>Location` / `<name>Size`.
WINDOW_SECTION = 'UI'


class TypedValuesMixin:
    """Needs `get`, `set`, `get_or_default` and `lock` from the host class.

    Getters that take a fallback behave like `get_or_default`: a missing
    entry is written back with the encoded fallback.
    """

    def get_point(self, section: str, key: str, fallback: Point) -> Point:
        value = self.get_or_default(section, key, encode_point(fallback))
        return decode_point(value, fallback)

    def set_point(self, section: str, key: str, point: Point) -> None:
        self.set(section, key, encode_point(point))

    def get_size(self, section: str, key: str, fallback: Size) -> Size:
        value = self.get_or_default(section, key, encode_size(fallback))
        return decode_size(value, fallback)

    def set_size(self, section: str, key: str, size: Size) -> None:
        self.set(section, key, encode_size(size))

    def get_color(self, section: str, key: str) -> Color:
        """Decode the stored color; all channels are 0 when it is absent."""
        return decode_color(self.get(section, key))

    def set_color(self, section: str, key: str, color: Color) -> None:
        self.set(section, key, encode_color(color))

    def get_color_or_default(
        self, section: str, key: str, default: Color
    ) -> Color:
        """Like `get_or_default`, for colors.

        Only a missing (or blank) entry yields `default`. A stored value
        that decodes partially gives zeros for the unreadable channels.
        """
        with self.lock:
            value = self.get(section, key)
            if value is None:
                self.set_color(section, key, default)
                return default
        return decode_color(value)

    def read_window_location(self, name: str, fallback: Point) -> Point:
        return self.get_point(WINDOW_SECTION, name + 'Location', fallback)

    def write_window_location(self, name: str, location: Point) -> None:
        self.set_point(WINDOW_SECTION, name + 'Location', location)

    def read_window_size(self, name: str, fallback: Size) -> Size:
        return self.get_size(WINDOW_SECTION, name + 'Size', fallback)

    def write_window_size(self, name: str, size: Size) -> None:
        self.set_size(WINDOW_SECTION, name + 'Size', size)
