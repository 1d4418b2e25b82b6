# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2026/10/19 10:48:19
# @Author : iniprofile contributors

"""
Typed views over single string entries.

    Point  -> {X=120,Y=80}
    Size   -> {Width=640,Height=480}
    Color  -> {A255;R30;G30;B30}

Decoding is tolerant on purpose, so hand-edited files keep working:
geometry components fall back one by one, and color channels are picked
up in any order (the last repeat wins, missing or unparseable ones are 0).
Geometry reads only the first two comma-separated parts, so
`{X=5,Y=6,Z=7}` decodes as (5, 6).
This is not validation.
"""

import re
from typing import NamedTuple

__all__ = [
    'Point', 'Size', 'Color',
    'encode_point', 'decode_point',
    'encode_size', 'decode_size',
    'encode_color', 'decode_color',
]

_BRACED = re.compile(r'\{(?P<body>[^{}]*)\}', re.S)
_COMPONENT = re.compile(r'[^=]+=\s*(?P<value>-?[0-9]+)')
_CHANNEL = re.compile(r'(?P<channel>[aArRgGbB])(?P<value>\d+)', re.S)
_HEX_COLOR = re.compile(r'#?(?P<digits>[0-9a-fA-F]{6}|[0-9a-fA-F]{8})')


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int


class Color(NamedTuple):
    a: int
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, text: str) -> 'Color':
        """`#RRGGBB` (opaque) or `#AARRGGBB`."""
        if not (m := _HEX_COLOR.fullmatch(text.strip())):
            raise ValueError(f'not a hex color: {text!r}')
        digits = m['digits']
        if len(digits) == 6:
            digits = 'FF' + digits
        return cls(*(int(digits[i:i + 2], 16) for i in range(0, 8, 2)))

    def to_hex(self) -> str:
        return '#%02X%02X%02X%02X' % self


def _parse_int(digits: str) -> int | None:
    # hand-edited runs past the int-string limit read as unparseable.
    try:
        return int(digits)
    except ValueError:
        return None


def _decode_pair(text: str | None, fallback: tuple[int, int]) -> list[int]:
    ret = list(fallback)
    if text is None or not (m := _BRACED.search(text)):
        return ret
    # positional, each half on its own: `{X=5}` keeps the fallback Y.
    for idx, part in enumerate(m['body'].split(',')[:2]):
        if component := _COMPONENT.fullmatch(part.strip()):
            if (value := _parse_int(component['value'])) is not None:
                ret[idx] = value
    return ret


def encode_point(point: Point) -> str:
    return '{X=%d,Y=%d}' % (point[0], point[1])


def decode_point(text: str | None, fallback: Point) -> Point:
    return Point(*_decode_pair(text, fallback))


def encode_size(size: Size) -> str:
    return '{Width=%d,Height=%d}' % (size[0], size[1])


def decode_size(text: str | None, fallback: Size) -> Size:
    return Size(*_decode_pair(text, fallback))


def encode_color(color: Color) -> str:
    # no clamping, out of range channels are the caller's business.
    return '{A%d;R%d;G%d;B%d}' % (color[0], color[1], color[2], color[3])


def decode_color(text: str | None) -> Color:
    if text is None:
        return Color(0, 0, 0, 0)
    channels = dict.fromkeys('ARGB', 0)
    for m in _CHANNEL.finditer(text):
        channels[m['channel'].upper()] = _parse_int(m['value']) or 0
    return Color(channels['A'], channels['R'], channels['G'], channels['B'])
