# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 09:10:21
# @Author : iniprofile contributors

import logging

from .codec import (
    Color, Point, Size,
    decode_color, decode_point, decode_size,
    encode_color, encode_point, encode_size,
)
from .errors import ProfileError, ProfileIOError
from .ini import (
    ProfileDocument, ProfileSection, ProfileParser,
    ProfileJsonHandler, ProfileYamlHandler,
)
from .store import ProfileStore, StrictProfileStore, default_profile_path

__all__ = [
    'ProfileStore', 'StrictProfileStore', 'default_profile_path',
    'ProfileDocument', 'ProfileSection', 'ProfileParser',
    'ProfileJsonHandler', 'ProfileYamlHandler',
    'Point', 'Size', 'Color',
    'encode_point', 'decode_point', 'encode_size', 'decode_size',
    'encode_color', 'decode_color',
    'ProfileError', 'ProfileIOError',
]

# applications decide where records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())
