# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 09:18:52
# @Author : iniprofile contributors

from .model import ProfileSection, ProfileDocument
from .parser import ProfileParser
from .interchange import ProfileJsonHandler, ProfileYamlHandler
