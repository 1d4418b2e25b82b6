# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2026/10/19 12:41:03
# @Author : iniprofile contributors

import sys

from .cli import main

sys.exit(main())
