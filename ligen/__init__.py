# -*- coding: utf-8 -*-

__author__ = """MoonMoon1919"""
__email__ = 'moonmoon1919@users.noreply.github.com'

import os

ROOT = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(ROOT, 'VERSION')) as version_file:
    VERSION = version_file.read().strip()
