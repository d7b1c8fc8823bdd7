# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
"""Contains parsers for all supported geometry formats"""


# These import statements are added for the convenience of users...
# Rather than having to type:
#         from xyzmonitor.parser.xyzparser import read_multi_xyz
# they can use:
#         from xyzmonitor.parser import read_multi_xyz

from xyzmonitor.parser.data import Atom
from xyzmonitor.parser.data import ClipboardData
from xyzmonitor.parser.data import ClipboardStatus
from xyzmonitor.parser.data import Frame
from xyzmonitor.parser.data import Trajectory
from xyzmonitor.parser.data import XYZFormat
from xyzmonitor.parser.xyzparser import detect_format
from xyzmonitor.parser.xyzparser import read_multi_xyz
from xyzmonitor.parser.xyzparser import SIMPLIFIED_COMMENT
from xyzmonitor.parser.gclipparser import read_gaussian_clipboard
