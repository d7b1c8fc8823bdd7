# -*- coding: utf-8 -*-
#
"""Contains all writers for the supported geometry representations."""


from xyzmonitor.io.gaussianlog import generate_gaussian_log
from xyzmonitor.io.gaussianlog import write_gaussian_log
from xyzmonitor.io.xyzwriter import atoms_to_xyz
from xyzmonitor.io.xyzwriter import generate_xyz
from xyzmonitor.io.xyzwriter import write_xyz
from xyzmonitor.io.xyzwriter import CLIPBOARD_COMMENT

from xyzmonitor.io.xyzio import xyzread
from xyzmonitor.io.xyzio import xyzwrite
from xyzmonitor.io.xyzio import convert_clipboard_text
from xyzmonitor.io.xyzio import convert_gaussian_clipboard
from xyzmonitor.io.xyzio import UnknownOutputFormatError

from xyzmonitor.io.ccbridge import to_ccdata
