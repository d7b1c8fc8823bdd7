# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.

"""
A converter between XYZ geometries and Gaussian optimization logs.

xyzmonitor recognizes XYZ text (standard, multi-frame, or bare coordinate
records without a header) and turns it into a synthetic Gaussian
optimization log, one optimization step per frame, so that GaussView can
display and animate the geometries. The reverse direction decodes the
scratch record written by GaussView's copy command back into XYZ text.

The element table comes from cclib, and parsed trajectories can be handed
over to cclib writers through xyzmonitor.io.to_ccdata.

"""

__version__ = "1.0.0"

from xyzmonitor import io
from xyzmonitor import parser

# The objects below constitute our public API. These names will not change
# over time. Names in the sub-modules will typically also be backwards
# compatible, but may sometimes change when code is moved around.
detect_format = parser.detect_format
xyzread = io.xyzread
xyzwrite = io.xyzwrite
convert_clipboard_text = io.convert_clipboard_text
convert_gaussian_clipboard = io.convert_gaussian_clipboard
