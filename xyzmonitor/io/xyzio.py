# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Tools for identifying, reading and writing geometries"""

import io
import logging
import os

from xyzmonitor.io.gaussianlog import write_gaussian_log
from xyzmonitor.io.xyzwriter import atoms_to_xyz, write_xyz
from xyzmonitor.parser.data import XYZFormat
from xyzmonitor.parser.gclipparser import read_gaussian_clipboard
from xyzmonitor.parser.xyzparser import detect_format, read_multi_xyz


logger = logging.getLogger(__name__)

writerclasses = {
    'log': write_gaussian_log,
    'gaussian': write_gaussian_log,
    'xyz': write_xyz,
}


class UnknownOutputFormatError(Exception):
    """Raised when an unknown output format is encountered."""


def _read_source(source):
    if hasattr(source, "read"):
        return source.read()
    if isinstance(source, str):
        return source
    raise ValueError(f"Cannot read geometries from {type(source).__name__}")


def xyzread(source, fmt=None):
    """Read geometries from XYZ text.

    Inputs:
        source - the XYZ text, or a stream to read it from
        fmt - the XYZFormat of the text; detected when None
    Returns:
        a Trajectory, empty when the text is not XYZ
    """
    return read_multi_xyz(_read_source(source), fmt)


def xyzwrite(frames, outputtype=None, outputdest=None):
    """Write a sequence of frames to a Gaussian log or XYZ representation.

    Inputs:
        frames - a Trajectory or any sequence of Frame objects
        outputtype - The output format ("log", "gaussian" or "xyz")
        outputdest - A filename or file object for writing

    Returns:
        the string representation when outputdest is None, otherwise None
    """
    writer = _determine_output_format(outputtype, outputdest)
    return writer(frames, outputdest)


def _determine_output_format(outputtype, outputdest):
    """
    Determine the correct output format.

    Inputs:
      outputtype - a string corresponding to the file type
      outputdest - a filename string or file handle
    Returns:
      the writer function for the output format
    Raises:
      UnknownOutputFormatError for unsupported file writer extensions
    """

    # Priority for determining the correct output format:
    #  1. outputtype
    #  2. outputdest

    if isinstance(outputtype, str):
        extension = outputtype.lower()
    elif isinstance(outputdest, str):
        extension = os.path.splitext(outputdest)[1][1:].lower()
    elif isinstance(outputdest, io.IOBase) and hasattr(outputdest, "name"):
        extension = os.path.splitext(str(outputdest.name))[1][1:].lower()
    else:
        raise UnknownOutputFormatError

    if extension not in writerclasses:
        raise UnknownOutputFormatError(extension)
    return writerclasses[extension]


def convert_clipboard_text(content, max_chars=None):
    """Convert XYZ text into a Gaussian optimization log.

    Inputs:
        content - XYZ text, standard, multi-frame or simplified
        max_chars - refuse texts longer than this many characters
    Returns:
        the log text, or None when the text is too large, is not XYZ or
        holds no readable frame
    """
    if not content:
        logger.info("Clipboard is empty or not text format.")
        return None

    if max_chars is not None and len(content) > max_chars:
        logger.warning("Clipboard content is too large (%d characters). Limit is %d characters.",
                       len(content), max_chars)
        return None

    fmt = detect_format(content)
    if fmt is XYZFormat.NOT_XYZ:
        logger.info("Invalid XYZ format in clipboard.")
        return None

    trajectory = read_multi_xyz(content, fmt)
    if not trajectory:
        logger.error("Failed to parse XYZ data.")
        return None

    logger.info("Found %d frame(s) with %d atoms.", len(trajectory), trajectory.natom)
    return write_gaussian_log(trajectory)


def convert_gaussian_clipboard(content):
    """Convert a Gaussian clipboard record into standard XYZ text.

    Inputs:
        content - text of the clipboard file
    Returns:
        the XYZ text, or None when no atom could be decoded
    """
    data = read_gaussian_clipboard(content)
    if not data.atoms:
        logger.error("No atoms decoded from Gaussian clipboard data.")
        return None
    return atoms_to_xyz(data.atoms)
