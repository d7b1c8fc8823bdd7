# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Detection and parsing of standard, multi-frame and simplified XYZ text"""

import logging

from xyzmonitor.config import MAX_ATOM_COUNT, PREVIEW_LINES
from xyzmonitor.parser.data import Atom, Frame, Trajectory, XYZFormat
from xyzmonitor.utils import (
    is_coordinate_line,
    leading_int,
    parse_coordinates,
    split_lines,
    split_whitespace,
)


logger = logging.getLogger(__name__)

SIMPLIFIED_COMMENT = "Simplified XYZ format"


def is_simplified_xyz(lines):
    """True if the first few lines are all coordinate records."""
    if not lines:
        return False
    records = [line for line in lines if line]
    return all(is_coordinate_line(line) for line in records[:PREVIEW_LINES])


def record_indices(lines, start, count):
    """Indices of the next `count` non-blank lines from `start` on, fewer at the end of the text."""
    indices = []
    for index in range(start, len(lines)):
        if len(indices) == count:
            break
        if lines[index]:
            indices.append(index)
    return indices


def detect_format(content):
    """Classify a text blob as standard XYZ, simplified XYZ or neither.

    Standard XYZ starts with an atom count (1..MAX_ATOM_COUNT) followed
    by a comment line and at least that many coordinate records; only
    the first PREVIEW_LINES records are checked. Anything else is
    simplified XYZ if its first PREVIEW_LINES lines are coordinate
    records.

    Inputs:
        content - the text blob, already bounded in size by the caller
    Returns:
        an XYZFormat member
    """
    if not content:
        logger.debug("Content is empty")
        return XYZFormat.NOT_XYZ

    if "\0" in content:
        logger.debug("Content contains binary data")
        return XYZFormat.NOT_XYZ

    lines = split_lines(content)
    if not lines:
        logger.debug("No lines found in content")
        return XYZFormat.NOT_XYZ

    natom = leading_int(lines[0])
    if natom is not None and 0 < natom <= MAX_ATOM_COUNT:
        records = record_indices(lines, 2, natom)
        if len(records) < natom:
            logger.debug("Not enough lines for atom count: %d", natom)
            return XYZFormat.NOT_XYZ

        for index in records[:PREVIEW_LINES]:
            if not is_coordinate_line(lines[index]):
                logger.debug("Invalid coordinate line at index: %d", index)
                return XYZFormat.NOT_XYZ

        logger.debug("Detected standard XYZ format")
        return XYZFormat.STANDARD

    logger.debug("First line is not an atom count, checking simplified format")
    if is_simplified_xyz(lines):
        logger.debug("Detected simplified XYZ format")
        return XYZFormat.SIMPLIFIED

    logger.debug("Not recognized as XYZ format")
    return XYZFormat.NOT_XYZ


def parse_atom(line, lineno):
    """Build an Atom from a coordinate record, None if the record is malformed."""
    tokens = split_whitespace(line)
    coords = parse_coordinates(tokens)
    if coords is None:
        logger.warning("Failed to parse atom at line %d: %r", lineno, line)
        return None
    return Atom(tokens[0], *coords)


def read_xyz_frame(lines, start):
    """Read one standard XYZ frame starting at the atom count line.

    The comment is the line right after the count, even when blank.
    Blank lines among the atom records are not counted as records.
    Records that cannot be parsed are skipped, the rest of the frame is
    still read.

    Inputs:
        lines - the stripped lines of the whole document
        start - index of the atom count line
    Returns:
        (frame, next_start); frame is None when the count line is not a
        positive integer, in which case next_start is None as well. A
        frame without any readable atom is returned with zero atoms.
    """
    natom = leading_int(lines[start])
    if natom is None or natom <= 0:
        return None, None

    comment = lines[start + 1] if start + 1 < len(lines) else ""
    records = record_indices(lines, start + 2, natom)
    atoms = []
    for lineno in records:
        atom = parse_atom(lines[lineno], lineno)
        if atom is not None:
            atoms.append(atom)

    if len(records) < natom:
        return Frame(atoms, comment), len(lines)
    return Frame(atoms, comment), records[-1] + 1


def _read_standard(lines):
    trajectory = Trajectory()
    cursor = 0
    while cursor < len(lines):
        # frames may be separated by blank lines
        if not lines[cursor]:
            cursor += 1
            continue

        frame, next_start = read_xyz_frame(lines, cursor)
        if frame is None:
            logger.warning("Failed to read frame header at line %d: %r", cursor, lines[cursor])
            trajectory.complete = False
            break

        if frame.atoms:
            trajectory.frames.append(frame)
        else:
            logger.warning("Dropping frame starting at line %d, no atoms could be read", cursor)
        cursor = next_start

    return trajectory


def _read_simplified(lines):
    atoms = []
    for lineno, line in enumerate(lines):
        if len(split_whitespace(line)) < 4:
            continue
        atom = parse_atom(line, lineno)
        if atom is not None:
            atoms.append(atom)

    trajectory = Trajectory()
    if atoms:
        trajectory.frames.append(Frame(atoms, SIMPLIFIED_COMMENT))
    return trajectory


def read_multi_xyz(content, fmt=None):
    """Parse XYZ text into a trajectory of frames.

    Inputs:
        content - the text blob
        fmt - the XYZFormat of the blob; detected when None
    Returns:
        a Trajectory, possibly empty. Its `complete` flag is False when a
        malformed frame header stopped the parse; the frames read before
        that point are kept.
    """
    if fmt is None:
        fmt = detect_format(content)

    if fmt is XYZFormat.NOT_XYZ:
        return Trajectory()

    lines = split_lines(content)
    if not lines:
        logger.debug("No lines to process")
        return Trajectory()

    if fmt is XYZFormat.STANDARD:
        logger.debug("Processing standard XYZ format")
        trajectory = _read_standard(lines)
    else:
        logger.debug("Processing simplified XYZ format")
        trajectory = _read_simplified(lines)

    logger.info("Processed %d frames", len(trajectory))
    return trajectory
