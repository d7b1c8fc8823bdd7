# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Text and numeric helpers shared by the readers and writers"""

import re


# A numeric prefix is enough, trailing characters are ignored ("3 atoms" -> 3).
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE | re.ASCII,
)


def split_lines(text):
    """Split a text blob into stripped lines.

    Blank lines at the beginning and at the end are dropped, blank lines
    in between are kept so that empty comment lines stay in place.

    Inputs:
        text - the text blob
    Returns:
        a list of strings, empty if the text holds nothing but whitespace
    """
    lines = [line.strip() for line in text.split("\n")]
    start = 0
    while start < len(lines) and not lines[start]:
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1]:
        end -= 1
    return lines[start:end]


def split_whitespace(line):
    return line.split()


def leading_int(text):
    """Parse the integer at the start of text, None if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def leading_float(text):
    """Parse the floating point number at the start of text, None if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_coordinates(tokens):
    """Read the x, y, z fields (tokens 1..3) of a coordinate record.

    Returns:
        a tuple of three floats, or None if the record is too short or
        one of the fields is not a number
    """
    if len(tokens) < 4:
        return None
    coords = tuple(leading_float(token) for token in tokens[1:4])
    if any(value is None for value in coords):
        return None
    return coords


def is_coordinate_line(line):
    return parse_coordinates(split_whitespace(line)) is not None


def format_fixed(value, width, precision=6):
    return f"{value:{width}.{precision}f}"
