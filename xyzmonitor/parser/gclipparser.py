# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Parser for the Gaussian clipboard scratch record.

The record is written by GaussView's copy command:

    <header line, ignored>
    <number of atoms>
    <atomic number> <x> <y> <z> [label]
    ...
"""

import logging

from xyzmonitor.elements import number_to_symbol
from xyzmonitor.parser.data import Atom, ClipboardData, ClipboardStatus
from xyzmonitor.utils import leading_float, leading_int, split_whitespace


logger = logging.getLogger(__name__)


def parse_record(line):
    """Split an atom record into (atomic number, x, y, z), None if malformed.

    A trailing label token (e.g. "O1") is accepted and dropped.
    """
    tokens = split_whitespace(line)
    if len(tokens) < 4:
        return None
    atomno = leading_int(tokens[0])
    coords = [leading_float(token) for token in tokens[1:4]]
    if atomno is None or None in coords:
        return None
    return (atomno, *coords)


def read_gaussian_clipboard(content):
    """Decode the atoms of a Gaussian clipboard record.

    Malformed records and atomic numbers without a symbol are skipped.
    When the text ends before the announced number of atoms the atoms
    decoded so far are returned with a TRUNCATED status.

    Inputs:
        content - text of the clipboard file
    Returns:
        a ClipboardData; HEADER_ERROR with no atoms when the first two
        lines are missing or the atom count is not a number
    """
    # positional: the header line may be blank
    lines = [line.strip() for line in content.rstrip().split("\n")]
    if len(lines) < 2:
        logger.error("Cannot read header of Gaussian clipboard data")
        return ClipboardData(status=ClipboardStatus.HEADER_ERROR)

    natom = leading_int(lines[1])
    if natom is None or natom < 0:
        logger.error("Cannot read atom count of Gaussian clipboard data: %r", lines[1])
        return ClipboardData(status=ClipboardStatus.HEADER_ERROR)

    data = ClipboardData()
    for index in range(natom):
        lineno = index + 2
        if lineno >= len(lines):
            logger.warning("Expected %d atoms, clipboard data ends after %d records",
                           natom, index)
            data.status = ClipboardStatus.TRUNCATED
            break

        record = parse_record(lines[lineno])
        if record is None:
            logger.warning("Failed to parse atom record at line %d: %r", lineno, lines[lineno])
            data.skipped += 1
            continue

        atomno, x, y, z = record
        symbol = number_to_symbol(atomno)
        if symbol is None:
            logger.warning("Unknown atomic number %d at line %d", atomno, lineno)
            data.skipped += 1
            continue

        data.atoms.append(Atom(symbol, x, y, z))

    logger.info("Decoded %d atoms from Gaussian clipboard data", len(data.atoms))
    return data
