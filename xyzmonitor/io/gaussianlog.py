# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Writer for a Gaussian optimization log holding a sequence of geometries.

Nothing is computed: energies and convergence criteria are constant
placeholders. The layout only has to satisfy the geometry extraction of
GaussView, which reads every "Standard orientation" block as one step of
an optimization, so it is reproduced character for character.
"""

import logging

from xyzmonitor.elements import symbol_to_number
from xyzmonitor.io.filewriter import write_output
from xyzmonitor.utils import format_fixed


logger = logging.getLogger(__name__)

DELIMITER = "Grad" * 18 + "\n"
RULE = " " + "-" * 69 + "\n"

HEADER = (
    " ! This file was generated by XYZ Monitor\n"
    " \n"
    " 0 basis functions\n"
    " 0 alpha electrons\n"
    " 0 beta electrons\n"
    + DELIMITER
)

ORIENTATION_HEADER = (
    DELIMITER
    + " \n"
    + "                         Standard orientation:\n"
    + RULE
    + " Center     Atomic      Atomic             Coordinates (Angstroms)\n"
    + " Number     Number       Type             X           Y           Z\n"
    + RULE
)

SCF_DONE = " SCF Done:      -100.000000000\n"

CONVERGENCE = (
    "         Item               Value     Threshold  Converged?\n"
    " Maximum Force            1.000000     1.000000     NO\n"
    " RMS     Force            1.000000     1.000000     NO\n"
    " Maximum Displacement     1.000000     1.000000     NO\n"
    " RMS     Displacement     1.000000     1.000000     NO\n"
)

FOOTER = DELIMITER + " Normal termination of Gaussian\n"


def geometry_row(index, atom):
    """One row of the Standard orientation table, index is 1-based."""
    return (
        f"      {index}          {symbol_to_number(atom.symbol)}           0        "
        f"{format_fixed(atom.x, 10)}    "
        f"{format_fixed(atom.y, 10)}    "
        f"{format_fixed(atom.z, 10)}\n"
    )


def geometry_block(frame, step):
    """The orientation table and the optimization step trailer of one frame."""
    parts = [ORIENTATION_HEADER]
    parts.extend(geometry_row(index, atom) for index, atom in enumerate(frame.atoms, 1))
    parts.append(RULE)
    parts.append(" \n")
    parts.append(SCF_DONE)
    parts.append(" \n")
    parts.append(DELIMITER)
    parts.append(f" Step number   {step}\n")
    parts.append(CONVERGENCE)
    return "".join(parts)


def generate_gaussian_log(frames):
    """Encode frames as a Gaussian optimization log, one step per frame.

    Inputs:
        frames - a Trajectory or any sequence of Frame objects
    Returns:
        the log text, or None when there are no frames
    """
    frames = list(frames)
    if not frames:
        logger.error("No frames to convert")
        return None

    parts = [HEADER]
    parts.extend(geometry_block(frame, step) for step, frame in enumerate(frames, 1))
    parts.append(FOOTER)

    logger.debug("Converted %d frames to Gaussian log format", len(frames))
    return "".join(parts)


def write_gaussian_log(frames, outputdest=None):
    """Writes the frames as a Gaussian optimization log.

    Inputs:
        frames - a Trajectory or any sequence of Frame objects
        outputdest - A filename or file object for writing. Example, "traj.log"

    Returns:
        the log text when outputdest is None, otherwise None
    """
    output = generate_gaussian_log(frames)
    if output is None:
        return None

    return write_output(output, outputdest)
