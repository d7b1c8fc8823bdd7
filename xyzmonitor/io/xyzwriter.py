# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Writer for standard XYZ text"""

from xyzmonitor.io.filewriter import write_output
from xyzmonitor.utils import format_fixed


CLIPBOARD_COMMENT = "Converted from Gaussian clipboard"


def atom_line(atom):
    return (f"{atom.symbol:<2}"
            f"{format_fixed(atom.x, 12)}"
            f"{format_fixed(atom.y, 12)}"
            f"{format_fixed(atom.z, 12)}\n")


def atoms_to_xyz(atoms, comment=CLIPBOARD_COMMENT):
    """Encode a list of atoms as one standard XYZ block."""
    lines = [f"{len(atoms)}\n", f"{comment}\n"]
    lines.extend(atom_line(atom) for atom in atoms)
    return "".join(lines)


def generate_xyz(frames):
    """Encode every frame as a standard XYZ block, in order.

    Inputs:
        frames - a Trajectory or any sequence of Frame objects
    Returns:
        the XYZ text, empty when there are no frames
    """
    return "".join(atoms_to_xyz(frame.atoms, frame.comment) for frame in frames)


def write_xyz(frames, outputdest=None):
    """Writes the frames as multi-frame XYZ text.

    Inputs:
        frames - a Trajectory or any sequence of Frame objects
        outputdest - A filename or file object for writing. Example, "traj.xyz"

    Returns:
        the XYZ text when outputdest is None, otherwise None
    """
    return write_output(generate_xyz(frames), outputdest)
