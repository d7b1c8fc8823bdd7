# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Bridge from parsed trajectories to cclib data objects"""

import numpy as np
from cclib.parser.data import ccData


def to_ccdata(frames):
    """Store the geometries of a trajectory in a cclib ccData object.

    The result can be handed to any cclib writer, e.g.
    cclib.io.ccwrite(data, outputtype="cjson").

    Inputs:
        frames - a Trajectory or any sequence of Frame objects, all with
                 the same atoms in the same order
    Returns:
        a ccData object with natom, atomnos and atomcoords set
    Raises:
        ValueError when there are no frames or their atom counts differ
    """
    frames = list(frames)
    if not frames:
        raise ValueError("No frames to convert")

    counts = {frame.natom for frame in frames}
    if len(counts) > 1:
        raise ValueError(f"frames have differing atom counts: {sorted(counts)}")

    atomcoords = np.stack([frame.atomcoords for frame in frames])
    attributes = {
        "natom": frames[0].natom,
        "atomnos": frames[0].atomnos,
        "atomcoords": atomcoords,
    }
    return ccData(attributes)
