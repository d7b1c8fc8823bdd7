# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Destination handling shared by the writers"""

import io


def write_output(output, outputdest=None):
    """Deliver a string representation to its destination.

    Inputs:
        output - the text produced by a writer
        outputdest - None, a filename or a file object

    Returns:
        output when outputdest is None, otherwise None
    Raises:
        ValueError for any other kind of destination
    """
    # If outputdest is None, return a string representation of the output.
    if outputdest is None:
        return output

    if isinstance(outputdest, str):
        with open(outputdest, "w") as file:
            file.write(output)
    elif isinstance(outputdest, io.IOBase):
        outputdest.write(output)
    else:
        raise ValueError(f"Cannot write to {type(outputdest).__name__}")
    return None
