# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Convert a Gaussian clipboard file (GaussView copy) into XYZ text"""

import argparse
import logging
import sys

from xyzmonitor.io import convert_gaussian_clipboard
from xyzmonitor.logging_config import setup_logging
from xyzmonitor.scripts.xyz2glog import read_input


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="-",
                        help="Gaussian clipboard file; '-' or nothing reads stdin")
    parser.add_argument("-o", "--output", default=None,
                        help="file to write the XYZ text to (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug messages")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    output = convert_gaussian_clipboard(read_input(args.input))
    if output is None:
        return 1

    if args.output is None:
        sys.stdout.write(output)
    else:
        with open(args.output, "w", encoding="utf-8") as file:
            file.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
