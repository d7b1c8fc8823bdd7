# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Convert XYZ text into a Gaussian optimization log that GaussView can open"""

import argparse
import logging
import sys

from xyzmonitor.config import load_config
from xyzmonitor.io import convert_clipboard_text
from xyzmonitor.logging_config import setup_logging


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="-",
                        help="XYZ file to convert, '-' or nothing reads stdin")
    parser.add_argument("-o", "--output", default=None,
                        help="file to write the log to (default: stdout)")
    parser.add_argument("-c", "--config", default="config.ini",
                        help="settings file (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug messages")
    return parser


def read_input(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as file:
        return file.read()


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = load_config(args.config)
    level = logging.DEBUG if args.verbose else settings.level
    setup_logging(level, settings.log_file, settings.log_to_console)

    content = read_input(args.input)
    output = convert_clipboard_text(content, settings.char_limit)
    if output is None:
        return 1

    if args.output is None:
        sys.stdout.write(output)
    else:
        with open(args.output, "w", encoding="utf-8") as file:
            file.write(output)
        logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
