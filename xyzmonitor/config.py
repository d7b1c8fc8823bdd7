# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Constants and user settings.

The core limits (MAX_ATOM_COUNT, PREVIEW_LINES) are fixed. The settings
file only controls the surroundings: how much text may be converted in
one go and how the package logs.

A settings file is a list of ``key=value`` lines, ``#`` starts a comment::

    log_level=INFO
    log_to_console=true
    log_file=logs/xyz_monitor.log
    # Memory limit in MB for processing
    max_memory_mb=500
    # Explicit character limit, 0 derives it from max_memory_mb
    max_clipboard_chars=0
"""

import configparser
import logging
import os
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)

# Upper bound for the atom count line of a standard XYZ block
MAX_ATOM_COUNT = 10000
# Number of coordinate records inspected by format detection
PREVIEW_LINES = 5

# Rough memory cost of one input character through parse and conversion
BYTES_PER_CHAR = 8
MIN_CHARS = 10000
MAX_CHARS = 100000000
MIN_MEMORY_MB = 50

_SECTION = "xyzmonitor"


def calculate_max_chars(memory_mb):
    """Number of characters that fit in memory_mb megabytes of processing memory.

    Inputs:
        memory_mb - memory budget in MB
    Returns:
        character limit clamped to [MIN_CHARS, MAX_CHARS]
    """
    max_chars = memory_mb * 1024 * 1024 // BYTES_PER_CHAR
    return max(MIN_CHARS, min(MAX_CHARS, max_chars))


@dataclass
class Settings:
    max_memory_mb: int = 500
    max_clipboard_chars: int = 0
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_to_console: bool = True

    @property
    def char_limit(self) -> int:
        """Effective character limit for one conversion."""
        if self.max_clipboard_chars > 0:
            return self.max_clipboard_chars
        return calculate_max_chars(self.max_memory_mb)

    @property
    def level(self) -> int:
        """log_level as a logging level, INFO when unrecognised."""
        name = self.log_level.upper()
        if name == "WARN":
            name = "WARNING"
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO


def load_config(path):
    """Read settings from a key=value file.

    A missing file yields the defaults. Values that cannot be converted
    are reported and the default is kept.

    Inputs:
        path - path of the settings file
    Returns:
        a Settings instance
    """
    settings = Settings()
    if not os.path.isfile(path):
        logger.info("Config file %s not found, using defaults", path)
        return settings

    with open(path, encoding="utf-8") as file:
        text = file.read()

    parser = configparser.ConfigParser(
        delimiters=("=",), comment_prefixes=("#",), interpolation=None,
        allow_no_value=True, strict=False)
    parser.read_string(f"[{_SECTION}]\n" + text, source=path)
    section = parser[_SECTION]

    for key, getter in (("max_memory_mb", section.getint),
                        ("max_clipboard_chars", section.getint),
                        ("log_to_console", section.getboolean)):
        if section.get(key) is None:
            continue
        try:
            setattr(settings, key, getter(key))
        except ValueError as error:
            logger.error("Error parsing config value for key '%s': %s", key, error)

    settings.log_level = section.get("log_level") or settings.log_level
    settings.log_file = section.get("log_file") or None

    if settings.max_memory_mb < MIN_MEMORY_MB:
        logger.warning("max_memory_mb is too small (%d), setting to %dMB",
                       settings.max_memory_mb, MIN_MEMORY_MB)
        settings.max_memory_mb = MIN_MEMORY_MB
    if settings.max_clipboard_chars < 0:
        settings.max_clipboard_chars = 0

    return settings
