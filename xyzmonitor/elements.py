# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Conversion between element symbols and atomic numbers"""

from cclib.parser.utils import PeriodicTable


MAX_SYMBOL_NUMBER = 118
# The clipboard decoder only ever has to go back as far as radon.
MAX_REVERSE_NUMBER = 86

_pt = PeriodicTable()

SYMBOL_TO_NUMBER = {
    symbol: number for symbol, number in _pt.number.items()
    if 1 <= number <= MAX_SYMBOL_NUMBER
}
NUMBER_TO_SYMBOL = {
    number: _pt.element[number] for number in range(1, MAX_REVERSE_NUMBER + 1)
}

del _pt


def normalize_symbol(symbol):
    """Return the symbol with the first letter uppercase and the rest lowercase."""
    symbol = symbol.strip()
    return symbol[:1].upper() + symbol[1:].lower()


def symbol_to_number(symbol):
    """Look up the atomic number of an element symbol.

    Inputs:
        symbol - element symbol in any case, e.g. "he", "HE", "He"
    Returns:
        the atomic number, or 0 when the symbol is not an element
    """
    return SYMBOL_TO_NUMBER.get(normalize_symbol(symbol), 0)


def number_to_symbol(number):
    """Look up the element symbol of an atomic number (1..86), None otherwise."""
    return NUMBER_TO_SYMBOL.get(number)
