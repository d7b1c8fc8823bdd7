# -*- coding: utf-8 -*-
#
# Copyright (c) 2021, Ravindra Shinde
#
# This file is part of TREX (http://trex-coe.eu) and is distributed under
# the terms of the BSD 3-Clause License.
"""Classes holding parsed geometries"""

import enum
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from xyzmonitor.elements import symbol_to_number


class XYZFormat(enum.Enum):
    """Outcome of format detection."""
    STANDARD = "standard"
    SIMPLIFIED = "simplified"
    NOT_XYZ = "not_xyz"


class ClipboardStatus(enum.Enum):
    OK = "ok"
    HEADER_ERROR = "header_error"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class Atom:
    """An atom with its element symbol and cartesian coordinates in Angstrom."""
    symbol: str
    x: float
    y: float
    z: float

    @property
    def atomno(self) -> int:
        return symbol_to_number(self.symbol)

    @property
    def coords(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Frame:
    """One geometry snapshot: the atoms in input order and the comment line."""
    atoms: Tuple[Atom, ...]
    comment: str = ""

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @property
    def natom(self) -> int:
        return len(self.atoms)

    @property
    def atomnos(self) -> np.ndarray:
        return np.array([atom.atomno for atom in self.atoms], dtype=int)

    @property
    def atomcoords(self) -> np.ndarray:
        return np.array([atom.coords for atom in self.atoms], dtype=float).reshape(-1, 3)


@dataclass
class Trajectory:
    """Ordered sequence of frames, in document order.

    The position of a frame is meaningful (it becomes the step number
    of the optimization transcript). `complete` is False when parsing
    stopped early on a malformed frame header; the frames read up to
    that point are kept.
    """
    frames: List[Frame] = field(default_factory=list)
    complete: bool = True

    def __len__(self):
        return len(self.frames)

    def __iter__(self):
        return iter(self.frames)

    def __getitem__(self, index):
        return self.frames[index]

    def __bool__(self):
        return bool(self.frames)

    @property
    def natom(self) -> int:
        """Number of atoms of the first frame, 0 for an empty trajectory."""
        return self.frames[0].natom if self.frames else 0

    @property
    def atomcoords(self) -> np.ndarray:
        """Coordinates of all frames as a (nframes, natom, 3) array.

        Raises:
          ValueError when the frames do not share the same number of atoms
        """
        if not self.frames:
            return np.zeros((0, 0, 3))
        counts = {frame.natom for frame in self.frames}
        if len(counts) > 1:
            raise ValueError(f"frames have differing atom counts: {sorted(counts)}")
        return np.stack([frame.atomcoords for frame in self.frames])


@dataclass
class ClipboardData:
    """Atoms decoded from a Gaussian clipboard record.

    `status` tells whether the header was unreadable or the records ran
    out before the announced atom count; `skipped` counts records that
    were dropped because they could not be decoded.
    """
    atoms: List[Atom] = field(default_factory=list)
    status: ClipboardStatus = ClipboardStatus.OK
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.status is ClipboardStatus.OK
