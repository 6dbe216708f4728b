# -*- coding: utf-8 -*-
"""
Candidate sets (domains) of the 81 squares.

A candidate set is a 9-bit mask: bit ``d - 1`` is set while digit ``d`` is
still possible. A Board is a flat list of 81 such masks indexed by CellId, so
cloning a Board for a search branch is a single list copy and removing a
candidate is one bitwise operation.

Lookup tables for all 512 masks are built once at import time.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..config import BLANK_OUTPUT, DIGITS
from ..types import CellId

N_DIGITS = len(DIGITS)

# Every digit still possible.
FULL_MASK: int = (1 << N_DIGITS) - 1

# BIT[d] is the mask of the single digit d (index 0 unused).
BIT: Tuple[int, ...] = (0,) + tuple(1 << (d - 1) for d in range(1, N_DIGITS + 1))

# Digits of every mask, ascending.
MASK_DIGITS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(d for d in range(1, N_DIGITS + 1) if m & BIT[d])
    for m in range(FULL_MASK + 1)
)

# Number of candidates in every mask.
POPCOUNT: Tuple[int, ...] = tuple(len(ds) for ds in MASK_DIGITS)

# Candidate string of every mask, e.g. 0b1001 -> "14".
MASK_TEXT: Tuple[str, ...] = tuple(
    "".join(DIGITS[d - 1] for d in ds) for ds in MASK_DIGITS
)


def mask_of(digits: Iterable[int]) -> int:
    """Build a candidate mask from digits 1..9."""
    m = 0
    for d in digits:
        m |= BIT[d]
    return m


def digit_value(ch: str) -> int:
    """Digit character to its integer value; ValueError for anything else."""
    i = DIGITS.find(ch)
    if i < 0:
        raise ValueError(f"not a digit: {ch!r}")
    return i + 1


class Board:
    """
    Candidate sets of all 81 squares.

    Each search branch owns its own Board (see :meth:`copy`); a Board is
    never shared mutably between branches.
    """

    __slots__ = ("masks",)

    def __init__(self, masks: Optional[List[int]] = None) -> None:
        self.masks: List[int] = list(masks) if masks is not None else [FULL_MASK] * 81

    @classmethod
    def full(cls) -> "Board":
        """A Board where every square may still hold any digit."""
        return cls()

    def copy(self) -> "Board":
        return Board(self.masks)

    def digits(self, cell: CellId) -> Tuple[int, ...]:
        """Candidates of ``cell`` in ascending order."""
        return MASK_DIGITS[self.masks[cell]]

    def candidates(self, cell: CellId) -> str:
        """Candidates of ``cell`` as an ordered digit string, e.g. ``"1479"``."""
        return MASK_TEXT[self.masks[cell]]

    def count(self, cell: CellId) -> int:
        return POPCOUNT[self.masks[cell]]

    def has(self, cell: CellId, digit: int) -> bool:
        return bool(self.masks[cell] & BIT[digit])

    def is_complete(self) -> bool:
        """True when every square has exactly one candidate."""
        return all(POPCOUNT[m] == 1 for m in self.masks)

    def singles(self) -> List[int]:
        """Masks of every square that is down to one candidate."""
        return [m for m in self.masks if POPCOUNT[m] == 1]

    def to_grid(self, blank: str = BLANK_OUTPUT) -> str:
        """
        81-character grid string in square order.

        Squares with one candidate show that digit; all others show ``blank``.
        """
        return "".join(
            MASK_TEXT[m] if POPCOUNT[m] == 1 else blank
            for m in self.masks
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.masks == other.masks

    def __repr__(self) -> str:
        return f"Board({self.to_grid()!r})"
