# -*- coding: utf-8 -*-
"""
Exceptions raised at the boundary of the solver.

Propagation and search never raise these themselves: a contradiction inside
the recursion is an ordinary ``False`` / ``None`` return. Only the public
entry points (:func:`sudoku_solver.solve`, :func:`parse_grid`,
:func:`display`) turn those outcomes into exceptions.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every outcome that prevents a puzzle from being solved."""

    default_message = "The puzzle could not be solved."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidGrid(PuzzleError):
    """The grid text does not hold exactly 81 recognizable characters."""

    default_message = (
        "Invalid Grid. Provide a string of 81 digits with 0 or . for empties."
    )


class Contradiction(PuzzleError):
    """Propagation or every search branch proved there is no completion."""

    default_message = "A contradiction occurred. The puzzle is unsolvable."


class Unsolved(PuzzleError):
    """Search returned a board that fails the unit-permutation check."""

    default_message = "The puzzle is unsolvable."


class SearchLimitReached(PuzzleError):
    """The caller's node or time budget ran out before search finished."""

    default_message = "Search budget exhausted before a solution was found."
