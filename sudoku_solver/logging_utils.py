# -*- coding: utf-8 -*-
"""
Logging setup for the solver.

Every module in the package logs through the same named logger so that an
application can silence or redirect the solver with one call to
``logging.getLogger("sudoku_solver")``.
"""

from __future__ import annotations

import logging

# Logger name shared by the whole sudoku_solver package
LOGGER_NAME = "sudoku_solver"


def get_logger() -> logging.Logger:
    """
    Return the logger shared by the whole sudoku_solver package.

    If no handler has been attached yet, a console handler at INFO level is
    installed so that benchmark summaries are visible out of the box.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Minimal console setup when nothing is configured yet
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
