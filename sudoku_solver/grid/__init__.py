# -*- coding: utf-8 -*-
"""
sudoku_solver.grid package

Everything about the board itself, independent of any particular solve:
- topology.py : squares, units and peers, built once and shared read-only
- parser.py   : grid text to per-square givens and the seeded candidate Board
"""
