# -*- coding: utf-8 -*-
"""
sudoku_solver.corpus package

Loading collections of puzzles from disk.
"""
