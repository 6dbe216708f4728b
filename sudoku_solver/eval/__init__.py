# -*- coding: utf-8 -*-
"""
sudoku_solver.eval package

- verification.py : the authoritative "is this board a valid solution" check
- benchmark.py    : timing a batch of solves and summarising the results
"""
