# -*- coding: utf-8 -*-
"""
sudoku_solver.csp package

Constraint propagation and search over candidate sets.
- domains.py     : candidate-set bitmasks and the Board that holds them
- propagation.py : assign / eliminate (naked and hidden single rules)
- search.py      : depth-first search with the minimum-remaining-values rule
- generator.py   : random puzzles built from the same assign primitive
"""
