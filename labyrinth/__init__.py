"""Labyrinth - random-walk maze generation and backtracking path search.

The package carves a maze with a self-avoiding random walk and then finds a
walkable route through it with a randomized search that backtracks over
crossroads, rendering both as character grids.
"""

__version__ = "1.0.0"
__author__ = "Labyrinth Demo"
