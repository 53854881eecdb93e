"""Placement grids the arm stacks boxes onto."""

from stacking_arm.grid.box_grid import BoxGrid, Box

__all__ = ["BoxGrid", "Box"]
