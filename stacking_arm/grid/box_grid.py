"""
Square grid of box stacks.

This module provides the BoxGrid class that tracks how many boxes are stacked
on each (u, v) cell and maps cells to the 3D position of their next free slot.
"""

import numpy as np
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from stacking_arm.core.base_grid import BaseGrid
from stacking_arm.errors import GridIndexError
from stacking_arm.utils.vector import as_vec3


class Box(NamedTuple):
    """A placed box. ``level`` is its 0-based height in the stack."""
    u: int
    v: int
    level: int
    position: np.ndarray
    shade: float


class BoxGrid(BaseGrid):
    """
    Grid of ``row_count`` x ``row_count`` cells holding stacks of cubes.
    
    Cell (u, v) with ``count`` boxes already on it maps to
    ``origin + box_size * (u, count, v)``: u runs along x, v along z and the
    stack grows along y (up).
    
    Attributes:
        row_count: Number of cells along each axis
        box_size: Edge length of a box
        origin: Position of cell (0, 0) at ground level
        entries: (row_count, row_count) integer array of stack heights
        boxes: Placed boxes in placement order
    """

    ROW_COUNT = 10
    BOX_SIZE = 0.1
    ORIGIN = (-0.5, -1.0, -0.5)

    # Fixed layout used to populate a fresh grid for demos
    DEMO_LAYOUT = ((4, 5), (5, 5), (5, 5), (5, 5), (5, 5), (2, 3), (8, 6), (8, 6))

    def __init__(
        self,
        row_count: int = ROW_COUNT,
        box_size: float = BOX_SIZE,
        origin: Sequence[float] = ORIGIN,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize an empty grid.
        
        Args:
            row_count: Number of cells along each axis
            box_size: Edge length of a box (also the cell pitch)
            origin: 3D position of cell (0, 0) at ground level
            rng: Random generator used for box shades
        """
        if row_count <= 0:
            raise ValueError(f"row_count must be positive, got {row_count}")
        if box_size <= 0:
            raise ValueError(f"box_size must be positive, got {box_size}")

        self.row_count = int(row_count)
        self.box_size = float(box_size)
        self.origin = as_vec3(origin)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.entries = np.zeros((self.row_count, self.row_count), dtype=int)
        self.boxes: List[Box] = []

    @property
    def grid_size(self) -> int:
        return self.row_count

    @property
    def total_boxes(self) -> int:
        return len(self.boxes)

    def _check_cell(self, u: int, v: int):
        if not (0 <= u < self.row_count and 0 <= v < self.row_count):
            raise GridIndexError(
                f"Cell ({u}, {v}) is outside the {self.row_count}x{self.row_count} grid"
            )

    def position_at(self, u: int, v: int) -> np.ndarray:
        self._check_cell(u, v)
        cell = np.array([u, self.entries[u, v], v], dtype=np.float64)
        return self.origin + cell * self.box_size

    def insert_box(self, u: int, v: int) -> Box:
        """
        Stack a new box on a cell.
        
        The box takes the slot returned by position_at() before the stack
        height is incremented.
        
        Returns:
            The placed Box
        """
        position = self.position_at(u, v)
        box = Box(
            u=int(u),
            v=int(v),
            level=int(self.entries[u, v]),
            position=position,
            shade=float(self.rng.random())
        )
        self.boxes.append(box)
        self.entries[u, v] += 1
        return box

    def commit_placement(self, u: int, v: int):
        self.insert_box(u, v)

    def seed_boxes(self, cells: Iterable[Tuple[int, int]] = DEMO_LAYOUT) -> List[Box]:
        """Insert one box per (u, v) pair, in order."""
        return [self.insert_box(u, v) for u, v in cells]

    def get_count(self, u: int, v: int) -> int:
        self._check_cell(u, v)
        return int(self.entries[u, v])

    def get_counts(self) -> np.ndarray:
        return self.entries.copy()

    def clear(self):
        self.entries[:] = 0
        self.boxes = []

    def get_grid_info(self) -> Dict:
        """
        Get information about the grid configuration and fill state.
        
        Returns:
            Dictionary containing grid dimensions, box size, origin and stack stats
        """
        return {
            'grid_dimensions': (self.row_count, self.row_count),
            'total_cells': self.row_count * self.row_count,
            'box_size': self.box_size,
            'origin': self.origin.copy(),
            'total_boxes': self.total_boxes,
            'max_stack_height': int(self.entries.max())
        }
