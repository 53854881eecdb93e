"""
Base class for placement grids.

A grid maps discrete (u, v) cells to 3D positions and records placements.
Controllers only talk to it through this interface.
"""

from abc import ABC, abstractmethod
import numpy as np


class BaseGrid(ABC):
    """Abstract base class for placement grids."""

    @property
    @abstractmethod
    def grid_size(self) -> int:
        """Number of cells along each axis; valid indices are [0, grid_size)."""
        pass

    @abstractmethod
    def position_at(self, u: int, v: int) -> np.ndarray:
        """
        Get the position where the next placement on a cell would go.
        
        Args:
            u: Cell index along the first grid axis
            v: Cell index along the second grid axis
        
        Returns:
            3D position of the next free slot on the cell
        """
        pass

    @abstractmethod
    def commit_placement(self, u: int, v: int):
        """
        Record a completed placement on a cell.
        
        Args:
            u: Cell index along the first grid axis
            v: Cell index along the second grid axis
        """
        pass
