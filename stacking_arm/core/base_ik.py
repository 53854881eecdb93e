"""Base inverse kinematics class."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np


class BaseIK(ABC):
    """Abstract base class for positional inverse kinematics solvers."""

    @abstractmethod
    def reach(self, target: np.ndarray):
        """Run a single solver iteration towards the target position."""
        pass

    @abstractmethod
    def reach_n(self, target: np.ndarray, steps: int, tolerance: Optional[float] = None) -> int:
        """
        Run several solver iterations towards the target position.
        
        Returns:
            Number of iterations actually performed.
        """
        pass

    @abstractmethod
    def get_joint_positions(self) -> np.ndarray:
        """Return a copy of the current joint positions."""
        pass
