"""Base controller class."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np


class BaseController(ABC):
    """Abstract base class for frame-driven chain controllers."""

    @abstractmethod
    def update(self, progress_step: Optional[float] = None):
        """Advance the controller by one tick."""
        pass

    @abstractmethod
    def pick_new_target(self):
        """Select the next target and restart travel towards it."""
        pass

    @abstractmethod
    def get_joint_positions(self) -> np.ndarray:
        """Get the pose produced by the most recent tick."""
        pass
