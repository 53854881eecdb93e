"""Core base classes for the stacking_arm package."""

from stacking_arm.core.base_ik import BaseIK
from stacking_arm.core.base_controller import BaseController
from stacking_arm.core.base_grid import BaseGrid

__all__ = [
    "BaseIK",
    "BaseController",
    "BaseGrid",
]
