"""
Stacking Arm - FABRIK chain IK driven between random box grid cells.
"""

from stacking_arm.errors import (
    StackingArmError,
    InvalidChainShape,
    DegenerateChain,
    DegenerateDirection,
    GridIndexError,
)
from stacking_arm.ik.fabrik import IKChain
from stacking_arm.grid.box_grid import BoxGrid, Box
from stacking_arm.controllers.target_driver import TargetDriver
from stacking_arm.environments.stacking_env import StackingEnvironment

__version__ = "0.1.0"

__all__ = [
    "IKChain",
    "BoxGrid",
    "Box",
    "TargetDriver",
    "StackingEnvironment",
    "StackingArmError",
    "InvalidChainShape",
    "DegenerateChain",
    "DegenerateDirection",
    "GridIndexError",
]
