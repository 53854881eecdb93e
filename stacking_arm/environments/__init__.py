"""Runnable environments wrapping the driver, grid and animation loop."""

from stacking_arm.environments.stacking_env import StackingEnvironment

__all__ = ["StackingEnvironment"]
