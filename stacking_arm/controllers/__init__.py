"""Controllers that drive IK chains over time."""

from stacking_arm.controllers.target_driver import TargetDriver

__all__ = ["TargetDriver"]
