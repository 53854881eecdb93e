"""Inverse kinematics solvers."""

from stacking_arm.ik.fabrik import IKChain

__all__ = ["IKChain"]
