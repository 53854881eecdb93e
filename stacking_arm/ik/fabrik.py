"""FABRIK-style positional IK for a single open chain."""

import numpy as np
from typing import Optional, Sequence

from stacking_arm.core.base_ik import BaseIK
from stacking_arm.errors import DegenerateChain, DegenerateDirection, InvalidChainShape
from stacking_arm.utils.vector import as_vec3, distance, normalize


class IKChain(BaseIK):
    """
    Chain of joints connected by fixed-length segments.
    
    ``joints[0]`` is the anchor and never moves; ``joints[-1]`` is the effector
    that chases the target. Each call to :meth:`reach` runs one backward
    (effector to anchor) and one forward (anchor to effector) relaxation pass,
    so segment lengths and the effector position only converge over repeated
    calls.
    
    Attributes:
        joints: (N, 3) array of joint positions, mutated in place by reach()
        lengths: (N-1,) array of segment lengths
    """

    # Used when two adjacent joints coincide and no segment direction has
    # been established yet in the current pass
    FALLBACK_AXIS = np.array([0.0, 1.0, 0.0])

    def __init__(self, joints: Sequence, lengths: Sequence[float]):
        """
        Initialize chain from an initial pose.
        
        Args:
            joints: Sequence of N 3D joint positions (copied)
            lengths: Sequence of N-1 segment lengths; lengths[i] separates
                joints[i] and joints[i+1]
        
        Raises:
            DegenerateChain: if fewer than two joints are given
            InvalidChainShape: if len(joints) != len(lengths) + 1
            ValueError: if a length is not positive or a joint is not 3D
        """
        joints = np.array(joints, dtype=np.float64)
        lengths = np.array(lengths, dtype=np.float64).reshape(-1)

        if len(joints) < 2:
            raise DegenerateChain(f"A chain needs at least 2 joints, got {len(joints)}")
        if len(joints) != len(lengths) + 1:
            raise InvalidChainShape(
                f"'joints' must be 1 more than 'lengths' in length "
                f"(got {len(joints)} joints and {len(lengths)} lengths)"
            )
        if joints.ndim != 2 or joints.shape[1] != 3:
            raise ValueError(f"Joints must have shape (N, 3), got {joints.shape}")
        if np.any(lengths <= 0.0):
            raise ValueError(f"Segment lengths must be positive, got {lengths}")

        self.joints = joints
        self.lengths = lengths

    @classmethod
    def straight(
        cls,
        base: Sequence[float],
        direction: Sequence[float],
        joint_count: int,
        arm_length: float
    ) -> "IKChain":
        """
        Build a colinear chain with evenly spaced joints.
        
        Joints are placed every ``arm_length / joint_count`` along
        ``direction`` starting at ``base``, giving ``joint_count - 1``
        segments of that length.
        """
        if joint_count < 2:
            raise DegenerateChain(f"A chain needs at least 2 joints, got {joint_count}")
        if arm_length <= 0.0:
            raise ValueError(f"arm_length must be positive, got {arm_length}")

        spacing = arm_length / joint_count
        unit = normalize(as_vec3(direction))
        origin = as_vec3(base)
        joints = [origin + unit * (i * spacing) for i in range(joint_count)]
        return cls(joints, [spacing] * (joint_count - 1))

    @property
    def joint_count(self) -> int:
        return len(self.joints)

    @property
    def base(self) -> np.ndarray:
        return self.joints[0].copy()

    @property
    def effector(self) -> np.ndarray:
        return self.joints[-1].copy()

    @property
    def total_length(self) -> float:
        return float(np.sum(self.lengths))

    @staticmethod
    def _direction(offset: np.ndarray, fallback: np.ndarray) -> np.ndarray:
        try:
            return normalize(offset)
        except DegenerateDirection:
            return fallback

    def reach(self, target: np.ndarray):
        """
        Run one backward and one forward relaxation pass towards ``target``.
        
        The anchor is restored bit-for-bit after the backward pass. Targets
        further away than ``total_length`` make the chain stretch towards
        them in a straight line from the anchor.
        """
        target = as_vec3(target)
        base = self.joints[0].copy()
        last = len(self.joints) - 1

        # Backward: pin effector to target, pull each joint towards its child
        self.joints[last] = target
        fallback = self.FALLBACK_AXIS
        for i in range(last - 1, -1, -1):
            direction = self._direction(self.joints[i] - self.joints[i + 1], fallback)
            self.joints[i] = self.joints[i + 1] + direction * self.lengths[i]
            fallback = direction

        # Forward: re-anchor, pull each joint towards its parent
        self.joints[0] = base
        fallback = self.FALLBACK_AXIS
        for i in range(1, last + 1):
            direction = self._direction(self.joints[i] - self.joints[i - 1], fallback)
            self.joints[i] = self.joints[i - 1] + direction * self.lengths[i - 1]
            fallback = direction

    def reach_n(self, target: np.ndarray, steps: int, tolerance: Optional[float] = None) -> int:
        """
        Call :meth:`reach` ``steps`` times.
        
        Args:
            target: Target effector position
            steps: Number of relaxation passes
            tolerance: If given, stop as soon as the effector is within this
                distance of the target after a pass
        
        Returns:
            Number of passes performed.
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        target = as_vec3(target)
        for step in range(1, steps + 1):
            self.reach(target)
            if tolerance is not None and distance(self.joints[-1], target) <= tolerance:
                return step
        return steps

    def segment_errors(self) -> np.ndarray:
        """Absolute deviation of each segment from its fixed length."""
        actual = np.linalg.norm(np.diff(self.joints, axis=0), axis=1)
        return np.abs(actual - self.lengths)

    def get_joint_positions(self) -> np.ndarray:
        return self.joints.copy()
