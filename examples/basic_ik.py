"""Example reaching a fixed target with a 10-joint FABRIK chain."""

import numpy as np

from stacking_arm import IKChain


def main():
    joint_count = 10
    arm_length = 2.0
    target = np.array([1.0, 1.0, 1.0])

    # Chain pointing straight up from the origin
    chain = IKChain.straight([0, 0, 0], [0, 1, 0], joint_count, arm_length)
    print(f"Initial joints:\n{chain.get_joint_positions()}")
    print(f"Segment lengths: {chain.lengths}")

    chain.reach(target)
    print(f"\nAfter one pass, effector at {chain.effector}")

    passes = chain.reach_n(target, 50, tolerance=1e-4)
    error = np.linalg.norm(chain.effector - target)
    print(f"After {passes} more passes, effector at {chain.effector} (error {error:.2e})")
    print(f"Max segment length error: {chain.segment_errors().max():.2e}")

    # Out of reach: the chain stretches towards the target
    far_target = np.array([4.0, 0.0, 3.0])
    chain.reach_n(far_target, 50)
    print(f"\nFar target {far_target}, effector at {chain.effector}")


if __name__ == "__main__":
    main()
