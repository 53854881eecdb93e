"""Example running the stacking arm without a viewer and reporting grid state."""

import argparse
import numpy as np

from stacking_arm import StackingEnvironment, TargetDriver

_DEFAULT_FRAMES = 1000
_DEFAULT_ROWS = 10


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run the stacking arm headless for a number of frames",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=_DEFAULT_FRAMES,
        help="Number of frames to simulate"
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=_DEFAULT_ROWS,
        help="Number of grid cells along each axis"
    )
    parser.add_argument(
        "--joints",
        type=int,
        default=TargetDriver.JOINT_COUNT,
        help="Number of joints in the arm"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for target sampling"
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Hold the frame rate instead of running as fast as possible"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print individual placements"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    env = StackingEnvironment(
        seed=args.seed,
        row_count=args.rows,
        joint_count=args.joints,
        realtime=args.realtime,
        verbose=not args.quiet
    )

    print(f"Running {args.frames} frames...")
    env.run(args.frames)

    driver = env.get_driver()
    grid = env.get_grid()
    errors = driver.chain.segment_errors()
    print(f"\nPlacements: {driver.placements}")
    print(f"Max stack height: {grid.get_grid_info()['max_stack_height']}")
    print(f"Max segment length error: {np.max(errors):.2e}")
    print(f"Stack heights:\n{grid.get_counts()}")


if __name__ == "__main__":
    main()
