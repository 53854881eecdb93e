"""Target driver that moves a chain's effector between random grid cells."""

import numpy as np
from typing import Callable, List, Optional, Sequence, Tuple

from stacking_arm.core.base_controller import BaseController
from stacking_arm.core.base_grid import BaseGrid
from stacking_arm.ik.fabrik import IKChain
from stacking_arm.utils.easing import arc_offset, ease_in_out, lerp
from stacking_arm.utils.vector import UP_AXIS, as_vec3


PlacementListener = Callable[[int, int], None]


class TargetDriver(BaseController):
    """
    Drives an IK chain hanging from a fixed anchor to random grid cells.
    
    Every update() advances ``progress`` by a fixed step. The IK target moves
    from the previous target to the current one along a cosine-eased line
    lifted by a parabolic arc. Once progress reaches 1 the placement is
    committed to the grid and a new cell is sampled.
    
    Travel always restarts from the previously commanded target, not the
    chain's actual effector position.
    """

    JOINT_COUNT = 4
    ARM_LENGTH = 2.0
    PROGRESS_STEP = 0.03
    REACH_STEPS = 4
    ARC_HEIGHT = 0.5

    def __init__(
        self,
        grid: BaseGrid,
        joint_count: int = JOINT_COUNT,
        arm_length: float = ARM_LENGTH,
        base: Sequence[float] = (0.0, 0.0, 0.0),
        progress_step: float = PROGRESS_STEP,
        reach_steps: int = REACH_STEPS,
        arc_height: float = ARC_HEIGHT,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize driver and pick the first target.
        
        Args:
            grid: Grid providing target positions and receiving placements
            joint_count: Number of joints in the chain
            arm_length: Total length of the arm
            base: Anchor position of the chain
            progress_step: Progress added per update()
            reach_steps: IK passes per update()
            arc_height: Peak lift of the travel arc
            rng: Random generator for cell sampling (takes precedence over seed)
            seed: Seed for a new generator if rng is not given
        """
        if progress_step <= 0:
            raise ValueError(f"progress_step must be positive, got {progress_step}")
        if reach_steps < 0:
            raise ValueError(f"reach_steps must be non-negative, got {reach_steps}")

        self.grid = grid
        self.progress_step = progress_step
        self.reach_steps = reach_steps
        self.arc_height = arc_height
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        down = np.zeros(3)
        down[UP_AXIS] = -1.0
        self.chain = IKChain.straight(base, down, joint_count, arm_length)

        self.target_position = self.chain.effector
        self.previous_target_position = self.target_position.copy()
        self.target_cell: Tuple[int, int] = (0, 0)
        self.progress = 0.0
        self.placements = 0
        self._listeners: List[PlacementListener] = []

        self.pick_new_target()

    def add_placement_listener(self, listener: PlacementListener):
        """Register ``listener(u, v)`` to run after each committed placement."""
        self._listeners.append(listener)

    def remove_placement_listener(self, listener: PlacementListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def pick_new_target(self):
        self.previous_target_position = self.target_position

        size = self.grid.grid_size
        u = int(self.rng.integers(0, size))
        v = int(self.rng.integers(0, size))
        self.target_cell = (u, v)
        self.target_position = as_vec3(self.grid.position_at(u, v))

        self.progress = 0.0

    def _commit(self):
        u, v = self.target_cell
        self.grid.commit_placement(u, v)
        self.placements += 1
        # Travel is reset before listeners run
        self.pick_new_target()
        for listener in list(self._listeners):
            listener(u, v)

    def current_ik_target(self) -> np.ndarray:
        """IK target for the current progress: eased position plus arc lift."""
        t = ease_in_out(self.progress)
        target = lerp(self.previous_target_position, self.target_position, t)
        target[UP_AXIS] += arc_offset(t, self.arc_height)
        return target

    def update(self, progress_step: Optional[float] = None):
        """
        Advance one tick and move the chain towards the new IK target.
        
        Args:
            progress_step: Progress increment for this tick, defaults to the
                configured progress_step
        """
        if progress_step is None:
            progress_step = self.progress_step
        elif progress_step <= 0:
            raise ValueError(f"progress_step must be positive, got {progress_step}")
        self.progress += progress_step

        if self.progress >= 1.0:
            self._commit()

        self.chain.reach_n(self.current_ik_target(), self.reach_steps)

    def get_joint_positions(self) -> np.ndarray:
        return self.chain.get_joint_positions()
