"""Box stacking environment: grid, driver, frame loop and optional viewer."""

import mujoco
try:
    import mujoco.viewer
except ImportError:
    pass
import numpy as np
from typing import Optional, Sequence

from stacking_arm.controllers.target_driver import TargetDriver
from stacking_arm.grid.box_grid import BoxGrid
from stacking_arm.utils.rate_limiter import RateLimiter


# Ground plane and light only; the arm and boxes are drawn as decor geoms
_SCENE_XML = """
<mujoco model="stacking_arm">
  <visual>
    <headlight diffuse="0.6 0.6 0.6" ambient="0.3 0.3 0.3"/>
  </visual>
  <asset>
    <texture name="grid" type="2d" builtin="checker" width="512" height="512"
             rgb1="0.55 0.55 0.55" rgb2="0.6 0.6 0.6"/>
    <material name="grid" texture="grid" texrepeat="8 8" reflectance="0.1"/>
  </asset>
  <worldbody>
    <light pos="0 0 4" dir="0 0 -1" diffuse="0.7 0.88 1.0"/>
    <geom name="floor" type="plane" size="3 3 0.05" pos="0 0 {floor}" material="grid"/>
  </worldbody>
</mujoco>
"""

_ARM_RGBA = np.array([0.05, 0.05, 0.05, 1.0], dtype=np.float32)
_JOINT_RGBA = np.array([0.8, 0.3, 0.1, 1.0], dtype=np.float32)
_TARGET_RGBA = np.array([0.1, 0.6, 0.2, 0.6], dtype=np.float32)


def to_mujoco_frame(point: np.ndarray) -> np.ndarray:
    """Map a Y-up scene point to MuJoCo's Z-up frame."""
    x, y, z = point
    return np.array([x, -z, y], dtype=np.float64)


class StackingEnvironment:
    """Environment that keeps an arm stacking boxes on a grid."""

    def __init__(
        self,
        rate: float = 60.0,
        seed: Optional[int] = None,
        row_count: int = BoxGrid.ROW_COUNT,
        box_size: float = BoxGrid.BOX_SIZE,
        origin: Sequence[float] = BoxGrid.ORIGIN,
        seed_boxes: bool = False,
        realtime: bool = True,
        verbose: bool = False,
        **driver_kwargs
    ):
        """
        Initialize environment.
        
        Args:
            rate: Frame rate of the animation loop in Hz
            seed: Seed for cell sampling and box shades
            row_count, box_size, origin: Grid layout, see BoxGrid
            seed_boxes: Populate the grid with BoxGrid.DEMO_LAYOUT on reset
            realtime: Sleep in step() to hold the frame rate
            verbose: Print each placement
            **driver_kwargs: Forwarded to TargetDriver
        """
        self.seed = seed
        self.grid_kwargs = dict(row_count=row_count, box_size=box_size, origin=origin)
        self.driver_kwargs = driver_kwargs
        self.seed_boxes = seed_boxes
        self.realtime = realtime
        self.verbose = verbose

        self.rate = RateLimiter(frequency=rate, warn=False)
        self.viewer = None
        self.model = None
        self.data = None

        self.reset()

    def get_grid(self) -> BoxGrid:
        return self.grid

    def get_driver(self) -> TargetDriver:
        return self.driver

    def reset(self):
        rng = np.random.default_rng(self.seed)
        self.grid = BoxGrid(rng=rng, **self.grid_kwargs)
        if self.seed_boxes:
            self.grid.seed_boxes()
        self.driver = TargetDriver(self.grid, rng=rng, **self.driver_kwargs)
        self.driver.add_placement_listener(self._on_placement)
        self.sim_time = 0.0
        self.frame = 0

    def _on_placement(self, u: int, v: int):
        if self.verbose:
            box = self.grid.boxes[-1]
            print(f"Placed box #{self.grid.total_boxes} at cell ({u}, {v}), level {box.level}")

    def step(self) -> float:
        self.driver.update()
        dt = self.rate.dt
        self.sim_time += dt
        self.frame += 1
        if self.viewer is not None:
            self._draw()
            self.viewer.sync()
        if self.realtime:
            self.rate.sleep()
        return dt

    def run(self, steps: int):
        for _ in range(steps):
            self.step()

    def _build_model(self):
        floor = to_mujoco_frame(self.grid.origin)[2] - 0.5 * self.grid.box_size
        self.model = mujoco.MjModel.from_xml_string(_SCENE_XML.format(floor=floor))
        self.data = mujoco.MjData(self.model)
        mujoco.mj_forward(self.model, self.data)

    def launch_viewer(self):
        if self.model is None:
            self._build_model()
        self.viewer = mujoco.viewer.launch_passive(
            model=self.model,
            data=self.data,
            show_left_ui=False,
            show_right_ui=False
        )
        mujoco.mjv_defaultFreeCamera(self.model, self.viewer.cam)
        if self.verbose:
            print("Viewer launched, close the window to stop.")
        return self.viewer

    def close_viewer(self):
        if self.viewer is not None:
            self.viewer.close()
            self.viewer = None
            if self.verbose:
                print("Viewer closed.")

    def _add_geom(self, scn, geom_type, size, pos, rgba) -> bool:
        if scn.ngeom >= scn.maxgeom:
            return False
        mujoco.mjv_initGeom(
            scn.geoms[scn.ngeom],
            type=geom_type,
            size=np.asarray(size, dtype=np.float64),
            pos=pos,
            mat=np.eye(3).flatten(),
            rgba=rgba
        )
        scn.ngeom += 1
        return True

    def _draw(self):
        scn = self.viewer.user_scn
        joints = [to_mujoco_frame(p) for p in self.driver.get_joint_positions()]
        half = 0.5 * self.grid.box_size

        with self.viewer.lock():
            scn.ngeom = 0

            for start, end in zip(joints[:-1], joints[1:]):
                if scn.ngeom >= scn.maxgeom:
                    break
                mujoco.mjv_connector(
                    scn.geoms[scn.ngeom],
                    mujoco.mjtGeom.mjGEOM_CAPSULE,
                    0.02,
                    start,
                    end
                )
                scn.geoms[scn.ngeom].rgba[:] = _ARM_RGBA
                scn.ngeom += 1

            for joint in joints:
                self._add_geom(scn, mujoco.mjtGeom.mjGEOM_SPHERE, [0.035, 0, 0], joint, _JOINT_RGBA)

            target = to_mujoco_frame(self.driver.target_position)
            self._add_geom(scn, mujoco.mjtGeom.mjGEOM_BOX, [half, half, 0.002], target, _TARGET_RGBA)

            for box in self.grid.boxes:
                shade = np.array([box.shade, box.shade, box.shade, 1.0], dtype=np.float32)
                if not self._add_geom(scn, mujoco.mjtGeom.mjGEOM_BOX, [half] * 3,
                                      to_mujoco_frame(box.position), shade):
                    break
