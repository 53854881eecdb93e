import numpy as np
import pytest

from stacking_arm.environments.stacking_env import StackingEnvironment, to_mujoco_frame


@pytest.fixture
def env():
    return StackingEnvironment(seed=0, realtime=False)


def test_step_advances_time(env):
    dt = env.step()
    assert dt == pytest.approx(1.0 / 60.0)
    assert env.sim_time == pytest.approx(dt)
    assert env.frame == 1


def test_run_places_one_box_per_travel(env):
    env.run(34)
    assert env.get_driver().placements == 1
    assert env.get_grid().total_boxes == 1


def test_reset_restores_initial_state(env):
    env.run(100)
    first_cells = [(box.u, box.v) for box in env.get_grid().boxes]
    env.reset()
    assert env.get_grid().total_boxes == 0
    assert env.sim_time == 0.0

    env.run(100)
    assert [(box.u, box.v) for box in env.get_grid().boxes] == first_cells


def test_seed_boxes_populates_grid():
    env = StackingEnvironment(seed=0, realtime=False, seed_boxes=True)
    assert env.get_grid().total_boxes == 8


def test_verbose_prints_placements(capsys):
    env = StackingEnvironment(seed=0, realtime=False, verbose=True)
    env.run(34)
    assert "Placed box #1 at cell" in capsys.readouterr().out


def test_driver_kwargs_forwarded():
    env = StackingEnvironment(seed=0, realtime=False, joint_count=6, progress_step=0.5)
    env.run(2)
    assert env.get_driver().chain.joint_count == 6
    assert env.get_driver().placements == 1


def test_to_mujoco_frame_maps_y_up_to_z_up():
    assert np.allclose(to_mujoco_frame(np.array([1.0, 2.0, 3.0])), [1.0, -3.0, 2.0])


def test_scene_model_builds_headless(env):
    env._build_model()
    assert env.model.ngeom == 1
    assert env.viewer is None


def test_installed_mujoco_has_connector_api():
    import mujoco
    assert hasattr(mujoco, "mjv_connector")
