"""Example running the stacking arm in the MuJoCo viewer."""

from stacking_arm import StackingEnvironment


def main():
    print("Initializing environment...")
    env = StackingEnvironment(rate=60.0, seed_boxes=True, verbose=True)
    print(f"Grid: {env.get_grid().get_grid_info()}")

    print("Launching viewer...")
    with env.launch_viewer() as viewer:
        while viewer.is_running():
            env.step()

    print(f"Stacked {env.get_driver().placements} boxes in {env.sim_time:.1f}s")


if __name__ == "__main__":
    main()
