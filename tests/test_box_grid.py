import numpy as np
import pytest

from stacking_arm.errors import GridIndexError
from stacking_arm.grid.box_grid import BoxGrid


@pytest.fixture
def grid():
    return BoxGrid(rng=np.random.default_rng(0))


def test_defaults(grid):
    assert grid.grid_size == 10
    assert grid.box_size == pytest.approx(0.1)
    assert np.allclose(grid.origin, [-0.5, -1.0, -0.5])
    assert grid.total_boxes == 0


def test_position_of_empty_cells(grid):
    assert np.allclose(grid.position_at(0, 0), [-0.5, -1.0, -0.5])
    assert np.allclose(grid.position_at(2, 3), [-0.3, -1.0, -0.2])


def test_insert_box_uses_slot_before_increment(grid):
    slot = grid.position_at(4, 5)
    box = grid.insert_box(4, 5)

    assert (box.u, box.v, box.level) == (4, 5, 0)
    assert np.allclose(box.position, slot)
    assert 0.0 <= box.shade < 1.0
    assert grid.get_count(4, 5) == 1
    assert np.allclose(grid.position_at(4, 5), slot + [0.0, 0.1, 0.0])


def test_commit_placement_stacks_boxes(grid):
    grid.commit_placement(1, 1)
    grid.commit_placement(1, 1)
    assert grid.get_count(1, 1) == 2
    assert [box.level for box in grid.boxes] == [0, 1]


def test_seed_boxes_demo_layout(grid):
    boxes = grid.seed_boxes()
    assert len(boxes) == 8
    assert grid.get_count(5, 5) == 4
    assert grid.get_count(8, 6) == 2
    assert grid.get_count(2, 3) == 1
    info = grid.get_grid_info()
    assert info['total_boxes'] == 8
    assert info['max_stack_height'] == 4
    assert info['grid_dimensions'] == (10, 10)


def test_out_of_range_cells_raise(grid):
    with pytest.raises(GridIndexError):
        grid.position_at(10, 0)
    with pytest.raises(IndexError):
        grid.insert_box(0, -1)


def test_counts_are_a_copy(grid):
    grid.insert_box(0, 0)
    counts = grid.get_counts()
    counts[0, 0] = 42
    assert grid.get_count(0, 0) == 1


def test_clear(grid):
    grid.seed_boxes([(0, 0), (0, 0)])
    grid.clear()
    assert grid.total_boxes == 0
    assert grid.get_count(0, 0) == 0


def test_invalid_layout_rejected():
    with pytest.raises(ValueError):
        BoxGrid(row_count=0)
    with pytest.raises(ValueError):
        BoxGrid(box_size=-0.1)


def test_demo_layout_is_immutable():
    assert isinstance(BoxGrid.DEMO_LAYOUT, tuple)
    assert all(isinstance(cell, tuple) for cell in BoxGrid.DEMO_LAYOUT)
