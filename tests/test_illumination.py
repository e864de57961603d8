from itertools import combinations

import numpy as np
import pytest

from maze_light.algorithms.greedy import plan_lights
from maze_light.algorithms.prim import carve_maze
from maze_light.boundary import mark_boundary
from maze_light.grid import CellState, MazeGrid, MazePreconditionError
from maze_light.light import IlluminationParams, coverage_footprint, footprints_overlap
from maze_test_utils import carve_corridor, carved_cells


def _marked(height, width, seed):
    g = MazeGrid.new(height, width)
    carve_maze(g, np.random.default_rng(seed))
    mark_boundary(g)
    return g


def _corridor(length=11):
    g = MazeGrid.new(3, length + 2)
    g.clear()
    carve_corridor(g, 1, 1, length)
    return g


def test_corridor_placement_is_exact():
    g = _corridor()
    result = plan_lights(g)
    # 第 4 步放在 (4,1)；(8,1) 与前一个重叠被放弃；(9,1) 放置
    assert result.lights == [(4, 1), (9, 1)]
    assert result.rejected == 1
    assert result.visited == 11
    assert g.get((4, 1)) == CellState.LIGHT
    assert g.get((9, 1)) == CellState.LIGHT
    assert g.count(CellState.LIGHT) == 2


def test_corridor_footprints():
    g = _corridor()
    result = plan_lights(g)
    assert set(result.footprints[0]) == {(2, 1), (3, 1), (4, 1), (5, 1), (6, 1)}
    assert set(result.footprints[1]) == {(7, 1), (8, 1), (9, 1), (10, 1), (11, 1)}
    assert result.illuminated == set(result.footprints[0]) | set(result.footprints[1])


def test_footprint_skips_step2_behind_wall():
    g = MazeGrid.new(7, 7)
    g.clear()
    carve_corridor(g, 3, 1, 5)
    g.set((3, 1), CellState.PASSAGE)  # (3,2) 仍是墙
    g.set((2, 2), CellState.PASSAGE)
    fp = coverage_footprint(g, (3, 3))
    assert set(fp) == {(3, 3), (2, 3), (4, 3), (1, 3), (5, 3), (2, 2)}
    assert (3, 1) not in fp
    assert len(fp) == len(set(fp))


def test_footprint_keeps_step2_along_open_corridor():
    g = MazeGrid.new(5, 5)
    g.clear()
    g.set((1, 1), CellState.PASSAGE)
    g.set((1, 2), CellState.PASSAGE)
    g.set((1, 3), CellState.PASSAGE)
    fp = coverage_footprint(g, (1, 1))
    assert set(fp) == {(1, 1), (1, 2), (1, 3)}


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5])
def test_lights_never_overlap(seed):
    g = _marked(21, 21, seed)
    result = plan_lights(g)
    assert result.light_count > 0
    footprints = [coverage_footprint(g, light) for light in result.lights]
    for a, b in combinations(footprints, 2):
        assert not footprints_overlap(a, b)


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_walk_visits_every_carved_cell(seed):
    g = _marked(15, 21, seed)
    result = plan_lights(g)
    assert result.visited == len(carved_cells(g))


def test_entry_and_exit_never_relabelled():
    for seed in range(8):
        g = _marked(11, 11, seed)
        result = plan_lights(g)
        assert g.get((1, 1)) == CellState.ENTRY
        assert g.get((9, 9)) == CellState.EXIT
        assert (1, 1) not in result.lights
        assert (9, 9) not in result.lights
        assert all(g.get(p) == CellState.LIGHT for p in result.lights)


def test_walk_is_deterministic_for_a_grid():
    g = _marked(25, 25, 7)
    a, b = g.clone(), g.clone()
    ra, rb = plan_lights(a), plan_lights(b)
    assert ra.lights == rb.lights
    assert np.array_equal(a.cells, b.cells)


def test_high_threshold_places_nothing():
    g = _marked(15, 15, 1)
    result = plan_lights(g, IlluminationParams(step_threshold=10**6))
    assert result.lights == []
    assert g.count(CellState.LIGHT) == 0


def test_start_must_be_carved():
    g = _corridor()
    with pytest.raises(MazePreconditionError):
        plan_lights(g, IlluminationParams(start=(0, 0)))
