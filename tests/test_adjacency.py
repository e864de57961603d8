from maze_light.adjacency import adjacent_cells, diagonal_passage_cells
from maze_light.grid import CellState, MazeGrid


def _cleared(height, width):
    g = MazeGrid.new(height, width)
    g.clear()
    return g


def test_step2_all_four_passages():
    g = _cleared(7, 7)
    for pos in [(1, 3), (5, 3), (3, 1), (3, 5)]:
        g.set(pos, CellState.PASSAGE)
    got = adjacent_cells(g, (3, 3), CellState.PASSAGE, 2)
    assert set(got) == {(1, 3), (5, 3), (3, 1), (3, 5)}
    assert len(got) == 4


def test_corner_probe_only_in_domain():
    g = _cleared(5, 5)
    got = adjacent_cells(g, (0, 0), CellState.BLOCKED, 2)
    assert set(got) == {(2, 0), (0, 2)}


def test_blocked_query_excludes_carved():
    g = _cleared(7, 7)
    g.set((1, 3), CellState.PASSAGE)
    got = adjacent_cells(g, (3, 3), CellState.BLOCKED, 2)
    assert set(got) == {(5, 3), (3, 1), (3, 5)}


def test_carved_query_accepts_refined_states():
    g = _cleared(7, 7)
    g.set((2, 3), CellState.LIGHT)
    g.set((4, 3), CellState.PASSAGE)
    g.set((3, 2), CellState.ENTRY)
    got = adjacent_cells(g, (3, 3), CellState.PASSAGE, 1)
    assert set(got) == {(2, 3), (4, 3), (3, 2)}


def test_empty_result():
    g = _cleared(5, 5)
    assert adjacent_cells(g, (2, 2), CellState.PASSAGE, 1) == []


def test_fixed_probe_order():
    g = _cleared(7, 7)
    for pos in [(3, 5), (1, 3), (3, 1), (5, 3)]:
        g.set(pos, CellState.PASSAGE)
    assert adjacent_cells(g, (3, 3), CellState.PASSAGE, 2) == [(1, 3), (5, 3), (3, 1), (3, 5)]


def test_diagonal_passage_cells():
    g = _cleared(5, 5)
    g.set((1, 1), CellState.PASSAGE)
    g.set((3, 3), CellState.LIGHT)
    g.set((2, 1), CellState.PASSAGE)  # 正交方向，不算对角
    assert set(diagonal_passage_cells(g, (2, 2))) == {(1, 1), (3, 3)}


def test_diagonal_at_corner():
    g = _cleared(3, 3)
    g.set((1, 1), CellState.PASSAGE)
    assert diagonal_passage_cells(g, (0, 0)) == [(1, 1)]
