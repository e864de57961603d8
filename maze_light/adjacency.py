from __future__ import annotations

from typing import List, Tuple

from .grid import CARVED_STATES, CellState, Coord, MazeGrid

# 四邻接方向 (dx, dy)，顺序固定，保证遍历结果可复现
_NEIGHBORS_4: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)

# 对角方向
_DIAGONALS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


def _matches(state: CellState, target_state: CellState) -> bool:
    if target_state == CellState.BLOCKED:
        return state == CellState.BLOCKED
    # 非 BLOCKED 查询：任何已挖开的状态都算作通道
    return state in CARVED_STATES


def adjacent_cells(
    grid: MazeGrid,
    center: Tuple[int, int],
    target_state: CellState,
    step: int,
) -> List[Coord]:
    """返回 center 上下左右距离恰为 step 且状态满足 target_state 的格子。

    - step = 2 用于迷宫结构查询（跳过中间的墙）；
    - step = 1 用于光照覆盖的局部检查；
    - 越界的探测点直接忽略。
    """

    cx, cy = center
    result: List[Coord] = []
    for dx, dy in _NEIGHBORS_4:
        pos = Coord(cx + dx * step, cy + dy * step)
        state = grid.get(pos)
        if state is None:
            continue
        if _matches(state, target_state):
            result.append(pos)
    return result


def diagonal_passage_cells(grid: MazeGrid, center: Tuple[int, int]) -> List[Coord]:
    """返回 center 四个对角方向上已挖开的格子。"""

    cx, cy = center
    result: List[Coord] = []
    for dx, dy in _DIAGONALS:
        pos = Coord(cx + dx, cy + dy)
        if grid.is_carved(pos):
            result.append(pos)
    return result
