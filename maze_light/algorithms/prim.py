from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import List, Optional, Set, Tuple

import numpy as np

from ..adjacency import adjacent_cells
from ..grid import CellState, Coord, MazeGrid, MazePreconditionError

logger = logging.getLogger(__name__)


@dataclass
class CarveResult:
    """随机 Prim 挖迷宫的结果统计。"""

    start: Coord
    passage_cells: int      # 挖开的格子总数（含连接墙）
    connections: int        # 挖开的连接墙数量，恒等于奇数格通道数 - 1
    frontier_misses: int    # 弹出时已无通道邻居、被直接丢弃的前沿格
    runtime_ms: float


def _random_start(grid: MazeGrid, rng: np.random.Generator) -> Coord:
    """在内部随机选取一个奇数坐标作为起点（偶数向上取奇）。"""

    x = int(rng.integers(1, grid.width - 1))
    y = int(rng.integers(1, grid.height - 1))
    if x % 2 == 0:
        x += 1
    if y % 2 == 0:
        y += 1
    return Coord(x, y)


def carve_maze(
    grid: MazeGrid,
    rng: np.random.Generator,
    start: Optional[Tuple[int, int]] = None,
) -> CarveResult:
    """基于前沿集合的随机 Prim 算法，把全 BLOCKED 网格挖成完美迷宫。

    流程：
    1. clear 网格；
    2. 起点为内部奇数坐标，保证外圈边框始终为 BLOCKED；
    3. 每次从前沿集合中均匀随机取出一个格子，随机连接到一个距离为 2 的通道，
       挖开二者中间的墙和该格子本身，再把它的 BLOCKED 邻居加入前沿；
    4. 前沿为空时结束。每个新格子恰好通过一条边接入已有的树，因此结果无环且连通。
    """

    if grid.width < 3 or grid.height < 3:
        raise MazePreconditionError(
            f"网格 {grid.shape} 过小，无法容纳内部奇数格"
        )

    t0 = perf_counter()
    grid.clear()

    cell = _random_start(grid, rng) if start is None else Coord(*start)
    if grid.get(cell) is None:
        raise MazePreconditionError(f"起点 {tuple(cell)} 不在网格 {grid.shape} 内")
    grid.set(cell, CellState.PASSAGE)

    # 前沿：列表用于随机 swap-remove，集合用于 O(1) 成员判断
    frontier: List[Coord] = adjacent_cells(grid, cell, CellState.BLOCKED, 2)
    in_frontier: Set[Coord] = set(frontier)

    passage_cells = 1
    connections = 0
    misses = 0

    while frontier:
        idx = int(rng.integers(0, len(frontier)))
        frontier[idx], frontier[-1] = frontier[-1], frontier[idx]
        current = frontier.pop()
        in_frontier.discard(current)

        neighbors = adjacent_cells(grid, current, CellState.PASSAGE, 2)
        if not neighbors:
            # 已被其他分支吸收，直接跳过
            misses += 1
            continue

        neighbor = neighbors[int(rng.integers(0, len(neighbors)))]
        grid.set(current.midpoint(neighbor), CellState.PASSAGE)
        grid.set(current, CellState.PASSAGE)
        passage_cells += 2
        connections += 1

        for pos in adjacent_cells(grid, current, CellState.BLOCKED, 2):
            if pos not in in_frontier:
                frontier.append(pos)
                in_frontier.add(pos)

    runtime_ms = (perf_counter() - t0) * 1000.0
    logger.debug(
        "carved maze %s from %s: passages=%d connections=%d misses=%d",
        grid.shape,
        tuple(cell),
        passage_cells,
        connections,
        misses,
    )

    return CarveResult(
        start=cell,
        passage_cells=passage_cells,
        connections=connections,
        frontier_misses=misses,
        runtime_ms=runtime_ms,
    )
