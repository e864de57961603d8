from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import List, Optional, Set

from ..adjacency import adjacent_cells
from ..grid import CellState, Coord, MazeGrid, MazePreconditionError
from ..light import IlluminationParams, coverage_footprint

logger = logging.getLogger(__name__)


@dataclass
class IlluminationResult:
    """贪心光源放置结果。"""

    lights: List[Coord]
    footprints: List[List[Coord]]
    illuminated: Set[Coord] = field(default_factory=set)
    visited: int = 0
    rejected: int = 0        # 步数已够、但覆盖范围与已有光源重叠而放弃的次数
    runtime_ms: float = 0.0

    @property
    def light_count(self) -> int:
        return len(self.lights)


def plan_lights(
    grid: MazeGrid,
    params: Optional[IlluminationParams] = None,
) -> IlluminationResult:
    """在已挖好的迷宫上贪心放置互不重叠的光源。

    从固定起点做深度优先遍历（显式栈 + visited 集合，不使用递归）：
    - 每访问一个格子，把未访问的相邻通道压栈，步数 +1；
    - 步数达到阈值，且当前格的覆盖范围与已照亮集合不相交时，
      把当前格标记为 LIGHT，合并覆盖范围并将步数清零；
    - 否则继续遍历。

    只有普通 PASSAGE 格会被改写为 LIGHT，ENTRY / EXIT 保持不变。
    遍历结果只取决于迷宫形状，不再引入随机性。
    """

    params = params or IlluminationParams()
    start = Coord(*params.start)
    if not grid.is_carved(start):
        raise MazePreconditionError(
            f"遍历起点 {tuple(start)} 不是通道，状态为 {grid.get(start)}"
        )

    t0 = perf_counter()

    stack: List[Coord] = [start]
    visited: Set[Coord] = set()
    illuminated: Set[Coord] = set()
    lights: List[Coord] = []
    footprints: List[List[Coord]] = []
    rejected = 0

    steps = 0
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        for pos in adjacent_cells(grid, current, CellState.PASSAGE, 1):
            if pos not in visited:
                stack.append(pos)
        steps += 1

        if steps < params.step_threshold:
            continue
        if grid.get(current) != CellState.PASSAGE:
            continue

        footprint = coverage_footprint(grid, current)
        if not illuminated.isdisjoint(footprint):
            rejected += 1
            continue

        grid.set(current, CellState.LIGHT)
        illuminated.update(footprint)
        lights.append(current)
        footprints.append(footprint)
        steps = 0

    runtime_ms = (perf_counter() - t0) * 1000.0
    logger.debug(
        "placed %d lights over %d visited cells (%d rejected)",
        len(lights),
        len(visited),
        rejected,
    )

    return IlluminationResult(
        lights=lights,
        footprints=footprints,
        illuminated=illuminated,
        visited=len(visited),
        rejected=rejected,
        runtime_ms=runtime_ms,
    )
