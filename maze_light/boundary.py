from __future__ import annotations

import logging
from typing import Tuple

from .grid import CellState, Coord, MazeGrid, MazePreconditionError

logger = logging.getLogger(__name__)


def entry_exit_coords(grid: MazeGrid) -> Tuple[Coord, Coord]:
    """入口位于左上内角 (1, 1)，出口位于右下内角 (width-2, height-2)。"""

    return Coord(1, 1), Coord(grid.width - 2, grid.height - 2)


def mark_boundary(grid: MazeGrid) -> Tuple[Coord, Coord]:
    """把左上 / 右下两个内角格分别标记为 ENTRY / EXIT。

    两个目标格在奇数尺寸下必然是通道；若不是，说明尺寸或格点配置有误，
    直接抛出 MazePreconditionError，不允许生成残缺的迷宫。
    """

    entry, exit_ = entry_exit_coords(grid)
    if entry == exit_:
        # 3×3 等只有一个内部格的网格无法同时容纳入口和出口
        logger.error("entry and exit coincide at %s for grid %s", tuple(entry), grid.shape)
        raise MazePreconditionError(
            f"网格 {grid.shape} 过小，入口与出口重合于 {tuple(entry)}"
        )
    for name, pos in (("entry", entry), ("exit", exit_)):
        state = grid.get(pos)
        if state != CellState.PASSAGE:
            logger.error("%s target %s is %s, expected PASSAGE", name, tuple(pos), state)
            raise MazePreconditionError(
                f"{name} 目标格 {tuple(pos)} 状态为 {state}，不是已挖开的通道"
            )

    grid.set(entry, CellState.ENTRY)
    grid.set(exit_, CellState.EXIT)
    return entry, exit_
