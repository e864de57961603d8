from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from .algorithms.greedy import IlluminationResult, plan_lights
from .algorithms.prim import CarveResult, carve_maze
from .boundary import mark_boundary
from .grid import Coord, MazeGrid
from .light import IlluminationParams

logger = logging.getLogger(__name__)


# 三种尺度的统一尺寸设置 (height, width)，均为奇数以保证一格厚的边框
SCALE_DIMS: Dict[str, Tuple[int, int]] = {
    "small": (15, 15),
    "medium": (31, 31),
    "large": (61, 61),
}


@dataclass
class MazeInfo:
    """迷宫元信息。"""

    height: int
    width: int
    seed: Optional[int]
    entry: Coord
    exit: Coord
    carve: CarveResult
    illumination: IlluminationResult
    scale: Optional[str] = None  # "small" / "medium" / "large"


def generate_maze(
    height: int,
    width: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    start: Optional[Tuple[int, int]] = None,
    params: Optional[IlluminationParams] = None,
) -> Tuple[MazeGrid, MazeInfo]:
    """完整生成流程：clear -> 挖迷宫 -> 标记入口/出口 -> 放置光源。

    rng 未给出时使用 np.random.default_rng(seed)；同一 seed 与尺寸得到完全相同的网格。
    """

    if rng is None:
        rng = np.random.default_rng(seed)

    grid = MazeGrid.new(height, width)
    carve = carve_maze(grid, rng, start=start)
    entry, exit_ = mark_boundary(grid)
    illumination = plan_lights(grid, params)

    logger.info(
        "generated %dx%d maze: passages=%d lights=%d",
        height,
        width,
        carve.passage_cells,
        illumination.light_count,
    )

    info = MazeInfo(
        height=height,
        width=width,
        seed=seed,
        entry=entry,
        exit=exit_,
        carve=carve,
        illumination=illumination,
    )
    return grid, info


def generate_scaled_maze(scale: str, seed: int) -> Tuple[MazeGrid, MazeInfo]:
    """按预设尺度生成迷宫。"""

    if scale not in SCALE_DIMS:
        raise ValueError(f"未知 scale: {scale}")
    height, width = SCALE_DIMS[scale]
    grid, info = generate_maze(height, width, seed=seed)
    info.scale = scale
    return grid, info
