from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .adjacency import adjacent_cells, diagonal_passage_cells
from .grid import CellState, Coord, MazeGrid


@dataclass
class IlluminationParams:
    """光源放置参数配置。"""

    step_threshold: int = 4              # 距上一次放置至少走过的步数
    start: Tuple[int, int] = (1, 1)      # 深度优先遍历的起点


def coverage_footprint(grid: MazeGrid, center: Tuple[int, int]) -> List[Coord]:
    """计算放置在 center 的光源的覆盖范围。

    覆盖范围包括：
    - center 本身；
    - 上下左右距离 1 的通道；
    - 四个对角方向的通道；
    - 上下左右距离 2 的通道，但仅当二者之间的格子已在覆盖范围内
      （中间是墙时视线被挡住，不计入）。
    """

    center = Coord(*center)
    footprint: List[Coord] = [center]
    footprint.extend(adjacent_cells(grid, center, CellState.PASSAGE, 1))
    footprint.extend(diagonal_passage_cells(grid, center))

    near = set(footprint)
    for far in adjacent_cells(grid, center, CellState.PASSAGE, 2):
        if center.midpoint(far) in near:
            footprint.append(far)

    return footprint


def footprints_overlap(a: Iterable[Tuple[int, int]], b: Iterable[Tuple[int, int]]) -> bool:
    return not set(a).isdisjoint(b)
