from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .grid import CARVED_STATES, Coord, MazeGrid


@dataclass
class Universe:
    """需照亮的格点集合 U。

    attrs
    ------
    name: 名称，目前只有 "passages"。
    coords: List[Coord]，按索引顺序存储 U 中所有格点坐标（行优先）。
    index_map: np.ndarray[int32]，shape 与 grid 相同，若格点在 U 中则为其索引，否则为 -1。
    """

    name: str
    coords: List[Coord]
    index_map: np.ndarray

    @property
    def size(self) -> int:
        return len(self.coords)


def build_universe_passages(grid: MazeGrid) -> Universe:
    """所有已挖开的格子（含 LIGHT / ENTRY / EXIT）都作为 U。"""

    index_map = np.full(grid.shape, -1, dtype=np.int32)
    coords: List[Coord] = []

    idx = 0
    for pos in grid.coords():
        if grid.get(pos) in CARVED_STATES:
            index_map[pos.x, pos.y] = idx
            coords.append(pos)
            idx += 1

    return Universe(name="passages", coords=coords, index_map=index_map)


def footprint_mask(footprint: Iterable[Tuple[int, int]], universe: Universe) -> int:
    """把覆盖范围转换为 Python int 位图，bit i = 1 表示 U 中索引 i 被照亮。"""

    mask = 0
    for x, y in footprint:
        uid = int(universe.index_map[x, y])
        if uid >= 0:
            mask |= 1 << uid
    return mask


def coverage_rate(universe: Universe, masks: Iterable[int]) -> float:
    if universe.size == 0:
        return 1.0
    cover = 0
    for m in masks:
        cover |= m
    return cover.bit_count() / universe.size


def footprints_disjoint(masks: Iterable[int]) -> bool:
    """各光源覆盖位图两两不相交。"""

    seen = 0
    for m in masks:
        if seen & m:
            return False
        seen |= m
    return True
