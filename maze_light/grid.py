from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

# 未初始化（clear 之前）的格子取值
UNSET = -1


class MazeError(Exception):
    """迷宫生成相关错误的基类。"""


class MazePreconditionError(MazeError, ValueError):
    """前置条件不满足：尺寸过小、入口/出口不是通道等，生成必须中止。"""


class OutOfDomainError(MazeError, IndexError):
    """对网格范围之外的坐标执行写操作（属于编程错误）。"""


class CellState(IntEnum):
    """格子状态。

    LIGHT / ENTRY / EXIT 都是在已挖开的通道上叠加的最终标记。
    """

    BLOCKED = 0
    PASSAGE = 1
    LIGHT = 2
    ENTRY = 3
    EXIT = 4


# 视为“已挖开”的状态
CARVED_STATES = frozenset(
    {CellState.PASSAGE, CellState.LIGHT, CellState.ENTRY, CellState.EXIT}
)


class Coord(NamedTuple):
    """二维格点坐标 (x, y)。"""

    x: int
    y: int

    def midpoint(self, other: "Coord") -> "Coord":
        """两个格点正中间的格子（逐分量取平均）。

        挖迷宫时 self 与 other 相距 2 格，中点即二者之间的墙。
        """

        return Coord(
            (other.x - self.x) // 2 + self.x,
            (other.y - self.y) // 2 + self.y,
        )


@dataclass
class MazeGrid:
    """二维迷宫网格。

    cells.shape = (width, height)，cells[x, y] 存储 CellState 的整数值，
    UNSET(-1) 表示尚未初始化。尺寸在构造后不再改变。
    """

    cells: np.ndarray  # int8 类型

    def __post_init__(self) -> None:
        if self.cells.ndim != 2:
            raise ValueError("cells 数组必须是二维的 (width, height)")
        if self.cells.dtype != np.int8:
            self.cells = self.cells.astype(np.int8)

    @classmethod
    def new(cls, height: int, width: int) -> "MazeGrid":
        """构造一个 height × width、所有格子都未初始化的网格。"""

        if height <= 0 or width <= 0:
            raise MazePreconditionError(
                f"网格尺寸必须为正数: height={height}, width={width}"
            )
        return cls(cells=np.full((width, height), UNSET, dtype=np.int8))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape  # (width, height)

    @property
    def width(self) -> int:
        return self.cells.shape[0]

    @property
    def height(self) -> int:
        return self.cells.shape[1]

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        """所有格子置为 BLOCKED。"""

        self.cells.fill(CellState.BLOCKED)

    def get(self, coord: Tuple[int, int]) -> Optional[CellState]:
        """返回格子状态；越界或尚未初始化时返回 None。"""

        if not self.in_bounds(coord):
            return None
        value = int(self.cells[coord[0], coord[1]])
        if value == UNSET:
            return None
        return CellState(value)

    def set(self, coord: Tuple[int, int], state: CellState) -> None:
        if not self.in_bounds(coord):
            logger.error(
                "set() outside grid domain: coord=%s shape=%s", coord, self.shape
            )
            raise OutOfDomainError(f"坐标 {tuple(coord)} 不在网格 {self.shape} 内")
        self.cells[coord[0], coord[1]] = state

    def is_carved(self, coord: Tuple[int, int]) -> bool:
        return self.get(coord) in CARVED_STATES

    def coords(self) -> Iterator[Coord]:
        """按行优先顺序（先 y 后 x）遍历全部坐标。"""

        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def clone(self) -> "MazeGrid":
        return MazeGrid(self.cells.copy())
