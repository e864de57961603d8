from __future__ import annotations

from typing import Dict

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from .grid import UNSET, CellState, MazeGrid, MazePreconditionError

GLYPHS: Dict[CellState, str] = {
    CellState.BLOCKED: "#",
    CellState.PASSAGE: " ",
    CellState.LIGHT: ".",
    CellState.ENTRY: "E",
    CellState.EXIT: "S",
}

# 颜色顺序与 CellState 取值一致
_COLORS = ["#202020", "#f0f0f0", "#ffd23f", "#2e86de", "#e74c3c"]


def _check_initialized(grid: MazeGrid) -> None:
    if np.any(grid.cells == UNSET):
        raise MazePreconditionError("网格尚未 clear，存在未初始化的格子")


def render_text(grid: MazeGrid) -> str:
    """按行输出字符画，每行一个 y，不加分隔符。"""

    _check_initialized(grid)
    lines = []
    for y in range(grid.height):
        lines.append("".join(GLYPHS[CellState(int(grid.cells[x, y]))] for x in range(grid.width)))
    return "\n".join(lines)


def render_image(grid: MazeGrid, out_path: str, cell_px: int = 12) -> None:
    """用 matplotlib 把网格保存为 PNG 图片。"""

    _check_initialized(grid)
    width, height = grid.width, grid.height
    fig, ax = plt.subplots(
        figsize=(width * cell_px / 100.0, height * cell_px / 100.0), dpi=100
    )
    ax.imshow(
        grid.cells.T,
        cmap=ListedColormap(_COLORS),
        vmin=0,
        vmax=len(_COLORS) - 1,
        interpolation="nearest",
    )
    ax.set_axis_off()
    fig.savefig(out_path, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
