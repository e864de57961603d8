from collections import deque

from maze_light.grid import CARVED_STATES, CellState, Coord


def carved_cells(grid):
    return [pos for pos in grid.coords() if grid.get(pos) in CARVED_STATES]


def reachable(grid, start):
    """从 start 出发沿上下左右一步可达的已挖开格子集合。"""
    start = Coord(*start)
    seen = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = Coord(cx + dx, cy + dy)
            if nxt in seen or grid.get(nxt) not in CARVED_STATES:
                continue
            seen.add(nxt)
            q.append(nxt)
    return seen


def border_coords(grid):
    w, h = grid.width, grid.height
    return [p for p in grid.coords() if p.x in (0, w - 1) or p.y in (0, h - 1)]


def carve_corridor(grid, y, x0, x1):
    """在已 clear 的网格上挖出一条水平走廊（含端点）。"""
    for x in range(x0, x1 + 1):
        grid.set((x, y), CellState.PASSAGE)
