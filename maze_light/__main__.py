from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .grid import MazeError
from .maps import generate_maze
from .render import render_image, render_text


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="maze_light",
        description="生成带光源的完美迷宫并输出字符画。",
    )
    ap.add_argument("--height", type=int, default=15, help="迷宫高度（建议奇数）")
    ap.add_argument("--width", type=int, default=15, help="迷宫宽度（建议奇数）")
    ap.add_argument("--seed", type=int, default=None, help="随机种子（默认随机）")
    ap.add_argument("--image", type=str, default=None, help="额外保存 PNG 图片的路径")
    ap.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        grid, _ = generate_maze(args.height, args.width, seed=args.seed)
    except MazeError as exc:
        logging.getLogger("maze_light").error("generation failed: %s", exc)
        return 1

    print(render_text(grid))
    if args.image:
        render_image(grid, args.image)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
