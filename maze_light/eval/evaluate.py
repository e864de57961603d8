from __future__ import annotations

import csv
import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import List

from ..maps import SCALE_DIMS, generate_scaled_maze
from ..universe import build_universe_passages, coverage_rate, footprint_mask, footprints_disjoint
from .charts import plot_all_charts

logger = logging.getLogger(__name__)


@dataclass
class ExperimentResult:
    """单次实验（尺度 × 种子）的指标记录。"""

    scale: str
    seed: int
    height: int
    width: int

    passage_cells: int
    light_count: int
    covered_cells: int
    coverage_rate: float
    disjoint: bool

    frontier_misses: int
    rejected_placements: int

    carve_ms: float
    illuminate_ms: float


def _ensure_output_dirs(base_dir: str) -> None:
    os.makedirs(base_dir, exist_ok=True)
    os.makedirs(os.path.join(base_dir, "charts"), exist_ok=True)


def run_experiment(scale: str, seed: int) -> ExperimentResult:
    grid, info = generate_scaled_maze(scale, seed)
    universe = build_universe_passages(grid)
    masks = [footprint_mask(fp, universe) for fp in info.illumination.footprints]

    return ExperimentResult(
        scale=scale,
        seed=seed,
        height=info.height,
        width=info.width,
        passage_cells=universe.size,
        light_count=info.illumination.light_count,
        covered_cells=len(info.illumination.illuminated),
        coverage_rate=coverage_rate(universe, masks),
        disjoint=footprints_disjoint(masks),
        frontier_misses=info.carve.frontier_misses,
        rejected_placements=info.illumination.rejected,
        carve_ms=info.carve.runtime_ms,
        illuminate_ms=info.illumination.runtime_ms,
    )


def run_all_experiments(
    output_dir: str = "output",
    seeds_per_scale: int = 3,
    with_charts: bool = True,
) -> List[ExperimentResult]:
    _ensure_output_dirs(output_dir)

    results: List[ExperimentResult] = []

    # 固定随机种子，保证可复现
    base_seed = 42

    for scale_idx, scale in enumerate(SCALE_DIMS):
        for i in range(seeds_per_scale):
            seed = base_seed + scale_idx * 100 + i
            result = run_experiment(scale, seed)
            logger.info(
                "scale=%s seed=%d lights=%d coverage=%.3f",
                scale,
                seed,
                result.light_count,
                result.coverage_rate,
            )
            results.append(result)

    # 写出 CSV 与 JSON 摘要
    csv_path = os.path.join(output_dir, "results_table.csv")
    json_path = os.path.join(output_dir, "summary.json")

    fieldnames = [f.name for f in fields(ExperimentResult)]

    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in results:
            writer.writerow(asdict(r))

    with open(json_path, "w", encoding="utf-8") as f:
        json.dump([asdict(r) for r in results], f, ensure_ascii=False, indent=2)

    if with_charts:
        plot_all_charts(results, os.path.join(output_dir, "charts"))

    return results


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_all_experiments()


if __name__ == "__main__":
    main()
