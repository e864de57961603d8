from __future__ import annotations

import os
from typing import Dict, Iterable, List

import matplotlib.pyplot as plt
import numpy as np

from ..maps import SCALE_DIMS


def _group_by(
    results: Iterable[dict], key: str
) -> Dict[str, List[dict]]:
    grouped: Dict[str, List[dict]] = {}
    for r in results:
        k = r[key]
        grouped.setdefault(k, []).append(r)
    return grouped


def _plot_metric_per_scale(
    results: List[dict],
    metric_key: str,
    ylabel: str,
    title: str,
    filename: str,
    output_dir: str,
) -> None:
    """按 scale 生成柱状图（横轴为尺度，柱高为各种子的均值，误差线为标准差）。"""

    grouped = _group_by(results, "scale")
    scales = [s for s in SCALE_DIMS if s in grouped]
    if not scales:
        return

    means = []
    stds = []
    for scale in scales:
        vals = np.array([r[metric_key] for r in grouped[scale]], dtype=float)
        means.append(vals.mean())
        stds.append(vals.std())

    fig, ax = plt.subplots(figsize=(6, 4), dpi=150)
    x = np.arange(len(scales))
    ax.bar(x, means, 0.5, yerr=stds, capsize=4)

    ax.set_xticks(x)
    ax.set_xticklabels([f"{s}\n{SCALE_DIMS[s][0]}×{SCALE_DIMS[s][1]}" for s in scales])
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    fig.subplots_adjust(bottom=0.2, top=0.88)

    fig.savefig(os.path.join(output_dir, filename), bbox_inches="tight")
    plt.close(fig)


def plot_all_charts(results_dataclasses, output_dir: str) -> None:
    """从 ExperimentResult 列表生成所有图表。"""

    os.makedirs(output_dir, exist_ok=True)

    # dataclass -> dict
    results: List[dict] = [
        r if isinstance(r, dict) else r.__dict__ for r in results_dataclasses
    ]

    # 1) 光源数量
    _plot_metric_per_scale(
        results,
        metric_key="light_count",
        ylabel="光源数量",
        title="各尺度光源数量",
        filename="light_count.png",
        output_dir=output_dir,
    )

    # 2) 覆盖率
    _plot_metric_per_scale(
        results,
        metric_key="coverage_rate",
        ylabel="通道覆盖率",
        title="各尺度通道覆盖率",
        filename="coverage_rate.png",
        output_dir=output_dir,
    )

    # 3) 生成耗时
    _plot_metric_per_scale(
        results,
        metric_key="carve_ms",
        ylabel="挖迷宫耗时 (ms)",
        title="各尺度挖迷宫耗时",
        filename="carve_runtime.png",
        output_dir=output_dir,
    )
