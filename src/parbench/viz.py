from __future__ import annotations

import json
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns


def plot_results_json(input_json_path: str, output_png_path: str) -> None:
    """Grouped bars of sequential vs parallel time per workload."""
    with open(input_json_path, "r", encoding="utf-8") as f:
        data: List[dict] = json.load(f)

    names: List[str] = []
    runs: List[str] = []
    times: List[int] = []
    for d in data:
        name = f"{d['name']}\n{d['speedup']:.2f}x"
        names += [name, name]
        runs += ["sequential", "parallel"]
        times += [d["sequential_ms"], d["parallel_ms"]]

    sns.set(style="whitegrid")
    fig = plt.figure(figsize=(9, 5))
    ax = sns.barplot(x=names, y=times, hue=runs)
    ax.set_xlabel("Workload (speedup)")
    ax.set_ylabel("Time (ms)")
    ax.set_title("parbench: sequential vs parallel")
    plt.tight_layout()
    plt.savefig(output_png_path)
    plt.close(fig)
