"""Save batch max-profit results to ./results/ as JSON and a bar chart."""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

__all__ = ["save_profit_report"]

RESULTS_DIR = Path("results")


def save_profit_report(profits: pd.Series, results_dir: Path = RESULTS_DIR) -> Path:
    """Write ``max_profits.json`` and ``max_profits.png``; return the JSON path."""
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)

    json_path = results_dir / "max_profits.json"
    json_path.write_text(
        json.dumps({str(k): round(float(v), 2) for k, v in profits.items()}, indent=2)
    )

    ordered = profits.astype(float).sort_values(ascending=False)
    plt.figure(figsize=(max(6, 0.6 * len(ordered)), 5))
    plt.bar([str(k) for k in ordered.index], ordered.values, color="seagreen")
    plt.title("Best single-trade profit")
    plt.ylabel("Profit per share")
    plt.xticks(rotation=45, ha="right")
    plt.grid(True, axis="y", alpha=0.3)
    plt.tight_layout()
    plt.savefig(results_dir / "max_profits.png", dpi=150)
    plt.close()

    print(f"📊  Saved: {json_path} & {results_dir / 'max_profits.png'}")
    return json_path
