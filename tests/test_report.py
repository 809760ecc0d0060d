import json
import sys
from pathlib import Path

import pandas as pd

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from maxprofit.report import save_profit_report


def test_save_profit_report_writes_json_and_chart(tmp_path):
    profits = pd.Series({"AAA": 5.0, "BBB": 0.0, "CCC": 12.346}, name="max_profit")
    results_dir = tmp_path / "results"

    json_path = save_profit_report(profits, results_dir)

    assert json_path == results_dir / "max_profits.json"
    assert json.loads(json_path.read_text()) == {"AAA": 5.0, "BBB": 0.0, "CCC": 12.35}
    assert (results_dir / "max_profits.png").stat().st_size > 0
