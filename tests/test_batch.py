import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from maxprofit.batch import compute_max_profits


def test_compute_max_profits_wide_frame():
    close = pd.DataFrame({
        "AAA": [7.0, 1.0, 5.0, 3.0, 6.0, 4.0],
        "BBB": [5.0, 4.0, 3.0, 2.0, 1.0, np.nan],
        "CCC": [np.nan, 2.0, 4.0, 1.0, np.nan, np.nan],
    })
    profits = compute_max_profits(close, n_jobs=1)

    assert profits.name == "max_profit"
    assert list(profits.index) == ["AAA", "BBB", "CCC"]
    assert profits.tolist() == [5.0, 0.0, 2.0]


def test_compute_max_profits_mapping_parallel():
    series = {
        "flat": [3, 3, 3],
        "up": [1, 2, 3, 4, 5],
        "single": [5],
        "empty": [],
    }
    profits = compute_max_profits(series, n_jobs=2)
    assert profits.to_dict() == {"flat": 0, "up": 4, "single": 0, "empty": 0}


def test_compute_max_profits_empty_input():
    profits = compute_max_profits({}, n_jobs=1)
    assert profits.empty


def test_compute_max_profits_rejects_plain_list():
    with pytest.raises(TypeError):
        compute_max_profits([[1, 2], [3, 4]])
