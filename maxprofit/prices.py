from __future__ import annotations

import datetime as dt
import json
from pathlib import Path

import pandas as pd
import yfinance as yf

__all__ = [
    "parse_prices",
    "load_price_file",
    "download_or_load_prices",
]


# ---------------------------------------------------------------------------
# Literal price lists
# ---------------------------------------------------------------------------

def parse_prices(text: str) -> list:
    """Parse ``"7,1,5.5"`` into ``[7, 1, 5.5]``.

    Integer tokens stay ``int`` so integer input keeps integer profits.
    """
    prices = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            prices.append(int(token))
        except ValueError:
            try:
                prices.append(float(token))
            except ValueError:
                raise ValueError(f"not a price: {token!r}") from None
    return prices


# ---------------------------------------------------------------------------
# Price files
# ---------------------------------------------------------------------------

def _read_json(path: Path):
    data = json.loads(path.read_text())
    if isinstance(data, list):
        return pd.Series(data)
    return pd.DataFrame(data)


def _pick_column(df: pd.DataFrame, column: str | None) -> pd.Series:
    if column is not None:
        if column not in df.columns:
            raise ValueError(f"column {column!r} not found; have {list(df.columns)}")
        return df[column]
    if "Close" in df.columns:
        return df["Close"]
    numeric = df.select_dtypes("number").columns
    if len(numeric) != 1:
        raise ValueError(
            f"cannot pick a price column from {list(df.columns)}; pass column="
        )
    return df[numeric[0]]


def load_price_file(path: Path, column: str | None = None) -> pd.Series:
    """Load one price series from a ``.csv``, ``.json`` or ``.parquet`` file.

    Prices are coerced to numbers (``ValueError`` if any cannot be) and rows
    with missing prices are dropped; the original row order is kept.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix == ".csv":
        data = pd.read_csv(path)
    elif suffix == ".json":
        data = _read_json(path)
    elif suffix == ".parquet":
        data = pd.read_parquet(path)
    else:
        raise ValueError(f"unsupported price file type: {suffix or path.name}")

    if isinstance(data, pd.DataFrame):
        data = _pick_column(data, column)
    try:
        data = pd.to_numeric(data, errors="raise")
    except (ValueError, TypeError):
        raise ValueError(f"non-numeric prices in {path}") from None
    return data.dropna().reset_index(drop=True)


# ---------------------------------------------------------------------------
# Close-price download/cache helper
# ---------------------------------------------------------------------------

def download_or_load_prices(tickers, cache_file: Path, start_date: dt.date, end_date: dt.date):
    """Return daily close prices (one column per ticker), cached in ``cache_file``."""

    def _download(start, end):
        print(f"📥  Downloading {', '.join(tickers)} {start} → {end} …")
        raw = yf.download(
            " ".join(tickers),
            start=start,
            end=end,
            progress=False,
            auto_adjust=True,
        )
        if raw.empty:
            return pd.DataFrame(columns=list(tickers), index=pd.DatetimeIndex([]), dtype=float)
        close = raw["Close"]
        if isinstance(close, pd.Series):
            close = close.to_frame(tickers[0])
        return close.sort_index()

    if cache_file.exists():
        try:
            df = pd.read_parquet(cache_file)
            idx = pd.to_datetime(df.index, errors="coerce")
            if idx.isna().any():
                raise ValueError("corrupt index detected")
            if not set(tickers) <= set(df.columns):
                raise ValueError("cache is missing tickers")
            print(f"📂  Loaded cached prices from {cache_file}")
            last_cached = idx.max().date()
            if last_cached < end_date - dt.timedelta(days=1):
                fresh = _download(last_cached + dt.timedelta(days=1), end_date)
                if fresh.empty:
                    print("ℹ  No new prices since the cached close.")
                else:
                    df = pd.concat([df, fresh])
                    df = df[~df.index.duplicated(keep="last")]
        except Exception as e:
            print(f"⚠  Discarding price cache ({e})")
            cache_file.unlink(missing_ok=True)
            df = _download(start_date, end_date)
    else:
        df = _download(start_date, end_date)

    df.to_parquet(cache_file)
    df = df.loc[
        (df.index >= pd.Timestamp(start_date)) & (df.index < pd.Timestamp(end_date))
    ]
    return df[list(tickers)]
