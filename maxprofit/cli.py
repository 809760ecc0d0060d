"""Max-profit command line interface."""
import argparse
import datetime as dt
from pathlib import Path

from .batch import compute_max_profits
from .prices import download_or_load_prices, load_price_file, parse_prices
from .report import save_profit_report
from .utils import get_max_profit

# ---------------------------- CONFIG ------------------------------------
CACHE_FILE = Path("close_prices.parquet")
TICKERS = [
    "AAPL","MSFT","TSLA","GOOGL","AMZN","NVDA","META","NFLX","AMD","KO",
]
YEARS = 1
END_DATE = dt.date.today()
START_DATE = END_DATE - dt.timedelta(days=YEARS * 365)
N_JOBS = -1

# --------------------------- ARGPARSE -----------------------------------

def _date(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Best profit from one buy followed by one later sell"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--prices", type=parse_prices, help="Comma separated prices, e.g. 7,1,5,3,6,4")
    source.add_argument("--file", type=Path, help="CSV / JSON / parquet file holding one price series")
    source.add_argument("--tickers", type=str, default=None, help="Comma separated list of tickers")
    parser.add_argument("--column", type=str, default=None, help="Price column to read from --file")
    parser.add_argument("--start", type=_date, default=None, help="Start date (YYYY-MM-DD), tickers only")
    parser.add_argument("--end", type=_date, default=None, help="End date (YYYY-MM-DD), tickers only")
    parser.add_argument("--cache-file", type=Path, default=None, help="Parquet cache for downloaded prices")
    parser.add_argument("--n-jobs", type=int, default=None, help="Parallel workers for --tickers")
    parser.add_argument("--report", action="store_true", help="Save results/max_profits.json and a chart")
    args = parser.parse_args(argv)

    if args.column is not None and args.file is None:
        parser.error("--column only applies to --file")
    if args.prices is not None or args.file is not None:
        ticker_only = {
            "--start": args.start,
            "--end": args.end,
            "--cache-file": args.cache_file,
            "--n-jobs": args.n_jobs,
        }
        given = [flag for flag, value in ticker_only.items() if value is not None]
        if args.report:
            given.append("--report")
        if given:
            parser.error(f"{', '.join(given)} only apply to --tickers")

    args.start = START_DATE if args.start is None else args.start
    args.end = END_DATE if args.end is None else args.end
    args.cache_file = CACHE_FILE if args.cache_file is None else args.cache_file
    args.n_jobs = N_JOBS if args.n_jobs is None else args.n_jobs
    return args

# ------------------------------ MAIN ------------------------------------

def main(argv=None):
    args = parse_args(argv)

    if args.prices is not None:
        profit = get_max_profit(args.prices)
        print(f"💰  Max profit: {profit}")
        return profit

    if args.file is not None:
        print(f"📂  Loading {args.file} …")
        prices = load_price_file(args.file, args.column)
        profit = get_max_profit(prices)
        print(f"💰  Max profit over {len(prices)} prices: {profit}")
        return profit

    tickers = TICKERS if args.tickers is None else [t.strip() for t in args.tickers.split(",") if t.strip()]
    close = download_or_load_prices(tickers, args.cache_file, args.start, args.end)
    profits = compute_max_profits(close, n_jobs=args.n_jobs)

    print("\n===== Max single-trade profit =====")
    print(profits.sort_values(ascending=False).to_string())

    if args.report:
        save_profit_report(profits)
    return profits


if __name__ == "__main__":
    main()
