from .utils import get_max_profit, brute_force_max_profit
from .prices import parse_prices, load_price_file, download_or_load_prices
from .batch import compute_max_profits
from .report import save_profit_report

__all__ = [
    "get_max_profit",
    "brute_force_max_profit",
    "parse_prices",
    "load_price_file",
    "download_or_load_prices",
    "compute_max_profits",
    "save_profit_report",
]
