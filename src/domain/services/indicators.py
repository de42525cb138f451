"""
Domain service: technical indicators over a close-price series.
Pure functions, no I/O. Missing closes are None and propagate as None.
"""

from typing import Optional, Sequence

from src.domain.entities.snapshot import Snapshot
from src.domain.entities.stock_price import StockQuote

RSI_PERIOD = 14
SHORT_MA_WINDOW = 5
LONG_MA_WINDOW = 25


def average(series: Sequence[Optional[float]], window: int) -> Optional[float]:
    """Mean of the non-null values among the last *window* elements of *series*.

    Returns None when the slice holds no values.
    """
    if window <= 0:
        return None
    valid = [value for value in series[-window:] if value is not None]
    if not valid:
        return None
    return sum(valid) / len(valid)


def calc_rsi(closes: Sequence[Optional[float]]) -> Optional[float]:
    """14-period RSI over the trailing 15 closes, rounded to one decimal.

    Returns None with fewer than 15 closes or a gap inside the window.
    No losses gives 100 and no gains gives 0, checked in that order.
    """
    if len(closes) < RSI_PERIOD + 1:
        return None
    window = closes[-(RSI_PERIOD + 1):]
    if any(close is None for close in window):
        return None

    gains = 0.0
    losses = 0.0
    for previous, current in zip(window, window[1:]):
        diff = current - previous
        if diff > 0:
            gains += diff
        else:
            losses -= diff

    avg_gain = gains / RSI_PERIOD
    avg_loss = losses / RSI_PERIOD
    if avg_loss == 0:
        return 100.0
    if avg_gain == 0:
        return 0.0
    rs = avg_gain / avg_loss
    return round(100 - 100 / (1 + rs), 1)


def build_snapshot(
    symbol: str,
    quote: StockQuote,
    closes: Sequence[Optional[float]],
) -> Snapshot:
    return Snapshot(
        symbol=symbol,
        price=quote.price,
        volume=quote.volume,
        rsi=calc_rsi(closes),
        ma_5=average(closes, SHORT_MA_WINDOW),
        ma_25=average(closes, LONG_MA_WINDOW),
    )
