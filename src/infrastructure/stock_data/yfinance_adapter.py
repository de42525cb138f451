"""
Infrastructure adapter: yfinance → IStockDataProvider.
All yfinance-specific details (ticker.info, fast_info, history()) are confined here;
the rest of the codebase depends only on IStockDataProvider.

Every exception raised by yfinance is re-raised as ProviderError with the
library's message unchanged.
"""

import logging
import math
from typing import Any, Optional

import yfinance as yf

from src.domain.entities.stock_price import ForexQuote, PriceHistory, StockQuote
from src.domain.errors import ProviderError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)

FOREX_SUFFIX = "=X"


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    number = float(value)
    if math.isnan(number):
        return None
    return number


def _fast_info_value(fast_info: Any, name: str) -> Optional[float]:
    # fast_info raises KeyError for fields Yahoo did not send
    try:
        return _to_float(getattr(fast_info, name, None))
    except (KeyError, TypeError, ValueError):
        return None


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches stock market data from Yahoo Finance via the yfinance library."""

    def __init__(self, timeout_seconds: float = 10.0) -> None:
        # Handed to yfinance so the HTTP request itself gives up.
        self._timeout = timeout_seconds

    def get_quote(self, symbol: str) -> StockQuote:
        try:
            return self._get_quote(symbol)
        except ProviderError:
            raise
        except Exception as exc:
            logger.warning("Quote lookup failed for %s: %s", symbol, exc)
            raise ProviderError(str(exc), symbol=symbol) from exc

    def get_price_history(
        self,
        symbol: str,
        period: str = "3mo",
        interval: str = "1d",
    ) -> PriceHistory:
        try:
            history = yf.Ticker(symbol).history(
                period=period, interval=interval, timeout=self._timeout
            )
        except Exception as exc:
            logger.warning("History lookup failed for %s: %s", symbol, exc)
            raise ProviderError(str(exc), symbol=symbol) from exc

        if history.empty or "Close" not in history:
            raise ProviderError(
                f"No historical data available for symbol: {symbol!r}", symbol=symbol
            )

        closes = [
            None if close is None else round(close, 4)
            for close in (_to_float(value) for value in history["Close"].tolist())
        ]
        return PriceHistory(
            symbol=symbol,
            period=period,
            interval=interval,
            closes=closes,
        )

    def get_forex_quote(self, pair: str) -> ForexQuote:
        try:
            quote = self._get_quote(f"{pair}{FOREX_SUFFIX}")
        except ProviderError as exc:
            raise ProviderError(str(exc), symbol=pair) from exc
        except Exception as exc:
            logger.warning("Forex lookup failed for %s: %s", pair, exc)
            raise ProviderError(str(exc), symbol=pair) from exc
        return ForexQuote(symbol=pair, price=quote.price)

    def _get_quote(self, symbol: str) -> StockQuote:
        ticker = yf.Ticker(symbol)
        fast_info = ticker.fast_info

        price = _fast_info_value(fast_info, "last_price")
        previous_close = _fast_info_value(fast_info, "previous_close")
        volume = _fast_info_value(fast_info, "last_volume")

        # ticker.info is a separate, slower request; only hit it for gaps.
        if price is None or previous_close is None or volume is None:
            info = ticker.info or {}
            if price is None:
                price = _to_float(
                    info.get("regularMarketPrice") or info.get("currentPrice")
                )
            if previous_close is None:
                previous_close = _to_float(
                    info.get("regularMarketPreviousClose") or info.get("previousClose")
                )
            if volume is None:
                volume = _to_float(info.get("regularMarketVolume") or info.get("volume"))

        if price is None:
            raise ProviderError(
                f"No price data available for symbol: {symbol!r}", symbol=symbol
            )

        return StockQuote(
            symbol=symbol,
            price=round(price, 4),
            volume=volume,
            previous_close=previous_close,
        )
