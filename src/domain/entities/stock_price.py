"""
Domain entities for raw market data returned by a stock data provider.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StockQuote:
    symbol: str
    price: Optional[float]
    volume: Optional[float]
    previous_close: Optional[float]

    @property
    def change(self) -> Optional[float]:
        if self.price is None or self.previous_close is None:
            return None
        return self.price - self.previous_close

    @property
    def change_percent(self) -> Optional[float]:
        change = self.change
        if change is None or not self.previous_close:
            return None
        return change / self.previous_close * 100


@dataclass(frozen=True)
class PriceHistory:
    """Chronologically ordered closes; a close is None where the provider had a gap."""

    symbol: str
    period: str
    interval: str
    closes: list[Optional[float]]


@dataclass(frozen=True)
class ForexQuote:
    symbol: str
    price: Optional[float]
