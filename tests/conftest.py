"""
Shared pytest fixtures for the stock signal API test suite.

Provides:
  - ``FakeStockDataProvider``: an in-memory IStockDataProvider; unknown symbols
    raise ProviderError the way the yfinance adapter does.
  - ``fake_provider``: a provider seeded with a few symbols and the ETF basket.
  - ``client``: a FastAPI TestClient wired to ``fake_provider``.
"""

from __future__ import annotations

import time
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from src.domain.entities.stock_price import ForexQuote, PriceHistory, StockQuote
from src.domain.errors import ProviderError
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.config.settings import ServiceConfig
from src.infrastructure.entrypoints.fastapi_app import create_app


# ── Helpers ────────────────────────────────────────────────────────────────────

def rising_closes(count: int = 30, start: float = 100.0) -> list[Optional[float]]:
    """Strictly increasing closes, one point per sample."""
    return [start + i for i in range(count)]


def falling_closes(count: int = 30, start: float = 200.0) -> list[Optional[float]]:
    return [start - i for i in range(count)]


class FakeStockDataProvider(IStockDataProvider):
    def __init__(self) -> None:
        self.quotes: dict[str, StockQuote] = {}
        self.closes: dict[str, list[Optional[float]]] = {}
        self.forex: dict[str, float] = {}
        self.delays: dict[str, float] = {}
        self.history_calls: list[tuple[str, str, str]] = []

    def add(
        self,
        symbol: str,
        price: Optional[float],
        volume: Optional[float] = 1_000_000,
        previous_close: Optional[float] = None,
        closes: Optional[list[Optional[float]]] = None,
    ) -> None:
        self.quotes[symbol] = StockQuote(
            symbol=symbol, price=price, volume=volume, previous_close=previous_close
        )
        self.closes[symbol] = closes if closes is not None else rising_closes()

    def get_quote(self, symbol: str) -> StockQuote:
        if symbol in self.delays:
            time.sleep(self.delays[symbol])
        if symbol not in self.quotes:
            raise ProviderError(f"Quote not found for ticker symbol: {symbol}", symbol=symbol)
        return self.quotes[symbol]

    def get_price_history(
        self,
        symbol: str,
        period: str = "3mo",
        interval: str = "1d",
    ) -> PriceHistory:
        self.history_calls.append((symbol, period, interval))
        if symbol not in self.closes:
            raise ProviderError(f"No historical data available for symbol: {symbol!r}", symbol=symbol)
        return PriceHistory(
            symbol=symbol, period=period, interval=interval, closes=self.closes[symbol]
        )

    def get_forex_quote(self, pair: str) -> ForexQuote:
        if pair not in self.forex:
            raise ProviderError(f"Quote not found for ticker symbol: {pair}=X", symbol=pair)
        return ForexQuote(symbol=pair, price=self.forex[pair])


# ── Fixtures ───────────────────────────────────────────────────────────────────

@pytest.fixture
def fake_provider() -> FakeStockDataProvider:
    provider = FakeStockDataProvider()
    # Rising closes 100..129: ma_5 = 127.0, ma_25 = 117.0, RSI = 100.
    provider.add("AAPL", price=130.0, volume=15_000_000)
    # Falling closes 200..171: ma_5 = 173.0, ma_25 = 183.0, RSI = 0.
    provider.add("MSFT", price=170.0, volume=2_000_000, closes=falling_closes())
    for symbol, price, previous in (
        ("SPY", 500.0, 495.0),
        ("QQQ", 440.0, 440.0),
        ("XLK", 210.0, 200.0),
        ("ARKK", 50.0, 52.0),
    ):
        provider.add(symbol, price=price, previous_close=previous)
    provider.forex["USDJPY"] = 151.25
    return provider


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(fetch_timeout_seconds=2.0, history_period="6mo")


@pytest.fixture
def client(config: ServiceConfig, fake_provider: FakeStockDataProvider) -> TestClient:
    return TestClient(create_app(config, provider=fake_provider))
