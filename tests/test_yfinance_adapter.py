"""
Tests for src.infrastructure.stock_data.yfinance_adapter with yf.Ticker replaced by a stub.
No network access.
"""

from __future__ import annotations

from types import SimpleNamespace

import pandas as pd
import pytest

from src.domain.errors import ProviderError
from src.infrastructure.stock_data import yfinance_adapter
from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider


class _MissingFastInfo:
    """Mimics yfinance FastInfo raising KeyError for fields Yahoo did not send."""

    def __getattr__(self, name):
        raise KeyError(name)


class StubTicker:
    fast_info: object = SimpleNamespace(last_price=101.5, previous_close=100.0, last_volume=12_345)
    info: dict = {}
    frame: pd.DataFrame = pd.DataFrame({"Close": [1.0, 2.0, float("nan"), 4.123456]})
    error: Exception | None = None
    created: list[str] = []
    history_args: list[tuple[str, str, float]] = []

    def __init__(self, symbol: str) -> None:
        StubTicker.created.append(symbol)

    def history(self, period: str, interval: str, timeout: float = 10) -> pd.DataFrame:
        StubTicker.history_args.append((period, interval, timeout))
        if StubTicker.error is not None:
            raise StubTicker.error
        return StubTicker.frame


@pytest.fixture
def stub_ticker(monkeypatch):
    # Class-level state is shared across tests; reset it every time.
    StubTicker.fast_info = SimpleNamespace(last_price=101.5, previous_close=100.0, last_volume=12_345)
    StubTicker.info = {}
    StubTicker.frame = pd.DataFrame({"Close": [1.0, 2.0, float("nan"), 4.123456]})
    StubTicker.error = None
    StubTicker.created = []
    StubTicker.history_args = []
    monkeypatch.setattr(yfinance_adapter.yf, "Ticker", StubTicker)
    return StubTicker


# ── get_quote ──────────────────────────────────────────────────────────────────

class TestGetQuote:
    def test_reads_fast_info(self, stub_ticker):
        quote = YFinanceStockDataProvider().get_quote("AAPL")
        assert quote.symbol == "AAPL"
        assert quote.price == 101.5
        assert quote.previous_close == 100.0
        assert quote.volume == 12_345
        assert quote.change == pytest.approx(1.5)

    def test_falls_back_to_info(self, stub_ticker):
        stub_ticker.fast_info = _MissingFastInfo()
        stub_ticker.info = {
            "regularMarketPrice": 55.0,
            "regularMarketPreviousClose": 50.0,
            "regularMarketVolume": 999,
        }
        quote = YFinanceStockDataProvider().get_quote("XYZ")
        assert (quote.price, quote.previous_close, quote.volume) == (55.0, 50.0, 999)

    def test_no_price_anywhere_raises(self, stub_ticker):
        stub_ticker.fast_info = _MissingFastInfo()
        with pytest.raises(ProviderError, match="No price data"):
            YFinanceStockDataProvider().get_quote("NOPE")

    def test_library_exception_becomes_provider_error(self, monkeypatch):
        def broken(symbol):
            raise ConnectionError("network is unreachable")

        monkeypatch.setattr(yfinance_adapter.yf, "Ticker", broken)
        with pytest.raises(ProviderError, match="network is unreachable") as exc_info:
            YFinanceStockDataProvider().get_quote("AAPL")
        assert exc_info.value.symbol == "AAPL"
        assert isinstance(exc_info.value.__cause__, ConnectionError)


# ── get_price_history ──────────────────────────────────────────────────────────

class TestGetPriceHistory:
    def test_closes_keep_gaps_as_none(self, stub_ticker):
        history = YFinanceStockDataProvider().get_price_history("AAPL", period="6mo", interval="1d")
        assert history.closes == [1.0, 2.0, None, 4.1235]
        assert (history.period, history.interval) == ("6mo", "1d")
        assert stub_ticker.history_args == [("6mo", "1d", 10.0)]

    def test_timeout_is_passed_to_yfinance(self, stub_ticker):
        YFinanceStockDataProvider(timeout_seconds=2.5).get_price_history("AAPL")
        assert stub_ticker.history_args == [("3mo", "1d", 2.5)]

    def test_empty_frame_raises(self, stub_ticker):
        stub_ticker.frame = pd.DataFrame()
        with pytest.raises(ProviderError, match="No historical data"):
            YFinanceStockDataProvider().get_price_history("GONE")

    def test_history_exception_becomes_provider_error(self, stub_ticker):
        stub_ticker.error = ValueError("malformed chart response")
        with pytest.raises(ProviderError, match="malformed chart response"):
            YFinanceStockDataProvider().get_price_history("AAPL")


# ── get_forex_quote ────────────────────────────────────────────────────────────

class TestGetForexQuote:
    def test_queries_fx_ticker(self, stub_ticker):
        quote = YFinanceStockDataProvider().get_forex_quote("USDJPY")
        assert stub_ticker.created == ["USDJPY=X"]
        assert quote.symbol == "USDJPY"
        assert quote.price == 101.5

    def test_error_names_the_pair(self, stub_ticker):
        stub_ticker.fast_info = _MissingFastInfo()
        with pytest.raises(ProviderError) as exc_info:
            YFinanceStockDataProvider().get_forex_quote("USDJPY")
        assert exc_info.value.symbol == "USDJPY"
