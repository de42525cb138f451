"""
Port (interface) for stock data providers.
Infrastructure adapters (e.g. YFinanceStockDataProvider) must implement this interface
and raise ProviderError for every upstream failure.
"""

from abc import ABC, abstractmethod

from src.domain.entities.stock_price import ForexQuote, PriceHistory, StockQuote


class IStockDataProvider(ABC):
    @abstractmethod
    def get_quote(self, symbol: str) -> StockQuote: ...

    @abstractmethod
    def get_price_history(
        self,
        symbol: str,
        period: str = "3mo",
        interval: str = "1d",
    ) -> PriceHistory: ...

    @abstractmethod
    def get_forex_quote(self, pair: str) -> ForexQuote:
        """Quote a currency pair given as e.g. 'USDJPY'."""
        ...
