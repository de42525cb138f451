"""
Use-case: quote one member of the fixed ETF basket.
"""

from src.application.use_cases.symbols import normalize_symbol
from src.domain.entities.stock_price import StockQuote
from src.domain.ports.stock_data_port import IStockDataProvider

ETF_BASKET: tuple[str, ...] = ("SPY", "QQQ", "XLK", "ARKK")


class GetEtfQuoteUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    def execute(self, symbol: str) -> StockQuote:
        return self._provider.get_quote(normalize_symbol(symbol))
