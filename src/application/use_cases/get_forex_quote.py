"""
Use-case: retrieve the current rate of a currency pair.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from src.application.use_cases.symbols import normalize_symbol
from src.domain.entities.stock_price import ForexQuote
from src.domain.ports.stock_data_port import IStockDataProvider


class GetForexQuoteUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    def execute(self, pair: str) -> ForexQuote:
        """Fetch the rate for *pair*, e.g. 'USDJPY' (case-insensitive).

        Raises:
            MissingParameterError: if *pair* is blank.
            ProviderError: on upstream failure.
        """
        return self._provider.get_forex_quote(normalize_symbol(pair))
